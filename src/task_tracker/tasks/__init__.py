"""
Task subsystem.

Components:
- task_models.py: data structure (Task) and its persisted shape
- task_store.py: JSON-file load/save contract
- task_api.py: add/list/complete operations over the in-memory sequence
"""
