# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default, so the tool runs with no configuration at all.
- Invalid values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASK_TRACKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Storage ----
    tasks_path: Path
    backup_corrupt: bool

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "task-tracker")

        log_level = _env(_k("LOG_LEVEL"), "WARNING").upper()
        if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            log_level = "WARNING"

        log_file = _env_path(_k("LOG_FILE"), None)
        tasks_path = _env_path(_k("TASKS_PATH"), Path("tasks.json")) or Path("tasks.json")
        backup_corrupt = _env_bool(_k("BACKUP_CORRUPT"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            tasks_path=tasks_path,
            backup_corrupt=backup_corrupt,
        )


def get_settings() -> Settings:
    """
    Read settings from the process environment.

    A .env found from the working directory upwards is loaded first
    (never overriding variables already set).
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
