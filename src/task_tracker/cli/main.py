# src/task_tracker/cli/main.py

"""
CLI entrypoint.

One invocation = one command:
load settings -> configure logging -> load tasks -> run the command ->
print the reply. Commands that change tasks save before replying.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import configure_logging, create_task_store
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..tasks.task_store import TaskStoreError

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()
    configure_logging(settings)
    logger.debug("Starting %s argv=%s", settings.app_name, list(argv))

    store = create_task_store(settings=settings)
    tasks = store.load()

    try:
        reply = command_registry.handle(store, tasks, argv)
    except TaskStoreError as e:
        logger.debug("Save failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if reply:
        print(reply)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
