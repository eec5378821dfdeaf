# src/kask/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..errors import RecordError
from .task_codec import decode_task, encode_task
from .task_models import Task

logger = logging.getLogger(__name__)


def next_id(tasks: Iterable[Task]) -> int:
    """Id for a new task: highest existing id + 1, or 1 for an empty list."""
    return max((t.id for t in tasks), default=0) + 1


class TaskStore:
    """
    Plain-text task list, one encoded task per line.

    Write paths:
    - append(): create-task only, one line at the end of the file
    - overwrite(): everything else, the whole list is rewritten in order

    There is no locking and no partial-write recovery; the tool assumes a
    single user running one command at a time.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self) -> bool:
        """Create an empty list file if missing. Returns True if it was created."""
        if self._path.exists():
            return False
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch()
        logger.info("New task list file created at %s", self._path)
        return True

    # ---- public API ----

    def load(self) -> list[Task]:
        """
        Read every task in file order.

        A missing file is created empty. A line that cannot be decoded is
        logged and skipped; the rest of the file still loads.
        """
        if self._ensure_file():
            return []

        tasks: list[Task] = []
        skipped = 0
        with self._path.open("rb") as fh:
            for lineno, raw in enumerate(fh, start=1):
                if not raw.strip():
                    continue
                try:
                    tasks.append(decode_task(raw.decode("utf-8")))
                except (RecordError, UnicodeDecodeError) as e:
                    skipped += 1
                    logger.warning("Skipping %s:%d: %s", self._path, lineno, e)

        logger.debug("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def append(self, task: Task) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as fh:
            fh.write(encode_task(task) + "\n")
        logger.debug("Task appended id=%s file=%s", task.id, self._path)

    def overwrite(self, tasks: Iterable[Task]) -> None:
        lines = [encode_task(t) + "\n" for t in tasks]
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as fh:
            fh.writelines(lines)
        logger.debug("Task list rewritten count=%d file=%s", len(lines), self._path)
