# src/kask/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings loaded once by main,
- builds the ConfigProvider (list configuration discovery),
- hands out the TaskStore for the list a command works on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..config import get_settings
from ..list_config import ConfigProvider, ListConfig
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class KaskContext:
    settings: object
    config: ConfigProvider

    # -f/--task-file: work on this file instead of the current list
    task_file: Path | None = None

    _list_config: ListConfig | None = None

    def list_config(self) -> ListConfig:
        if self._list_config is None:
            self._list_config = self.config.load()
        return self._list_config

    def save_list_config(self) -> None:
        self.config.save(self.list_config())

    def current_list_name(self) -> str:
        if self.task_file is not None:
            return str(self.task_file)
        return self.list_config().current_tasks_list

    def task_store(self) -> TaskStore:
        if self.task_file is not None:
            path = self.task_file
        else:
            path = self.list_config().current_path()
        logger.debug("Task list %s -> %s", self.current_list_name(), path)
        return TaskStore(path)


def create_context(
    *,
    settings=None,
    task_file: str | Path | None = None,
    home: Path | None = None,
    cwd: Path | None = None,
) -> KaskContext:
    """
    Build a KaskContext from the provided settings.

    Keeping settings injectable makes the CLI easy to test against temp dirs.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    provider = ConfigProvider(getattr(settings, "config_file", None), home=home, cwd=cwd)
    return KaskContext(
        settings=settings,
        config=provider,
        task_file=Path(task_file).expanduser() if task_file else None,
    )
