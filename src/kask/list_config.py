# src/kask/list_config.py

"""
Task list configuration: which lists exist and which one is current.

On disk this is a small JSON object:

    {"current_tasks_list": "default_tasks",
     "tasks_lists_paths": {"default_tasks": "/abs/path/default_tasks.csv"}}

Discovery order (first hit wins):
1. explicit path (KASK_CONFIG_FILE); created with defaults if missing
2. ~/.config/kask/kask.config
3. ./kask.config
4. nothing found: a fresh ./kask.config is created
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError, DuplicateListError, UnknownListError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "kask.config"
DEFAULT_LIST_NAME = "default_tasks"
DEFAULT_LIST_FILENAME = "default_tasks.csv"


@dataclass(frozen=True, slots=True)
class ConfigLocation:
    path: Path
    exists: bool
    source: str  # "env" | "home" | "local" | "new"


def resolve_config_path(
    *,
    explicit: Path | None,
    home: Path,
    cwd: Path,
    exists: Callable[[Path], bool] = Path.is_file,
) -> ConfigLocation:
    """Pure discovery: no file is read or created here."""
    if explicit is not None:
        return ConfigLocation(explicit, exists(explicit), "env")

    home_file = home / ".config" / "kask" / CONFIG_FILENAME
    if exists(home_file):
        return ConfigLocation(home_file, True, "home")

    local_file = cwd / CONFIG_FILENAME
    if exists(local_file):
        return ConfigLocation(local_file, True, "local")

    return ConfigLocation(local_file, False, "new")


@dataclass(slots=True)
class ListConfig:
    current_tasks_list: str
    tasks_lists_paths: dict[str, str] = field(default_factory=dict)

    @classmethod
    def default(cls, base_dir: Path) -> ListConfig:
        path = (base_dir / DEFAULT_LIST_FILENAME).resolve()
        return cls(
            current_tasks_list=DEFAULT_LIST_NAME,
            tasks_lists_paths={DEFAULT_LIST_NAME: str(path)},
        )

    @classmethod
    def from_dict(cls, data: Any) -> ListConfig:
        if not isinstance(data, dict):
            raise ConfigError("config must be a JSON object")
        current = data.get("current_tasks_list")
        paths = data.get("tasks_lists_paths")
        if not isinstance(current, str):
            raise ConfigError("config field 'current_tasks_list' must be a string")
        if not isinstance(paths, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in paths.items()
        ):
            raise ConfigError("config field 'tasks_lists_paths' must map names to paths")
        return cls(current_tasks_list=current, tasks_lists_paths=dict(paths))

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_tasks_list": self.current_tasks_list,
            "tasks_lists_paths": dict(self.tasks_lists_paths),
        }

    def path_of(self, name: str) -> Path:
        try:
            return Path(self.tasks_lists_paths[name])
        except KeyError:
            raise UnknownListError(name) from None

    def current_path(self) -> Path:
        return self.path_of(self.current_tasks_list)

    def set_current(self, name: str) -> None:
        if name not in self.tasks_lists_paths:
            raise UnknownListError(name)
        self.current_tasks_list = name

    def add_list(self, name: str, path: str | Path) -> Path:
        name = name.strip()
        if not name:
            raise ConfigError("list name must not be empty")
        if name in self.tasks_lists_paths:
            raise DuplicateListError(name)
        abs_path = Path(path).expanduser().resolve()
        self.tasks_lists_paths[name] = str(abs_path)
        return abs_path

    def remove_list(self, name: str) -> None:
        if name not in self.tasks_lists_paths:
            raise UnknownListError(name)
        if name == self.current_tasks_list:
            raise ConfigError(f"Cannot remove the current task list: {name}")
        del self.tasks_lists_paths[name]


class ConfigProvider:
    """
    Finds, creates, reads and writes the list configuration file.

    home/cwd are injectable so discovery can be tested without touching the
    real home directory.
    """

    def __init__(
        self,
        explicit_path: str | Path | None = None,
        *,
        home: Path | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._explicit = Path(explicit_path).expanduser() if explicit_path else None
        self._home = home if home is not None else Path.home()
        self._cwd = cwd if cwd is not None else Path.cwd()
        self._location: ConfigLocation | None = None

    def location(self) -> ConfigLocation:
        if self._location is None:
            self._location = resolve_config_path(
                explicit=self._explicit, home=self._home, cwd=self._cwd
            )
        return self._location

    @property
    def path(self) -> Path:
        return self.location().path

    def load(self) -> ListConfig:
        loc = self.location()
        if not loc.exists:
            cfg = ListConfig.default(self._cwd)
            self.save(cfg)
            self._location = ConfigLocation(loc.path, True, loc.source)
            logger.info("Created new config file at %s", loc.path)
            return cfg

        try:
            data = json.loads(loc.path.read_text("utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {loc.path} is not valid JSON: {e}") from e
        logger.debug("Using config file at %s (source=%s)", loc.path, loc.source)
        return ListConfig.from_dict(data)

    def save(self, cfg: ListConfig) -> None:
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(cfg.to_dict(), indent=2), "utf-8")
        os.replace(tmp, path)
        logger.debug("Saved config file %s", path)
