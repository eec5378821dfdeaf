# src/kask/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Everything has a default; a bare `kask` invocation needs no environment.
- The list configuration file (names -> task files) is a separate concern,
  see list_config.py. Only its explicit path override lives here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "KASK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    log_level: str
    log_dir: Path
    log_file_enabled: bool

    # ---- List configuration ----
    config_file: Path | None

    # ---- Output defaults ----
    search_limit: int
    list_limit: int

    @staticmethod
    def from_env() -> "Settings":
        log_dir = _env_path(_k("LOG_DIR"), None) or Path.home() / ".local" / "state" / "kask"

        return Settings(
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            log_dir=log_dir,
            log_file_enabled=_env_bool(_k("LOG_FILE_ENABLED"), True),
            config_file=_env_path(_k("CONFIG_FILE"), None),
            search_limit=_env_int(_k("SEARCH_LIMIT"), 10),
            list_limit=_env_int(_k("LIST_LIMIT"), 0),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
