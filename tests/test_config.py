# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from kask.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    for name in ("KASK_LOG_LEVEL", "KASK_LOG_DIR", "KASK_CONFIG_FILE", "KASK_SEARCH_LIMIT", "KASK_LIST_LIMIT"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.log_level == "WARNING"
    assert s.config_file is None
    assert s.search_limit == 10
    assert s.list_limit == 0
    assert s.log_dir == Path.home() / ".local" / "state" / "kask"


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("KASK_CONFIG_FILE", str(tmp_path / "k.config"))
    monkeypatch.setenv("KASK_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("KASK_LOG_FILE_ENABLED", "off")
    monkeypatch.setenv("KASK_SEARCH_LIMIT", "3")
    monkeypatch.setenv("KASK_LIST_LIMIT", "not a number")

    s = Settings.from_env()
    assert s.config_file == tmp_path / "k.config"
    assert s.log_dir == tmp_path / "logs"
    assert s.log_file_enabled is False
    assert s.search_limit == 3
    assert s.list_limit == 0
