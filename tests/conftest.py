# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from kask.tasks.task_models import Task


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with main() and create_context().

    We intentionally use a SimpleNamespace rather than Settings.from_env(),
    to keep unit tests isolated from the real environment and home dir.
    """
    return SimpleNamespace(
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_file_enabled=False,
        config_file=tmp_path / "kask.config",
        search_limit=10,
        list_limit=0,
    )


@pytest.fixture()
def today() -> date:
    # A Wednesday; the week window runs 06/12/24 .. 06/16/24.
    return date(2024, 6, 12)


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(id=1, name="Go to gym", date="06/12/24", time="06:30pm", tags=["health"]),
        Task(id=2, name="Buy milk", date="06/14/24", time="09:00am", tags=["errand"]),
        Task(id=3, name="Gym session", date="06/20/24", done=True, tags=["health", "gym"]),
        Task(id=4, name="Pay rent", date="07/01/24", time="10:00am", description="transfer"),
    ]
