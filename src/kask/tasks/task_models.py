# src/kask/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

DATE_FORMAT = "%m/%d/%y"
TIME_FORMAT = "%I:%M%p"

# Tasks created without a time are due at the end of their day.
DEFAULT_TIME = "11:59pm"


class ShowMode(StrEnum):
    """Done-state filter applied when listing."""

    NOT_DONE = "not-done"
    ALL = "all"
    DONE = "done"

    @classmethod
    def from_cli(cls, raw: str | None) -> ShowMode:
        if not raw:
            return cls.NOT_DONE
        return cls(raw.strip().lower())


class Scope(StrEnum):
    """Date window applied when listing. At most one is active."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"


@dataclass(slots=True)
class Task:
    id: int
    name: str
    date: str
    time: str = DEFAULT_TIME
    description: str = ""
    done: bool = False
    tags: list[str] = field(default_factory=list)
