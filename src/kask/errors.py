# src/kask/errors.py

"""Exception taxonomy shared by the task engine, the list config and the CLI."""

from __future__ import annotations


class KaskError(Exception):
    """Base class for every error the CLI reports to the user (exit code 1)."""


# ---- creation / update input ----


class ValidationError(KaskError, ValueError):
    """Raised when user input does not match the expected format."""

    def __init__(self, value: str, expected: str, what: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid {what} format: {value} (expected {expected})")


class DateFormatError(ValidationError):
    def __init__(self, value: str, expected: str = "mm/dd/yy") -> None:
        super().__init__(value, expected, "date")


class TimeFormatError(ValidationError):
    def __init__(self, value: str, expected: str = "hh:mm[am|pm]") -> None:
        super().__init__(value, expected, "time")


class LineBreakError(ValidationError):
    """Free text may not span lines: every task is stored on exactly one line."""

    def __init__(self, value: str, what: str) -> None:
        super().__init__(value, "a single line of text", what)


# ---- load time (one corrupt line) ----


class RecordError(KaskError, ValueError):
    """A single stored line could not be decoded into a task."""


class MalformedRecordError(RecordError):
    def __init__(self, found: int, expected: int = 7, reason: str | None = None) -> None:
        self.found = found
        self.expected = expected
        super().__init__(
            reason
            or f"Invalid number of parts in task string: expected {expected}, found {found}"
        )


class InvalidIdError(RecordError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid task id: {raw!r}")


class InvalidBooleanError(RecordError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid done flag: {raw!r} (expected true or false)")


# ---- mutations ----


class TaskNotFoundError(KaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


# ---- list configuration ----


class ConfigError(KaskError):
    """The list configuration file is malformed or an operation on it is invalid."""


class UnknownListError(ConfigError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown task list: {name}")


class DuplicateListError(ConfigError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Task list already exists: {name}")
