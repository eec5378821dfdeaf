# src/kask/tasks/task_codec.py

"""
One task <-> one line of text.

Line layout (seven fields, comma + space separated):

    id, name, date, time, description, done, tag1; tag2

A field containing a comma or a double quote is written CSV-style, wrapped in
double quotes with inner quotes doubled. Plain fields are written bare, so
files produced by older versions load unchanged.
"""

from __future__ import annotations

import csv

from ..errors import InvalidBooleanError, InvalidIdError, MalformedRecordError
from .task_models import Task

FIELD_COUNT = 7
FIELD_SEPARATOR = ", "
TAG_SEPARATOR = "; "


def _quote(value: str) -> str:
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def encode_task(task: Task) -> str:
    fields = [
        str(task.id),
        task.name,
        task.date,
        task.time,
        task.description,
        "true" if task.done else "false",
        TAG_SEPARATOR.join(task.tags),
    ]
    return FIELD_SEPARATOR.join(_quote(f) for f in fields)


def _parse_id(raw: str) -> int:
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidIdError(raw)
    return int(raw)


def _parse_done(raw: str) -> bool:
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise InvalidBooleanError(raw.strip())


def _parse_tags(raw: str) -> list[str]:
    if not raw.strip():
        return []
    return [t.strip() for t in raw.split(";")]


def decode_task(line: str) -> Task:
    """
    Parse one stored line.

    Raises a RecordError subclass on a wrong field count, a non-numeric id or
    a bad done flag. Dates and times are not checked here.
    """
    line = line.rstrip("\r\n")
    try:
        parts = next(csv.reader([line], skipinitialspace=True), [])
    except csv.Error as e:
        raise MalformedRecordError(0, FIELD_COUNT, reason=f"Unreadable task line: {e}") from e
    if len(parts) != FIELD_COUNT:
        raise MalformedRecordError(len(parts), FIELD_COUNT)

    raw_id, name, date, time_, description, raw_done, raw_tags = parts
    return Task(
        id=_parse_id(raw_id),
        name=name.strip(),
        date=date.strip(),
        time=time_.strip(),
        description=description.strip(),
        done=_parse_done(raw_done),
        tags=_parse_tags(raw_tags),
    )
