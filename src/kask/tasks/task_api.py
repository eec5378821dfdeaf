# src/kask/tasks/task_api.py

"""
In-memory mutations over a loaded task list.

Callers persist the result themselves: TaskStore.append() after create_task,
TaskStore.overwrite() after the other operations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import TaskNotFoundError
from .task_models import DEFAULT_TIME, Task
from .task_store import next_id
from .validation import validate_date, validate_text, validate_time

logger = logging.getLogger(__name__)


def _clean_tags(tags: Iterable[str] | None) -> list[str]:
    if not tags:
        return []
    return [t.strip() for t in tags if t.strip()]


def _check_single_line(
    name: str | None, description: str | None, tags: list[str] | None
) -> None:
    if name is not None:
        validate_text(name, "name")
    if description is not None:
        validate_text(description, "description")
    for tag in tags or ():
        validate_text(tag, "tag")


def create_task(
    tasks: list[Task],
    *,
    name: str,
    date: str,
    time: str | None = None,
    description: str | None = None,
    tags: Iterable[str] | None = None,
) -> Task:
    """
    Build a new task for `tasks` (the list is not modified).

    Raises DateFormatError / TimeFormatError, or LineBreakError for
    multi-line text, before anything is built.
    """
    tags = list(tags) if tags is not None else None
    _check_single_line(name, description, tags)
    date = date.strip()
    validate_date(date)
    if time is not None:
        time = time.strip()
        validate_time(time)

    task = Task(
        id=next_id(tasks),
        name=name.strip(),
        date=date,
        time=time if time is not None else DEFAULT_TIME,
        description=(description or "").strip(),
        done=False,
        tags=_clean_tags(tags),
    )
    logger.debug("Task built id=%s date=%s time=%s", task.id, task.date, task.time)
    return task


def find_task(tasks: Iterable[Task], task_id: int) -> Task | None:
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def edit_task(
    tasks: list[Task],
    task_id: int,
    *,
    name: str | None = None,
    date: str | None = None,
    time: str | None = None,
    description: str | None = None,
    done: bool | None = None,
    tags: Iterable[str] | None = None,
) -> Task:
    """
    Sparse update: only the supplied fields change.

    Raises TaskNotFoundError when no task has `task_id`, and a ValidationError
    for a malformed date/time or multi-line text. Either way nothing is modified.
    """
    task = find_task(tasks, task_id)
    if task is None:
        raise TaskNotFoundError(task_id)

    tags = list(tags) if tags is not None else None
    _check_single_line(name, description, tags)

    if date is not None:
        date = date.strip()
        validate_date(date)
    if time is not None:
        time = time.strip()
        validate_time(time)

    if name is not None:
        task.name = name.strip()
    if date is not None:
        task.date = date
    if description is not None:
        task.description = description.strip()
    if time is not None:
        task.time = time
    if tags is not None:
        task.tags = _clean_tags(tags)
    if done is not None:
        task.done = done

    logger.debug("Task edited id=%s", task_id)
    return task


def complete_task(tasks: list[Task], task_id: int) -> bool:
    """Mark the first task with `task_id` done. Returns False if there is none."""
    task = find_task(tasks, task_id)
    if task is None:
        logger.debug("complete_task: no task id=%s", task_id)
        return False
    task.done = True
    return True


def delete_task(tasks: list[Task], task_id: int) -> list[Task]:
    """Return `tasks` without any task carrying `task_id`."""
    return [t for t in tasks if t.id != task_id]
