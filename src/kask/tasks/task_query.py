# src/kask/tasks/task_query.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import date, timedelta

from ..errors import DateFormatError, TimeFormatError
from .task_models import Scope, ShowMode, Task
from .validation import parse_date, parse_time, validate_date

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.75
DEFAULT_SEARCH_LIMIT = 10
FAR_FUTURE = date(9999, 12, 31)

# Sort key for values that fail to parse: after every real date/time.
_LAST = 10**9


# ---- edit distance ----


def levenshtein(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute distance between two strings."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cur[j] = min(
                prev[j] + 1,  # delete
                cur[j - 1] + 1,  # insert
                prev[j - 1] + (ca != cb),  # substitute
            )
        prev = cur
    return prev[-1]


def normalized_levenshtein(a: str, b: str) -> float:
    """Edit distance divided by the longer length, in [0, 1]. 0.0 for two empty strings."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    return levenshtein(a, b) / longest


def similarity(a: str, b: str) -> float:
    return 1.0 - normalized_levenshtein(a, b)


# ---- filters ----


def _keep_by_date(
    tasks: Iterable[Task], predicate: Callable[[date], bool]
) -> list[Task]:
    """Keep tasks whose parsed date satisfies `predicate`; skip unparseable ones."""
    out: list[Task] = []
    for task in tasks:
        try:
            d = parse_date(task.date)
        except DateFormatError:
            logger.warning("Skipping task id=%s: unparseable date %r", task.id, task.date)
            continue
        if predicate(d):
            out.append(task)
    return out


def filter_by_show_mode(tasks: Iterable[Task], mode: ShowMode) -> list[Task]:
    if mode == ShowMode.DONE:
        return [t for t in tasks if t.done]
    if mode == ShowMode.NOT_DONE:
        return [t for t in tasks if not t.done]
    return list(tasks)


def week_end(today: date) -> date:
    """The Sunday closing the week that contains `today`."""
    return today + timedelta(days=6 - today.weekday())


def filter_by_scope(tasks: Iterable[Task], scope: Scope | None, today: date) -> list[Task]:
    if scope is None:
        return list(tasks)
    if scope == Scope.TODAY:
        return _keep_by_date(tasks, lambda d: d == today)
    if scope == Scope.WEEK:
        sunday = week_end(today)
        return _keep_by_date(tasks, lambda d: today <= d <= sunday)
    if scope == Scope.MONTH:
        return _keep_by_date(tasks, lambda d: d.month == today.month)
    raise ValueError(f"unknown scope: {scope!r}")


def _sort_key(task: Task) -> tuple[int, int]:
    try:
        day = parse_date(task.date).toordinal()
    except DateFormatError:
        day = _LAST
    try:
        minutes = parse_time(task.time)
    except TimeFormatError:
        minutes = _LAST
    return day, minutes


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Chronological order: date, then clock time (unparseable values last)."""
    return sorted(tasks, key=_sort_key)


def _limit(tasks: list[Task], limit: int | None) -> list[Task]:
    if limit is None or limit <= 0:
        return tasks
    return tasks[:limit]


# ---- public API ----


def list_tasks(
    tasks: Iterable[Task],
    *,
    scope: Scope | None = None,
    show_mode: ShowMode = ShowMode.NOT_DONE,
    limit: int | None = None,
    today: date | None = None,
) -> list[Task]:
    """
    Tasks to show for `kask list`:
    - done-state filter
    - optional date window (today / this week up to Sunday / this month)
    - chronological sort
    - first `limit` results (None or <= 0 means no limit)
    """
    if today is None:
        today = date.today()
    selected = filter_by_show_mode(tasks, show_mode)
    selected = filter_by_scope(selected, scope, today)
    return _limit(sort_tasks(selected), limit)


def _has_tags(task: Task, tags: Sequence[str]) -> bool:
    wanted = {t.strip().lower() for t in tags if t.strip()}
    have = {t.lower() for t in task.tags}
    return wanted <= have


def matches_query(name: str, query: str) -> bool:
    """Case-insensitive substring hit, or close enough by edit distance."""
    return query.casefold() in name.casefold() or similarity(name, query) > SIMILARITY_THRESHOLD


def search_tasks(
    tasks: Iterable[Task],
    query: str,
    *,
    start_date: str | None = None,
    end_date: str | None = None,
    tags: Sequence[str] | None = None,
    limit: int | None = DEFAULT_SEARCH_LIMIT,
    today: date | None = None,
) -> list[Task]:
    """
    Fuzzy search by name within [start_date, end_date].

    start_date defaults to today and end_date to 12/31/9999. Bounds are
    mm/dd/yy strings and raise DateFormatError when malformed.

    A task matches when its name contains `query` (ignoring case) or is more than 75%
    similar to it. Matches are ranked by raw edit distance (stable).
    """
    if start_date is None:
        start = today if today is not None else date.today()
    else:
        validate_date(start_date)
        start = parse_date(start_date)
    if end_date is None:
        end = FAR_FUTURE
    else:
        validate_date(end_date)
        end = parse_date(end_date)

    candidates = _keep_by_date(tasks, lambda d: start <= d <= end)
    if tags:
        candidates = [t for t in candidates if _has_tags(t, tags)]

    hits = [t for t in candidates if matches_query(t.name, query)]
    hits.sort(key=lambda t: levenshtein(t.name, query))
    logger.debug(
        "search query=%r start=%s end=%s candidates=%d hits=%d",
        query,
        start,
        end,
        len(candidates),
        len(hits),
    )
    return _limit(hits, limit)
