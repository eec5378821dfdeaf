# src/kask/cli/render.py

"""Fixed-width text tables for task listings."""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task

_RULE = "-" * 61


def _clip(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 1] + "~"


def render_task_table(tasks: Iterable[Task]) -> str:
    lines = [
        f"{'ID':>3}|{'Name':^20} {'Due Date':^13} {'Time':^7} {'Done':^6} Tags",
        _RULE,
    ]
    for t in tasks:
        done = "yes" if t.done else "no"
        lines.append(
            f"{t.id:>3}|{_clip(t.name, 20):^20}|{t.date:^13} {t.time:^7} {done:^6} {', '.join(t.tags)}"
        )
    return "\n".join(lines)


def render_search_results(tasks: list[Task]) -> str:
    lines = [
        f"{'ID':>3}| {'Name':>30} {'Date':^11}",
        "-----------------",
    ]
    for t in tasks:
        lines.append(f"{t.id:>3}| {_clip(t.name, 30):>30} {t.date:^11}")
    return "\n".join(lines)

