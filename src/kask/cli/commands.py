# src/kask/cli/commands.py

"""
Command handlers behind the argparse subcommands.

Every handler takes (ctx, args) and returns the text to print on stdout.
KaskError subclasses propagate to main(), which reports them and exits 1
before anything is written.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from datetime import date

from ..tasks.task_api import complete_task, create_task, delete_task, edit_task
from ..tasks.task_models import Scope, ShowMode
from ..tasks.task_query import FAR_FUTURE, list_tasks, search_tasks
from .bootstrap import KaskContext
from .render import render_search_results, render_task_table

CommandHandler = Callable[[KaskContext, argparse.Namespace], str]

logger = logging.getLogger(__name__)


# ---- tasks ----


def cmd_create(ctx: KaskContext, args: argparse.Namespace) -> str:
    store = ctx.task_store()
    tasks = store.load()
    task = create_task(
        tasks,
        name=args.name,
        date=args.date,
        time=args.time,
        description=args.description,
        tags=args.tags,
    )
    store.append(task)
    logger.info("Task created id=%s list=%s", task.id, ctx.current_list_name())
    return f"Task created with id {task.id}"


def _scope_from_args(args: argparse.Namespace) -> Scope | None:
    if args.today:
        return Scope.TODAY
    if args.week:
        return Scope.WEEK
    if args.month:
        return Scope.MONTH
    return None


def cmd_list(ctx: KaskContext, args: argparse.Namespace) -> str:
    limit = args.count if args.count is not None else getattr(ctx.settings, "list_limit", 0)
    shown = list_tasks(
        ctx.task_store().load(),
        scope=_scope_from_args(args),
        show_mode=ShowMode.from_cli(args.show_mode),
        limit=limit,
    )
    return render_task_table(shown)


def cmd_update(ctx: KaskContext, args: argparse.Namespace) -> str:
    store = ctx.task_store()
    tasks = store.load()
    edit_task(
        tasks,
        args.id,
        name=args.name,
        date=args.date,
        time=args.time,
        description=args.description,
        done=args.done,
        tags=args.tags,
    )
    store.overwrite(tasks)
    return "Task updated successfully"


def cmd_delete(ctx: KaskContext, args: argparse.Namespace) -> str:
    store = ctx.task_store()
    tasks = store.load()
    remaining = delete_task(tasks, args.id)
    if len(remaining) == len(tasks):
        return f"No task with id {args.id}; nothing deleted"
    store.overwrite(remaining)
    return "Task deleted successfully"


def cmd_complete(ctx: KaskContext, args: argparse.Namespace) -> str:
    store = ctx.task_store()
    tasks = store.load()
    if not complete_task(tasks, args.id):
        return f"No task with id {args.id}; nothing completed"
    store.overwrite(tasks)
    return "Task completed successfully"


def cmd_search(ctx: KaskContext, args: argparse.Namespace) -> str:
    limit = args.count if args.count is not None else getattr(ctx.settings, "search_limit", 10)
    today = date.today()
    found = search_tasks(
        ctx.task_store().load(),
        args.query,
        start_date=args.start_date,
        end_date=args.end_date,
        tags=args.tags,
        limit=limit,
        today=today,
    )
    return "\n".join(
        [
            f"Searching for tasks with query: {args.query}",
            f"Start Date: {args.start_date or today.strftime('%m/%d/%y')}",
            f"End Date: {args.end_date or FAR_FUTURE.strftime('%m/%d/%Y')}",
            f"Top {len(found)} results",
            render_search_results(found),
        ]
    )


# ---- list configuration ----


def cmd_config_set(ctx: KaskContext, args: argparse.Namespace) -> str:
    cfg = ctx.list_config()
    cfg.set_current(args.list)
    ctx.save_list_config()
    return f"Current task list set to {args.list}"


def cmd_config_add(ctx: KaskContext, args: argparse.Namespace) -> str:
    cfg = ctx.list_config()
    path = cfg.add_list(args.list, args.path)
    ctx.save_list_config()
    return f"Task list {args.list} added at {path}"


def cmd_config_remove(ctx: KaskContext, args: argparse.Namespace) -> str:
    cfg = ctx.list_config()
    cfg.remove_list(args.list)
    ctx.save_list_config()
    return f"Task list {args.list} removed"


def cmd_config_info(ctx: KaskContext, args: argparse.Namespace) -> str:
    cfg = ctx.list_config()
    lines = [
        f"Config file: {ctx.config.path}",
        f"Current list: {cfg.current_tasks_list}",
        "Lists:",
    ]
    for name, path in sorted(cfg.tasks_lists_paths.items()):
        marker = "*" if name == cfg.current_tasks_list else " "
        lines.append(f" {marker} {name}: {path}")
    return "\n".join(lines)
