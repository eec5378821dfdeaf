# src/kask/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the KaskContext, then runs one subcommand:
- task commands: create, list, update, delete, complete, search
- config commands: set, add, remove, info
"""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..config import get_settings
from ..errors import KaskError
from ..logging_setup import setup_logging
from ..tasks.task_models import ShowMode
from . import commands
from .bootstrap import create_context

logger = logging.getLogger(__name__)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("true", "yes", "1"):
        return True
    if value in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {raw!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kask", description="Personal task lists in plain text")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-f", "--task-file", help="Path to the task list file to use")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    subparsers = parser.add_subparsers(dest="command", required=True)

    create_p = subparsers.add_parser("create", help="Create a new task and add it to the current list")
    create_p.add_argument("name")
    create_p.add_argument("date", help="Due date (mm/dd/yy)")
    create_p.add_argument("-m", "--description")
    create_p.add_argument("-t", "--time", help="Due time (hh:mm[am|pm])")
    create_p.add_argument("--tags", nargs="+")
    create_p.set_defaults(func=commands.cmd_create)

    list_p = subparsers.add_parser("list", help="List tasks from the current list")
    scope = list_p.add_mutually_exclusive_group()
    scope.add_argument("-t", "--today", action="store_true")
    scope.add_argument("-w", "--week", action="store_true", help="From today until Sunday")
    scope.add_argument("-m", "--month", action="store_true")
    list_p.add_argument(
        "-s",
        "--show-mode",
        choices=[m.value for m in ShowMode],
        default=ShowMode.NOT_DONE.value,
    )
    list_p.add_argument("-c", "--count", type=int, help="Show at most this many tasks")
    list_p.set_defaults(func=commands.cmd_list)

    update_p = subparsers.add_parser("update", help="Update a task from the current list by its id")
    update_p.add_argument("id", type=int)
    update_p.add_argument("-n", "--name")
    update_p.add_argument("-d", "--date")
    update_p.add_argument("-m", "--description")
    update_p.add_argument("-t", "--time")
    update_p.add_argument("--tags", nargs="+")
    update_p.add_argument("--done", type=_parse_bool)
    update_p.set_defaults(func=commands.cmd_update)

    delete_p = subparsers.add_parser("delete", help="Delete a task from the current list by its id")
    delete_p.add_argument("id", type=int)
    delete_p.set_defaults(func=commands.cmd_delete)

    complete_p = subparsers.add_parser("complete", help="Mark a task as complete by its id")
    complete_p.add_argument("id", type=int)
    complete_p.set_defaults(func=commands.cmd_complete)

    search_p = subparsers.add_parser("search", help="Search for tasks in the current list")
    search_p.add_argument("query")
    search_p.add_argument("-s", "--start-date", help="mm/dd/yy (default: today)")
    search_p.add_argument("-e", "--end-date", help="mm/dd/yy (default: no limit)")
    search_p.add_argument("--tags", nargs="+", help="Only tasks carrying all of these tags")
    search_p.add_argument("-c", "--count", type=int)
    search_p.set_defaults(func=commands.cmd_search)

    config_p = subparsers.add_parser("config", help="Configuration commands")
    config_sub = config_p.add_subparsers(dest="config_command", required=True)

    set_p = config_sub.add_parser("set", help="Set the current task list")
    set_p.add_argument("list")
    set_p.set_defaults(func=commands.cmd_config_set)

    add_p = config_sub.add_parser("add", help="Add a new task list")
    add_p.add_argument("list")
    add_p.add_argument("path")
    add_p.set_defaults(func=commands.cmd_config_add)

    remove_p = config_sub.add_parser("remove", help="Remove a task list")
    remove_p.add_argument("list")
    remove_p.set_defaults(func=commands.cmd_config_remove)

    info_p = config_sub.add_parser("info", help="Display configuration information")
    info_p.set_defaults(func=commands.cmd_config_info)

    return parser


def main(argv: list[str] | None = None, *, settings=None) -> int:
    args = build_parser().parse_args(argv)

    if settings is None:
        settings = get_settings()

    if args.verbose:
        console_level = logging.DEBUG
    else:
        level_name = str(getattr(settings, "log_level", "WARNING")).upper()
        console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.log_dir if getattr(settings, "log_file_enabled", False) else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    ctx = create_context(settings=settings, task_file=args.task_file)
    logger.debug("Running command=%s", args.command)

    try:
        output = args.func(ctx, args)
    except KaskError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("I/O failure: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
