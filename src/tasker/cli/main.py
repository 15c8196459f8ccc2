# src/tasker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then dispatches one subcommand:
add / list / done / rm / stats / theme.
"""

from __future__ import annotations

import argparse
import logging
import sys

from ..config import Config, get_config
from ..core.errors import StorageError
from ..core.state import AppState
from ..core.view import completion_band, completion_counts, completion_ratio, format_row
from ..logging_setup import setup_logging
from ..tasks import task_api
from ..tasks.task_models import Category, parse_deadline
from .bootstrap import create_initial_state

logger = logging.getLogger(__name__)

BAND_NAMES = {
    "low": "низкий",
    "medium": "средний",
    "high": "высокий",
}


def cmd_add(state: AppState, args: argparse.Namespace) -> int:
    description = " ".join(args.description)
    if args.deadline is not None and parse_deadline(args.deadline) is None:
        print(f"warning: срок '{args.deadline}' не в формате ДД.ММ.ГГГГ, сохранён как есть", file=sys.stderr)

    task = task_api.add_task(state, description, deadline=args.deadline, category=args.category)
    if task is None:
        print("warning: пустое описание, ничего не добавлено", file=sys.stderr)
        return 0
    print("✅ Задача добавлена!")
    return 0


def cmd_list(state: AppState, args: argparse.Namespace) -> int:
    rows = task_api.list_tasks(state)
    if not rows:
        print("Список задач пуст.")
        return 0
    for row in rows:
        print(format_row(row))
    return 0


def cmd_done(state: AppState, args: argparse.Namespace) -> int:
    task = task_api.toggle_task(state, args.position)
    mark = "выполнена" if task.done else "снова в работе"
    print(f"Задача {args.position} {mark}: {task.description}")
    return 0


def cmd_rm(state: AppState, args: argparse.Namespace) -> int:
    task = task_api.remove_task(state, args.position)
    print(f"Задача удалена: {task.description}")
    return 0


def cmd_stats(state: AppState, args: argparse.Namespace) -> int:
    done, total = completion_counts(state.store)
    ratio = completion_ratio(state.store)
    band = completion_band(ratio)
    print(f"Выполнено: {done}/{total} ({ratio:.0%})")
    print(f"Прогресс: {BAND_NAMES[band.value]}")
    return 0


def cmd_theme(state: AppState, args: argparse.Namespace) -> int:
    if args.mode is not None:
        task_api.set_dark_mode(state, args.mode == "on")
    dark = task_api.get_settings(state).dark_mode
    print(f"Тёмная тема: {'вкл' if dark else 'выкл'}")
    return 0


def _position(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"номер задачи должен быть числом: {raw!r}") from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tasker", description="Личный список задач.")
    sub = p.add_subparsers(dest="cmd", required=True)

    a = sub.add_parser("add", help="добавить задачу")
    a.add_argument("description", nargs="+", help="текст задачи; пустой текст игнорируется")
    a.add_argument("--deadline", "-d", help="срок в формате ДД.ММ.ГГГГ")
    a.add_argument("--category", "-c", choices=[c.value for c in Category])
    a.set_defaults(func=cmd_add)

    ls = sub.add_parser("list", help="показать задачи")
    ls.set_defaults(func=cmd_list)

    d = sub.add_parser("done", help="отметить задачу выполненной (или снять отметку)")
    d.add_argument("position", type=_position)
    d.set_defaults(func=cmd_done)

    rm = sub.add_parser("rm", help="удалить задачу")
    rm.add_argument("position", type=_position)
    rm.set_defaults(func=cmd_rm)

    st = sub.add_parser("stats", help="показать прогресс")
    st.set_defaults(func=cmd_stats)

    th = sub.add_parser("theme", help="показать или переключить тёмную тему")
    th.add_argument("mode", nargs="?", choices=["on", "off"])
    th.set_defaults(func=cmd_theme)

    return p


def run(argv: list[str] | None = None, *, config: Config | None = None) -> int:
    """Parse argv, run one command against freshly loaded state, return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    state = create_initial_state(config=config)
    try:
        return args.func(state, args)
    except IndexError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except StorageError as e:
        logger.error("Save failed: %s", e)
        print(f"error: не удалось сохранить: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    config = get_config()

    console_level = getattr(logging, config.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(
        log_dir=config.data_dir,
        console_level=console_level,
        log_to_file=config.log_to_file,
    )
    logger.debug("Starting %s...", config.app_name)

    return run(argv, config=config)


if __name__ == "__main__":
    raise SystemExit(main())
