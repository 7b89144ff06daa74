# ruff: noqa: T201

import argparse
import sys

from pyresults import Err, Ok

from ticklist.core.commands import AddTask, CycleTheme, DeleteTask, Session, SetFilter, SetSort, ToggleTask
from ticklist.core.models import DEFAULT_FILTER, DEFAULT_SORT, FILTER_MODES, SORT_MODES
from ticklist.interfaces.style import SHORT_ID_LENGTH, theme_icon
from ticklist.io.std_io import format_stats, print_projection
from ticklist.storage import get_kv_store
from ticklist.util.dirs import ensure_dirs, load_env
from ticklist.util.ids import parse_id
from ticklist.util.logger import setup_logger, setup_mode


def get_session() -> Session:
    env = load_env()
    ensure_dirs(env["HOME_DIR"])
    return Session(get_kv_store(env["DATA_PATH"]))


def _resolve_id(session: Session, s: str) -> str | None:
    match parse_id(s, source_ids=session.store.collection.ids()):
        case Ok(tid):
            return tid  # type: ignore[no-any-return]
        case Err(e):
            print(f"Error: {e}", file=sys.stderr)
            return None
        case _:
            print("Error: Unexpected error", file=sys.stderr)
            return None


def cmd_add(args: argparse.Namespace) -> int:
    session = get_session()
    session.handle(AddTask(text=args.text, due=args.due))
    if session.last_added is not None:
        print(session.last_added.id)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    session = get_session()
    session.handle(SetFilter(args.filter))
    p = session.handle(SetSort(args.sort))
    print_projection(p, id_length=None if args.full_id else SHORT_ID_LENGTH)
    return 0


def cmd_toggle(args: argparse.Namespace) -> int:
    session = get_session()
    tid = _resolve_id(session, args.id)
    if tid is None:
        return 1
    session.handle(ToggleTask(tid))
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    session = get_session()
    tid = _resolve_id(session, args.id)
    if tid is None:
        return 1
    session.handle(DeleteTask(tid))
    return 0


def cmd_stats(_args: argparse.Namespace) -> int:
    session = get_session()
    print(format_stats(session.projection().stats))
    return 0


def cmd_theme(args: argparse.Namespace) -> int:
    session = get_session()
    if args.next:
        session.handle(CycleTheme())
    print(f"{theme_icon(session.theme)} {session.theme}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ticklist", description="single-user task list")
    p.add_argument("--debug", action="store_true", help="verbose logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # add
    sp = sub.add_parser("add", help="add a task")
    sp.add_argument("text")
    sp.add_argument("--due", help="due date (YYYY-MM-DD)")
    sp.set_defaults(func=cmd_add)

    # list
    sp = sub.add_parser("list", help="list tasks")
    sp.add_argument("--filter", choices=FILTER_MODES, default=DEFAULT_FILTER)
    sp.add_argument("--sort", choices=SORT_MODES, default=DEFAULT_SORT)
    sp.add_argument("--full-id", action="store_true", help="show full task ids")
    sp.set_defaults(func=cmd_list)

    # toggle
    sp = sub.add_parser("toggle", help="mark a task done / not done")
    sp.add_argument("id", help="task id or unique id prefix")
    sp.set_defaults(func=cmd_toggle)

    # delete
    sp = sub.add_parser("delete", help="delete a task")
    sp.add_argument("id", help="task id or unique id prefix")
    sp.set_defaults(func=cmd_delete)

    # stats
    sp = sub.add_parser("stats", help="show counts and progress")
    sp.set_defaults(func=cmd_stats)

    # theme
    sp = sub.add_parser("theme", help="show the theme, or cycle it with --next")
    sp.add_argument("--next", action="store_true")
    sp.set_defaults(func=cmd_theme)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    env = load_env()
    setup_logger("ticklist", is_file=True, home=env["HOME_DIR"])
    setup_mode(is_debug=args.debug, level=env["LOG_LEVEL"])
    return args.func(args)  # type: ignore[no-any-return]


if __name__ == "__main__":
    sys.exit(main())
