from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, Tuple

from .actions import Create, Delete, Edit, Outcome, Search, View, dispatch
from .config import BACKENDS, Settings, create_store
from .exception_handler import ErrorHandler, setup_logging
from .snippet import Snippet, SnippetStore

logger = logging.getLogger("snippetbox")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippetbox",
        description="Store, browse and search short code snippets",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=None,
        help="Storage backend (defaults to SNIPPETS_BACKEND or 'file')",
    )
    parser.add_argument(
        "--dir",
        dest="data_dir",
        default=None,
        help="Directory for the file backend (defaults to SNIPPETS_DIR or ~/.snippetbox)",
    )
    parser.add_argument(
        "--redis-url",
        dest="redis_url",
        default=None,
        help="Redis URL for the redis backend (defaults to REDIS_URL)",
    )
    parser.add_argument(
        "--key",
        dest="storage_key",
        default=None,
        help="Storage key holding the collection (default: codeSnippets)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging level (defaults to SNIPPETS_LOG_LEVEL or WARNING)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List every snippet")

    add = commands.add_parser("add", help="Store a new snippet")
    add.add_argument("--title", default="", help="Snippet title")
    add.add_argument("--language", "-l", default="", help="Language tag, for example Java")
    add.add_argument("--description", "-d", default="", help="Short description")
    _add_code_arguments(add)

    show = commands.add_parser("show", help="Show one snippet with its code")
    show.add_argument("index", type=int, help="Position of the snippet in the list")
    show.add_argument(
        "--html",
        action="store_true",
        help="Print the highlighted HTML markup instead of plain code",
    )

    edit = commands.add_parser("edit", help="Replace the code of a snippet")
    edit.add_argument("index", type=int, help="Position of the snippet in the list")
    _add_code_arguments(edit)

    delete = commands.add_parser("delete", help="Delete a snippet")
    delete.add_argument("index", type=int, help="Position of the snippet in the list")

    search = commands.add_parser("search", help="Filter by title, language or description")
    search.add_argument("query", help="Case-insensitive text to look for")

    return parser


def _add_code_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--code", "-c", default=None, help="Code text")
    group.add_argument(
        "--code-file",
        dest="code_file",
        default=None,
        help="Read code from this file ('-' reads standard input)",
    )


def read_code(args: argparse.Namespace) -> str:
    if args.code_file == "-":
        return sys.stdin.read()
    if args.code_file:
        return Path(args.code_file).read_text(encoding="utf-8")
    return args.code or ""


def build_settings(args: argparse.Namespace) -> Settings:
    return Settings.from_env().with_overrides(
        backend=args.backend,
        data_dir=args.data_dir,
        redis_url=args.redis_url,
        storage_key=args.storage_key,
        log_level=args.log_level,
    )


def format_snippets(entries: Sequence[Tuple[int, Snippet]], *, total: int | None = None) -> str:
    if not entries:
        if total == 0:
            return "No snippets saved yet."
        return "No snippets found."

    lines: list[str] = [f"List of Snippets ({len(entries)})"]
    for index, snippet in entries:
        lines.extend(
            [
                "",
                f"[{index}] {snippet.display_title}",
                f"    Language: {snippet.display_language}",
                f"    Description: {snippet.display_description}",
            ]
        )
    return "\n".join(lines)


def format_snippet(index: int, snippet: Snippet, body: str) -> str:
    lines = [
        f"[{index}] {snippet.display_title}",
        f"Language: {snippet.display_language}",
        f"Description: {snippet.display_description}",
        "Code:",
        "```",
    ]
    lines.extend(body.splitlines() or [""])
    lines.append("```")
    return "\n".join(lines)


def run_command(args: argparse.Namespace, store: SnippetStore) -> Outcome:
    if args.command == "list":
        return dispatch(store, Search(""))
    if args.command == "search":
        return dispatch(store, Search(args.query))
    if args.command == "show":
        return dispatch(store, View(args.index))
    if args.command == "add":
        return dispatch(
            store,
            Create(
                {
                    "title": args.title,
                    "language": args.language,
                    "code": read_code(args),
                    "description": args.description,
                }
            ),
        )
    if args.command == "edit":
        return dispatch(store, Edit(args.index, read_code(args)))
    if args.command == "delete":
        return dispatch(store, Delete(args.index))
    raise ValueError(f"Unknown command: {args.command}")


def render_outcome(args: argparse.Namespace, outcome: Outcome, total: int) -> str:
    if args.command in ("list", "search"):
        return format_snippets(outcome.entries, total=total)
    if args.command == "show" and outcome.snippet is not None and outcome.index is not None:
        body = outcome.markup if args.html else outcome.snippet.display_code
        return format_snippet(outcome.index, outcome.snippet, body or "")
    if args.command == "add" and outcome.index is not None:
        return f"✅ {outcome.message} (index {outcome.index})"
    return f"✅ {outcome.message}"


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = build_settings(args)
    setup_logging(settings.log_level)

    error_handler = ErrorHandler()
    try:
        store = create_store(settings, error_handler=error_handler)
        outcome = run_command(args, store)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Fatal error while running %s", args.command)
        print("\n❌ Fatal error occurred. See log for details.", file=sys.stderr)
        return 1

    exit_code = 0
    if not outcome.ok:
        print(f"❌ {outcome.message}", file=sys.stderr)
        exit_code = 1
    elif not outcome.persisted:
        print(f"⚠️  {outcome.message}", file=sys.stderr)
        exit_code = 1
    else:
        print(render_outcome(args, outcome, len(store)))

    report = error_handler.format_error_report()
    if report:
        print(f"\n⚠️  {report}", file=sys.stderr)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
