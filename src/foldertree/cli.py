"""Command-line front door for foldertree.

Reads a tree listing from a file or stdin, then creates the described
folders and empty files under a destination directory.
"""

import argparse
import logging
import sys
from pathlib import Path

from foldertree.core.types import EntryKind
from foldertree.generation import GenerationResult, generate_structure
from foldertree.materialization import OutcomeStatus
from foldertree.parsing import ParserConfig, parse_tree


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foldertree",
        description="Create folders and empty files from a text tree listing.",
    )
    parser.add_argument(
        "tree_file",
        nargs="?",
        default=None,
        help="File containing the tree listing. Reads stdin when omitted or '-'.",
    )
    parser.add_argument(
        "-d",
        "--dest",
        default=None,
        help="Destination root directory (default: current directory).",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=[],
        metavar="SUFFIX",
        help="Extra file extension treated as a file (repeatable).",
    )
    parser.add_argument(
        "--file",
        action="append",
        default=[],
        metavar="NAME",
        help="Always treat NAME as a file, e.g. Makefile (repeatable).",
    )
    parser.add_argument(
        "--folder",
        action="append",
        default=[],
        metavar="NAME",
        help="Always treat NAME as a folder, e.g. v1.0 (repeatable).",
    )
    parser.add_argument(
        "--comment-marker",
        default=None,
        help="Drop trailing annotations starting with this marker, e.g. '#'.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print the parsed entries; do not touch the filesystem.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log created entries (-v) or every parsed line (-vv).",
    )
    return parser


def _read_tree(tree_file: str | None) -> str:
    if tree_file is None or tree_file == "-":
        return sys.stdin.read()
    path = Path(tree_file)
    if not path.is_file():
        raise SystemExit(f"Tree file not found: {path}")
    return path.read_text(encoding="utf-8")


def _build_config(args: argparse.Namespace) -> ParserConfig:
    overrides = {name: EntryKind.FILE for name in args.file}
    overrides.update({name: EntryKind.FOLDER for name in args.folder})
    try:
        config = ParserConfig(overrides=overrides, comment_marker=args.comment_marker)
        if args.ext:
            config = config.with_extensions(*args.ext)
    except ValueError as exc:
        raise SystemExit(f"Invalid parser option: {exc}") from exc
    return config


def _report(result: GenerationResult) -> int:
    if result.succeeded:
        created = sum(
            1 for item in result.entries if item.outcome.status is OutcomeStatus.CREATED
        )
        print(
            f"Folder structure created successfully in {result.destination} "
            f"({created} created, {len(result.entries) - created} already existed)."
        )
        return 0

    failure = result.failure
    message = f"Error [{failure.category.value}]: {failure.message}"
    if failure.path is not None:
        message += f" ({failure.kind.value}: {failure.path})"
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, then generate the structure or print a dry run.

    Returns the process exit code: 0 on success, 1 on any failure category.
    """
    args = _build_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    text = _read_tree(args.tree_file)
    config = _build_config(args)

    if args.dry_run:
        for entry in parse_tree(text, config):
            print(f"{'  ' * entry.level}{entry.path} [{entry.kind.value}]")
        return 0

    destination = args.dest if args.dest is not None else str(Path.cwd())
    return _report(generate_structure(text, destination, config=config))


if __name__ == "__main__":
    sys.exit(main())
