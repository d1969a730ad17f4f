"""Command that assigns identifiers to every folder under a directory."""

from __future__ import annotations

import argparse
import os

from persistguard.fileid import (
    HISTORY_FILE,
    FileIDGenerator,
    History,
    interactive_menu,
    scan_and_generate,
)

DEFAULT_STATE_FILE = "estado.bin"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="persistguard-ids",
        description="Assign sequential identifiers to folders, keeping state between runs.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=os.path.expanduser("~"),
        help="directory to scan (default: the home directory)",
    )
    parser.add_argument(
        "--state", default=DEFAULT_STATE_FILE, help="generator state file"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="prompt for paths instead of scanning",
    )
    parser.add_argument(
        "--history", default=HISTORY_FILE, help="history file used in interactive mode"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load state, assign identifiers, save state."""
    args = _parser().parse_args(argv)
    generator = FileIDGenerator.load(args.state)

    if args.interactive:
        interactive_menu(generator, History(args.history), args.state)
    else:
        for path, file_id in scan_and_generate(args.directory, generator):
            print(f"Pasta: {path} | ID: {file_id}")

    generator.save(args.state)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())