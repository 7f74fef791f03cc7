"""CLI entrypoint for the interactive crossword solver."""

from __future__ import annotations

import argparse

from colorama import init as init_colors

from kryss.engine.session import Session, SessionConfig
from kryss.io.lookup import GratiskryssordClient, LookupConfig
from kryss.io.shell import KryssShell
from kryss.utils.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a crossword by propagating letters between crossing words",
    )
    parser.add_argument("board", type=str, help="Board description file")
    parser.add_argument(
        "-d",
        "--dictionary",
        type=str,
        default="dict.json",
        help="Dictionary JSON file (created on save if missing)",
    )
    parser.add_argument(
        "--fetch",
        action="store_true",
        help="Look up every hint missing from the dictionary before solving",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Never contact the online crossword dictionary",
    )
    parser.add_argument("--no-colors", action="store_true", help="Disable colour output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    if args.offline and args.fetch:
        parser.error("--fetch cannot be combined with --offline")

    config = SessionConfig(
        board_path=args.board,
        dictionary_path=args.dictionary,
        fetch_missing=args.fetch,
        colors=not args.no_colors,
    )
    client = None if args.offline else GratiskryssordClient(LookupConfig.from_env())
    session = Session.open(config, lookup_client=client)

    if config.colors:
        init_colors()
    KryssShell(session, colors=config.colors).cmdloop()


if __name__ == "__main__":  # pragma: no cover
    main()
