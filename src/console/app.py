"""
Text console: read a move per line, print the board after each one.

Type a move as two square names, e.g. `E2E4`, or `exit` to stop.
"""

import argparse
import logging
import os
import sys
from typing import Callable, Optional, Sequence

from src.core.config import ConsoleSettings
from src.core.exceptions import ConfigError
from src.services.session import GameSession

CLEAR_SCREEN = "\x1b[2J"

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]


def run(
    settings: ConsoleSettings,
    read_line: Optional[ReadLine] = None,
    write_line: Optional[WriteLine] = None,
    session: Optional[GameSession] = None,
) -> GameSession:
    """The input loop. Stops on an exit command or when input runs out (EOF)."""
    read_line = read_line or input
    write_line = write_line or print
    session = session or GameSession(exit_commands=settings.exit_commands)

    write_line(settings.banner)
    while not session.finished:
        write_line(session.render())

        try:
            line = read_line(settings.prompt)
        except EOFError:
            session.finish()
            break

        outcome = session.submit(line)
        if outcome.quit_requested:
            break

        # wipe the previous board, the result of the move stays on top of the new one
        if settings.clear_screen:
            write_line(CLEAR_SCREEN)
        write_line(settings.success_message if outcome.accepted else settings.failure_message)

    return session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rchess", description="Two players, one board, moves typed as e.g. E2E4."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging goes to stderr (default: WARNING)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not send the clear-screen sequence after drawing the board",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = ConsoleSettings.from_env(os.environ)
    except ConfigError as err:
        print(f"Configuration error: {err}", file=sys.stderr)
        return 2
    if args.no_clear:
        settings = settings.model_copy(update={"clear_screen": False})

    run(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
