"""Orchestration between the console (I/O) and the board/move logic of the domain layer."""

import logging

from src.chess.board import Board
from src.chess.moves import perform_move
from src.chess.pieces import Color
from src.chess.render import render_board
from src.core.exceptions import InvalidMoveError
from src.core.models import MoveOutcome

logger = logging.getLogger(__name__)

DEFAULT_EXIT_COMMANDS = ("exit",)


class GameSession:
    """Owns the one board of this process. Lives as long as the console loop does."""

    def __init__(
        self,
        board: Board | None = None,
        exit_commands: tuple[str, ...] | list[str] = DEFAULT_EXIT_COMMANDS,
    ) -> None:
        self.board = board if board is not None else Board.new()
        self.exit_commands = tuple(exit_commands)
        self.moves_played: list[str] = []
        self.finished = False
        logger.info("Session started, %s to move", self.board.to_move.name.lower())

    @property
    def to_move(self) -> Color:
        return self.board.to_move

    def submit(self, line: str) -> MoveOutcome:
        """Handle a single line typed by the user: either an exit command or a move attempt."""
        token = line.strip()

        if token in self.exit_commands:
            self.finish()
            return MoveOutcome(token=token, accepted=False, quit_requested=True)

        try:
            perform_move(self.board, token)
        except InvalidMoveError as err:
            return MoveOutcome(token=token, accepted=False, error=err.kind)

        self.moves_played.append(token)
        return MoveOutcome(token=token, accepted=True)

    def render(self) -> str:
        return render_board(self.board)

    def finish(self) -> None:
        if not self.finished:
            self.finished = True
            logger.info("Session ended after %d move(s)", len(self.moves_played))
