"""Text representation of the board, as shown in the console"""

from src.chess.board import Board
from src.chess.pieces import Color, PieceType
from src.chess.square import BOARD_DIMENSIONS, FILE_NAMES, Square

EMPTY_SQUARE = "."

# Outlined glyphs for white, filled glyphs for black
GLYPHS: dict[tuple[PieceType, Color], str] = {
    (PieceType.KING, Color.WHITE): "♔",
    (PieceType.QUEEN, Color.WHITE): "♕",
    (PieceType.ROOK, Color.WHITE): "♖",
    (PieceType.BISHOP, Color.WHITE): "♗",
    (PieceType.KNIGHT, Color.WHITE): "♘",
    (PieceType.PAWN, Color.WHITE): "♙",
    (PieceType.KING, Color.BLACK): "♚",
    (PieceType.QUEEN, Color.BLACK): "♛",
    (PieceType.ROOK, Color.BLACK): "♜",
    (PieceType.BISHOP, Color.BLACK): "♝",
    (PieceType.KNIGHT, Color.BLACK): "♞",
    (PieceType.PAWN, Color.BLACK): "♟",
}


def render_board(board: Board) -> str:
    """
    Rank 8 on top, rank 1 at the bottom. Every row is labelled with its rank number on both sides,
    and the file letters run along the top and the bottom:

      A B C D E F G H
    8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜ 8
    ...
    1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖ 1
      A B C D E F G H
    """
    file_labels = "  " + " ".join(FILE_NAMES[: BOARD_DIMENSIONS[0]])
    lines = [file_labels]
    for rank in range(BOARD_DIMENSIONS[1], 0, -1):
        lines.append(f"{rank} {_render_rank(board, rank)} {rank}")
    lines.append(file_labels)
    return "\n".join(lines)


def _render_rank(board: Board, rank: int) -> str:
    cells: list[str] = []
    for file in range(1, BOARD_DIMENSIONS[0] + 1):
        piece = board.piece_at(Square(file, rank))
        cells.append(EMPTY_SQUARE if piece is None else GLYPHS[(piece.type, piece.color)])
    return " ".join(cells)
