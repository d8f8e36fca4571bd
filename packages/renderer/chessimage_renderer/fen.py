"""FEN placement field parsing."""

from __future__ import annotations

from .errors import InvalidFen, InvalidPieceCharacter
from .models import BoardPosition, PieceIdentity
from .pieces import identity_from_fen_char

BOARD_SIZE = 8
STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EMPTY_FEN = "8/8/8/8/8/8/8/8 w - - 0 1"


def placement_field(fen: str) -> str:
    if not isinstance(fen, str):
        raise InvalidFen(f"FEN must be a string, got {type(fen).__name__}")
    placement = fen.strip().split(" ", 1)[0]
    if not placement:
        raise InvalidFen("FEN placement field is empty")
    return placement


def parse_placement(fen: str, strict: bool = False) -> BoardPosition:
    """Parse the placement field of ``fen`` into an 8x8 grid.

    Only the placement field is read; turn, castling, en passant and clock
    fields are ignored. By default rows are not required to add up to eight
    columns: cells past the edge of the board are dropped and short rows are
    left empty. ``strict=True`` rejects any placement that is not exactly
    eight rows of eight columns.
    """
    ranks = placement_field(fen).split("/")
    if strict and len(ranks) != BOARD_SIZE:
        raise InvalidFen(f"Expected {BOARD_SIZE} ranks, got {len(ranks)}: {fen!r}")

    grid: list[list[PieceIdentity | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for row, rank in enumerate(ranks):
        col = 0
        for char in rank:
            if char in "12345678":
                col += int(char)
                continue
            try:
                piece = identity_from_fen_char(char)
            except InvalidPieceCharacter as exc:
                raise InvalidFen(f"Invalid character {char!r} in rank {row + 1} of {fen!r}") from exc
            if row < BOARD_SIZE and col < BOARD_SIZE:
                grid[row][col] = piece
            col += 1
        if strict and col != BOARD_SIZE:
            raise InvalidFen(f"Rank {row + 1} spans {col} columns, expected {BOARD_SIZE}: {rank!r}")

    return BoardPosition(rows=tuple(tuple(cells) for cells in grid))


def placement_to_dict(position: BoardPosition) -> dict[str, str]:
    return {square.name: str(piece) for square, piece in position.pieces()}
