"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Callable, Iterator, Union

from .resolver import default_resolver

FILES = "abcdefgh"

Color = Union[str, tuple[int, ...]]


class Side(str, Enum):
    WHITE = "white"
    BLACK = "black"


class PieceKind(str, Enum):
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"
    PAWN = "pawn"


_KIND_LETTERS = {
    PieceKind.ROOK: "r",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
    PieceKind.PAWN: "p",
}

_SIDE_LETTERS = {Side.WHITE: "l", Side.BLACK: "d"}


@dataclass(frozen=True)
class PieceIdentity:
    kind: PieceKind
    side: Side

    @property
    def fen_char(self) -> str:
        letter = _KIND_LETTERS[self.kind]
        return letter.upper() if self.side is Side.WHITE else letter

    @property
    def asset_name(self) -> str:
        """Bundled glyph name: kind letter then ``l`` (white) or ``d`` (black)."""
        return _KIND_LETTERS[self.kind] + _SIDE_LETTERS[self.side]

    def __str__(self) -> str:
        return f"{self.side.value} {self.kind.value}"


@dataclass(frozen=True)
class Square:
    """Board square; row 0 is rank 8 and col 0 is file a."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < 8 and 0 <= self.col < 8):
            raise ValueError(f"Square out of range: row={self.row} col={self.col}")

    @property
    def name(self) -> str:
        return f"{FILES[self.col]}{8 - self.row}"

    @property
    def is_light(self) -> bool:
        return (self.row + self.col) % 2 == 0

    @classmethod
    def from_name(cls, name: str) -> "Square":
        text = name.strip().lower()
        if len(text) != 2 or text[0] not in FILES or text[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(row=8 - int(text[1]), col=FILES.index(text[0]))


AssetResolver = Callable[[PieceIdentity], Union[IO[bytes], bytes]]
Highlighter = Callable[[Square], Union[Color, None]]


@dataclass(frozen=True)
class Theme:
    name: str
    light: Color
    dark: Color
    resolver: AssetResolver = field(default=default_resolver, compare=False, repr=False)

    def base_color(self, square: Square) -> Color:
        return self.light if square.is_light else self.dark

    def label_color(self, square: Square) -> Color:
        return self.dark if square.is_light else self.light


@dataclass(frozen=True)
class BoardPosition:
    rows: tuple[tuple[PieceIdentity | None, ...], ...]

    def piece_at(self, square: Square) -> PieceIdentity | None:
        return self.rows[square.row][square.col]

    def pieces(self) -> Iterator[tuple[Square, PieceIdentity]]:
        for row, cells in enumerate(self.rows):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Square(row, col), piece

    def count(self, identity: PieceIdentity | None = None) -> int:
        return sum(1 for _, piece in self.pieces() if identity is None or piece == identity)
