"""Exceptions raised by the chess image renderer."""

from __future__ import annotations


class ChessImageError(Exception):
    """Base class for renderer failures."""


class InvalidConfiguration(ChessImageError, ValueError):
    """Renderer or theme arguments are unusable."""


class AssetNotFound(ChessImageError, LookupError):
    """A piece glyph could not be resolved or decoded."""


class InvalidFen(ChessImageError, ValueError):
    """The FEN placement field cannot be tokenized into squares."""


class InvalidPieceCharacter(InvalidFen):
    def __init__(self, char: str) -> None:
        super().__init__(f"Unknown piece: {char!r}")
        self.char = char
