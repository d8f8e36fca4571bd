"""Piece catalog: FEN placement characters to piece identities."""

from __future__ import annotations

from types import MappingProxyType

from .errors import InvalidPieceCharacter
from .models import PieceIdentity, PieceKind, Side

_LETTER_KINDS = {
    "r": PieceKind.ROOK,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
    "p": PieceKind.PAWN,
}

PIECES: MappingProxyType[str, PieceIdentity] = MappingProxyType(
    {
        **{letter.upper(): PieceIdentity(kind, Side.WHITE) for letter, kind in _LETTER_KINDS.items()},
        **{letter: PieceIdentity(kind, Side.BLACK) for letter, kind in _LETTER_KINDS.items()},
    }
)

_ALL = frozenset(PIECES.values())


def identity_from_fen_char(char: str) -> PieceIdentity:
    try:
        return PIECES[char]
    except (KeyError, TypeError):
        raise InvalidPieceCharacter(str(char)) from None


def fen_char_for(identity: PieceIdentity) -> str:
    return identity.fen_char


def all_identities() -> frozenset[PieceIdentity]:
    return _ALL
