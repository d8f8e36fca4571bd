"""Renderer package for drawing FEN chess positions as images."""

from .resolver import default_resolver, directory_resolver
from .board import DEFAULT_SQUARE_SIZE, ChessRenderer, highlight_squares
from .errors import AssetNotFound, ChessImageError, InvalidConfiguration, InvalidFen, InvalidPieceCharacter
from .fen import EMPTY_FEN, STARTING_FEN, parse_placement, placement_to_dict
from .models import BoardPosition, PieceIdentity, PieceKind, Side, Square, Theme
from .pieces import all_identities, fen_char_for, identity_from_fen_char
from .themes import BROWN, DEFAULT_THEME_NAME, GREEN, THEMES, get_theme, list_themes

__all__ = [
    "AssetNotFound",
    "BROWN",
    "BoardPosition",
    "ChessImageError",
    "ChessRenderer",
    "DEFAULT_SQUARE_SIZE",
    "DEFAULT_THEME_NAME",
    "EMPTY_FEN",
    "GREEN",
    "InvalidConfiguration",
    "InvalidFen",
    "InvalidPieceCharacter",
    "PieceIdentity",
    "PieceKind",
    "STARTING_FEN",
    "Side",
    "Square",
    "THEMES",
    "Theme",
    "all_identities",
    "default_resolver",
    "directory_resolver",
    "fen_char_for",
    "get_theme",
    "highlight_squares",
    "identity_from_fen_char",
    "list_themes",
    "parse_placement",
    "placement_to_dict",
]
