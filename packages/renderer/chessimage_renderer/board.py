"""Chess board image composer: FEN in, RGBA board image out."""

from __future__ import annotations

import base64
import logging
from io import BytesIO
from types import MappingProxyType
from typing import IO, Any, Mapping

import numpy as np
from PIL import Image, ImageColor, ImageDraw, ImageFont

from .errors import AssetNotFound, InvalidConfiguration
from .fen import BOARD_SIZE, parse_placement
from .models import FILES, BoardPosition, Color, Highlighter, PieceIdentity, Square, Theme
from .pieces import all_identities
from .themes import GREEN, get_theme

logger = logging.getLogger("chessimage.renderer")

DEFAULT_SQUARE_SIZE = 80
PIECE_SCALE = 0.7
LABEL_FONTS = ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf", "Arial.ttf")


def _no_highlight(_square: Square) -> None:
    return None


def _resolve_color(color: Color, mode: str, square: Square | None = None) -> Any:
    where = f" for {square.name}" if square is not None else ""
    if isinstance(color, str):
        try:
            return ImageColor.getcolor(color, mode)
        except ValueError as exc:
            raise InvalidConfiguration(f"Invalid color{where}: {color!r}") from exc
    if (
        isinstance(color, tuple)
        and len(color) in (3, 4)
        and all(isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 255 for v in color)
    ):
        return color
    raise InvalidConfiguration(f"Invalid color{where}: {color!r}")


def highlight_squares(colors: Mapping[Square | str, Color]) -> Highlighter:
    """Build a highlighter from ``{square: color}``; keys may be names like ``"e4"``."""
    table = {(key if isinstance(key, Square) else Square.from_name(key)): color for key, color in colors.items()}
    return table.get


class ChessRenderer:
    """Draws a FEN position on a themed 8x8 board.

    All twelve piece glyphs are resolved, decoded and scaled when the renderer
    is built. After that the renderer holds no mutable state, so one instance
    can serve any number of render calls, including concurrent ones that each
    draw onto their own image.
    """

    def __init__(
        self,
        theme: Theme | str | None = GREEN,
        square_size: int = DEFAULT_SQUARE_SIZE,
        show_coordinates: bool = True,
    ) -> None:
        if theme is None:
            raise InvalidConfiguration("Chess theme must not be None")
        if isinstance(theme, str):
            theme = get_theme(theme)
        if not isinstance(theme, Theme):
            raise InvalidConfiguration(f"Expected a Theme, got {type(theme).__name__}")
        if isinstance(square_size, bool) or not isinstance(square_size, int) or square_size < 1:
            raise InvalidConfiguration(f"Square size must be greater than 0, got {square_size!r}")
        for color in (theme.light, theme.dark):
            _resolve_color(color, "RGBA")

        self.theme = theme
        self.square_size = square_size
        self.show_coordinates = show_coordinates
        self.piece_size = max(1, int(square_size * PIECE_SCALE))
        self.piece_offset = (square_size - self.piece_size) // 2

        self.glyphs: Mapping[PieceIdentity, Image.Image] = MappingProxyType(self._load_glyphs())
        self._sprites = {
            identity: glyph.resize((self.piece_size, self.piece_size), Image.Resampling.LANCZOS)
            for identity, glyph in self.glyphs.items()
        }
        self._label_font = self._font(max(1, square_size // 6))
        logger.debug(
            "renderer ready theme=%s square_size=%d glyphs=%d",
            theme.name,
            square_size,
            len(self.glyphs),
            extra={"event": "renderer_ready"},
        )

    @classmethod
    def from_config(cls, cfg: Any) -> "ChessRenderer":
        """Build from any object exposing ``theme``, ``square_size`` and ``show_coordinates``."""
        return cls(theme=get_theme(cfg.theme), square_size=cfg.square_size, show_coordinates=cfg.show_coordinates)

    @property
    def board_size(self) -> int:
        return self.square_size * BOARD_SIZE

    def _load_glyphs(self) -> dict[PieceIdentity, Image.Image]:
        glyphs: dict[PieceIdentity, Image.Image] = {}
        for identity in sorted(all_identities(), key=lambda p: p.asset_name):
            try:
                source = self.theme.resolver(identity)
                if isinstance(source, (bytes, bytearray)):
                    source = BytesIO(source)
                with source as stream:
                    with Image.open(stream) as raw:
                        glyphs[identity] = raw.convert("RGBA")
            except AssetNotFound:
                raise
            except Exception as exc:
                raise AssetNotFound(f"Failed to load piece image {identity} ({identity.asset_name})") from exc
        return glyphs

    @staticmethod
    def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        for name in LABEL_FONTS:
            try:
                return ImageFont.truetype(name, size)
            except OSError:
                continue
        return ImageFont.load_default(size=size)

    def render_into(self, fen: str, image: Image.Image, highlight: Highlighter | None = None) -> BoardPosition:
        """Draw ``fen`` onto a caller-owned image and return the parsed position.

        The FEN is parsed and every square color resolved before anything is
        drawn, so an invalid FEN or highlight color leaves ``image`` untouched.
        """
        position = parse_placement(fen)
        colors = self._square_colors(image.mode, highlight or _no_highlight)
        draw = ImageDraw.Draw(image)
        self._paint_squares(draw, colors)
        if self.show_coordinates:
            self._draw_coordinates(draw)
        self._draw_pieces(image, position)
        return position

    def render_image(self, fen: str, highlight: Highlighter | None = None) -> Image.Image:
        image = Image.new("RGBA", (self.board_size, self.board_size), (0, 0, 0, 0))
        self.render_into(fen, image, highlight)
        return image

    def render(self, fen: str, out: IO[bytes], highlight: Highlighter | None = None, format: str = "PNG") -> None:
        if out is None:
            raise ValueError("Output stream must not be None")
        image = self.render_image(fen, highlight)
        image.save(out, format=format)

    def render_png(self, fen: str, highlight: Highlighter | None = None) -> bytes:
        buf = BytesIO()
        self.render(fen, buf, highlight)
        return buf.getvalue()

    def render_array(self, fen: str, highlight: Highlighter | None = None) -> np.ndarray:
        """Board pixels as a ``(height, width, 4)`` uint8 RGBA array."""
        return np.array(self.render_image(fen, highlight), dtype=np.uint8)

    def preview_data_url(self, fen: str, highlight: Highlighter | None = None) -> str:
        b64 = base64.b64encode(self.render_png(fen, highlight)).decode("ascii")
        return f"data:image/png;base64,{b64}"

    def _square_box(self, square: Square) -> tuple[int, int, int, int]:
        x = square.col * self.square_size
        y = square.row * self.square_size
        return (x, y, x + self.square_size - 1, y + self.square_size - 1)

    def _square_colors(self, mode: str, highlight: Highlighter) -> dict[Square, Any]:
        colors: dict[Square, Any] = {}
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                square = Square(row, col)
                override = highlight(square)
                color = override if override is not None else self.theme.base_color(square)
                colors[square] = _resolve_color(color, mode, square)
        return colors

    def _paint_squares(self, draw: ImageDraw.ImageDraw, colors: Mapping[Square, Any]) -> None:
        for square, color in colors.items():
            draw.rectangle(self._square_box(square), fill=color)

    def _draw_coordinates(self, draw: ImageDraw.ImageDraw) -> None:
        font = self._label_font
        inset = self.square_size // 12
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if col != 0 and row != BOARD_SIZE - 1:
                    continue
                square = Square(row, col)
                color = self.theme.label_color(square)
                x0, y0, x1, y1 = self._square_box(square)

                if col == 0:
                    rank = str(BOARD_SIZE - row)
                    left, top, _, _ = draw.textbbox((0, 0), rank, font=font)
                    draw.text((x0 + inset - left, y0 + inset - top), rank, font=font, fill=color)

                if row == BOARD_SIZE - 1:
                    letter = FILES[col]
                    _, _, right, bottom = draw.textbbox((0, 0), letter, font=font)
                    draw.text((x1 + 1 - inset - right, y1 + 1 - inset - bottom), letter, font=font, fill=color)

    def _draw_pieces(self, image: Image.Image, position: BoardPosition) -> None:
        for square, identity in position.pieces():
            sprite = self._sprites[identity]
            x0, y0, _, _ = self._square_box(square)
            image.paste(sprite, (x0 + self.piece_offset, y0 + self.piece_offset), sprite)
