"""Piece glyph resolution against the bundled asset set or a directory."""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING, Callable

from .errors import AssetNotFound

if TYPE_CHECKING:
    from .models import PieceIdentity

ASSETS_DIR = Path(__file__).resolve().parent / "assets"
ASSET_SUFFIX = ".png"


def asset_path(identity: PieceIdentity) -> str:
    return f"{ASSETS_DIR.name}/{identity.asset_name}{ASSET_SUFFIX}"


def directory_resolver(directory: str | Path) -> Callable[[PieceIdentity], IO[bytes]]:
    """Resolver reading ``<name>.png`` glyphs from a piece set directory."""
    root = Path(directory).expanduser()

    def _resolve(identity: PieceIdentity) -> IO[bytes]:
        path = root / f"{identity.asset_name}{ASSET_SUFFIX}"
        try:
            return path.open("rb")
        except OSError as exc:
            raise AssetNotFound(f"Failed to load piece image {identity} from path: {path}") from exc

    return _resolve


_bundled = directory_resolver(ASSETS_DIR)


def default_resolver(identity: PieceIdentity) -> IO[bytes]:
    return _bundled(identity)
