"""Built-in board themes."""

from __future__ import annotations

from .errors import InvalidConfiguration
from .models import Theme

DEFAULT_THEME_NAME = "green"

GREEN = Theme(name="green", light="#ebecd0", dark="#739552")
BROWN = Theme(name="brown", light="#efdab7", dark="#b48766")

THEMES: dict[str, Theme] = {
    GREEN.name: GREEN,
    BROWN.name: BROWN,
}


def list_themes() -> list[str]:
    return sorted(THEMES.keys())


def get_theme(name: str | None) -> Theme:
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    try:
        return THEMES[name.lower()]
    except KeyError:
        raise InvalidConfiguration(f"Unknown theme: {name!r} (available: {', '.join(list_themes())})") from None
