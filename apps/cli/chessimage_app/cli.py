"""CLI entrypoints for rendering FEN positions and inspecting themes."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from chessimage_core import load_config
from chessimage_core.logging_setup import configure_logging, get_logger
from chessimage_renderer import (
    ChessImageError,
    ChessRenderer,
    THEMES,
    Square,
    highlight_squares,
    list_themes,
    parse_placement,
    placement_to_dict,
)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _fail(message: str) -> int:
    _print_json({"success": False, "error": message})
    return 2


def parse_highlight(value: str) -> tuple[Square, str]:
    """Parse ``SQUARE=COLOR`` (for example ``e4=#f6f66980``)."""
    name, sep, color = value.partition("=")
    if not sep or not color:
        raise argparse.ArgumentTypeError(f"expected SQUARE=COLOR, got {value!r}")
    try:
        return Square.from_name(name), color
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config(Path(args.config) if args.config else None)
    theme = args.theme or cfg.render.theme
    square_size = args.square_size if args.square_size is not None else cfg.render.square_size
    show_coordinates = cfg.render.show_coordinates and not args.no_coordinates
    out = Path(args.out) if args.out else Path(cfg.output.directory).expanduser() / cfg.output.filename
    highlight = highlight_squares(dict(args.highlight)) if args.highlight else None

    try:
        if args.strict:
            parse_placement(args.fen, strict=True)
        renderer = ChessRenderer(theme=theme, square_size=square_size, show_coordinates=show_coordinates)
        png = renderer.render_png(args.fen, highlight)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(png)
    except (ChessImageError, OSError) as exc:
        get_logger().warning(f"render failed: {exc}", extra={"event": "render_failed"})
        return _fail(str(exc))

    get_logger().info(f"rendered {out}", extra={"event": "render_complete"})
    _print_json(
        {
            "success": True,
            "path": str(out),
            "theme": renderer.theme.name,
            "size": [renderer.board_size, renderer.board_size],
            "bytes": len(png),
        }
    )
    return 0


def cmd_themes(_args: argparse.Namespace) -> int:
    _print_json([{"name": name, "light": THEMES[name].light, "dark": THEMES[name].dark} for name in list_themes()])
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    try:
        position = parse_placement(args.fen, strict=args.strict)
    except ChessImageError as exc:
        return _fail(str(exc))
    _print_json({"success": True, "pieces": position.count(), "placement": placement_to_dict(position)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chessimage", description="Render chess positions from FEN to PNG")
    parser.add_argument("--config", default=None, help="Optional path to a config.json")
    parser.add_argument("--verbose", action="store_true", help="Also log to the console")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render a FEN position to a PNG file")
    render_cmd.add_argument("fen", help="Position in Forsyth-Edwards Notation")
    render_cmd.add_argument("--out", default=None, help="Output PNG path")
    render_cmd.add_argument("--theme", choices=list_themes(), default=None)
    render_cmd.add_argument("--square-size", type=int, default=None, help="Square size in pixels")
    render_cmd.add_argument("--no-coordinates", action="store_true", help="Hide rank and file labels")
    render_cmd.add_argument(
        "--highlight",
        action="append",
        type=parse_highlight,
        default=[],
        metavar="SQUARE=COLOR",
        help="Override a square color, repeatable",
    )
    render_cmd.add_argument("--strict", action="store_true", help="Require exactly 8 ranks of 8 files")
    render_cmd.set_defaults(func=cmd_render)

    themes_cmd = sub.add_parser("themes", help="List built-in board themes")
    themes_cmd.set_defaults(func=cmd_themes)

    parse_cmd = sub.add_parser("parse", help="Print the piece placement of a FEN as JSON")
    parse_cmd.add_argument("fen", help="Position in Forsyth-Edwards Notation")
    parse_cmd.add_argument("--strict", action="store_true", help="Require exactly 8 ranks of 8 files")
    parse_cmd.set_defaults(func=cmd_parse)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(console=args.verbose)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
