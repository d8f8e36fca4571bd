import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from chessimage_renderer.errors import InvalidFen, InvalidPieceCharacter
from chessimage_renderer.fen import EMPTY_FEN, STARTING_FEN, parse_placement, placement_to_dict
from chessimage_renderer.models import PieceIdentity, PieceKind, Side, Square


class PlacementParserTests(unittest.TestCase):
    def test_empty_board(self):
        position = parse_placement(EMPTY_FEN)
        self.assertEqual(position.count(), 0)
        self.assertEqual(len(position.rows), 8)
        self.assertTrue(all(len(row) == 8 for row in position.rows))

    def test_starting_position(self):
        position = parse_placement(STARTING_FEN)
        self.assertEqual(position.count(), 32)
        self.assertEqual(position.count(PieceIdentity(PieceKind.PAWN, Side.WHITE)), 8)
        self.assertEqual(position.count(PieceIdentity(PieceKind.PAWN, Side.BLACK)), 8)
        self.assertEqual(position.piece_at(Square(0, 4)), PieceIdentity(PieceKind.KING, Side.BLACK))
        self.assertEqual(position.piece_at(Square(7, 3)), PieceIdentity(PieceKind.QUEEN, Side.WHITE))
        self.assertEqual(position.piece_at(Square(7, 0)), PieceIdentity(PieceKind.ROOK, Side.WHITE))
        self.assertIsNone(position.piece_at(Square(4, 4)))

    def test_digits_skip_columns(self):
        position = parse_placement("8/8/8/4p3/3P4/8/8/8 w - - 0 1")
        self.assertEqual(position.count(), 2)
        self.assertEqual(position.piece_at(Square.from_name("e5")), PieceIdentity(PieceKind.PAWN, Side.BLACK))
        self.assertEqual(position.piece_at(Square.from_name("d4")), PieceIdentity(PieceKind.PAWN, Side.WHITE))

    def test_other_fields_are_ignored(self):
        a = parse_placement("8/8/8/8/8/8/8/K7 w - - 0 1")
        b = parse_placement("8/8/8/8/8/8/8/K7 b KQkq e3 12 40")
        c = parse_placement("8/8/8/8/8/8/8/K7")
        self.assertEqual(a, b)
        self.assertEqual(a, c)

    def test_invalid_characters(self):
        for fen in (
            "rnbqkbnr/ppppxppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "8/8/8/8/8/8/8/7? w - - 0 1",
            "8/8/8/8/0/8/8/8",
            "8/8/8/8/9/8/8/8",
        ):
            with self.subTest(fen=fen):
                with self.assertRaises(InvalidFen):
                    parse_placement(fen)

    def test_invalid_letter_chains_catalog_error(self):
        with self.assertRaises(InvalidFen) as ctx:
            parse_placement("8/8/8/8/8/8/8/7z")
        self.assertIsInstance(ctx.exception.__cause__, InvalidPieceCharacter)

    def test_empty_and_non_string(self):
        for fen in ("", "   ", None, 42):
            with self.subTest(fen=fen):
                with self.assertRaises(InvalidFen):
                    parse_placement(fen)  # type: ignore[arg-type]

    def test_overflowing_rank_is_clipped(self):
        position = parse_placement("ppppppppp/8/8/8/8/8/8/8")
        self.assertEqual(position.count(), 8)

    def test_short_rank_and_missing_ranks_stay_empty(self):
        position = parse_placement("k/8/8")
        self.assertEqual(position.count(), 1)
        self.assertEqual(position.piece_at(Square(0, 0)), PieceIdentity(PieceKind.KING, Side.BLACK))

    def test_extra_ranks_are_dropped(self):
        position = parse_placement("8/8/8/8/8/8/8/8/K7")
        self.assertEqual(position.count(), 0)

    def test_strict_mode_rejects_bad_geometry(self):
        for fen in ("ppppppppp/8/8/8/8/8/8/8", "7/8/8/8/8/8/8/8", "8/8/8/8/8/8/8", "8/8/8/8/8/8/8/8/8"):
            with self.subTest(fen=fen):
                with self.assertRaises(InvalidFen):
                    parse_placement(fen, strict=True)

    def test_strict_mode_accepts_valid_position(self):
        self.assertEqual(parse_placement(STARTING_FEN, strict=True).count(), 32)

    def test_placement_to_dict(self):
        placement = placement_to_dict(parse_placement("4k3/8/8/8/8/8/8/4K3 w - - 0 1"))
        self.assertEqual(placement, {"e8": "black king", "e1": "white king"})


if __name__ == "__main__":
    unittest.main()
