import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from chessimage_renderer.errors import InvalidConfiguration
from chessimage_renderer.models import Square
from chessimage_renderer.themes import BROWN, DEFAULT_THEME_NAME, GREEN, get_theme, list_themes


class SquareTests(unittest.TestCase):
    def test_names(self):
        self.assertEqual(Square(0, 0).name, "a8")
        self.assertEqual(Square(7, 7).name, "h1")
        self.assertEqual(Square(4, 4).name, "e4")

    def test_from_name(self):
        self.assertEqual(Square.from_name("a8"), Square(0, 0))
        self.assertEqual(Square.from_name("H1"), Square(7, 7))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Square(8, 0)
        with self.assertRaises(ValueError):
            Square(0, -1)
        for name in ("i1", "a9", "a0", "e", "e44"):
            with self.assertRaises(ValueError):
                Square.from_name(name)

    def test_light_squares(self):
        self.assertTrue(Square(0, 0).is_light)
        self.assertFalse(Square(0, 1).is_light)
        self.assertTrue(Square(7, 7).is_light)

    def test_value_equality(self):
        self.assertEqual(Square(3, 5), Square(3, 5))
        self.assertEqual(len({Square(3, 5), Square(3, 5)}), 1)


class ThemeTests(unittest.TestCase):
    def test_builtin_colors(self):
        self.assertEqual((GREEN.light, GREEN.dark), ("#ebecd0", "#739552"))
        self.assertEqual((BROWN.light, BROWN.dark), ("#efdab7", "#b48766"))

    def test_registry(self):
        self.assertEqual(list_themes(), ["brown", "green"])
        self.assertIs(get_theme("brown"), BROWN)
        self.assertIs(get_theme("GREEN"), GREEN)
        self.assertEqual(get_theme(None).name, DEFAULT_THEME_NAME)
        self.assertEqual(get_theme("").name, DEFAULT_THEME_NAME)

    def test_unknown_theme(self):
        with self.assertRaises(InvalidConfiguration):
            get_theme("purple")

    def test_label_color_contrasts_base(self):
        light, dark = Square(0, 0), Square(0, 1)
        self.assertEqual(GREEN.base_color(light), GREEN.light)
        self.assertEqual(GREEN.label_color(light), GREEN.dark)
        self.assertEqual(GREEN.base_color(dark), GREEN.dark)
        self.assertEqual(GREEN.label_color(dark), GREEN.light)


if __name__ == "__main__":
    unittest.main()
