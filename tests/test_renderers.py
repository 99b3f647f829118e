"""
Tests for the console and window renderers.
"""

import io
from unittest import TestCase, main

import matplotlib

matplotlib.use("Agg")

from tilegrid.envs.engine import GridEngine  # noqa: E402
from tilegrid.utils.console import ConsoleBoard  # noqa: E402
from tilegrid.utils.windows import WindowBoard  # noqa: E402

BOARD = [[2, 0, 0, 0], [0, 4096, 0, 0], [0, 0, 0, 0], [0, 0, 0, 8]]


class TestConsoleBoard(TestCase):
    def test_render(self):
        stream = io.StringIO()
        ConsoleBoard(stream).render(GridEngine.from_grid(BOARD, score=36).snapshot(), best=100)

        lines = stream.getvalue().splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0].split(), ["2", ".", ".", "."])
        self.assertEqual(lines[1].split(), [".", "4096", ".", "."])
        self.assertEqual(lines[4], "score=36 best=100")

    def test_game_over(self):
        stream = io.StringIO()
        full = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]
        ConsoleBoard(stream).render(GridEngine.from_grid(full).snapshot(), best=0)
        self.assertTrue(stream.getvalue().endswith("Game over!\n"))


class TestWindowBoard(TestCase):
    def setUp(self):
        self.window = WindowBoard(title="test", size=4)

    def tearDown(self):
        self.window.close()

    def test_colors(self):
        self.assertEqual(self.window.color(0), WindowBoard.COLORS[0])
        self.assertEqual(self.window.color(2048), WindowBoard.COLORS[2048])
        self.assertEqual(self.window.color(4096), WindowBoard.SUPER_COLOR)

    def test_custom_super_tile(self):
        window = WindowBoard(title="small", size=4, super_tile=256)
        try:
            self.assertEqual(window.color(256), WindowBoard.COLORS[256])
            self.assertEqual(window.color(512), WindowBoard.SUPER_COLOR)
        finally:
            window.close()

    def test_render(self):
        self.window.render(GridEngine.from_grid(BOARD, score=12).snapshot(), best=40)
        self.assertEqual(self.window.texts[0].get_text(), "2")
        self.assertEqual(self.window.texts[1].get_text(), "")
        self.assertEqual(self.window.texts[5].get_text(), "4096")
        self.assertEqual(self.window.message.get_text(), "")
        self.assertTrue(self.window.closed is False)


if __name__ == "__main__":
    main()
