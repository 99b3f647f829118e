from unittest import TestCase, main

from numpy import array

from tilegrid.core.gamemove import Direction, legal_actions_mask, legal_directions, parse_direction


class TestGameMove(TestCase):
    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_directions(board)
        self.assertEqual(set(legal), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_mask_order(self):
        """
        The mask follows the order left, up, right, down.
        """
        board = array([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_actions_mask(board), (True, False, False, True))

    def test_no_legal_direction(self):
        board = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(legal_directions(board), [])


class TestDirection(TestCase):
    def test_parse(self):
        """
        Directions are parsed from their case-insensitive names.
        """
        self.assertIs(parse_direction("left"), Direction.LEFT)
        self.assertIs(parse_direction(" UP "), Direction.UP)
        self.assertIs(parse_direction(Direction.DOWN), Direction.DOWN)

    def test_parse_unknown(self):
        """
        Unknown directions are rejected.
        """
        for value in ("north", "", 3, None):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_direction(value)

    def test_rotation(self):
        self.assertEqual([direction.rotation for direction in Direction], [0, 1, 2, 3])


if __name__ == '__main__':
    main()
