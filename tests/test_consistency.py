import unittest

from zoosolver.core.models import Animal, Block, Pattern
from zoosolver.engine.board import BoardConfig, ZooBoard
from zoosolver.engine.consistency import ConsistencyConfig, find_arrangement, is_consistent


def make_board(size: int, *animals: Animal) -> ZooBoard:
    board = ZooBoard(BoardConfig(size=size))
    board.add_animals(animals)
    board.generate()
    return board


class ArrangementTests(unittest.TestCase):
    def test_disjoint_arrangement_found(self) -> None:
        board = make_board(3, Animal("Fox", Pattern.from_rows("X")), Animal("Owl", Pattern.from_rows("X")))
        arrangement = find_arrangement(board, ConsistencyConfig(timeout=5.0, num_workers=1))
        self.assertIsNotNone(arrangement)
        assert arrangement is not None
        self.assertEqual(set(arrangement), {"Fox", "Owl"})
        self.assertNotEqual(arrangement["Fox"].position, arrangement["Owl"].position)

    def test_overlapping_only_placements_are_inconsistent(self) -> None:
        # Every row crosses every column on a 2x2 board.
        bar = Animal("Bar", Pattern.from_rows("XX"))
        pole = Animal("Pole", Pattern.from_rows("X/X"))
        board = make_board(2, bar, pole)
        self.assertEqual(board.exhausted_animals(), ())
        self.assertFalse(is_consistent(board))

    def test_confirmed_hit_is_respected(self) -> None:
        fox = Animal("Fox", Pattern.from_rows("X"))
        snake = Animal("Snake", Pattern.from_rows("XX"))
        board = make_board(3, fox, snake)
        board.confirm_hit(Block(1, 1), "Snake")
        arrangement = find_arrangement(board)
        assert arrangement is not None
        self.assertTrue(arrangement["Snake"].covers(Block(1, 1)))
        self.assertFalse(arrangement["Fox"].covers(Block(1, 1)))

    def test_exhausted_animal_short_circuits(self) -> None:
        board = make_board(2, Animal("Long", Pattern.from_rows("XXX")))
        self.assertIsNone(find_arrangement(board))

    def test_empty_roster_is_trivially_consistent(self) -> None:
        board = ZooBoard(BoardConfig(size=2))
        self.assertEqual(find_arrangement(board), {})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
