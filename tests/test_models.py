import unittest

from zoosolver.core.exceptions import PatternError
from zoosolver.core.models import Animal, Block, Candidate, Cell, Pattern


class PatternTests(unittest.TestCase):
    def test_dimensions_follow_offsets(self) -> None:
        pattern = Pattern.from_offsets([(0, 0), (2, 0), (1, 3)])
        self.assertEqual(pattern.width, 3)
        self.assertEqual(pattern.height, 4)

    def test_from_rows_accepts_separated_string(self) -> None:
        pattern = Pattern.from_rows("X./XX")
        self.assertEqual(pattern.blocks, (Block(0, 0), Block(0, 1), Block(1, 1)))
        self.assertEqual((pattern.width, pattern.height), (2, 2))

    def test_from_rows_matches_list_form(self) -> None:
        self.assertEqual(Pattern.from_rows(["#.", ".#"]), Pattern.from_rows("X./.X"))

    def test_duplicate_offsets_collapse_in_order(self) -> None:
        pattern = Pattern.from_offsets([(1, 0), (0, 0), (1, 0)])
        self.assertEqual(pattern.blocks, (Block(1, 0), Block(0, 0)))
        self.assertEqual(len(pattern), 2)

    def test_empty_pattern_rejected(self) -> None:
        with self.assertRaises(PatternError):
            Pattern.from_rows("...")

    def test_negative_offset_rejected(self) -> None:
        with self.assertRaises(PatternError):
            Pattern.from_offsets([(0, 0), (-1, 0)])


class CandidateTests(unittest.TestCase):
    def test_block_is_value_type(self) -> None:
        self.assertEqual(Block(1, 2), Block(1, 2))
        self.assertEqual(len({Block(1, 2), Block(1, 2)}), 1)
        self.assertEqual(Block(1, 2).shifted(2, 1), Block(3, 3))

    def test_candidate_covers_its_position(self) -> None:
        animal = Animal("Snake", Pattern.from_rows("XX"))
        candidate = Candidate(animal, (Block(1, 1), Block(2, 1)))
        self.assertEqual(candidate.name, "Snake")
        self.assertTrue(candidate.covers(Block(2, 1)))
        self.assertFalse(candidate.covers(Block(0, 1)))


class CellTests(unittest.TestCase):
    def test_reset_restores_defaults(self) -> None:
        cell = Cell(1, 2, count=3, animals={"Fox"}, priority=True)
        cell.mark_known("Fox")
        cell.reset()
        self.assertEqual(cell, Cell(1, 2))

    def test_known_and_finalised_are_exclusive(self) -> None:
        cell = Cell(0, 0)
        cell.mark_known("Fox")
        self.assertTrue(cell.known)
        cell.mark_finalised("Fox")
        self.assertTrue(cell.finalised)
        self.assertFalse(cell.known)
        self.assertFalse(cell.is_eligible())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
