import unittest

from queens.core.constants import DEFAULT_PALETTE
from queens.core.models import Board
from queens.engine.validator import BoardValidator

CANDIDATES = ((0, 1), (1, 3), (2, 0), (3, 2))


def _row_regions() -> dict:
    return {(r, c): DEFAULT_PALETTE[r] for r in range(4) for c in range(4)}


def _board(candidates=CANDIDATES, regions=None) -> Board:
    return Board(dimension=4, candidates=candidates, regions=regions or _row_regions())


class BoardValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = BoardValidator()

    def test_valid_board_passes(self) -> None:
        result = self.validator.validate(_board())
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_touching_queens_fail(self) -> None:
        result = self.validator.validate(_board(candidates=((0, 0), (1, 1), (2, 3), (3, 2))))
        self.assertFalse(result.ok)
        self.assertIn("touch", result.messages[0])

    def test_missing_cell_fails(self) -> None:
        regions = _row_regions()
        del regions[(3, 3)]
        result = self.validator.validate(_board(regions=regions))
        self.assertFalse(result.ok)
        self.assertIn("(3, 3)", result.messages[0])

    def test_wrong_queen_colour_fails(self) -> None:
        regions = _row_regions()
        regions[(0, 0)] = DEFAULT_PALETTE[1]
        regions[(0, 1)] = DEFAULT_PALETTE[1]
        result = self.validator.validate(_board(regions=regions))
        self.assertFalse(result.ok)
        self.assertIn("Queen 0", result.messages[0])

    def test_split_region_fails(self) -> None:
        regions = _row_regions()
        # Row 0 region gains a detached cell in row 2.
        regions[(2, 3)] = DEFAULT_PALETTE[0]
        result = self.validator.validate(_board(regions=regions))
        self.assertFalse(result.ok)
        self.assertIn("not connected", result.messages[0])

    def test_extra_region_fails(self) -> None:
        regions = _row_regions()
        regions[(3, 3)] = "hsl(0, 0%, 50%)"
        result = self.validator.validate(_board(regions=regions))
        self.assertFalse(result.ok)
        self.assertIn("found 5", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
