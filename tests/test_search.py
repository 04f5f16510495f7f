import unittest
from unittest.mock import MagicMock

from queens.engine.constraints import is_independent
from queens.engine.search import SearchResult, search
from queens.utils.random_source import RandomSource


class RandomSourceTests(unittest.TestCase):
    def test_randint_stays_in_closed_range(self) -> None:
        rng = RandomSource(7)
        values = {rng.randint(1, 3) for _ in range(200)}
        self.assertEqual(values, {1, 2, 3})

    def test_randint_rejects_empty_range(self) -> None:
        with self.assertRaises(ValueError):
            RandomSource(1).randint(3, 2)

    def test_shuffle_is_a_permutation(self) -> None:
        items = list(range(20))
        RandomSource(3).shuffle(items)
        self.assertEqual(sorted(items), list(range(20)))

    def test_shuffle_reaches_every_permutation(self) -> None:
        rng = RandomSource(11)
        seen = set()
        for _ in range(600):
            items = ["a", "b", "c"]
            rng.shuffle(items)
            seen.add(tuple(items))
        self.assertEqual(len(seen), 6)

    def test_choice_leaves_input_untouched(self) -> None:
        items = [(0, 0), (1, 2), (3, 1)]
        picked = RandomSource(5).choice(items)
        self.assertIn(picked, items)
        self.assertEqual(items, [(0, 0), (1, 2), (3, 1)])

    def test_choice_rejects_empty_sequence(self) -> None:
        with self.assertRaises(IndexError):
            RandomSource(5).choice([])

    def test_seeded_sources_repeat(self) -> None:
        first = [RandomSource(42).randint(0, 1000) for _ in range(3)]
        second = [RandomSource(42).randint(0, 1000) for _ in range(3)]
        self.assertEqual(first, second)


class SearchTests(unittest.TestCase):
    def test_single_cell_board(self) -> None:
        result = search(1, RandomSource(0))
        self.assertEqual(result.candidates, ((0, 0),))
        self.assertTrue(result.complete)

    def test_result_is_always_independent_and_maximal(self) -> None:
        for seed in range(25):
            result = search(6, RandomSource(seed))
            self.assertTrue(is_independent(result.candidates))
            self.assertLessEqual(len(result.candidates), 6)
            self.assertGreater(len(result.candidates), 0)

    def test_observer_receives_growing_snapshots(self) -> None:
        observer = MagicMock()
        result = search(5, RandomSource(9), observer)
        self.assertEqual(observer.call_count, len(result.candidates))
        snapshots = [call.args[0] for call in observer.call_args_list]
        for index, snapshot in enumerate(snapshots, start=1):
            self.assertIsInstance(snapshot, tuple)
            self.assertEqual(len(snapshot), index)
        self.assertEqual(snapshots[-1], result.candidates)

    def test_two_by_two_never_completes(self) -> None:
        for seed in range(10):
            result = search(2, RandomSource(seed))
            self.assertEqual(len(result.candidates), 1)
            self.assertFalse(result.complete)

    def test_complete_flag(self) -> None:
        self.assertTrue(SearchResult(candidates=((0, 0),), dimension=1).complete)
        self.assertFalse(SearchResult(candidates=((0, 0),), dimension=4).complete)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
