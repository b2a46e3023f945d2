import unittest

import numpy as np

from decider.scorers import PassthroughScorer, get_scorer, list_scorers
from models import Alternative, Factor, ImportanceVector


class TestScorers(unittest.TestCase):
    def test_passthrough_keeps_order(self) -> None:
        alternatives = [Alternative("B"), Alternative("A")]
        ranked = PassthroughScorer().rank(
            alternatives,
            [Factor("Cost")],
            ImportanceVector(values=(100,), standard=100),
            np.full((2, 1), 100.0),
        )

        self.assertEqual([item.name for item in ranked], ["B", "A"])
        self.assertTrue(all(item.score is None for item in ranked))

    def test_get_registered_scorer(self) -> None:
        self.assertIsInstance(get_scorer("passthrough"), PassthroughScorer)
        self.assertIn("passthrough", list_scorers())

    def test_get_scorer_by_path(self) -> None:
        self.assertIsInstance(get_scorer("decider.scorers:PassthroughScorer"), PassthroughScorer)

    def test_get_scorer_rejects_unknown(self) -> None:
        with self.assertRaises(ValueError):
            get_scorer("topsis")
        with self.assertRaises(TypeError):
            get_scorer("models:Factor")
