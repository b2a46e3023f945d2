import asyncio
import unittest
from typing import List, Optional

from decider.core import InsufficientInputError, Scorer, UserInterface
from decider.scorers import PassthroughScorer
from decider.session import INTRODUCTION, main_session, run_session
from decider.steps import ImportanceElicitor, NameListCollector, RatingsMatrixBuilder, ResultSummary


class ScriptedInterface(UserInterface):
    """Plays back canned answers; ``None`` for a step means the user cancels."""

    def __init__(
        self,
        alternatives: Optional[List[str]],
        factors: Optional[List[str]],
        importance: Optional[dict] = None,
        ratings: Optional[dict] = None,
        leave_open: bool = False,
    ) -> None:
        self.names = [alternatives, factors]
        self.importance = importance
        self.ratings = ratings
        self.leave_open = leave_open
        self.introduction: Optional[str] = None
        self.importance_asked = False
        self.summary: Optional[ResultSummary] = None
        self.errors: List[tuple] = []

    async def show_introduction(self, text: str) -> None:
        self.introduction = text

    async def collect_names(self, collector: NameListCollector) -> None:
        names = self.names.pop(0)
        if names is None:
            collector.abandon()
            return
        for name in names:
            collector.add(name)
        collector.confirm()

    async def elicit_importance(self, elicitor: ImportanceElicitor) -> None:
        self.importance_asked = True
        if self.leave_open:
            return
        if self.importance is None:
            elicitor.abandon()
            return
        for index, value in self.importance.items():
            elicitor.set(index, value)
        elicitor.confirm()

    async def rate_alternatives(self, builder: RatingsMatrixBuilder) -> None:
        if self.leave_open:
            return
        if self.ratings is None:
            builder.abandon()
            return
        for (row, col), value in self.ratings.items():
            builder.set(row, col, value)
        builder.confirm()

    async def show_results(self, summary: ResultSummary) -> None:
        self.summary = summary

    async def show_error(self, title: str, message: str) -> None:
        self.errors.append((title, message))


class GoneInterface(ScriptedInterface):
    """A front end whose user went away: every step returns still open."""

    def __init__(self) -> None:
        super().__init__(["A"], ["Cost"])
        self.collectors: List[NameListCollector] = []

    async def collect_names(self, collector: NameListCollector) -> None:
        collector.add("typed but never confirmed")
        self.collectors.append(collector)


class ScoreByFirstFactor(Scorer):
    id = "first_factor"
    name = "First factor"

    def rank(self, alternatives, factors, importance, ratings):
        for alternative, row in zip(alternatives, ratings.tolist()):
            alternative.score = row[0] / 1000.0
        return sorted(alternatives, key=lambda item: item.score, reverse=True)


class TestSession(unittest.IsolatedAsyncioTestCase):
    async def test_single_factor_skips_importance(self) -> None:
        interface = ScriptedInterface(["A", "B"], ["Cost"], ratings={})
        result = await run_session(interface, PassthroughScorer(), 100)

        self.assertFalse(interface.importance_asked)
        self.assertEqual(result.importance.to_list(), [100])
        self.assertEqual(result.factors[0].rank, 100)
        self.assertEqual(interface.introduction, INTRODUCTION)

    async def test_confirmed_importance_pins_baseline(self) -> None:
        interface = ScriptedInterface(["A", "B"], ["Cost", "Quality"], importance={0: 40, 1: 5}, ratings={})
        result = await run_session(interface, PassthroughScorer(), 100)

        self.assertEqual(result.importance.to_list(), [40, 100])

    async def test_abandoned_ratings_fall_back_to_standard(self) -> None:
        interface = ScriptedInterface(["A", "B", "C"], ["Cost", "Quality"], importance={0: 40}, ratings=None)
        result = await run_session(interface, PassthroughScorer(), 100)

        self.assertEqual(result.ratings.tolist(), [[100.0, 100.0]] * 3)
        self.assertEqual(result.importance.to_list(), [40, 100])

    async def test_open_steps_count_as_abandoned(self) -> None:
        interface = ScriptedInterface(["A", "B"], ["Cost", "Quality"], leave_open=True)
        result = await run_session(interface, PassthroughScorer(), 100)

        self.assertEqual(result.importance.to_list(), [100, 100])
        self.assertEqual(result.ratings.tolist(), [[100.0, 100.0]] * 2)

    async def test_scorer_output_is_presented(self) -> None:
        interface = ScriptedInterface(
            ["A", "B"],
            ["Cost"],
            ratings={(1, 0): 5000, (0, 0): 1},
        )
        result = await run_session(interface, ScoreByFirstFactor(), 100)

        self.assertEqual(result.ratings.tolist(), [[100.0], [1000.0]])
        self.assertEqual([item.name for item in result.ranked], ["B", "A"])
        self.assertEqual(interface.summary.best, "B")
        self.assertEqual([row.score for row in interface.summary.rows], ["1.0000", "0.1000"])

    async def test_passthrough_leaves_scores_blank(self) -> None:
        interface = ScriptedInterface(["A", "B"], ["Cost"], ratings={})
        await run_session(interface, PassthroughScorer(), 100)

        self.assertEqual(interface.summary.best, "A")
        self.assertEqual([row.score for row in interface.summary.rows], ["", ""])

    async def test_abandoned_alternatives_end_session(self) -> None:
        interface = ScriptedInterface(None, ["Cost"])
        with self.assertRaises(InsufficientInputError) as ctx:
            await run_session(interface, PassthroughScorer(), 100)
        self.assertEqual(ctx.exception.exit_status, 2)
        self.assertEqual(ctx.exception.message, "No alternatives entered.")

    async def test_abandoned_factors_end_session(self) -> None:
        interface = ScriptedInterface(["A"], None)
        status = await main_session(interface, PassthroughScorer(), 100)

        self.assertEqual(status, 2)
        self.assertEqual(interface.errors, [("Error", "No factors entered.")])
        self.assertIsNone(interface.summary)

    async def test_main_session_success(self) -> None:
        interface = ScriptedInterface(["A"], ["Cost"], ratings={})
        status = await main_session(interface, PassthroughScorer(), 100)

        self.assertEqual(status, 0)
        self.assertEqual(interface.errors, [])

    async def test_unclosed_name_step_ends_session(self) -> None:
        interface = GoneInterface()
        status = await asyncio.wait_for(main_session(interface, PassthroughScorer(), 100), timeout=5)

        self.assertEqual(status, 2)
        self.assertTrue(interface.collectors[0].abandoned)
        self.assertEqual(interface.errors, [("Error", "No alternatives entered.")])

    async def test_summary_is_logged(self) -> None:
        interface = ScriptedInterface(["A", "B"], ["Cost"], ratings={})
        with self.assertLogs("decider.session", level="INFO") as logs:
            await run_session(interface, PassthroughScorer(), 100)

        self.assertTrue(any("Preferred choice: A" in line for line in logs.output))

    async def test_invalid_standard(self) -> None:
        interface = ScriptedInterface(["A"], ["Cost"], ratings={})
        with self.assertRaises(ValueError):
            await run_session(interface, PassthroughScorer(), -1)
