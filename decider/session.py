from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List

import numpy as np

from decider.core import InsufficientInputError, Scorer, UserInterface
from decider.steps import (
    ImportanceElicitor,
    NameListCollector,
    RatingsMatrixBuilder,
    ResultPresenter,
    ResultSummary,
)
from models import DEFAULT_STANDARD, Alternative, Factor, ImportanceVector, validate_standard

logger = logging.getLogger(__name__)

INTRODUCTION = """Decision Support Aid

This wizard helps you compare alternatives against factors, then computes a preferred choice.

- Enter Alternatives (things you're choosing between)
- Enter Factors (criteria you care about)
- Set Factor Importances
- Rate each alternative per factor

You can use the keyboard (Enter to add) and all numeric fields are validated."""


@dataclass
class SessionResult:
    alternatives: List[Alternative]
    factors: List[Factor]
    importance: ImportanceVector
    ratings: np.ndarray
    ranked: List[Alternative]
    summary: ResultSummary


def alternatives_collector() -> NameListCollector:
    return NameListCollector(
        "Alternatives",
        "Add an alternative",
        "Enter a name and press Add",
        require_at_least_one=True,
    )


def factors_collector() -> NameListCollector:
    return NameListCollector(
        "Factors",
        "Add a factor",
        "Enter a factor and press Add",
        require_at_least_one=True,
    )


async def collect_alternatives(interface: UserInterface) -> List[Alternative]:
    collector = alternatives_collector()
    await interface.collect_names(collector)
    names = collector.finish()
    if not names:
        logger.error("No alternatives entered")
        raise InsufficientInputError("No alternatives entered.")
    return [Alternative(name) for name in names]


async def collect_factors(interface: UserInterface) -> List[Factor]:
    collector = factors_collector()
    await interface.collect_names(collector)
    names = collector.finish()
    if not names:
        logger.error("No factors entered")
        raise InsufficientInputError("No factors entered.")
    return [Factor(name) for name in names]


async def elicit_importance(interface: UserInterface, factors: List[Factor], standard: int) -> ImportanceVector:
    elicitor = ImportanceElicitor(factors, standard)
    if not elicitor.requires_input:
        return elicitor.confirm()
    await interface.elicit_importance(elicitor)
    return elicitor.finish()


async def rate_alternatives(
    interface: UserInterface,
    alternatives: List[Alternative],
    factors: List[Factor],
    standard: int,
) -> np.ndarray:
    builder = RatingsMatrixBuilder(alternatives, factors, standard)
    await interface.rate_alternatives(builder)
    return builder.finish()


async def run_session(
    interface: UserInterface,
    scorer: Scorer,
    standard: int = DEFAULT_STANDARD,
) -> SessionResult:
    standard = validate_standard(standard)
    await interface.show_introduction(INTRODUCTION)

    alternatives = await collect_alternatives(interface)
    factors = await collect_factors(interface)
    importance = await elicit_importance(interface, factors, standard)
    ratings = await rate_alternatives(interface, alternatives, factors, standard)

    ranked = scorer.rank(list(alternatives), list(factors), importance, ratings.copy())
    summary = ResultPresenter().present(ranked)
    await interface.show_results(summary)
    logger.info("Session finished:\n%s", summary.to_text())
    return SessionResult(
        alternatives=alternatives,
        factors=factors,
        importance=importance,
        ratings=ratings,
        ranked=list(ranked),
        summary=summary,
    )


async def main_session(
    interface: UserInterface,
    scorer: Scorer,
    standard: int = DEFAULT_STANDARD,
) -> int:
    """Run one session and return the status the process should exit with."""
    try:
        await run_session(interface, scorer, standard)
    except InsufficientInputError as exc:
        await interface.show_error("Error", exc.message)
        return exc.exit_status
    return 0
