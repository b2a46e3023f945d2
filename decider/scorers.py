from __future__ import annotations

from importlib import import_module
import logging
from typing import Dict, List, Sequence

import numpy as np

from decider.core import Scorer
from models import Alternative, Factor, ImportanceVector

logger = logging.getLogger(__name__)


class PassthroughScorer(Scorer):
    """Keeps the entry order and attaches no scores.

    Stands in when no ranking algorithm is plugged in.
    """

    id = "passthrough"
    name = "Entry order (no scoring)"

    def rank(
        self,
        alternatives: Sequence[Alternative],
        factors: Sequence[Factor],
        importance: ImportanceVector,
        ratings: np.ndarray,
    ) -> List[Alternative]:
        return list(alternatives)


SCORERS: Dict[str, Scorer] = {
    "passthrough": PassthroughScorer(),
}


def get_scorer(scorer_id: str) -> Scorer:
    """Resolve a registered scorer id or a ``module:attribute`` path."""
    if scorer_id in SCORERS:
        return SCORERS[scorer_id]
    module_name, sep, attribute = scorer_id.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Unknown scorer {scorer_id!r}; use one of {sorted(SCORERS)} or 'module:attribute'.")
    target = getattr(import_module(module_name), attribute)
    scorer = target() if isinstance(target, type) else target
    if not isinstance(scorer, Scorer):
        raise TypeError(f"{scorer_id!r} is not a Scorer.")
    logger.info("Loaded scorer %s from %s", type(scorer).__name__, scorer_id)
    return scorer


def list_scorers() -> dict:
    return {scorer_id: scorer.name for scorer_id, scorer in SCORERS.items()}
