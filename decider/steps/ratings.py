from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from decider.core import ElicitationStep
from decider.scale import normalize_value
from models import Alternative, Factor, MAX_RANK, MIN_RANK, validate_standard

logger = logging.getLogger(__name__)


def seed_ratings(
    seed: Sequence[Sequence[float]] | np.ndarray | None,
    alternatives: int,
    factors: int,
    standard: float,
) -> np.ndarray:
    data = np.full((alternatives, factors), float(standard), dtype=float)
    if seed is None:
        return data
    for i in range(1, alternatives):
        row = seed[i] if i < len(seed) else []
        for j in range(factors):
            if j < len(row) and row[j]:
                data[i, j] = normalize_value(row[j], standard)
    return data


class RatingsMatrixBuilder(ElicitationStep):
    """Alternative x factor ratings with the first alternative as anchor.

    Row 0 is pinned to ``standard`` for every factor. Every other cell is
    clamped to [MIN_RANK, MAX_RANK] on write; a zero in the seed counts as
    unset.
    """

    title = "Cross-Rankings"

    def __init__(
        self,
        alternatives: Sequence[Alternative],
        factors: Sequence[Factor],
        standard: int,
        seed: Sequence[Sequence[float]] | np.ndarray | None = None,
    ) -> None:
        super().__init__()
        if not alternatives or not factors:
            raise ValueError("Ratings need at least one alternative and one factor.")
        self.alternatives = list(alternatives)
        self.factors = list(factors)
        self.standard = validate_standard(standard)
        self._data = seed_ratings(seed, len(self.alternatives), len(self.factors), standard)
        self._result: Optional[np.ndarray] = None

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def row_names(self) -> List[str]:
        return [alternative.name for alternative in self.alternatives]

    @property
    def column_names(self) -> List[str]:
        return [factor.name for factor in self.factors]

    @staticmethod
    def is_editable(row: int, col: int) -> bool:
        return row != 0

    def get(self, row: int, col: int) -> float:
        return float(self._data[row, col])

    def set(self, row: int, col: int, value) -> None:
        self._ensure_open()
        self._check_cell(row, col)
        if not self.is_editable(row, col):
            return
        self._data[row, col] = normalize_value(value, self.standard)
        logger.debug(
            "%s: %s / %s = %s",
            self.title,
            self.alternatives[row].name,
            self.factors[col].name,
            self._data[row, col],
        )

    def _check_cell(self, row: int, col: int) -> None:
        rows, cols = self._data.shape
        if not (0 <= row < rows and 0 <= col < cols):
            raise IndexError(f"Cell ({row}, {col}) out of range for a {rows}x{cols} matrix.")

    def confirm(self) -> np.ndarray:
        self._ensure_open()
        self._data[0, :] = self.standard
        np.clip(self._data, MIN_RANK, MAX_RANK, out=self._data)
        self._result = self._data.copy()
        self._close()
        logger.info("%s: confirmed %dx%d matrix", self.title, *self._data.shape)
        return self.result

    def abandon(self) -> np.ndarray:
        self._ensure_open()
        self._data.fill(float(self.standard))
        self._result = self._data.copy()
        self._close(abandoned=True)
        logger.info("%s: abandoned, every cell set to %d", self.title, self.standard)
        return self.result

    @property
    def result(self) -> np.ndarray:
        if self._result is None:
            raise RuntimeError("Ratings step has not been closed yet.")
        return self._result.copy()
