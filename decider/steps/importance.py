from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from decider.core import ElicitationStep
from decider.scale import normalize_value
from models import Factor, ImportanceVector, validate_standard

logger = logging.getLogger(__name__)


class ImportanceElicitor(ElicitationStep):
    """Relative factor importances anchored on the last factor.

    The last factor is the baseline: it always holds ``standard`` and cannot
    be edited. With a single factor there is nothing to ask and the step only
    needs to be confirmed.
    """

    title = "Factor Importances"

    def __init__(self, factors: Sequence[Factor], standard: int) -> None:
        super().__init__()
        if not factors:
            raise ValueError("At least one factor is required.")
        self.factors = list(factors)
        self.standard = validate_standard(standard)
        self._values: List[int] = [standard] * len(self.factors)
        self._result: Optional[ImportanceVector] = None

    @property
    def baseline_index(self) -> int:
        return len(self.factors) - 1

    @property
    def baseline(self) -> Factor:
        return self.factors[self.baseline_index]

    @property
    def requires_input(self) -> bool:
        return len(self.factors) > 1

    @property
    def values(self) -> List[int]:
        return list(self._values)

    def is_editable(self, index: int) -> bool:
        return index != self.baseline_index

    def get(self, index: int) -> int:
        return self._values[index]

    def set(self, index: int, value) -> None:
        self._ensure_open()
        if not 0 <= index < len(self.factors):
            raise IndexError(f"Factor index {index} out of range.")
        if not self.is_editable(index):
            return
        self._values[index] = int(round(normalize_value(value, self.standard)))
        logger.debug("%s: %s = %d", self.title, self.factors[index].name, self._values[index])

    def confirm(self) -> ImportanceVector:
        self._ensure_open()
        self._values[self.baseline_index] = self.standard
        self._apply()
        self._close()
        logger.info("%s: confirmed %s", self.title, self._values)
        return self.result

    def abandon(self) -> ImportanceVector:
        self._ensure_open()
        self._values = [self.standard] * len(self.factors)
        self._apply()
        self._close(abandoned=True)
        logger.info("%s: abandoned, every factor set to %d", self.title, self.standard)
        return self.result

    def _apply(self) -> None:
        for factor, value in zip(self.factors, self._values):
            factor.rank = value
        self._result = ImportanceVector(values=tuple(self._values), standard=self.standard)

    @property
    def result(self) -> ImportanceVector:
        if self._result is None:
            raise RuntimeError("Importance step has not been closed yet.")
        return self._result
