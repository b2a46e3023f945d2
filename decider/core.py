from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Sequence

import numpy as np

from models import Alternative, Factor, ImportanceVector

if TYPE_CHECKING:
    from decider.steps.importance import ImportanceElicitor
    from decider.steps.names import NameListCollector
    from decider.steps.ratings import RatingsMatrixBuilder
    from decider.steps.results import ResultSummary

INSUFFICIENT_INPUT_EXIT_STATUS = 2


class ElicitationError(Exception):
    """Base class for errors raised by elicitation steps."""


class InsufficientInputError(ElicitationError):
    """Raised when a mandatory list step ends with no items.

    This is the only error that escapes a session; ``exit_status`` tells the
    caller how to terminate.
    """

    def __init__(self, message: str, exit_status: int = INSUFFICIENT_INPUT_EXIT_STATUS) -> None:
        super().__init__(message)
        self.message = message
        self.exit_status = exit_status


class MissingRequiredItemError(ElicitationError):
    """Raised by a list step asked to confirm with zero items."""


class StepClosedError(ElicitationError):
    """Raised when a step is edited after it was confirmed or abandoned."""


class ElicitationStep(ABC):
    title: str = ""

    def __init__(self) -> None:
        self._closed = False
        self._abandoned = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def abandoned(self) -> bool:
        return self._abandoned

    def _ensure_open(self) -> None:
        if self._closed:
            raise StepClosedError(f"{self.title or type(self).__name__} step is already closed.")

    def _close(self, abandoned: bool = False) -> None:
        self._closed = True
        self._abandoned = abandoned

    @abstractmethod
    def confirm(self):
        raise NotImplementedError

    @abstractmethod
    def abandon(self):
        raise NotImplementedError

    @property
    @abstractmethod
    def result(self):
        raise NotImplementedError

    def finish(self):
        """Return the step result, abandoning the step if it is still open."""
        if not self._closed:
            self.abandon()
        return self.result


class UserInterface(ABC):
    """Modal front end driven by a session.

    Every method blocks the session until the user is done with it. The step
    methods receive a step object and are expected to close it through
    ``confirm`` or ``abandon``; a step left open counts as abandoned.
    """

    @abstractmethod
    async def show_introduction(self, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def collect_names(self, collector: "NameListCollector") -> None:
        raise NotImplementedError

    @abstractmethod
    async def elicit_importance(self, elicitor: "ImportanceElicitor") -> None:
        raise NotImplementedError

    @abstractmethod
    async def rate_alternatives(self, builder: "RatingsMatrixBuilder") -> None:
        raise NotImplementedError

    @abstractmethod
    async def show_results(self, summary: "ResultSummary") -> None:
        raise NotImplementedError

    @abstractmethod
    async def show_error(self, title: str, message: str) -> None:
        raise NotImplementedError


class Scorer(ABC):
    id: str
    name: str

    @abstractmethod
    def rank(
        self,
        alternatives: Sequence[Alternative],
        factors: Sequence[Factor],
        importance: ImportanceVector,
        ratings: np.ndarray,
    ) -> List[Alternative]:
        """Return the alternatives ordered best to worst, optionally scored."""
        raise NotImplementedError
