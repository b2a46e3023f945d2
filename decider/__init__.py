from decider.core import (
    InsufficientInputError,
    MissingRequiredItemError,
    Scorer,
    UserInterface,
)
from decider.scorers import get_scorer, list_scorers
from decider.session import SessionResult, main_session, run_session

__all__ = [
    "InsufficientInputError",
    "MissingRequiredItemError",
    "Scorer",
    "SessionResult",
    "UserInterface",
    "get_scorer",
    "list_scorers",
    "main_session",
    "run_session",
]
