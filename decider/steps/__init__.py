from decider.steps.importance import ImportanceElicitor
from decider.steps.names import NameListCollector
from decider.steps.ratings import RatingsMatrixBuilder
from decider.steps.results import ResultPresenter, ResultSummary

__all__ = [
    "ImportanceElicitor",
    "NameListCollector",
    "RatingsMatrixBuilder",
    "ResultPresenter",
    "ResultSummary",
]
