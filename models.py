from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

MIN_RANK = 0
MAX_RANK = 1000
DEFAULT_STANDARD = 100


@dataclass
class Alternative:
    name: str
    score: Optional[float] = None


@dataclass
class Factor:
    name: str
    rank: Optional[int] = None


@dataclass(frozen=True)
class ImportanceVector:
    values: Tuple[int, ...]
    standard: int

    @property
    def baseline_index(self) -> int:
        return len(self.values) - 1

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def to_list(self) -> List[int]:
        return list(self.values)


def validate_standard(standard: int) -> int:
    if isinstance(standard, bool) or not isinstance(standard, int):
        raise ValueError(f"Standard must be an integer, got {standard!r}.")
    if standard < MIN_RANK or standard > MAX_RANK:
        raise ValueError(f"Standard must be between {MIN_RANK} and {MAX_RANK}.")
    return standard
