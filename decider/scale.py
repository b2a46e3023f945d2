from __future__ import annotations

import math
from numbers import Complex, Number, Real

from models import MAX_RANK, MIN_RANK


def coerce_value(value, standard: float) -> float:
    """Turn widget input into a float, falling back to ``standard``.

    Any ``numbers.Number`` except ``bool`` and complex values counts as numeric.
    Magnitudes too large for a float saturate at the rank bounds.
    """
    if isinstance(value, bool) or not isinstance(value, Number):
        return float(standard)
    if isinstance(value, Complex) and not isinstance(value, Real):
        return float(standard)
    try:
        converted = float(value)
    except OverflowError:
        return float(MAX_RANK) if value > 0 else float(MIN_RANK)
    except (TypeError, ValueError):
        return float(standard)
    if math.isnan(converted):
        return float(standard)
    return converted


def clamp_rank(value: float) -> float:
    return min(float(MAX_RANK), max(float(MIN_RANK), value))


def normalize_value(value, standard: float) -> float:
    return clamp_rank(coerce_value(value, standard))
