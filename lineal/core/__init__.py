"""Core value types, errors and thresholds."""

from lineal.core.exceptions import (
    LinealError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from lineal.core.indexing import Index, Span
from lineal.core.tolerances import RANK_ZERO_THRESHOLD, ToleranceTier

__all__ = [
    "LinealError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "Index",
    "Span",
    "RANK_ZERO_THRESHOLD",
    "ToleranceTier",
]
