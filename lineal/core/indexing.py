"""Index and range value types resolved against a dimension at access time."""

import operator
from dataclasses import dataclass
from typing import Any, Union

from lineal.core.exceptions import IndexOutOfRangeError


@dataclass(frozen=True)
class Index:
    """
    Position counted from either end of a dimension.

    ``Index(k)`` is the k-th element from the start; ``Index(k, from_end=True)``
    is the k-th element from the end, so ``Index(0, from_end=True)`` is the
    last one. Plain negative ints map onto the from-end form (``-1`` is
    ``Index(0, from_end=True)``).
    """

    value: int
    from_end: bool = False

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Index offset must be non-negative, got {self.value}")

    @classmethod
    def coerce(cls, key: Union["Index", int]) -> "Index":
        """Convert an int (or any __index__ type) to an Index."""
        if isinstance(key, Index):
            return key
        position = operator.index(key)
        if position < 0:
            return cls(-position - 1, from_end=True)
        return cls(position)

    def resolve(self, length: int) -> int:
        """
        Resolve to a from-start position.

        Raises:
            IndexOutOfRangeError: if the position is outside [0, length)
        """
        position = length - 1 - self.value if self.from_end else self.value
        if not 0 <= position < length:
            raise IndexOutOfRangeError(
                f"Index {position} is out of range for dimension {length}",
                index=position,
                length=length,
            )
        return position


@dataclass(frozen=True)
class Span:
    """Half-open range given as (offset, length)."""

    offset: int
    length: int

    @property
    def stop(self) -> int:
        return self.offset + self.length

    @property
    def positions(self) -> range:
        return range(self.offset, self.stop)

    @classmethod
    def resolve(cls, key: Union["Span", slice], length: int) -> "Span":
        """
        Resolve a slice (or an explicit Span) against a dimension.

        Slices follow Python clamping rules; an explicit Span must fit
        inside the dimension.

        Raises:
            ValueError: for stepped slices
            IndexOutOfRangeError: for a Span reaching outside [0, length)
        """
        if isinstance(key, Span):
            if key.offset < 0 or key.length < 0 or key.stop > length:
                raise IndexOutOfRangeError(
                    f"Span [{key.offset}, {key.stop}) is out of range for dimension {length}",
                    index=key.stop if key.offset >= 0 else key.offset,
                    length=length,
                )
            return key
        if key.step not in (None, 1):
            raise ValueError(f"Stepped slices are not supported (step={key.step})")
        start, stop, _ = key.indices(length)
        return cls(start, max(0, stop - start))


def is_range_key(key: Any) -> bool:
    """True for keys that address a range rather than a single position."""
    return isinstance(key, (slice, Span))
