"""Fixed-dimension vector of float64 values."""

import numbers
from typing import Iterable, Iterator, Optional, Union

import numpy as np
from numpy.typing import NDArray

from lineal.core.exceptions import DimensionMismatchError
from lineal.core.indexing import Index, Span, is_range_key


class Vector:
    """
    Ordered sequence of doubles whose dimension never changes.

    Supports indexed and ranged access, elementwise arithmetic (``+``, ``-``,
    ``^`` for the Hadamard product), scalar multiplication in either operand
    order and the dot product (``*`` or ``@`` between two vectors).

    Ranged reads return copies. Instances are not thread-safe.
    """

    # Make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, values: Union[int, Iterable[float]] = 0):
        """
        Args:
            values: Dimension of a zero-filled vector, or the values themselves
        """
        if isinstance(values, numbers.Integral):
            if values < 0:
                raise ValueError(f"Vector dimension must be non-negative, got {values}")
            self._values: NDArray = np.zeros(int(values))
            return
        if not isinstance(values, np.ndarray):
            values = list(values)
        array = np.array(values, dtype=np.float64)
        if array.ndim != 1:
            raise ValueError(f"Vector values must be 1-D, got shape {array.shape}")
        self._values = array

    @classmethod
    def _wrap(cls, array: NDArray) -> "Vector":
        """Adopt an already-owned 1-D array without copying."""
        vector = cls.__new__(cls)
        vector._values = array
        return vector

    @classmethod
    def coerce(cls, value: Union["Vector", tuple]) -> Optional["Vector"]:
        """Return value as a Vector if it is one or a pair of numbers, else None."""
        if isinstance(value, Vector):
            return value
        if (
            isinstance(value, tuple)
            and len(value) == 2
            and all(isinstance(item, numbers.Real) for item in value)
        ):
            return cls(value)
        return None

    @property
    def dimension(self) -> int:
        return self._values.shape[0]

    def __len__(self) -> int:
        return self.dimension

    def __getitem__(self, key):
        if is_range_key(key):
            span = Span.resolve(key, self.dimension)
            return Vector._wrap(self._values[span.offset:span.stop].copy())
        return float(self._values[Index.coerce(key).resolve(self.dimension)])

    def __setitem__(self, key, value) -> None:
        if is_range_key(key):
            span = Span.resolve(key, self.dimension)
            source = self._require_vector(value, span.length)
            self._values[span.offset:span.stop] = source._values
            return
        self._values[Index.coerce(key).resolve(self.dimension)] = float(value)

    def __iter__(self) -> Iterator[float]:
        for value in self._values:
            yield float(value)

    def hadamard(self, other: "Vector") -> "Vector":
        """Elementwise product."""
        other = self._require_vector(other, self.dimension)
        return Vector._wrap(self._values * other._values)

    def dot(self, other: "Vector") -> float:
        """Dot product."""
        other = self._require_vector(other, self.dimension)
        return float(np.dot(self._values, other._values))

    def __xor__(self, other):
        if Vector.coerce(other) is None:
            return NotImplemented
        return self.hadamard(other)

    __rxor__ = __xor__

    def __add__(self, other):
        other = Vector.coerce(other)
        if other is None:
            return NotImplemented
        other = self._require_vector(other, self.dimension)
        return Vector._wrap(self._values + other._values)

    __radd__ = __add__

    def __sub__(self, other):
        other = Vector.coerce(other)
        if other is None:
            return NotImplemented
        other = self._require_vector(other, self.dimension)
        return Vector._wrap(self._values - other._values)

    def __rsub__(self, other):
        other = Vector.coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return Vector._wrap(self._values * float(other))
        if Vector.coerce(other) is not None:
            return self.dot(other)
        return NotImplemented

    __rmul__ = __mul__

    def __matmul__(self, other):
        if Vector.coerce(other) is None:
            return NotImplemented
        return self.dot(other)

    __rmatmul__ = __matmul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None  # mutable

    def to_numpy(self) -> NDArray:
        """Copy of the values as a 1-D float64 array."""
        return self._values.copy()

    def to_list(self) -> list[float]:
        return [float(value) for value in self._values]

    def __array__(self, dtype=None, copy=None) -> NDArray:
        array = self.to_numpy()
        return array if dtype is None else array.astype(dtype)

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def _require_vector(self, value, dimension: int) -> "Vector":
        vector = Vector.coerce(value)
        if vector is None:
            raise TypeError(f"Expected a Vector, got {type(value).__name__}")
        if vector.dimension != dimension:
            raise DimensionMismatchError(
                f"Vector dimension mismatch: expected {dimension}, got {vector.dimension}",
                expected=dimension,
                actual=vector.dimension,
            )
        return vector
