"""Dense float64 matrix with memoized determinant, inverse and minors."""

import logging
from typing import Iterable, Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from lineal.algebra import elimination
from lineal.algebra.cache import MatrixCache
from lineal.algebra.vector import Vector
from lineal.core.exceptions import DimensionMismatchError
from lineal.core.indexing import Index, Span, is_range_key
from lineal.core.tolerances import RANK_ZERO_THRESHOLD

logger = logging.getLogger(__name__)


class Matrix:
    """
    Fixed-size grid of doubles.

    Indexing takes two keys, each an int/Index (one position) or a
    slice/Span (a range)::

        m[i, j]          -> float
        m[i, a:b]        -> Vector (row slice)
        m[a:b, j]        -> Vector (column slice)
        m[a:b, c:d]      -> Matrix (copy, never a view)

    Results of determinant(), inverse() and get_associated_matrix() are
    memoized in a MatrixCache. Cell and row/column-slice writes invalidate
    it; block writes (``m[a:b, c:d] = other``) leave every cache untouched,
    so a determinant or inverse read before a block write is returned again
    afterwards.

    Instances are not thread-safe.
    """

    # Make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int):
        """
        Args:
            rows: Number of rows
            cols: Number of columns
        """
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix shape must be non-negative, got ({rows}, {cols})")
        self._values: NDArray = np.zeros((rows, cols))
        self._cache = MatrixCache()

    @classmethod
    def _wrap(cls, array: NDArray) -> "Matrix":
        """Adopt an already-owned 2-D array without copying."""
        matrix = cls.__new__(cls)
        matrix._values = array
        matrix._cache = MatrixCache()
        return matrix

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix":
        """Build a matrix from nested rows (lists, Vectors or an array)."""
        if isinstance(rows, np.ndarray):
            array = np.array(rows, dtype=np.float64)
        else:
            array = np.array([list(row) for row in rows], dtype=np.float64)
        if array.ndim == 1 and array.size == 0:
            array = array.reshape(0, 0)
        if array.ndim != 2:
            raise ValueError(f"Matrix rows must form a 2-D grid, got shape {array.shape}")
        return cls._wrap(array)

    @staticmethod
    def identity(dim: int) -> "Matrix":
        """Zero matrix with ones on the diagonal."""
        result = Matrix(dim, dim)
        for i in range(dim):
            result[i, i] = 1.0
        return result

    rows_reduction = staticmethod(elimination.rows_reduction)
    gauss = staticmethod(elimination.gauss)

    @property
    def rows(self) -> int:
        return self._values.shape[0]

    @property
    def cols(self) -> int:
        return self._values.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    # Indexing

    def __getitem__(self, key):
        row_key, col_key = self._split_key(key)
        if is_range_key(row_key) and is_range_key(col_key):
            row_span = Span.resolve(row_key, self.rows)
            col_span = Span.resolve(col_key, self.cols)
            return Matrix._wrap(
                self._values[row_span.offset:row_span.stop, col_span.offset:col_span.stop].copy()
            )
        if is_range_key(col_key):
            row = Index.coerce(row_key).resolve(self.rows)
            span = Span.resolve(col_key, self.cols)
            return Vector._wrap(self._values[row, span.offset:span.stop].copy())
        if is_range_key(row_key):
            span = Span.resolve(row_key, self.rows)
            col = Index.coerce(col_key).resolve(self.cols)
            return Vector._wrap(self._values[span.offset:span.stop, col].copy())
        row = Index.coerce(row_key).resolve(self.rows)
        col = Index.coerce(col_key).resolve(self.cols)
        return float(self._values[row, col])

    def __setitem__(self, key, value) -> None:
        row_key, col_key = self._split_key(key)
        if is_range_key(row_key) and is_range_key(col_key):
            self._set_block(
                Span.resolve(row_key, self.rows), Span.resolve(col_key, self.cols), value
            )
            return
        if is_range_key(col_key):
            row = Index.coerce(row_key).resolve(self.rows)
            span = Span.resolve(col_key, self.cols)
            source = self._require_vector(value, span.length)
            self._values[row, span.offset:span.stop] = source.to_numpy()
            self._cache.invalidate_cells([row], span.positions)
            return
        if is_range_key(row_key):
            span = Span.resolve(row_key, self.rows)
            col = Index.coerce(col_key).resolve(self.cols)
            source = self._require_vector(value, span.length)
            self._values[span.offset:span.stop, col] = source.to_numpy()
            self._cache.invalidate_cells(span.positions, [col])
            return
        row = Index.coerce(row_key).resolve(self.rows)
        col = Index.coerce(col_key).resolve(self.cols)
        self._values[row, col] = float(value)
        self._cache.invalidate_cells([row], [col])

    def _set_block(self, row_span: Span, col_span: Span, value: "Matrix") -> None:
        if not isinstance(value, Matrix):
            raise TypeError(f"Expected a Matrix, got {type(value).__name__}")
        expected = (row_span.length, col_span.length)
        if value.shape != expected:
            raise DimensionMismatchError(
                f"Block shape mismatch: expected {expected}, got {value.shape}",
                expected=expected,
                actual=value.shape,
            )
        # Caches are deliberately left as they are
        self._values[row_span.offset:row_span.stop, col_span.offset:col_span.stop] = value._values

    @staticmethod
    def _split_key(key) -> tuple:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices take the form m[row, col]")
        return key

    @staticmethod
    def _require_vector(value, dimension: int) -> Vector:
        vector = Vector.coerce(value)
        if vector is None:
            raise TypeError(f"Expected a Vector, got {type(value).__name__}")
        if vector.dimension != dimension:
            raise DimensionMismatchError(
                f"Slice length mismatch: expected {dimension}, got {vector.dimension}",
                expected=dimension,
                actual=vector.dimension,
            )
        return vector

    def copy(self) -> "Matrix":
        """Deep copy with an empty cache."""
        return self[:, :]

    def swap_rows(self, r1: int, r2: int) -> "Matrix":
        """Copy of the matrix with rows r1 and r2 exchanged."""
        result = self.copy()
        result[r1, :] = self[r2, :]
        result[r2, :] = self[r1, :]
        return result

    def swap_columns(self, c1: int, c2: int) -> "Matrix":
        """Copy of the matrix with columns c1 and c2 exchanged."""
        result = self.copy()
        result[:, c1] = self[:, c2]
        result[:, c2] = self[:, c1]
        return result

    # Minors and determinants

    def get_associated_matrix(self, row: int, col: int) -> "Matrix":
        """
        Minor obtained by deleting one row and one column.

        The remaining entries keep their relative order. The result is
        memoized per (row, col) and returned as the cached object on later
        calls, so its own determinant memo is reused as well.

        Args:
            row: Row to delete
            col: Column to delete

        Returns:
            The (rows-1) x (cols-1) minor
        """
        row = Index.coerce(row).resolve(self.rows)
        col = Index.coerce(col).resolve(self.cols)
        cached = self._cache.minors.get((row, col))
        if cached is not None:
            return cached
        minor = Matrix._wrap(np.delete(np.delete(self._values, row, axis=0), col, axis=1))
        self._cache.minors[(row, col)] = minor
        return minor

    get_augmented_matrix = get_associated_matrix

    def determinant(self) -> float:
        """
        Determinant by closed forms up to 3x3, Laplace expansion beyond.

        Non-square and 0x0 matrices give 0. Only the Laplace expansion
        result is memoized; the 1x1, 2x2 and 3x3 forms are recomputed on
        every call.
        """
        if self._cache.determinant is not None:
            return self._cache.determinant
        if self.rows != self.cols or self.rows == 0:
            return 0.0
        if self.rows == 1:
            return self[0, 0]
        if self.rows == 2:
            return self[0, 0] * self[1, 1] - self[1, 0] * self[0, 1]
        if self.rows == 3:
            return self._sarrus()

        det = 0.0
        for i in range(self.cols):
            det += (-1) ** i * self[0, i] * self.get_associated_matrix(0, i).determinant()
        self._cache.determinant = det
        return det

    def _sarrus(self) -> float:
        """Rule of Sarrus written as wrapped diagonals and anti-diagonals."""
        det = 0.0
        for k in range(self.cols):
            forward = 1.0
            backward = 1.0
            for i in range(self.rows):
                forward *= self[i, (k + i) % self.cols]
                backward *= self[i, Index((i + k) % self.cols, from_end=True)]
            det += forward
            det -= backward
        return det

    def determinant_c(self) -> float:
        """
        Determinant as the diagonal product after rows_reduction().

        Zero diagonal cells are repaired only when their row holds an entry
        exactly equal to 1; otherwise the zero (or a nan from a zero pivot)
        ends up in the product. Not memoized.
        """
        if self.rows != self.cols or self.rows == 0:
            return 0.0
        if self.rows == 1:
            return self[0, 0]
        if self.rows == 2:
            return self[0, 0] * self[1, 1] - self[1, 0] * self[0, 1]

        reduced = elimination.rows_reduction(self)
        for i in range(self.rows):
            if reduced[i, i] == 0:
                for j in range(self.cols):
                    if reduced[i, j] == 1:
                        reduced = reduced.swap_rows(i, j)
                        reduced[i, i] *= -1
                        break
        det = 1.0
        for i in range(self.cols):
            det *= reduced[i, i]
        return det

    # Inverses

    def inverse(self) -> Optional["Matrix"]:
        """
        Inverse by the adjugate (cofactor) method.

        Returns:
            A copy of the memoized inverse, or None when determinant() is
            exactly zero (this includes every non-square matrix)
        """
        if self._cache.inverse is not None:
            return self._cache.inverse.copy()
        det = self.determinant()
        if det == 0:
            logger.debug("Determinant of %dx%d matrix is zero; no inverse", self.rows, self.cols)
            return None
        cofactors = Matrix(self.rows, self.cols)
        for i in range(self.rows):
            for j in range(self.cols):
                cofactors[i, j] = (-1) ** (i + j) / det * self._minor_determinant(i, j)
        self._cache.inverse = cofactors.transpose()
        return self._cache.inverse.copy()

    def _minor_determinant(self, row: int, col: int) -> float:
        minor = self.get_associated_matrix(row, col)
        if minor.rows == 0:
            # Empty product: the adjugate of a 1x1 matrix is [[1]]
            return 1.0
        return minor.determinant()

    def inverse_gauss(self) -> "Matrix":
        """
        Inverse by Gauss-Jordan elimination of [self | I].

        Not memoized. A singular matrix yields nan/inf entries.
        """
        augmented = Matrix(self.rows, self.cols * 2)
        augmented[:, self.cols:] = Matrix.identity(self.cols)
        augmented[:, :self.cols] = self
        reduced = elimination.gauss(augmented)
        return reduced[:, self.cols:]

    def __invert__(self) -> "Matrix":
        return self.inverse_gauss()

    # Other algorithms

    def transpose(self) -> "Matrix":
        result = Matrix(self.cols, self.rows)
        for i in range(self.cols):
            result[i, :] = self[:, i]
        return result

    def rank(self, tol: float = RANK_ZERO_THRESHOLD) -> int:
        """
        Number of non-zero rows after rows_reduction().

        Args:
            tol: A row is zero when all its entries are below tol in magnitude
        """
        zero_rows = 0
        for row in elimination.rows_reduction(self):
            if all(abs(value) < tol for value in row):
                zero_rows += 1
        return self.rows - zero_rows

    # Operators

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Cannot add {self.shape} and {other.shape} matrices",
                expected=self.shape,
                actual=other.shape,
            )
        return Matrix._wrap(self._values + other._values)

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self.shape} by {other.shape}: inner dimensions differ",
                expected=self.cols,
                actual=other.rows,
            )
        result = Matrix(self.rows, other.cols)
        for i in range(self.rows):
            for j in range(other.cols):
                result[i, j] = self[i, :] * other[:, j]
        return result

    __matmul__ = __mul__

    def __iter__(self) -> Iterator[Vector]:
        for i in range(self.rows):
            yield self[i, :]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None  # mutable

    def to_numpy(self) -> NDArray:
        """Copy of the values as a 2-D float64 array."""
        return self._values.copy()

    def to_list(self) -> list[list[float]]:
        return [row.to_list() for row in self]

    def __array__(self, dtype=None, copy=None) -> NDArray:
        array = self.to_numpy()
        return array if dtype is None else array.astype(dtype)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_list()!r})"

    def __str__(self) -> str:
        return "\n".join(str(row) for row in self)


def identity(dim: int) -> Matrix:
    """Identity matrix of size dim."""
    return Matrix.identity(dim)
