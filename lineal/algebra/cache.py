"""Memoized results of a matrix and the rules for dropping them."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from lineal.algebra.matrix import Matrix

logger = logging.getLogger(__name__)


@dataclass
class MatrixCache:
    """Derived data of one Matrix, reused until a write invalidates it."""

    minors: dict[tuple[int, int], "Matrix"] = field(default_factory=dict)  # (row, col) -> minor
    determinant: Optional[float] = None
    inverse: Optional["Matrix"] = None

    def invalidate_results(self) -> None:
        """Forget the determinant and the inverse."""
        self.determinant = None
        self.inverse = None

    def invalidate_cells(self, rows: Iterable[int], cols: Iterable[int]) -> None:
        """
        Invalidate after writing the block ``rows x cols``.

        Clears the determinant and the inverse, and drops every cached minor
        that still contains one of the written cells. The minor at (i, j)
        survives only when the block lies entirely in row i or entirely in
        column j, since those are deleted from it.
        """
        self.invalidate_results()
        if not self.minors:
            return
        written_rows = set(rows)
        written_cols = set(cols)
        kept = {
            key: minor
            for key, minor in self.minors.items()
            if written_rows <= {key[0]} or written_cols <= {key[1]}
        }
        dropped = len(self.minors) - len(kept)
        if dropped:
            logger.debug("Dropped %d stale cached minors", dropped)
        self.minors = kept
