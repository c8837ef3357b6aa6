"""
Lineal: small dense linear-algebra library.

This library provides a float64 Vector and Matrix with:
- Indexed and ranged access (from-start or from-end indices, copy-on-read slices)
- Elementwise, dot and matrix products
- Determinants (Laplace expansion and row reduction) with memoized minors
- Inverses (adjugate and Gauss-Jordan), transpose and rank
"""

__version__ = "0.1.0"

import logging

from lineal.core.exceptions import (
    LinealError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from lineal.core.indexing import Index, Span
from lineal.algebra.vector import Vector
from lineal.algebra.matrix import Matrix, identity
from lineal.algebra.elimination import gauss, rows_reduction

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LinealError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "Index",
    "Span",
    "Vector",
    "Matrix",
    "identity",
    "gauss",
    "rows_reduction",
]
