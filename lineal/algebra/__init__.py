"""Vector and matrix types."""

from lineal.algebra.vector import Vector
from lineal.algebra.matrix import Matrix, identity
from lineal.algebra.elimination import gauss, rows_reduction

__all__ = [
    "Vector",
    "Matrix",
    "identity",
    "gauss",
    "rows_reduction",
]
