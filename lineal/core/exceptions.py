"""
Exception hierarchy for lineal.

All exceptions inherit from LinealError so callers can catch any
library-specific error. Each one also subclasses the builtin exception a
Python caller would expect, so ``except IndexError`` keeps working.
"""


class LinealError(Exception):
    """Base exception for all lineal errors."""
    pass


class DimensionMismatchError(LinealError, ValueError):
    """
    Operand shapes are incompatible.

    Raised by vector/matrix arithmetic and ranged assignment when the
    operands do not have the dimensions the operation requires.

    Attributes:
        expected: Shape or length the operation required
        actual: Shape or length that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(LinealError, IndexError):
    """
    A resolved index falls outside the container.

    Attributes:
        index: The resolved (zero-based, from-start) position
        length: Size of the indexed dimension
    """

    def __init__(self, message: str, index: int, length: int):
        super().__init__(message)
        self.index = index
        self.length = length
