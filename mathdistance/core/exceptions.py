"""
Custom exceptions for mathdistance.
"""

from typing import Any, Optional


class DistanceError(Exception):
    """Base exception for mathdistance."""
    pass


class ValidationError(DistanceError):
    """Operands failed validation before a distance was computed."""
    pass


class NonNumericError(ValidationError):
    """A vector element is not a real number."""

    def __init__(self, value: Any, index: Optional[int] = None, operand: Optional[str] = None):
        self.value = value
        self.index = index
        self.operand = operand
        location = ""
        if operand is not None and index is not None:
            location = f" (vector {operand}, index {index})"
        super().__init__(
            f"Vectors must contain numeric data, non-numeric item found: {value!r}{location}"
        )


class IncompatibleLengthError(ValidationError):
    """Operands are of different lengths."""

    def __init__(self, len_a: int, len_b: int):
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(f"Operands must be of equal size: n1={len_a}, n2={len_b}")


class InvalidTypeError(ValidationError):
    """Operands are not of the kind the metric expects."""
    pass


class EmptyInputError(ValidationError):
    """Metric is undefined for zero-length operands."""
    pass


class InvalidOrderError(DistanceError):
    """Minkowski order is zero or not a real number."""
    pass


class NoDataError(DistanceError):
    """Distance requested before any valid data was set."""
    pass
