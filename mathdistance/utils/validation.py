"""
Operand validation shared by every distance algorithm.

Vector metrics call validate_numeric_pair() and Hamming calls
validate_string_pair(). Both either return None or raise one of the
ValidationError subclasses from mathdistance.core.exceptions.
"""

import math
import numbers
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Tuple

import numpy as np

from ..core.exceptions import (
    IncompatibleLengthError,
    InvalidTypeError,
    NonNumericError,
)


SYMBOL_TYPES = (str, bytes)


def is_numeric(value: Any) -> bool:
    """
    Check whether a single value counts as a real number.

    Accepts ints, floats, Decimals, Fractions, numpy real scalars and
    strings that parse as a float. Booleans, complex numbers, NaN,
    infinities and values too large for a float are rejected.

    Args:
        value: The value to check

    Returns:
        True if the value is a finite real number
    """
    if isinstance(value, (bool, np.bool_)):
        return False

    if not isinstance(value, (str, numbers.Real, Decimal)):
        return False

    # Values outside the float range cannot take part in the arithmetic
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return False

    return math.isfinite(number)


def _check_vector_type(vector: Any) -> None:
    if isinstance(vector, np.ndarray):
        if vector.ndim != 1:
            raise InvalidTypeError(
                f"Vector must be 1-dimensional, got {vector.ndim} dimensions"
            )
        return

    if isinstance(vector, SYMBOL_TYPES) or not isinstance(vector, Sequence):
        raise InvalidTypeError(
            f"Expected a numeric sequence, got {type(vector).__name__}"
        )


def validate_numeric_pair(a: Any, b: Any) -> None:
    """
    Validate two numeric vectors before a distance is computed.

    Elements of a are scanned first, then b, and the first non-numeric
    element is reported.

    Args:
        a: First vector
        b: Second vector

    Raises:
        InvalidTypeError: If an operand is not a sequence of numbers
        NonNumericError: If an element is not a real number
        IncompatibleLengthError: If the vectors differ in length
    """
    _check_vector_type(a)
    _check_vector_type(b)

    for operand, vector in (("a", a), ("b", b)):
        for i, item in enumerate(vector):
            if not is_numeric(item):
                raise NonNumericError(item, index=i, operand=operand)

    if len(a) != len(b):
        raise IncompatibleLengthError(len(a), len(b))


def validate_string_pair(a: Any, b: Any) -> None:
    """
    Validate two symbol sequences for a position-wise comparison.

    Args:
        a: First string
        b: Second string

    Raises:
        InvalidTypeError: If the operands are not both str (or both bytes)
        IncompatibleLengthError: If the strings differ in length
    """
    if not isinstance(a, SYMBOL_TYPES) or not isinstance(b, SYMBOL_TYPES):
        raise InvalidTypeError(
            "Expecting two strings, got "
            f"{type(a).__name__} and {type(b).__name__}"
        )

    if type(a) is not type(b):
        raise InvalidTypeError("Cannot compare str with bytes")

    if len(a) != len(b):
        raise IncompatibleLengthError(len(a), len(b))


def as_vector_pair(a: Any, b: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Convert a validated numeric pair to float64 arrays."""
    return (
        np.fromiter((float(x) for x in a), dtype=np.float64, count=len(a)),
        np.fromiter((float(x) for x in b), dtype=np.float64, count=len(b)),
    )
