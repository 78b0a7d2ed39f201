"""
Core components for mathdistance.
"""

from .exceptions import (
    DistanceError,
    ValidationError,
    NonNumericError,
    IncompatibleLengthError,
    InvalidTypeError,
    EmptyInputError,
    InvalidOrderError,
    NoDataError,
)
from .calculator import DistanceCalculator

__all__ = [
    # Calculator
    "DistanceCalculator",
    # Exceptions
    "DistanceError",
    "ValidationError",
    "NonNumericError",
    "IncompatibleLengthError",
    "InvalidTypeError",
    "EmptyInputError",
    "InvalidOrderError",
    "NoDataError",
]
