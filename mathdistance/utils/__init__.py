"""
Utility functions for mathdistance.
"""

from .validation import (
    is_numeric,
    validate_numeric_pair,
    validate_string_pair,
    as_vector_pair,
)
from .logging import setup_logger, get_logger

__all__ = [
    "is_numeric",
    "validate_numeric_pair",
    "validate_string_pair",
    "as_vector_pair",
    "setup_logger",
    "get_logger",
]
