"""
mathdistance - distance metrics between numeric vectors and strings.

Example:
    >>> from mathdistance import DistanceCalculator, euclidean, Minkowski
    >>>
    >>> # One-off computations
    >>> euclidean([1, 2], [3, 4])
    2.8284271247461903
    >>>
    >>> # Reusable calculator
    >>> calc = DistanceCalculator(Minkowski(3))
    >>> round(calc.set_data([0, 5, 6, 9], [3, 4, 2, 1]).distance(), 4)
    8.453
    >>> calc.set_algorithm("chebyshev").distance()
    8.0
"""

from .core import (
    DistanceCalculator,
    DistanceError,
    ValidationError,
    NonNumericError,
    IncompatibleLengthError,
    InvalidTypeError,
    EmptyInputError,
    InvalidOrderError,
    NoDataError,
)

from .distance import (
    # Algorithms
    DistanceAlgorithm,
    Euclidean,
    Manhattan,
    Chebyshev,
    Minkowski,
    Hamming,
    # Functions
    euclidean,
    manhattan,
    chebyshev,
    minkowski,
    hamming,
    # Registry
    get_metric,
    get_algorithm,
    register_metric,
    list_metrics,
    metric_exists,
)

__version__ = "0.1.0"

__all__ = [
    # Calculator
    "DistanceCalculator",
    # Algorithms
    "DistanceAlgorithm",
    "Euclidean",
    "Manhattan",
    "Chebyshev",
    "Minkowski",
    "Hamming",
    # Functions
    "euclidean",
    "manhattan",
    "chebyshev",
    "minkowski",
    "hamming",
    # Registry
    "get_metric",
    "get_algorithm",
    "register_metric",
    "list_metrics",
    "metric_exists",
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
