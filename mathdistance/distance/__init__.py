"""
Distance metrics between numeric vectors and strings.

Supported Metrics:
    - euclidean: L2 distance
    - manhattan: L1 (taxicab) distance
    - chebyshev: L-infinity distance
    - minkowski: Lp distance of a given order
    - hamming: number of differing positions between two strings

Example:
    >>> from mathdistance.distance import euclidean, get_algorithm
    >>>
    >>> # Direct function call
    >>> euclidean([1, 2], [3, 4])
    2.8284271247461903
    >>>
    >>> # Using registry
    >>> algo = get_algorithm("minkowski", order=3)
    >>> dist = algo([0, 5, 6, 9], [3, 4, 2, 1])
"""

from .algorithms import (
    DistanceAlgorithm,
    VectorAlgorithm,
    Euclidean,
    Manhattan,
    Chebyshev,
    Minkowski,
    Hamming,
)

from .metrics import (
    euclidean,
    manhattan,
    chebyshev,
    minkowski,
    hamming,
)

from .registry import (
    MetricInfo,
    MetricRegistry,
    get_metric,
    get_algorithm,
    register_metric,
    list_metrics,
    metric_exists,
)

__all__ = [
    # Algorithms
    "DistanceAlgorithm",
    "VectorAlgorithm",
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
    "MetricInfo",
    "MetricRegistry",
    "get_metric",
    "get_algorithm",
    "register_metric",
    "list_metrics",
    "metric_exists",
]
