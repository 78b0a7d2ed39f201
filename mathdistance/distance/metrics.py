"""
Distance functions for direct use.

Each function validates its operands and then computes the distance,
raising a ValidationError subclass on incompatible input.

Example:
    >>> manhattan([3, 4, 2, 1], [0, 5, 6, 9])
    16.0
    >>> hamming("1011101", "1001001")
    2
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from .algorithms import Chebyshev, Euclidean, Hamming, Manhattan, Minkowski


_euclidean = Euclidean()
_manhattan = Manhattan()
_chebyshev = Chebyshev()
_hamming = Hamming()


def euclidean(a: Sequence[Any], b: Sequence[Any]) -> float:
    """
    Compute Euclidean (L2) distance between two vectors.

    Formula: sqrt(sum((a_i - b_i)^2))

    Args:
        a: First vector
        b: Second vector

    Returns:
        Euclidean distance (>= 0)

    Raises:
        NonNumericError: If a vector holds a non-numeric element
        IncompatibleLengthError: If the vectors differ in length

    Example:
        >>> euclidean([0, 0], [3, 4])
        5.0
    """
    return _euclidean(a, b)


def manhattan(a: Sequence[Any], b: Sequence[Any]) -> float:
    """
    Compute Manhattan (L1) distance between two vectors.

    Formula: sum(|a_i - b_i|)

    Example:
        >>> manhattan([-2, 4], [0, 5])
        3.0
    """
    return _manhattan(a, b)


def chebyshev(a: Sequence[Any], b: Sequence[Any]) -> float:
    """
    Compute Chebyshev (L-infinity) distance between two vectors.

    Formula: max(|a_i - b_i|)

    Raises:
        EmptyInputError: If the vectors are empty
    """
    return _chebyshev(a, b)


def minkowski(a: Sequence[Any], b: Sequence[Any], order: Union[int, float]) -> float:
    """
    Compute Minkowski distance of the given order between two vectors.

    Formula: (sum(|a_i - b_i|^p))^(1/p)

    Args:
        a: First vector
        b: Second vector
        order: The order p (non-zero)

    Returns:
        Minkowski distance

    Raises:
        InvalidOrderError: If order is zero or not a real number
    """
    return Minkowski(order)(a, b)


def hamming(s1: Union[str, bytes], s2: Union[str, bytes]) -> int:
    """
    Compute Hamming distance between two strings of equal length.

    Example:
        >>> hamming("chemistry", "dentistry")
        4
    """
    return _hamming(s1, s2)
