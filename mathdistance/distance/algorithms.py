"""
Distance algorithm implementations.

Every algorithm exposes the same two-step interface: validate() rejects
operands the formula cannot handle, compute() evaluates the formula on
operands that already passed validation. Calling the algorithm object
runs both.

Example:
    >>> algo = Minkowski(3)
    >>> round(algo([0, 5, 6, 9], [3, 4, 2, 1]), 4)
    8.453
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Union

import numpy as np

from ..core.exceptions import EmptyInputError, InvalidOrderError
from ..utils.validation import (
    as_vector_pair,
    validate_numeric_pair,
    validate_string_pair,
)


Number = Union[int, float]


class DistanceAlgorithm(ABC):
    """Common interface for all distance algorithms."""

    name: str = ""

    @abstractmethod
    def validate(self, a: Any, b: Any) -> None:
        """
        Check that (a, b) can be compared by this algorithm.

        Raises:
            ValidationError: If the operands are incompatible
        """

    @abstractmethod
    def compute(self, a: Any, b: Any) -> Number:
        """Evaluate the distance on an already validated pair."""

    def __call__(self, a: Any, b: Any) -> Number:
        self.validate(a, b)
        return self.compute(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class VectorAlgorithm(DistanceAlgorithm):
    """Base for metrics over two equal-length numeric vectors."""

    def validate(self, a: Sequence[Any], b: Sequence[Any]) -> None:
        validate_numeric_pair(a, b)


class Euclidean(VectorAlgorithm):
    """
    Euclidean (L2) distance.

    Formula: sqrt(sum((a_i - b_i)^2))
    """

    name = "euclidean"

    def compute(self, a: Sequence[Any], b: Sequence[Any]) -> float:
        x, y = as_vector_pair(a, b)
        diff = x - y
        return float(np.sqrt(np.dot(diff, diff)))


class Manhattan(VectorAlgorithm):
    """
    Manhattan (L1, taxicab) distance.

    The sum of the absolute differences between the coordinates, akin to
    the path taken when walking around a city block.

    Formula: sum(|a_i - b_i|)
    """

    name = "manhattan"

    def compute(self, a: Sequence[Any], b: Sequence[Any]) -> float:
        x, y = as_vector_pair(a, b)
        return float(np.sum(np.abs(x - y)))


class Chebyshev(VectorAlgorithm):
    """
    Chebyshev (L-infinity, maximum metric) distance.

    The greatest difference along any coordinate. Undefined for empty
    vectors.

    Formula: max(|a_i - b_i|)
    """

    name = "chebyshev"

    def validate(self, a: Sequence[Any], b: Sequence[Any]) -> None:
        super().validate(a, b)
        if len(a) == 0:
            raise EmptyInputError("Chebyshev distance is undefined for empty vectors")

    def compute(self, a: Sequence[Any], b: Sequence[Any]) -> float:
        x, y = as_vector_pair(a, b)
        return float(np.max(np.abs(x - y)))


class Minkowski(VectorAlgorithm):
    """
    Minkowski (Lp) distance of a fixed order.

    Generalizes the other vector metrics: order 1 is Manhattan, order 2 is
    Euclidean and the limit towards infinity is Chebyshev. Those three
    orders are delegated to the dedicated algorithms.

    Formula: (sum(|a_i - b_i|^p))^(1/p)

    Args:
        order: The order p, any real number except 0 and NaN.
            float("inf") selects the Chebyshev distance.

    Raises:
        InvalidOrderError: If order is zero, NaN, -inf or not a real number
    """

    name = "minkowski"

    def __init__(self, order: Number):
        self._order = self._check_order(order)
        self._delegate: Optional[VectorAlgorithm] = None

        if self._order == 1:
            self._delegate = Manhattan()
        elif self._order == 2:
            self._delegate = Euclidean()
        elif self._order == math.inf:
            self._delegate = Chebyshev()

    @staticmethod
    def _check_order(order: Any) -> Number:
        if isinstance(order, (bool, np.bool_)) or not isinstance(order, numbers.Real):
            raise InvalidOrderError(
                f"Minkowski distance order must be a real number, got {order!r}"
            )
        if math.isnan(order) or order == -math.inf:
            raise InvalidOrderError(f"Invalid Minkowski distance order: {order!r}")
        if order == 0:
            raise InvalidOrderError("Minkowski distance order cannot be zero")
        return order

    @property
    def order(self) -> Number:
        """The order p of this metric."""
        return self._order

    def validate(self, a: Sequence[Any], b: Sequence[Any]) -> None:
        if self._delegate is not None:
            self._delegate.validate(a, b)
        else:
            super().validate(a, b)

    def compute(self, a: Sequence[Any], b: Sequence[Any]) -> float:
        if self._delegate is not None:
            return self._delegate.compute(a, b)

        p = float(self._order)
        x, y = as_vector_pair(a, b)
        if len(x) == 0:
            return 0.0

        # Negative orders hit 0 ** p for equal coordinates
        with np.errstate(divide="ignore"):
            total = np.sum(np.power(np.abs(x - y), p))
            return float(np.power(total, 1.0 / p))

    def __repr__(self) -> str:
        return f"Minkowski(order={self._order!r})"


class Hamming(DistanceAlgorithm):
    """
    Hamming distance between two strings of equal length.

    The number of positions at which the corresponding symbols differ.
    """

    name = "hamming"

    def validate(self, a: Any, b: Any) -> None:
        validate_string_pair(a, b)

    def compute(self, a: Union[str, bytes], b: Union[str, bytes]) -> int:
        return sum(1 for x, y in zip(a, b) if x != y)
