"""
DistanceCalculator - a reusable session binding an algorithm to data.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from .exceptions import NoDataError
from ..distance.algorithms import DistanceAlgorithm
from ..distance.registry import get_algorithm, get_metric
from ..utils.logging import get_logger


logger = get_logger(__name__)

AlgorithmLike = Union[DistanceAlgorithm, str]


class DistanceCalculator:
    """
    Holds a selected distance algorithm and a current pair of operands.

    The algorithm and the data can be swapped independently, so the same
    data can be measured under several algorithms, or several datasets
    under one algorithm.

    Example:
        >>> from mathdistance.distance import Euclidean, Hamming
        >>> calc = DistanceCalculator(Euclidean())
        >>> calc.set_data([0, 2, 1], [1, 4, 5]).distance()
        4.58257569495584
        >>> calc.set_algorithm("manhattan").distance()
        7.0
        >>> calc.set_algorithm(Hamming()).set_data("electric", "tectonic").distance()
        6
    """

    def __init__(self, algorithm: AlgorithmLike, **params: Any):
        """
        Initialize the calculator.

        Args:
            algorithm: Algorithm instance or registered metric name
            **params: Arguments for a parametric metric given by name
        """
        self._algorithm = self._resolve(algorithm, params)
        self._data: Optional[Tuple[Any, Any]] = None

    @classmethod
    def from_settings(cls, settings: Any) -> DistanceCalculator:
        """
        Create a calculator from a config.Settings object.

        The Minkowski order from the settings is used only when the
        default metric is Minkowski. Other parametric metrics cannot be
        configured through settings and are built without arguments.
        """
        info = get_metric(settings.default_metric)
        if info.name == "minkowski":
            return cls(info.name, order=settings.minkowski_order)
        return cls(info.name)

    @staticmethod
    def _resolve(algorithm: AlgorithmLike, params: dict) -> DistanceAlgorithm:
        if isinstance(algorithm, str):
            return get_algorithm(algorithm, **params)
        if params:
            raise TypeError("Parameters are only accepted with a metric name")
        if not isinstance(algorithm, DistanceAlgorithm):
            raise TypeError(
                f"Expected a DistanceAlgorithm or metric name, got {type(algorithm).__name__}"
            )
        return algorithm

    # =========================================================================
    # ALGORITHM AND DATA
    # =========================================================================

    @property
    def algorithm(self) -> DistanceAlgorithm:
        """The currently selected algorithm."""
        return self._algorithm

    @property
    def data(self) -> Optional[Tuple[Any, Any]]:
        """The current operand pair, or None if none was set."""
        return self._data

    @property
    def has_data(self) -> bool:
        """True once a valid operand pair has been stored."""
        return self._data is not None

    def set_algorithm(self, algorithm: AlgorithmLike, **params: Any) -> DistanceCalculator:
        """
        Select the algorithm used by distance().

        Stored data is kept and checked against the new algorithm when
        distance() is called.

        Args:
            algorithm: Algorithm instance or registered metric name
            **params: Arguments for a parametric metric given by name

        Returns:
            self, for chaining
        """
        self._algorithm = self._resolve(algorithm, params)
        logger.debug(f"Selected algorithm {self._algorithm!r}")
        return self

    def set_data(self, a: Any, b: Any) -> DistanceCalculator:
        """
        Validate and store an operand pair.

        The pair is only replaced when it passes the current algorithm's
        validation. If either operand is None nothing happens and the
        previous pair is kept.

        Args:
            a: First operand
            b: Second operand

        Returns:
            self, for chaining

        Raises:
            ValidationError: If the pair is invalid for the current algorithm
        """
        if a is None or b is None:
            logger.debug("Ignoring data pair with a missing operand")
            return self

        self._algorithm.validate(a, b)
        self._data = (a, b)
        logger.debug(f"Stored data pair of length {len(a)}")
        return self

    def clear_data(self) -> DistanceCalculator:
        """Forget the stored operand pair."""
        self._data = None
        return self

    # =========================================================================
    # COMPUTATION
    # =========================================================================

    def distance(self) -> Union[int, float]:
        """
        Compute the distance between the stored operands.

        Returns:
            The distance under the current algorithm

        Raises:
            NoDataError: If no valid data pair has been set
            ValidationError: If the stored pair does not suit the current
                algorithm (e.g. numbers under Hamming)
        """
        if self._data is None:
            raise NoDataError("No data set: call set_data() before distance()")

        a, b = self._data
        return self._algorithm(a, b)

    def __repr__(self) -> str:
        return (
            f"DistanceCalculator(algorithm={self._algorithm!r}, "
            f"has_data={self.has_data})"
        )

