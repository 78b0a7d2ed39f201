"""
Distance metric registry and factory.

Resolves metric names and aliases to algorithm instances and lets
callers register their own algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .algorithms import (
    Chebyshev,
    DistanceAlgorithm,
    Euclidean,
    Hamming,
    Manhattan,
    Minkowski,
)
from ..utils.logging import get_logger


logger = get_logger(__name__)

AlgorithmFactory = Callable[..., DistanceAlgorithm]


@dataclass
class MetricInfo:
    """Information about a distance metric."""

    name: str
    factory: AlgorithmFactory
    description: str
    aliases: List[str] = field(default_factory=list)
    parametric: bool = False  # True if the factory needs arguments

    def create(self, **params: Any) -> DistanceAlgorithm:
        """Build an algorithm instance for this metric."""
        if params and not self.parametric:
            raise TypeError(
                f"Metric '{self.name}' takes no parameters, got {sorted(params)}"
            )
        return self.factory(**params)

    def __repr__(self) -> str:
        return f"MetricInfo(name='{self.name}', parametric={self.parametric})"


class MetricRegistry:
    """
    Registry for distance metrics.

    Names and aliases are matched case-insensitively.
    """

    def __init__(self):
        self._metrics: Dict[str, MetricInfo] = {}
        self._aliases: Dict[str, str] = {}
        self._register_builtins()

    def _register_builtins(self) -> None:
        self.register(MetricInfo(
            name="euclidean",
            factory=Euclidean,
            description="Euclidean (L2) distance",
            aliases=["l2"],
        ))
        self.register(MetricInfo(
            name="manhattan",
            factory=Manhattan,
            description="Manhattan (L1, taxicab) distance",
            aliases=["l1", "taxicab", "cityblock"],
        ))
        self.register(MetricInfo(
            name="chebyshev",
            factory=Chebyshev,
            description="Chebyshev (L-infinity) distance",
            aliases=["linf", "chessboard", "maximum"],
        ))
        self.register(MetricInfo(
            name="minkowski",
            factory=Minkowski,
            description="Minkowski (Lp) distance of a given order",
            aliases=["lp"],
            parametric=True,
        ))
        self.register(MetricInfo(
            name="hamming",
            factory=Hamming,
            description="Hamming distance between equal-length strings",
        ))

    def register(self, info: MetricInfo) -> None:
        """
        Register a distance metric.

        A metric registered under an existing name replaces it.

        Args:
            info: MetricInfo object
        """
        name = info.name.lower()
        self._metrics[name] = info
        for alias in info.aliases:
            self._aliases[alias.lower()] = name

    def _canonical(self, name: str) -> str:
        key = name.lower()
        return self._aliases.get(key, key)

    def get(self, name: str) -> MetricInfo:
        """
        Get metric info by name.

        Args:
            name: Metric name or alias

        Returns:
            MetricInfo object

        Raises:
            KeyError: If metric not found
        """
        canonical = self._canonical(name)
        if canonical not in self._metrics:
            available = list(self._metrics.keys())
            raise KeyError(f"Unknown metric: '{name}'. Available: {available}")
        return self._metrics[canonical]

    def list_metrics(self) -> List[str]:
        """List all registered metric names."""
        return list(self._metrics.keys())

    def __contains__(self, name: str) -> bool:
        return self._canonical(name) in self._metrics

    def __getitem__(self, name: str) -> MetricInfo:
        return self.get(name)


_registry = MetricRegistry()


def get_metric(name: str) -> MetricInfo:
    """
    Get metric info by name.

    Example:
        >>> get_metric("taxicab").name
        'manhattan'
    """
    return _registry.get(name)


def get_algorithm(name: str, **params: Any) -> DistanceAlgorithm:
    """
    Build a distance algorithm by metric name.

    Args:
        name: Metric name or alias
        **params: Arguments for parametric metrics (order for Minkowski)

    Returns:
        Algorithm instance

    Example:
        >>> get_algorithm("minkowski", order=3)
        Minkowski(order=3)
    """
    return _registry.get(name).create(**params)


def register_metric(
    name: str,
    factory: AlgorithmFactory,
    description: str = "",
    aliases: Optional[List[str]] = None,
    parametric: bool = False,
) -> None:
    """
    Register a custom distance algorithm.

    Args:
        name: Metric name
        factory: Callable returning a DistanceAlgorithm (usually the class)
        description: Human-readable description
        aliases: Optional list of alternative names
        parametric: True if the factory takes keyword arguments
    """
    info = MetricInfo(
        name=name,
        factory=factory,
        description=description or f"Custom metric: {name}",
        aliases=list(aliases or []),
        parametric=parametric,
    )
    _registry.register(info)
    logger.debug(f"Registered metric '{name}' (aliases: {info.aliases})")


def list_metrics() -> List[str]:
    """List all available metric names."""
    return _registry.list_metrics()


def metric_exists(name: str) -> bool:
    """Check if a metric name or alias is registered."""
    return name in _registry
