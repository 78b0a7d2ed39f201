"""
Pytest fixtures for mathdistance tests.
"""

import pytest
import numpy as np

from mathdistance import Euclidean, Manhattan, Chebyshev, Minkowski, Hamming


@pytest.fixture
def dimension() -> int:
    """Default dimension for test vectors."""
    return 16


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vector(rng, dimension: int) -> np.ndarray:
    """Generate a random vector."""
    return rng.normal(size=dimension)


@pytest.fixture
def random_triples(rng, dimension: int) -> np.ndarray:
    """Generate 50 random (a, b, c) vector triples."""
    return rng.normal(scale=10.0, size=(50, 3, dimension))


@pytest.fixture
def vector_pair():
    """Small integer vectors with absolute differences (3, 1, 4, 8)."""
    return [3, 4, 2, 1], [0, 5, 6, 9]


@pytest.fixture
def vector_algorithms():
    """One instance of every vector algorithm."""
    return [Euclidean(), Manhattan(), Chebyshev(), Minkowski(3), Minkowski(1.5)]


@pytest.fixture
def all_algorithms(vector_algorithms):
    """Every vector algorithm plus Hamming."""
    return vector_algorithms + [Hamming()]
