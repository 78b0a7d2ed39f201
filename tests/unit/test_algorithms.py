"""
Unit tests for the algorithm classes.
"""

import math
from fractions import Fraction

import pytest
import numpy as np

from mathdistance.distance import (
    DistanceAlgorithm,
    Euclidean,
    Manhattan,
    Chebyshev,
    Minkowski,
    Hamming,
)
from mathdistance.core.exceptions import (
    EmptyInputError,
    IncompatibleLengthError,
    InvalidOrderError,
    InvalidTypeError,
    NonNumericError,
)


class TestAlgorithmInterface:
    """Tests shared by all algorithms."""

    def test_all_are_distance_algorithms(self, all_algorithms):
        for algo in all_algorithms:
            assert isinstance(algo, DistanceAlgorithm)
            assert algo.name

    def test_call_validates_then_computes(self, vector_algorithms):
        for algo in vector_algorithms:
            with pytest.raises(NonNumericError):
                algo([1, "x"], [1, 2])

    def test_validate_returns_none(self, vector_algorithms, vector_pair):
        for algo in vector_algorithms:
            assert algo.validate(*vector_pair) is None

    def test_call_matches_compute(self, vector_algorithms, vector_pair):
        for algo in vector_algorithms:
            assert algo(*vector_pair) == algo.compute(*vector_pair)

    def test_reusable_across_pairs(self):
        algo = Manhattan()
        assert algo([0, 0], [1, 1]) == 2
        assert algo([3, 4, 2, 1], [0, 5, 6, 9]) == 16
        assert algo([0, 0], [1, 1]) == 2

    def test_cannot_instantiate_interface(self):
        with pytest.raises(TypeError):
            DistanceAlgorithm()

    def test_custom_subclass(self):
        class Discrete(DistanceAlgorithm):
            name = "discrete"

            def validate(self, a, b):
                pass

            def compute(self, a, b):
                return 0 if a == b else 1

        algo = Discrete()
        assert algo("x", "x") == 0
        assert algo("x", "y") == 1

    def test_repr(self):
        assert repr(Euclidean()) == "Euclidean()"
        assert repr(Minkowski(3)) == "Minkowski(order=3)"


class TestChebyshev:
    """Chebyshev specific behaviour."""

    def test_empty_input(self):
        algo = Chebyshev()
        with pytest.raises(EmptyInputError):
            algo.validate([], [])

    def test_single_element(self):
        assert Chebyshev()([5], [-2]) == 7


class TestMinkowski:
    """Tests for Minkowski construction and dispatch."""

    @pytest.mark.parametrize("order", [0, 0.0, -0.0, Fraction(0)])
    def test_zero_order(self, order):
        with pytest.raises(InvalidOrderError):
            Minkowski(order)

    @pytest.mark.parametrize("order", ["3", None, True, float("nan"), -math.inf, 2 + 0j])
    def test_invalid_order(self, order):
        with pytest.raises(InvalidOrderError):
            Minkowski(order)

    def test_order_property(self):
        assert Minkowski(3).order == 3
        assert Minkowski(2.5).order == 2.5

    @pytest.mark.parametrize("order, delegate", [
        (1, Manhattan),
        (1.0, Manhattan),
        (2, Euclidean),
        (np.float64(2.0), Euclidean),
        (math.inf, Chebyshev),
    ])
    def test_short_circuit_orders(self, order, delegate, vector_pair):
        assert Minkowski(order)(*vector_pair) == delegate()(*vector_pair)

    def test_infinite_order_rejects_empty_input(self):
        with pytest.raises(EmptyInputError):
            Minkowski(math.inf)([], [])

    def test_general_formula(self, vector_pair):
        expected = (3 ** 3 + 1 ** 3 + 4 ** 3 + 8 ** 3) ** (1 / 3)
        assert Minkowski(3)(*vector_pair) == pytest.approx(expected)

    def test_general_formula_empty_input(self):
        assert Minkowski(3)([], []) == 0.0

    def test_negative_order(self):
        # |d| = (1, 2): (1 + 0.5) ** -1
        assert Minkowski(-1)([0, 0], [1, 2]) == pytest.approx(2 / 3)

    def test_negative_order_with_equal_coordinate(self):
        with np.errstate(all="raise"):
            assert Minkowski(-1)([0, 0], [0, 2]) == 0.0

    @pytest.mark.parametrize("order", [-1, -0.5, 3])
    def test_general_formula_empty_input_any_order(self, order):
        with np.errstate(all="raise"):
            assert Minkowski(order)([], []) == 0.0

    def test_length_mismatch_in_every_branch(self):
        for order in (1, 2, 3, math.inf):
            with pytest.raises(IncompatibleLengthError):
                Minkowski(order)([1, 2, 3], [1, 2, 3, 4])


class TestHamming:
    """Tests for the Hamming algorithm."""

    def test_counts_differing_positions(self):
        assert Hamming()("electric", "tectonic") == 6

    def test_rejects_numeric_vectors(self):
        with pytest.raises(InvalidTypeError):
            Hamming().validate([1, 2], [1, 2])

    def test_length_mismatch(self):
        with pytest.raises(IncompatibleLengthError):
            Hamming()("abc", "ab")
