"""
Tests for constant term reconstruction.
"""

import random
from fractions import Fraction

import pytest
from errors import DuplicateX, InsufficientPoints, NonIntegerResult
from polynomial import Polynomial
from reconstruct import (Mismatch, Strategy, choose_strategy, lagrange_at_zero, process,
                         reconstruct, reduced_constant, verify)
from samples import Point, SampleSet, TestCase


def test_quadratic_example():
    """Points from f(x) = x^2 + 3."""
    points = [(1, 4), (2, 7), (3, 12)]
    assert reconstruct(points, 3) == 3


def test_single_point_uses_reduced_model():
    """With k = 1 the reduced model gives c = y - x^2."""
    assert reconstruct([(1, 5)], 1) == 4


def test_two_points_use_reduced_model():
    """k = 2 still uses only the first point under the reduced model."""
    assert reconstruct([(3, 20), (1, 100)], 2) == 11


def test_choose_strategy():
    """Reduced model below three points, general otherwise."""
    assert choose_strategy(1) is Strategy.REDUCED
    assert choose_strategy(2) is Strategy.REDUCED
    assert choose_strategy(3) is Strategy.GENERAL
    assert choose_strategy(10) is Strategy.GENERAL


def test_explicit_general_strategy_for_small_k():
    """Callers can interpolate even with fewer than three points."""
    # f(x) = 4x + 9
    assert reconstruct([(1, 13), (5, 29)], 2, Strategy.GENERAL) == 9
    assert reconstruct([(1, 5)], 1, Strategy.GENERAL) == 5


def test_explicit_reduced_strategy_for_large_k():
    """The reduced model can be forced for any k."""
    assert reconstruct([(2, 10), (3, 1), (4, 1)], 3, Strategy.REDUCED) == 6


def test_uses_first_k_points_in_order():
    """Selection is the first k points, not the smallest x."""
    # first three points lie on x^2 + 3, the fourth does not
    points = [(3, 12), (1, 4), (2, 7), (0, 1000)]
    assert reconstruct(points, 3) == 3


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6])
def test_recovers_constant_term(k):
    """Exact recovery for random integer polynomials of degree k - 1."""
    rng = random.Random(k)
    for _ in range(20):
        coeffs = [rng.randint(-2**80, 2**80) for _ in range(k)]
        original = Polynomial(coeffs)
        xs = rng.sample(range(-50, 200), k)
        points = [(x, int(original.eval(x))) for x in xs]

        assert reconstruct(points, k, Strategy.GENERAL) == coeffs[0]


def test_recovers_constant_with_huge_abscissas():
    """Abscissas beyond 64 bits are handled exactly."""
    coeffs = [-17, 3**50, 2**70]
    original = Polynomial(coeffs)
    xs = [2**65, 2**65 + 1, -(2**66)]
    points = [(x, int(original.eval(x))) for x in xs]

    assert reconstruct(points, 3) == -17


def test_duplicate_x_rejected():
    """Two selected points sharing x = 2 cannot be interpolated."""
    with pytest.raises(DuplicateX) as info:
        reconstruct([(1, 4), (2, 7), (2, 8)], 3)
    assert info.value.x == 2

    with pytest.raises(DuplicateX):
        reconstruct([(2, 7), (2, 8)], 2)


def test_duplicate_x_outside_selection_ignored():
    """Only the selected points must be distinct."""
    assert reconstruct([(1, 4), (2, 7), (3, 12), (3, 99)], 3) == 3


def test_insufficient_points():
    """k = 0 or k beyond the available points fails."""
    points = [(1, 4), (2, 7), (3, 12)]
    with pytest.raises(InsufficientPoints):
        reconstruct(points, 0)
    with pytest.raises(InsufficientPoints):
        reconstruct(points, 4)
    with pytest.raises(InsufficientPoints):
        reconstruct([], 1)


def test_non_integer_result():
    """Inconsistent points give a non-integer constant, which is an error."""
    # line through (1, 0) and (3, 1) hits x = 0 at -1/2
    with pytest.raises(NonIntegerResult) as info:
        lagrange_at_zero([Point(1, 0), Point(3, 1)])
    assert info.value.value == Fraction(-1, 2)

    with pytest.raises(NonIntegerResult):
        reconstruct([(1, 0), (2, 0), (4, 1)], 3)


def test_reduced_constant():
    """c = y - x^2 for the first point."""
    assert reduced_constant([Point(4, 10), Point(1, 1)]) == -6


def test_verify_consistent_set():
    """No mismatches when every point lies on the polynomial."""
    points = [(1, 4), (2, 7), (3, 12), (6, 39)]
    assert verify(points, 3, 3, Strategy.GENERAL) == []


def test_verify_reports_unused_mismatch():
    """An off-model point beyond the first k is reported, not raised."""
    points = [(1, 4), (2, 7), (3, 12), (6, 40)]

    mismatches = verify(points, 3, 3, Strategy.GENERAL)

    assert len(mismatches) == 1
    assert mismatches[0].point == Point(6, 40)
    assert mismatches[0].expected == 39
    assert mismatches[0].difference == 1


def test_verify_reduced_model_checks_every_point():
    """The reduced model is checked against used and unused points."""
    # c = 5 - 1 = 4; neither (2, 9) nor (3, 14) fits x^2 + 4
    points = [(1, 5), (2, 9), (3, 14)]

    mismatches = verify(points, 4, 1, Strategy.REDUCED)

    assert [m.point.x for m in mismatches] == [2, 3]
    assert [m.expected for m in mismatches] == [8, 13]


def test_process_example():
    """Full pipeline over a sample set with an index gap."""
    samples = SampleSet([(1, 4), (2, 7), (3, 12), (6, 39)])
    result = process(TestCase(4, 3, samples))

    assert result.constant == 3
    assert result.strategy is Strategy.GENERAL
    assert result.mismatches == []
    assert result.as_dict() == {
        'n': 4,
        'k': 3,
        'points': [(1, 4), (2, 7), (3, 12), (6, 39)],
        'constant': 3,
    }


def test_process_keeps_constant_despite_mismatch():
    """Verification never changes or blocks the result."""
    samples = SampleSet([(1, 4), (2, 7), (3, 12), (6, 1)])
    result = process(TestCase(4, 3, samples))

    assert result.constant == 3
    assert len(result.mismatches) == 1


def test_process_fallback():
    """k = 1 runs the reduced model."""
    result = process(TestCase(1, 1, SampleSet([(1, 5)])))

    assert result.constant == 4
    assert result.strategy is Strategy.REDUCED


def test_verify_rejects_invalid_selection():
    """verify fails with the same error kinds as reconstruct."""
    with pytest.raises(DuplicateX):
        verify([(2, 1), (2, 5), (3, 7)], 0, 2, Strategy.GENERAL)
    with pytest.raises(InsufficientPoints):
        verify([(1, 4)], 3, 2, Strategy.GENERAL)


def test_mismatch_is_hashable():
    """Equal mismatches hash alike."""
    first = Mismatch(Point(6, 40), 39)
    second = Mismatch(Point(6, 40), Fraction(39))

    assert first == second
    assert len({first, second}) == 1
