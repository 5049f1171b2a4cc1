"""
Constant term reconstruction from sample points.

Two explicit strategies:
  REDUCED - assume f(x) = x^2 + c, so c = y - x^2 from the first point.
  GENERAL - Lagrange interpolation through k points, evaluated at x = 0.
Everything is computed on ints and Fractions, never floats.
"""

from enum import Enum
from fractions import Fraction

from errors import DuplicateX, InsufficientPoints, NonIntegerResult
from polynomial import Polynomial
from samples import Point


class Strategy(Enum):
    REDUCED = 'reduced'
    GENERAL = 'general'


# Below this many points the reduced model is used unless the caller asks otherwise
GENERAL_MIN_POINTS = 3


def choose_strategy(k):
    """Pick the strategy for a selection of k points."""
    return Strategy.REDUCED if k < GENERAL_MIN_POINTS else Strategy.GENERAL


class Mismatch:
    """A sample point that does not lie on the reconstructed model."""

    def __init__(self, point, expected):
        self.point = point
        self.expected = expected
        self.difference = point.y - expected

    def __eq__(self, other):
        return (isinstance(other, Mismatch) and self.point == other.point
                and self.expected == other.expected)

    def __hash__(self):
        return hash((self.point, self.expected))

    def __repr__(self):
        return (f"Mismatch(x={self.point.x}, y={self.point.y}, "
                f"expected={self.expected}, difference={self.difference})")


class Result:
    """Outcome of one test case."""

    def __init__(self, n, k, points, constant, strategy, mismatches):
        self.n = n
        self.k = k
        self.points = points
        self.constant = constant
        self.strategy = strategy
        self.mismatches = mismatches

    def as_dict(self):
        return {
            'n': self.n,
            'k': self.k,
            'points': list(self.points),
            'constant': self.constant,
        }

    def __repr__(self):
        return (f"Result(n={self.n}, k={self.k}, constant={self.constant}, "
                f"strategy={self.strategy.value}, mismatches={len(self.mismatches)})")


def _as_points(points):
    return [point if isinstance(point, Point) else Point(*point) for point in points]


def _select(points, k):
    """First k points, rejecting a short set or a repeated x."""
    if k < 1 or k > len(points):
        raise InsufficientPoints(len(points), k)
    selected = points[:k]

    seen = set()
    for point in selected:
        if point.x in seen:
            raise DuplicateX(point.x)
        seen.add(point.x)
    return selected


def lagrange_at_zero(points):
    """
    c = sum_i y_i * prod_{j != i} (-x_j) / (x_i - x_j)

    points must have distinct x values. Raises NonIntegerResult when the
    exact sum has a denominator other than 1.
    """
    xs = [point.x for point in points]
    total = Fraction(0)
    for i, point in enumerate(points):
        total += point.y * Polynomial.lagrange_coefficient(i, xs, 0)

    if total.denominator != 1:
        raise NonIntegerResult(total)
    return total.numerator


def reduced_constant(points):
    """c = y - x^2 for the first point."""
    first = points[0]
    return first.y - first.x * first.x


def reconstruct(points, k, strategy=None):
    """
    Constant term of the polynomial through the first k points.

    strategy defaults to choose_strategy(k); pass Strategy.GENERAL to
    interpolate even when k < 3.
    """
    selected = _select(_as_points(points), k)
    if strategy is None:
        strategy = choose_strategy(k)

    if strategy is Strategy.REDUCED:
        return reduced_constant(selected)
    return lagrange_at_zero(selected)


def model_for(used, constant, strategy):
    """Polynomial predicted by the given strategy."""
    if strategy is Strategy.REDUCED:
        return Polynomial([constant, 0, 1])
    return Polynomial.interpolate(used)


def verify(points, constant, k, strategy):
    """
    Check every point against the model built from the first k points.

    Returns one Mismatch per point whose y differs from the model; an
    empty list means the whole set is consistent. A mismatch is reported,
    never raised; an invalid selection raises InsufficientPoints or
    DuplicateX just as reconstruct does.
    """
    points = _as_points(points)
    model = model_for(_select(points, k), constant, strategy)

    mismatches = []
    for point in points:
        expected = model.eval(point.x)
        if expected != point.y:
            if expected.denominator == 1:
                expected = expected.numerator
            mismatches.append(Mismatch(point, expected))
    return mismatches


def process(test_case, strategy=None):
    """Reconstruct and verify one test case."""
    points = list(test_case.samples)
    k = test_case.k
    if strategy is None:
        strategy = choose_strategy(k)

    constant = reconstruct(points, k, strategy)
    mismatches = verify(points, constant, k, strategy)

    return Result(test_case.n, k, tuple(points), constant, strategy, mismatches)
