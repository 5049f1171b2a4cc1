"""
Polynomial arithmetic over the rationals.
All coefficients are fractions.Fraction so interpolation stays exact
for integers of any size.
"""

from fractions import Fraction


class Polynomial:
    """Polynomial with exact rational coefficients."""

    def __init__(self, coefficients):
        """
        Create a polynomial from coefficients.
        coefficients[i] is the coefficient of x^i.
        """
        self.coeffs = [Fraction(c) for c in coefficients] or [Fraction(0)]
        # Remove leading zeros
        while len(self.coeffs) > 1 and self.coeffs[-1] == 0:
            self.coeffs.pop()

    def degree(self):
        """Return the degree of the polynomial."""
        return len(self.coeffs) - 1

    def eval(self, x):
        """Evaluate polynomial at point x using Horner's method."""
        result = Fraction(0)
        for coeff in reversed(self.coeffs):
            result = result * x + coeff
        return result

    def constant(self):
        """Return the coefficient of x^0."""
        return self.coeffs[0]

    def __add__(self, other):
        """Add two polynomials."""
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else 0
            b = other.coeffs[i] if i < len(other.coeffs) else 0
            result.append(a + b)
        return Polynomial(result)

    def __mul__(self, other):
        """Multiply two polynomials, or scale by an int/Fraction."""
        if isinstance(other, (int, Fraction)):
            return Polynomial([c * other for c in self.coeffs])

        result = [Fraction(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            for j, b in enumerate(other.coeffs):
                result[i + j] += a * b
        return Polynomial(result)

    def __eq__(self, other):
        return isinstance(other, Polynomial) and self.coeffs == other.coeffs

    @staticmethod
    def interpolate(points):
        """
        Lagrange interpolation.
        points: list of (x, y) tuples with distinct x.
        Returns the polynomial of degree < len(points) through them.
        """
        n = len(points)
        result = Polynomial([0])

        for i in range(n):
            xi, yi = points[i]
            # Build Lagrange basis polynomial L_i(x)
            basis = Polynomial([1])
            for j in range(n):
                if i != j:
                    xj = points[j][0]
                    # basis *= (x - xj) / (xi - xj)
                    numerator = Polynomial([-xj, 1])
                    basis = basis * numerator * Fraction(1, xi - xj)

            result = result + basis * yi

        return result

    @staticmethod
    def lagrange_coefficient(i, xs, eval_point=0):
        """
        Compute the i-th Lagrange coefficient for interpolation at eval_point.
        xs: list of x-coordinates
        """
        xi = xs[i]
        result = Fraction(1)
        for j, xj in enumerate(xs):
            if i != j:
                result *= Fraction(eval_point - xj, xi - xj)
        return result

    def __repr__(self):
        return f"Polynomial({[str(c) for c in self.coeffs]})"
