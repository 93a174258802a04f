"""Integer polynomials and exact Lagrange interpolation at x=0."""

from core import rng
from core.errors import DegenerateInput
from core.fraction import Fraction, add


class Polynomial:
    """Polynomial with integer coefficients. coeffs[0] = constant term."""

    def __init__(self, coeffs: list[int]):
        self.coeffs = coeffs

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def evaluate(self, x: int) -> int:
        """Evaluate polynomial at x using Horner's method."""
        result = 0
        for coeff in reversed(self.coeffs):
            result = result * x + coeff
        return result

    @staticmethod
    def random(degree: int, constant: int, bound: int = 1 << 64) -> 'Polynomial':
        """Random polynomial of given degree with p(0) = constant.

        Non-constant coefficients are drawn from [0, bound), the leading one
        from [1, bound) so the degree is exact.
        """
        coeffs = [constant]
        for i in range(degree):
            lo = 1 if i == degree - 1 else 0
            coeffs.append(rng.randrange(lo, bound))
        return Polynomial(coeffs)

    @staticmethod
    def interpolate_at_zero(points: list[tuple[int, int]]) -> Fraction:
        """Lagrange interpolation evaluated at x=0.

        points: (x_i, y_i) pairs with distinct x.
        Returns p(0) = sum_i y_i * prod_{j!=i} (-x_j) / prod_{j!=i} (x_i - x_j)
        as a reduced Fraction. The running sum is reduced after every term.
        """
        if not points:
            raise DegenerateInput("Cannot interpolate through zero points")
        x_values = [x for x, _ in points]
        total = Fraction.zero()
        for i, (_, yi) in enumerate(points):
            numerator, denominator = _basis_at_zero(x_values, i)
            total = add(total, Fraction(yi * numerator, denominator))
        return total.reduced()


def _basis_at_zero(x_values: list[int], i: int) -> tuple[int, int]:
    """Unreduced (numerator, denominator) of lambda_i, denominator > 0."""
    xi = x_values[i]
    numerator = 1
    denominator = 1
    for j, xj in enumerate(x_values):
        if i == j:
            continue
        numerator *= -xj
        denominator *= xi - xj
    if denominator == 0:
        raise DegenerateInput(f"Duplicate x-coordinate {xi}", x=xi)
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return numerator, denominator


def lagrange_coefficients_at_zero(x_values: list[int]) -> list[Fraction]:
    """Precompute Lagrange basis coefficients at x=0 for given x-coordinates.

    Returns lambda_i = prod_{j!=i} (-x_j) / (x_i - x_j) for each i, reduced.
    """
    return [Fraction(*_basis_at_zero(x_values, i)).reduced()
            for i in range(len(x_values))]
