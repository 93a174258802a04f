"""Constant-term recovery: document -> points -> exact p(0) -> text."""

import logging
from dataclasses import dataclass

from core.fraction import Fraction
from core.polynomial import Polynomial
from document import Point, load_threshold, load_points, count_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    """Outcome of one interpolation."""
    constant: Fraction
    points: list[Point]
    ignored: int

    def __str__(self):
        return format_fraction(self.constant)


def format_fraction(fraction: Fraction) -> str:
    """Base-10 integer when integral, otherwise "numerator/denominator"."""
    num, den = fraction.numerator, fraction.denominator
    if den == 1:
        return str(num)
    if num % den == 0:
        return str(num // den)
    return f"{num}/{den}"


def solve_document(document) -> Solution:
    k = load_threshold(document)
    selected = load_points(document, k)
    logger.debug(f"Interpolating through x = {[p.x for p in selected]}")

    constant = Polynomial.interpolate_at_zero([(p.x, p.y) for p in selected])
    if constant.denominator != 1:
        logger.warning(f"Constant term is not an integer: "
                       f"{constant.numerator}/{constant.denominator}")
    return Solution(constant, selected, count_entries(document) - k)


def solve(document) -> str:
    """Constant term of the polynomial through the document's first k points."""
    return str(solve_document(document))
