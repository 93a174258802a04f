"""Core primitives: radix decoding, exact fractions, Lagrange interpolation."""

import sys

# x, y and p(0) are unbounded; lift CPython's int<->str digit limit (3.11+)
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

from core.errors import (InterpolationError, InvalidDigit, DegenerateInput,
                         InsufficientPoints, MalformedDocument)
from core.fraction import Fraction, gcd, reduce, add
from core.radix import decode, encode, MIN_RADIX, MAX_RADIX
from core.polynomial import Polynomial, lagrange_coefficients_at_zero
from core import rng
