"""Test utilities: document builders and reference oracle."""

from core.polynomial import Polynomial
from core.radix import encode


def make_document(points, k, base=10):
    """Build a point document; `base` may be an int or a per-point list."""
    bases = base if isinstance(base, list) else [base] * len(points)
    doc = {"keys": {"n": len(points), "k": k}}
    for (x, y), b in zip(points, bases):
        doc[str(x)] = {"base": str(b), "value": encode(y, b)}
    return doc


def sample_points(poly: Polynomial, xs):
    return [(x, poly.evaluate(x)) for x in xs]
