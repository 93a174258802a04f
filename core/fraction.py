"""Exact rational arithmetic over Python integers."""


def gcd(a: int, b: int) -> int:
    """Euclid on magnitudes. gcd(0, 0) = 0 and gcd(a, 0) = |a|."""
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


class Fraction:
    """numerator / denominator with arbitrary-precision parts.

    The constructor stores its arguments as given, so unreduced terms can be
    built directly. Everything returned by reduce(), add() and `+` is fully
    reduced with a positive denominator. Instances are immutable.
    """

    __slots__ = ('numerator', 'denominator')

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise ZeroDivisionError("Fraction with zero denominator")
        object.__setattr__(self, 'numerator', numerator)
        object.__setattr__(self, 'denominator', denominator)

    def __setattr__(self, name, value):
        raise AttributeError(f"Fraction is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Fraction is immutable; cannot delete {name!r}")

    def __add__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        if isinstance(other, int):
            return add(Fraction(other), self)
        return NotImplemented

    def __neg__(self):
        return Fraction(-self.numerator, self.denominator)

    def __eq__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if isinstance(other, Fraction):
            # cross-multiplication keeps unreduced values comparable
            return self.numerator * other.denominator == other.numerator * self.denominator
        return NotImplemented

    def __hash__(self):
        r = self.reduced()
        if r.denominator == 1:
            return hash(r.numerator)
        return hash((r.numerator, r.denominator))

    def __repr__(self):
        return f"Fraction({self.numerator}, {self.denominator})"

    @property
    def is_integer(self) -> bool:
        return self.numerator % self.denominator == 0

    def reduced(self) -> 'Fraction':
        return reduce(self.numerator, self.denominator)

    @staticmethod
    def zero():
        return Fraction(0)

    @staticmethod
    def one():
        return Fraction(1)


def reduce(num: int, den: int) -> Fraction:
    """Canonical form of num/den: divided by the gcd, sign on the numerator."""
    if den < 0:
        num, den = -num, -den
    g = gcd(num, den)
    if g == 0:
        return Fraction(0, 1)
    return Fraction(num // g, den // g)


def add(a: Fraction, b: Fraction) -> Fraction:
    return reduce(a.numerator * b.denominator + b.numerator * a.denominator,
                  a.denominator * b.denominator)
