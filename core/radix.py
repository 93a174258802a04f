"""Digit strings in radix 2..36 <-> non-negative integers."""

from core.errors import InvalidDigit

MIN_RADIX = 2
MAX_RADIX = 36

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check_radix(radix: int):
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ValueError(f"Radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix}")


def _digit_value(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    return -1


def decode(digits: str, radix: int) -> int:
    """Decode `digits` (case-insensitive, 0-9 then a-z) in the given radix.

    An empty string decodes to 0. Raises InvalidDigit for any character
    outside the radix.
    """
    _check_radix(radix)
    s = digits.strip().lower().lstrip("0")
    value = 0
    for ch in s:
        d = _digit_value(ch)
        if d < 0 or d >= radix:
            raise InvalidDigit(ch, radix)
        value = value * radix + d
    return value


def encode(value: int, radix: int) -> str:
    """Lower-case digit string of a non-negative integer in the given radix."""
    _check_radix(radix)
    if value < 0:
        raise ValueError("Cannot encode a negative value")
    if value == 0:
        return "0"
    out = []
    while value:
        value, d = divmod(value, radix)
        out.append(_DIGITS[d])
    return "".join(reversed(out))
