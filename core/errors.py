"""Error kinds raised by the interpolation core."""


class InterpolationError(Exception):
    """Base class for every failure of a single constant-term computation."""


class InvalidDigit(InterpolationError):
    """A value string holds a character that is not a digit of its radix."""

    def __init__(self, char: str, radix: int):
        super().__init__(f"Invalid digit {char!r} for base {radix}")
        self.char = char
        self.radix = radix


class DegenerateInput(InterpolationError):
    """Points cannot define an interpolating polynomial (e.g. repeated x)."""

    def __init__(self, message: str, x: int | None = None):
        super().__init__(message)
        self.x = x


class InsufficientPoints(InterpolationError):
    def __init__(self, available: int, required: int):
        super().__init__(
            f"Not enough points: found {available}, required k={required}")
        self.available = available
        self.required = required


class MalformedDocument(InterpolationError):
    """Required fields are missing or have the wrong shape."""
