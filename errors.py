"""
Error kinds raised while decoding samples and reconstructing the constant term.
"""


class ReconstructionError(ValueError):
    """Base class for all decoding and reconstruction failures."""


class InvalidBase(ReconstructionError):
    """Base specifier is non-numeric or outside [2, 36]."""

    def __init__(self, base):
        self.base = base
        super().__init__(f"Invalid base: {base!r} (expected an integer in [2, 36])")


class InvalidDigit(ReconstructionError):
    """A character is not a valid digit for the stated base."""

    def __init__(self, value, char, position, base):
        self.value = value
        self.char = char
        self.position = position
        self.base = base
        if char is None:
            message = f"Empty value for base {base}"
        else:
            message = (f"Invalid digit {char!r} at position {position} "
                       f"of {value!r} for base {base}")
        super().__init__(message)


class InsufficientPoints(ReconstructionError):
    """Fewer usable points than k, or k < 1."""

    def __init__(self, available, k):
        self.available = available
        self.k = k
        super().__init__(f"Need k={k} points (k >= 1), got {available}")


class DuplicateX(ReconstructionError):
    """Two points share the same x value."""

    def __init__(self, x):
        self.x = x
        super().__init__(f"Duplicate x value: {x}")


class NonIntegerResult(ReconstructionError):
    """Exact interpolation produced a non-integer constant term."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Constant term is not an integer: {value}")


class MalformedRecord(ReconstructionError):
    """A test case record is missing fields or has ill-typed fields."""
