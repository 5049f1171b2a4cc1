"""
Arbitrary-base (2-36) digit string decoding onto unbounded integers.
Digits are 0-9 then a-z (case-insensitive) for values 10-35.
"""

from errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def parse_base(base):
    """Normalize a base given as an int or a decimal string."""
    if isinstance(base, bool):
        raise InvalidBase(base)
    if isinstance(base, str):
        text = base.strip()
        if not text or len(text) > 2 or any(c not in DIGITS[:10] for c in text):
            raise InvalidBase(base)
        base = int(text)
    elif not isinstance(base, int):
        raise InvalidBase(base)

    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)
    return base


def digit_value(char):
    """Magnitude of a single digit character, or None if it is not one."""
    if len(char) != 1 or not char.isascii():
        return None
    index = DIGITS.find(char.lower())
    return index if index >= 0 else None


def decode(value, base):
    """
    Decode a digit string in the given base, most significant digit first.

    Unlike int(value, base) this accepts no sign, prefix, whitespace or
    underscores: every character must be a digit below the base.
    """
    base = parse_base(base)
    if not value:
        raise InvalidDigit(value, None, 0, base)

    result = 0
    for position, char in enumerate(value):
        digit = digit_value(char)
        if digit is None or digit >= base:
            raise InvalidDigit(value, char, position, base)
        result = result * base + digit
    return result


def encode(number, base):
    """Encode a non-negative integer as a lowercase digit string."""
    base = parse_base(base)
    if number < 0:
        raise ValueError("Cannot encode a negative number")
    if number == 0:
        return "0"

    digits = []
    while number:
        number, remainder = divmod(number, base)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits))
