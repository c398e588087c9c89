"""Number drills: modular inverse, decimal-string arithmetic and digit divisors."""

from __future__ import annotations

import re
from itertools import zip_longest

MOD = 1000000007

_INTEGER = re.compile(r"-?\d+")


def mod_pow(base: int, exp: int) -> int:
    """Return base ** exp modulo 1000000007."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exp, MOD)


def mod_inverse(n: int) -> int:
    """Return the inverse of n modulo the prime 1000000007, by Fermat's little theorem."""
    return mod_pow(n, MOD - 2)


def _parse(text: str) -> tuple[bool, str]:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    negative = text.startswith("-")
    magnitude = text.lstrip("-").lstrip("0") or "0"
    return negative and magnitude != "0", magnitude


def _signed(negative: bool, magnitude: str) -> str:
    return "-" + magnitude if negative and magnitude != "0" else magnitude


def _magnitude_less(a: str, b: str) -> bool:
    return (len(a), a) < (len(b), b)


def _add_magnitudes(a: str, b: str) -> str:
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(x) + int(y) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits)).lstrip("0") or "0"


def _subtract_magnitudes(a: str, b: str) -> str:
    """Return a - b for magnitudes with a >= b."""
    digits = []
    borrow = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        digit = int(x) - int(y) - borrow
        borrow = 1 if digit < 0 else 0
        digits.append(str(digit + 10 * borrow))
    return "".join(reversed(digits)).lstrip("0") or "0"


def _add_parsed(neg_a: bool, mag_a: str, neg_b: bool, mag_b: str) -> str:
    if neg_a == neg_b:
        return _signed(neg_a, _add_magnitudes(mag_a, mag_b))
    if _magnitude_less(mag_a, mag_b):
        return _signed(neg_b, _subtract_magnitudes(mag_b, mag_a))
    return _signed(neg_a, _subtract_magnitudes(mag_a, mag_b))


def is_smaller(a: str, b: str) -> bool:
    """Whether the magnitude of a is strictly below that of b, signs ignored."""
    return _magnitude_less(_parse(a)[1], _parse(b)[1])


def add_strings(a: str, b: str) -> str:
    """Sum of two signed decimal integers given as strings."""
    return _add_parsed(*_parse(a), *_parse(b))


def subtract_strings(a: str, b: str) -> str:
    """Difference a - b of two signed decimal integers given as strings."""
    neg_b, mag_b = _parse(b)
    return _add_parsed(*_parse(a), not neg_b, mag_b)


def multiply_strings(a: str, b: str) -> str:
    """Product of two signed decimal integers given as strings."""
    neg_a, mag_a = _parse(a)
    neg_b, mag_b = _parse(b)
    columns = [0] * (len(mag_a) + len(mag_b))
    for i, x in enumerate(reversed(mag_a)):
        for j, y in enumerate(reversed(mag_b)):
            columns[i + j] += int(x) * int(y)
    digits = []
    carry = 0
    for column in columns:
        carry, digit = divmod(column + carry, 10)
        digits.append(str(digit))
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(str(digit))
    magnitude = "".join(reversed(digits)).lstrip("0") or "0"
    return _signed(neg_a != neg_b, magnitude)


def evaluate_polynomial(x: str) -> str:
    """Evaluate 4x^3 + 5x^2 - 6x + 14 exactly for a decimal integer string x."""
    x = x.strip()
    square = multiply_strings(x, x)
    cube = multiply_strings(square, x)
    total = add_strings(multiply_strings("4", cube), multiply_strings("5", square))
    total = add_strings(total, multiply_strings("-6", x))
    return add_strings(total, "14")


def find_digits(n: int) -> int:
    """Count the digits of n (with repetition) that are non-zero and divide n."""
    return sum(1 for ch in str(abs(n)) if ch != "0" and n % int(ch) == 0)