"""String and number helpers used by the pipeline tools."""

from __future__ import annotations

from typing import Optional

_INT_BITS = 32
_ULONG_BITS = 64
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap_int(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _sign_and_digits(text: str, skip: str) -> tuple[int, str, str]:
    """Split text into (sign, leading digits, remainder) after skipping blanks."""
    rest = text.lstrip(skip)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    end = len(rest) - len(rest.lstrip(_DIGITS))
    return sign, rest[:end], rest[end:]


def atoi(text: str) -> int:
    """Parse a leading integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; the result wraps like a 32-bit int.
    """
    sign, digits, _ = _sign_and_digits(text, _WHITESPACE)
    value = int(digits) if digits else 0
    return _wrap_int(_wrap_int(value) * sign)


def atof(text: str) -> float:
    """Parse a leading decimal number such as ``-12.5``.

    Only spaces are skipped before the optional sign; parsing stops at the
    first character that does not fit the number.
    """
    sign, whole, rest = _sign_and_digits(text, " ")
    number = int(whole) if whole else 0
    if not rest.startswith("."):
        return float(number * sign)
    fraction = rest[1:]
    end = len(fraction) - len(fraction.lstrip(_DIGITS))
    fraction = fraction[:end]
    scaled = number * 10 ** len(fraction) + (int(fraction) if fraction else 0)
    return (scaled / 10 ** len(fraction)) * sign


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(number))


def itoa_base(number: int, base: str) -> str:
    """Write a non-negative number using the characters of ``base`` as digits.

    Negative numbers wrap as 64-bit unsigned values.
    """
    radix = len(base)
    if radix < 2:
        raise ValueError("base must contain at least two digits")
    number %= 1 << _ULONG_BITS
    digits = [base[number % radix]]
    number //= radix
    while number:
        digits.append(base[number % radix])
        number //= radix
    return "".join(reversed(digits))


def split_words(text: str, sep: str) -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of text beginning at ``start``.

    A start past the end of text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle within the first ``length`` characters of haystack.

    Returns the index of the first match, 0 for an empty needle, or None
    when the needle does not occur wholly inside that prefix.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index