"""
Base-N integer decoding.

Decodes signed integer literals written in bases 2-16 into signed 64-bit
values, detecting overflow before it can happen.
"""

from __future__ import annotations

from polysynth.errors import DecodeOverflow, DigitOutOfRange, EmptyLiteral, InvalidDigit
from polysynth.int64 import INT64_MAX

# str.isspace() also accepts Unicode whitespace; only ASCII counts here
WHITESPACE = " \t\n\v\f\r"
SEPARATORS = WHITESPACE + "_"
DIGITS = "0123456789abcdef"


def digit_value(char: str) -> int:
    """
    Map a character to its digit value, or -1 if it is not a digit.

    `0`-`9` map to 0-9 and `a`-`f` (either case) map to 10-15.
    """
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return 10 + ord(char) - ord("a")
    if "A" <= char <= "F":
        return 10 + ord(char) - ord("A")
    return -1


def decode(literal: str, base: int) -> int:
    """
    Decode a signed integer literal written in the given base.

    Parameters
    ----------
    literal : str
        Literal with an optional leading sign. Leading whitespace is skipped,
        and whitespace or underscores inside the digit run are ignored.
    base : int
        Numeric base. Digits must be smaller than the base; the base itself is
        not otherwise range-checked.

    Returns
    -------
    int
        The decoded value, guaranteed to fit in a signed 64-bit integer.

    Raises
    ------
    EmptyLiteral
        Nothing follows the optional sign.
    InvalidDigit
        A character is neither a separator nor a hex digit.
    DigitOutOfRange
        A digit is not valid in `base`.
    DecodeOverflow
        The magnitude does not fit in a signed 64-bit integer.

    Examples
    --------
    >>> decode("-ff", 16)
    -255
    >>> decode("1_0", 10)
    10
    """
    body = literal.lstrip(WHITESPACE)
    negative = False
    if body[:1] == "+":
        body = body[1:]
    elif body[:1] == "-":
        negative = True
        body = body[1:]

    if not body:
        raise EmptyLiteral(literal, base)

    acc = 0
    for char in body:
        if char in SEPARATORS:
            continue
        value = digit_value(char)
        if value < 0:
            raise InvalidDigit(literal, base, char)
        if value >= base:
            raise DigitOutOfRange(literal, base, char)
        # Check before multiplying: the bound keeps acc within INT64_MAX
        if acc > (INT64_MAX - value) // base:
            raise DecodeOverflow(literal, base)
        acc = acc * base + value

    if negative:
        if acc > INT64_MAX + 1:
            raise DecodeOverflow(literal, base)
        return -acc
    return acc


def format_in_base(value: int, base: int) -> str:
    """
    Render an integer as a base-N literal (lowercase digits, leading '-').

    This is the inverse of `decode` for separator-free literals.
    """
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"base must be in [2, {len(DIGITS)}], got {base}")
    if value == 0:
        return "0"

    magnitude = abs(value)
    digits = []
    while magnitude:
        magnitude, rem = divmod(magnitude, base)
        digits.append(DIGITS[rem])
    if value < 0:
        digits.append("-")
    return "".join(reversed(digits))
