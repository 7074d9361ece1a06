"""
Exception hierarchy for root decoding and polynomial synthesis.

Every failure is terminal for a run. Exceptions carry the record index or the
synthesis step that produced them so the CLI can print a single diagnostic.
"""

from __future__ import annotations


class PolynomialError(ValueError):
    """Base class for every failure the pipeline can report."""


class InputFormatError(PolynomialError):
    """The input document is unreadable or violates the expected schema."""


class Overflow(PolynomialError):
    """A value left the signed 64-bit range (decode or synthesis phase)."""


class DecodeError(PolynomialError):
    """
    A literal could not be decoded in the requested base.

    Parameters
    ----------
    literal : str
        The literal that failed to decode
    base : int
        The base it was decoded in
    reason : str
        Human readable description of the failure
    """

    def __init__(self, literal: str, base: int, reason: str):
        self.literal = literal
        self.base = base
        self.reason = reason
        super().__init__(f"{reason} (literal={literal!r}, base={base})")


class EmptyLiteral(DecodeError):
    def __init__(self, literal: str, base: int):
        super().__init__(literal, base, "no digits after sign")


class InvalidDigit(DecodeError):
    def __init__(self, literal: str, base: int, char: str):
        self.char = char
        super().__init__(literal, base, f"invalid digit {char!r}")


class DigitOutOfRange(DecodeError):
    def __init__(self, literal: str, base: int, char: str):
        self.char = char
        super().__init__(literal, base, f"digit {char!r} out of range for base {base}")


class DecodeOverflow(DecodeError, Overflow):
    def __init__(self, literal: str, base: int):
        super().__init__(literal, base, "value does not fit in signed 64 bits")


class RootDecodeFailed(PolynomialError):
    """The record at `index` was located but its literal did not decode."""

    def __init__(self, index: int, cause: DecodeError):
        self.index = index
        self.cause = cause
        super().__init__(f"Failed to parse value at index {index}: {cause}")


class InsufficientRoots(PolynomialError):
    """Fewer than k records were located in the input."""

    def __init__(self, found: int, k: int):
        self.found = found
        self.k = k
        super().__init__(f"Not enough roots: found {found}, need {k}")


class CoefficientOverflow(Overflow):
    """
    Folding a root overflowed a coefficient.

    Parameters
    ----------
    step : int
        0-based position of the root being folded in
    position : int
        Power of x whose coefficient overflowed
    root : int
        The root being folded in
    """

    def __init__(self, step: int, position: int, root: int):
        self.step = step
        self.position = position
        self.root = root
        super().__init__(
            f"Coefficient overflow during synthesis: folding root {root} "
            f"(step {step}) overflowed the x^{position} coefficient"
        )
