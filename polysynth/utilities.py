"""
Utility functions for polynomial operations and other common tasks.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.polynomial import polynomial


def descending(coef: Sequence[int]) -> list[int]:
    """Return ascending-power coefficients highest degree first."""
    return [int(c) for c in coef][::-1]


def evaluate(coef: Sequence[int], x: int) -> int:
    """
    Evaluate a polynomial exactly at integer x using Horner's method.

    Parameters
    ----------
    coef : sequence of int
        Coefficients in ascending powers of x
    x : int
        Evaluation point

    Returns
    -------
    int
        p(x), computed with unbounded Python integers
    """
    result = 0
    for c in reversed(coef):
        result = result * x + int(c)
    return result


def roots_to_coefficients(roots: list[float]) -> list[float]:
    """
    Convert polynomial roots to floating-point coefficients in descending order.

    Given roots [p0, p1, ..., pn], returns coefficients [cn, cn-1, ..., c1, c0]
    such that:
        (x - p0)(x - p1)...(x - pn) = c_n * x^n + c_{n-1} * x^{n-1} + ... + c_1 * x + c_0

    This is an independent floating-point reference for `synthesize`; it is
    only exact while the coefficients stay below 2**53.

    Parameters
    ----------
    roots : list[float]
        List of polynomial roots [p0, p1, ..., pn]

    Returns
    -------
    list[float]
        Coefficients in descending order [cn, cn-1, ..., c1, c0]

    Examples
    --------
    >>> roots_to_coefficients([1, 2])
    [1.0, -3.0, 2.0]
    """
    if not roots:
        return [1.0]  # Empty product is 1

    roots_array = np.array(roots, dtype=float)
    coefficients = polynomial.polyfromroots(roots_array)

    # Reverse to get descending order (highest degree first)
    return coefficients.tolist()[::-1]
