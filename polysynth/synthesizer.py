"""
Monic polynomial synthesis by iterative convolution.

Coefficient vectors are int64 arrays in ascending powers of x: element j is
the coefficient of x^j.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from polysynth.errors import CoefficientOverflow
from polysynth.int64 import checked_add, checked_mul, checked_sub, to_int64_array


def fold_root(coef: Sequence[int], root: int, step: int = 0) -> list[int]:
    """
    Multiply a polynomial by (x - root).

    Parameters
    ----------
    coef : sequence of int
        Ascending-power coefficients of the current polynomial
    root : int
        Root to fold in
    step : int, optional
        Position of `root` in the fold order, reported on overflow

    Returns
    -------
    list[int]
        New coefficient list, one entry longer than `coef`

    Raises
    ------
    CoefficientOverflow
        Any product or accumulation leaves the signed 64-bit range.
    """
    nxt = [0] * (len(coef) + 1)
    for j, a in enumerate(coef):
        a = int(a)
        position = j + 1
        try:
            # x * a_j x^j
            nxt[j + 1] = checked_add(nxt[j + 1], a)
            # -r * a_j x^j
            position = j
            nxt[j] = checked_sub(nxt[j], checked_mul(root, a))
        except OverflowError as exc:
            raise CoefficientOverflow(step, position, root) from exc
    return nxt


def synthesize(roots: Sequence[int]) -> np.ndarray:
    """
    Build the monic polynomial prod_i (x - roots[i]).

    Roots are folded strictly in the given order, which fixes where an
    overflow is first reported.

    Parameters
    ----------
    roots : sequence of int
        Roots, each within the signed 64-bit range

    Returns
    -------
    np.ndarray
        int64 coefficients in ascending powers, length len(roots) + 1, with
        the last entry equal to 1

    Examples
    --------
    >>> synthesize([2, 3]).tolist()
    [6, -5, 1]
    """
    coef = [1]
    for step, root in enumerate(roots):
        coef = fold_root(coef, int(root), step)
    return to_int64_array(coef)
