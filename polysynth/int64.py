"""
Checked signed 64-bit arithmetic.

Values are plain Python ints; each helper verifies the exact result against the
int64 range and raises OverflowError instead of wrapping.
"""

from __future__ import annotations

import numpy as np

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


def _checked(value: int) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowError(f"{value} is outside the signed 64-bit range")
    return value


def checked_add(a: int, b: int) -> int:
    return _checked(a + b)


def checked_sub(a: int, b: int) -> int:
    return _checked(a - b)


def checked_mul(a: int, b: int) -> int:
    return _checked(a * b)


def to_int64_array(values) -> np.ndarray:
    """Pack already range-checked ints into an int64 array."""
    return np.array([_checked(int(v)) for v in values], dtype=np.int64)
