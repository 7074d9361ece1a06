"""
Root selection: decode the first k located records in ascending index order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from polysynth.decoder import decode
from polysynth.errors import DecodeError, InsufficientRoots, RootDecodeFailed
from polysynth.int64 import to_int64_array


@dataclass(frozen=True)
class RootRecord:
    """
    One located root entry.

    Attributes
    ----------
    index : int
        1-based position of the record in the input
    base : int
        Base the literal is written in
    literal : str
        Root value as written in the input
    """

    index: int
    base: int
    literal: str

    def decode(self) -> int:
        """Decode this record, tagging any failure with its index."""
        try:
            return decode(self.literal, self.base)
        except DecodeError as exc:
            raise RootDecodeFailed(self.index, exc) from exc


def select_roots(records: Iterable[Optional[RootRecord]], k: int) -> np.ndarray:
    """
    Decode the first `k` located records.

    Parameters
    ----------
    records : iterable of RootRecord or None
        Records in ascending index order. None marks an index the scanner
        could not locate; it is skipped.
    k : int
        Number of roots required (must be >= 1)

    Returns
    -------
    np.ndarray
        int64 array of exactly `k` roots in index order

    Raises
    ------
    RootDecodeFailed
        A located record failed to decode before `k` roots were collected.
        Records after the k-th located one are never decoded.
    InsufficientRoots
        Fewer than `k` records were located.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")

    roots = []
    for record in records:
        if record is None:
            continue
        roots.append(record.decode())
        if len(roots) == k:
            return to_int64_array(roots)

    raise InsufficientRoots(len(roots), k)
