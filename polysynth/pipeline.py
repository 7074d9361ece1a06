"""
Composition of root selection and polynomial synthesis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from polysynth.selector import RootRecord, select_roots
from polysynth.synthesizer import synthesize
from polysynth.utilities import descending


@dataclass(frozen=True)
class ProblemInput:
    """
    Decoded input document.

    Attributes
    ----------
    n : int
        Number of declared records
    k : int
        Number of roots required
    records : sequence of RootRecord or None
        Entry i holds index i + 1, or None when that index was not located
    """

    n: int
    k: int
    records: Sequence[Optional[RootRecord]]


@dataclass(frozen=True)
class SynthesisResult:
    """Selected roots and the monic polynomial they define."""

    k: int
    roots: np.ndarray
    coefficients: np.ndarray  # ascending powers

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def descending(self) -> list[int]:
        return descending(self.coefficients)


def solve(problem: ProblemInput) -> SynthesisResult:
    """Select the first k roots of `problem` and synthesize their polynomial."""
    roots = select_roots(problem.records, problem.k)
    coefficients = synthesize(roots)
    return SynthesisResult(k=problem.k, roots=roots, coefficients=coefficients)
