"""
Input document parsing.

The expected document looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

`n` and `k` may also appear at the top level. Each index 1..n maps to a
`{base, value}` block; blocks that are missing or malformed are reported as
absent rather than as errors.
"""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Any, Optional

from polysynth.errors import InputFormatError
from polysynth.pipeline import ProblemInput
from polysynth.selector import RootRecord


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _read_count(doc: dict, key: str) -> int:
    keys = doc.get("keys")
    source = keys if isinstance(keys, dict) and key in keys else doc
    if key not in source:
        raise InputFormatError(f"Failed to extract {key!r} from input")
    value = source[key]
    if not _is_int(value):
        raise InputFormatError(f"{key!r} must be an integer, got {value!r}")
    return value


BASE_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_base(raw: Any) -> Optional[int]:
    """
    Read a base given as a JSON integer or a decimal string.

    Strings may carry surrounding whitespace and a sign; anything other than
    ASCII digits after that (underscores, Unicode digits) is rejected.
    """
    if _is_int(raw):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if BASE_PATTERN.fullmatch(text):
            return int(text)
    return None


def parse_record(doc: dict, index: int) -> Optional[RootRecord]:
    """
    Locate the `{base, value}` block for a 1-based index.

    Returns None when the block is missing, is not an object, has no usable
    base, or has a non-string value.
    """
    block = doc.get(str(index))
    if not isinstance(block, dict):
        return None
    base = _parse_base(block.get("base"))
    literal = block.get("value")
    if base is None or not isinstance(literal, str):
        return None
    return RootRecord(index=index, base=base, literal=literal)


def parse_problem(text: str) -> ProblemInput:
    """
    Parse an input document into n, k and the per-index records.

    Parameters
    ----------
    text : str
        JSON document

    Returns
    -------
    ProblemInput
        `records[i]` describes index i + 1, or is None when that index is absent

    Raises
    ------
    InputFormatError
        The text is not a JSON object, n or k is missing or not an integer,
        or either is not positive.
    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputFormatError(f"Input is not valid JSON: {exc}") from exc
    if not isinstance(doc, dict):
        raise InputFormatError(f"Input must be a JSON object, got {type(doc).__name__}")

    n = _read_count(doc, "n")
    k = _read_count(doc, "k")
    if n <= 0 or k <= 0:
        raise InputFormatError(f"Invalid n or k: n={n}, k={k}")

    records = [parse_record(doc, i) for i in range(1, n + 1)]
    return ProblemInput(n=n, k=k, records=records)


def read_problem(path: str | Path) -> ProblemInput:
    """Read and parse an input document from a file, or from stdin for '-'."""
    if str(path) == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(path).read_text()
        except OSError as exc:
            raise InputFormatError(f"Failed to read input {path}: {exc}") from exc
    return parse_problem(text)
