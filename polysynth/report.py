"""
Rendering and saving synthesis results.
"""

from __future__ import annotations

import json
from pathlib import Path

from polysynth.pipeline import SynthesisResult


def format_report(result: SynthesisResult) -> str:
    """
    Render a result as the line-oriented report.

    The report lists k, the selected roots in decimal, the degree, and the
    coefficients from the highest power down to the constant term, each under
    its own header line.
    """
    lines = ["k", str(result.k), "roots_decimal_first_k"]
    lines.extend(str(int(r)) for r in result.roots)
    lines.extend(["degree", str(result.degree), "coefficients_high_to_low"])
    lines.extend(str(c) for c in result.descending())
    return "\n".join(lines) + "\n"


def result_to_dict(result: SynthesisResult) -> dict:
    return {
        "k": result.k,
        "roots": [int(r) for r in result.roots],
        "degree": result.degree,
        "coefficients": result.descending(),
    }


def save_result_to_json(output_path: str | Path, result: SynthesisResult) -> None:
    """Save a result to a JSON file, creating parent directories as needed."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(result_to_dict(result), f, indent=2)
