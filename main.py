"""
Command-line entry point: read root descriptions, print the monic polynomial.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from polysynth.config import RunParameters, load_run_parameters
from polysynth.errors import PolynomialError
from polysynth.pipeline import solve
from polysynth.report import format_report, save_result_to_json
from polysynth.scanner import read_problem


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build the monic polynomial whose roots are given as base-N literals",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Input JSON document ('-' for stdin, the default)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Python module defining run_params (e.g. problem.py)",
    )
    parser.add_argument(
        "--output-json",
        default=None,
        help="Also save the result to this JSON file",
    )
    parser.add_argument(
        "--plot",
        default=None,
        help="Save a plot of the polynomial to this path",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress to stderr",
    )
    return parser.parse_args([] if argv is None else list(argv))


def _resolve_params(args: argparse.Namespace) -> RunParameters:
    params = load_run_parameters(args.config)
    overrides = {}
    if args.input is not None:
        overrides["input_path"] = args.input
    if args.output_json is not None:
        overrides["output_json"] = args.output_json
    if args.plot is not None:
        overrides["plot_path"] = args.plot
    if args.verbose:
        overrides["verbose"] = True
    return replace(params, **overrides)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = _parse_args(list(argv) if argv is not None else sys.argv[1:])
    try:
        params = _resolve_params(args)
    except (AttributeError, TypeError, OSError, ImportError) as exc:
        print(f"polysynth: invalid config: {exc}", file=sys.stderr)
        return 1

    try:
        problem = read_problem(params.input_path)
        if params.verbose:
            located = sum(record is not None for record in problem.records)
            print(f"n = {problem.n}, k = {problem.k}, located {located} records", file=sys.stderr)

        result = solve(problem)
        if params.verbose:
            print(f"Selected roots: {[int(r) for r in result.roots]}", file=sys.stderr)
            print(f"Degree: {result.degree}", file=sys.stderr)
    except PolynomialError as exc:
        print(f"polysynth: {exc}", file=sys.stderr)
        return 1

    # Side outputs first so a failed save leaves no report on stdout
    try:
        if params.output_json is not None:
            save_result_to_json(params.output_json, result)
            if params.verbose:
                print(f"Result saved to: {params.output_json}", file=sys.stderr)
        if params.plot_path is not None:
            from polysynth.plotting_utils import plot_polynomial

            plot_polynomial(result, save_path=params.plot_path)
            if params.verbose:
                print(f"Plot saved to {params.plot_path}", file=sys.stderr)
    except OSError as exc:
        print(f"polysynth: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
