"""
User-defined run configuration.

Pass this file with `--config problem.py`. Command-line flags override the
values set here.
"""

from polysynth.config import RunParameters

# ============================================================================
# Run parameters
# ============================================================================

run_params = RunParameters(
    input_path="data/sample_input.json",  # Input JSON document ("-" for stdin)
    output_json="output/polynomial.json",  # Path to save result JSON (None to skip)
    plot_path=None,  # Path to save a plot, e.g. "output/polynomial.png"
    verbose=True,  # Print progress to stderr
)
