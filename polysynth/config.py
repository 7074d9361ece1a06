"""
Run configuration.

A run is configured by a Python module (see `problem.py` at the repository
root) that defines `run_params`, a `RunParameters` instance. Command-line
flags override the values it sets.
"""

from __future__ import annotations

import importlib.util
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType


@dataclass(frozen=True)
class RunParameters:
    """
    Parameters for one synthesis run.

    Attributes
    ----------
    input_path : str, optional
        Input JSON document, or "-" for stdin. Default: "-"
    output_json : str | None, optional
        Path to save the result as JSON (None to skip). Default: None
    plot_path : str | None, optional
        Path to save a plot of the polynomial (None to skip). Default: None
    verbose : bool, optional
        Print progress to stderr. Default: False
    """

    input_path: str = "-"
    output_json: str | None = None
    plot_path: str | None = None
    verbose: bool = False


def load_config_module(config_file: str | Path) -> ModuleType:
    """Import a configuration module from a file path."""
    config_file = Path(config_file)
    if not config_file.is_file():
        raise FileNotFoundError(f"Config file not found: {config_file}")
    spec = importlib.util.spec_from_file_location(config_file.stem, config_file)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load config module from {config_file}")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise ImportError(f"Cannot load config module from {config_file}: {exc}") from exc
    return module


def load_run_parameters(config_file: str | Path | None) -> RunParameters:
    """
    Load `run_params` from a config module, or return defaults when None.

    Raises
    ------
    AttributeError
        The module does not define `run_params`.
    TypeError
        `run_params` is not a RunParameters instance.
    """
    if config_file is None:
        return RunParameters()

    module = load_config_module(config_file)
    if not hasattr(module, "run_params"):
        raise AttributeError(
            f"{config_file} must define a 'run_params' variable of type RunParameters. "
            f"Found: {[name for name in dir(module) if not name.startswith('_')]}"
        )
    run_params = module.run_params
    if not isinstance(run_params, RunParameters):
        raise TypeError(f"run_params must be a RunParameters instance, got {type(run_params)}")
    return run_params
