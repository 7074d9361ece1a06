"""End-to-end tests for the command-line entry point."""

import io
import json
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from main import main
from polysynth.config import RunParameters, load_run_parameters

SAMPLE = Path(__file__).resolve().parent / "data" / "sample_input.json"

EXPECTED_SAMPLE_REPORT = (
    "k\n3\n"
    "roots_decimal_first_k\n4\n7\n12\n"
    "degree\n3\n"
    "coefficients_high_to_low\n1\n-23\n160\n-336\n"
)


def _write(path, doc):
    path.write_text(json.dumps(doc))
    return str(path)


def test_sample_report(capsys):
    assert main([str(SAMPLE)]) == 0
    captured = capsys.readouterr()
    assert captured.out == EXPECTED_SAMPLE_REPORT
    assert captured.err == ""


def test_reads_stdin_by_default(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(SAMPLE.read_text()))
    assert main([]) == 0
    assert capsys.readouterr().out == EXPECTED_SAMPLE_REPORT


def test_verbose_goes_to_stderr(capsys):
    assert main([str(SAMPLE), "--verbose"]) == 0
    captured = capsys.readouterr()
    assert captured.out == EXPECTED_SAMPLE_REPORT
    assert "located 3 records" in captured.err
    assert "Degree: 3" in captured.err


def test_decode_failure(tmp_path, capsys):
    path = _write(tmp_path / "in.json", {"keys": {"n": 2, "k": 2}, "1": {"base": "10", "value": "1"}, "2": {"base": "2", "value": "12"}})
    assert main([path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("polysynth: Failed to parse value at index 2")


def test_insufficient_roots(tmp_path, capsys):
    path = _write(tmp_path / "in.json", {"keys": {"n": 3, "k": 3}, "1": {"base": "10", "value": "1"}})
    assert main([path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Not enough roots: found 1, need 3" in captured.err


def test_synthesis_overflow(tmp_path, capsys):
    big = {"base": "16", "value": "100000000"}  # 2^32
    path = _write(tmp_path / "in.json", {"keys": {"n": 2, "k": 2}, "1": big, "2": big})
    assert main([path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "overflow" in captured.err


def test_invalid_input(tmp_path, capsys):
    path = tmp_path / "in.json"
    path.write_text("{")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_output_json_and_plot(tmp_path, capsys):
    out_json = tmp_path / "out" / "result.json"
    out_png = tmp_path / "out" / "plot.png"
    assert main([str(SAMPLE), "--output-json", str(out_json), "--plot", str(out_png)]) == 0
    with open(out_json) as f:
        assert json.load(f)["coefficients"] == [1, -23, 160, -336]
    assert out_png.exists()


def test_config_module(tmp_path, capsys):
    out_json = tmp_path / "configured.json"
    config = tmp_path / "run_config.py"
    config.write_text(
        "from polysynth.config import RunParameters\n"
        f"run_params = RunParameters(input_path={str(SAMPLE)!r}, output_json={str(out_json)!r})\n"
    )
    assert main(["--config", str(config)]) == 0
    assert capsys.readouterr().out == EXPECTED_SAMPLE_REPORT
    assert out_json.exists()


def test_config_without_run_params(tmp_path, capsys):
    config = tmp_path / "empty_config.py"
    config.write_text("x = 1\n")
    assert main(["--config", str(config)]) == 1
    assert "run_params" in capsys.readouterr().err


def test_load_run_parameters_defaults():
    assert load_run_parameters(None) == RunParameters()


def test_load_run_parameters_wrong_type(tmp_path):
    config = tmp_path / "bad_config.py"
    config.write_text("run_params = {'input_path': '-'}\n")
    with pytest.raises(TypeError):
        load_run_parameters(config)


def test_load_run_parameters_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_run_parameters(tmp_path / "nope.py")


def test_unwritable_output_json(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    assert main([str(SAMPLE), "--output-json", str(blocker / "out.json")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("polysynth: ")


def test_unwritable_plot_path(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    assert main([str(SAMPLE), "--plot", str(blocker / "plot.png")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("polysynth: ")


def test_config_with_syntax_error(tmp_path, capsys):
    config = tmp_path / "broken_config.py"
    config.write_text("run_params = (\n")
    assert main(["--config", str(config)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Cannot load config module" in captured.err


def test_config_raising_at_import(tmp_path):
    config = tmp_path / "raising_config.py"
    config.write_text("run_params = undefined_name\n")
    with pytest.raises(ImportError) as excinfo:
        load_run_parameters(config)
    assert isinstance(excinfo.value.__cause__, NameError)
