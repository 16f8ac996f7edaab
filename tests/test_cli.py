# tests/test_cli.py

import pytest

from constpoly import SeriesConfig
from constpoly.approx import config
from constpoly.cli import main


def test_approx_sqrt(capsys):
    assert main(["approx", "sqrt", "4.0"]) == 0
    assert capsys.readouterr().out.strip() == "sqrt(4.0) = 2.0"


def test_approx_several_points_with_term_override(capsys):
    assert main(["approx", "sin", "0.5", "0.25", "--terms", "1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["sin(0.5) = 0.5", "sin(0.25) = 0.25"]


def test_approx_sqrt_rejects_terms():
    with pytest.raises(SystemExit):
        main(["approx", "sqrt", "4.0", "--terms", "3"])


def test_eval_polynomial(capsys):
    rc = main(["eval", "--term", "1.5:sin,x", "--term=-2:cos,pow(2)", "0.0", "3.0"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "-18.0"


def test_eval_show(capsys):
    assert main(["eval", "--show", "--term", "2:x^2", "3.0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["p = 2.0*x0^2", "18.0"]


@pytest.mark.parametrize(
    "argv",
    [
        ["eval", "--term", "1:sin", "--term", "1:sin,cos", "0.5"],
        ["eval", "--term", "1:sec", "0.5"],
        ["eval", "--term", "1:sin,cos", "0.5"],
        ["eval", "--term", "sin", "0.5"],
    ],
)
def test_eval_errors_exit_with_status_2(argv, capsys):
    assert main(argv) == 2
    assert capsys.readouterr().err.startswith("Error: ")


def test_config_prints_knobs(monkeypatch, capsys):
    monkeypatch.setattr(config, "ACTIVE", SeriesConfig(exp_terms=25))
    assert main(["config"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "EXP_TAYLOR_TERMS=25" in out
    assert "SIN_TAYLOR_TERMS=10" in out
    assert len(out) == 7


def test_table_output(capsys):
    argv = ["table", "--term", "1:x", "--start", "0", "--stop", "1", "--count", "3", "--name", "LIN"]
    assert main(argv) == 0
    assert capsys.readouterr().out.splitlines() == [
        "# start=0.0 step=0.5",
        "LIN = (",
        "    0.0,",
        "    0.5,",
        "    1.0,",
        ")",
    ]


def test_table_bad_count(capsys):
    assert main(["table", "--term", "1:x", "--start", "0", "--stop", "1", "--count", "1"]) == 1
    assert "--count" in capsys.readouterr().err


def test_verbose_flag(capsys):
    assert main(["-v", "approx", "cos", "0.0"]) == 0
    assert "cos(0.0) = 1.0" in capsys.readouterr().out
