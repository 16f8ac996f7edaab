# tests/test_config.py

import math

import pytest

from constpoly import SeriesConfig, SeriesConfigError, active_config
from constpoly.approx import (
    arctan_approx,
    config,
    cos_approx,
    exp_approx,
    ln_approx,
    sin_approx,
    sinh_approx,
)


def test_defaults():
    c = SeriesConfig()
    assert c.sin_terms == 10
    assert c.cos_terms == 10
    assert c.exp_terms == 20
    assert c.atan_terms == 50
    assert c.sinh_terms == 30
    assert c.cosh_terms == 30
    assert c.ln_terms == 20


def test_from_env_reads_knobs():
    c = SeriesConfig.from_env({"SIN_TAYLOR_TERMS": "6", "LN_SERIES_TERMS": " 12 "})
    assert c.sin_terms == 6
    assert c.ln_terms == 12
    assert c.cos_terms == 10


def test_from_env_ignores_blank_values():
    assert SeriesConfig.from_env({"EXP_TAYLOR_TERMS": "  "}) == SeriesConfig()
    assert SeriesConfig.from_env({}) == SeriesConfig()


@pytest.mark.parametrize("raw", ["0", "-3", "ten", "2.5"])
def test_from_env_rejects_bad_values(raw):
    with pytest.raises(SeriesConfigError) as ei:
        SeriesConfig.from_env({"COSH_TAYLOR_TERMS": raw})
    assert "COSH_TAYLOR_TERMS" in str(ei.value)


def test_constructor_validates():
    with pytest.raises(SeriesConfigError):
        SeriesConfig(sin_terms=0)
    with pytest.raises(SeriesConfigError):
        SeriesConfig(exp_terms=True)
    with pytest.raises(ValueError):
        SeriesConfig(atan_terms="5")


def test_as_env_round_trips():
    c = SeriesConfig(sinh_terms=7)
    env = {k: str(v) for k, v in c.as_env().items()}
    assert env["SINH_TAYLOR_TERMS"] == "7"
    assert SeriesConfig.from_env(env) == c


def test_active_config_is_module_config():
    assert active_config() is config.ACTIVE


def test_per_call_override():
    assert sin_approx(1.0, terms=1) == 1.0
    assert cos_approx(0.5, terms=1) == 1.0
    assert exp_approx(0.3, terms=2) == 1.0 + 0.3
    with pytest.raises(SeriesConfigError):
        sin_approx(1.0, terms=0)


def test_more_terms_is_more_accurate():
    x = 1.2
    errs = [abs(sin_approx(x, terms=n) - math.sin(x)) for n in (2, 4, 6)]
    assert errs[0] > errs[1] > errs[2]
    errs = [abs(ln_approx(3.0, terms=n) - math.log(3.0)) for n in (1, 3, 6)]
    assert errs[0] > errs[1] > errs[2]


def test_swapped_active_config(monkeypatch):
    monkeypatch.setattr(config, "ACTIVE", SeriesConfig(sin_terms=1, sinh_terms=1, atan_terms=1))
    assert sin_approx(1.0) == 1.0
    assert sinh_approx(0.5) == 0.5
    assert arctan_approx(0.25) == 0.25


def test_environment_is_read_by_from_env(monkeypatch):
    monkeypatch.setenv("ATAN_TAYLOR_TERMS", "17")
    monkeypatch.delenv("SIN_TAYLOR_TERMS", raising=False)
    c = SeriesConfig.from_env()
    assert c.atan_terms == 17
    assert c.sin_terms == 10
