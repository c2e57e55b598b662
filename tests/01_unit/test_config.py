import decimal

import environ
import pytest
from environ.exceptions import ConfigError

from atmospherics import numeric
from atmospherics._config import AtmosphericsConfig, config


def test_defaults():
    cfg = environ.to_config(AtmosphericsConfig, environ={})
    assert cfg.precision == 28
    assert cfg.rounding == decimal.ROUND_HALF_EVEN


def test_from_environ():
    cfg = environ.to_config(
        AtmosphericsConfig,
        environ={
            "ATMOSPHERICS_PRECISION": "50",
            "ATMOSPHERICS_ROUNDING": "half_up",
        },
    )
    assert cfg.precision == 50
    assert cfg.rounding == decimal.ROUND_HALF_UP

    # The prefix is optional in rounding mode names
    cfg = environ.to_config(
        AtmosphericsConfig, environ={"ATMOSPHERICS_ROUNDING": "ROUND_FLOOR"}
    )
    assert cfg.rounding == decimal.ROUND_FLOOR


@pytest.mark.parametrize(
    "environment",
    [
        {"ATMOSPHERICS_PRECISION": "0"},
        {"ATMOSPHERICS_PRECISION": "-3"},
        {"ATMOSPHERICS_PRECISION": "many"},
        {"ATMOSPHERICS_ROUNDING": "sideways"},
    ],
)
def test_from_environ_invalid(environment):
    with pytest.raises(ConfigError):
        environ.to_config(AtmosphericsConfig, environ=environment)


def test_setattr_validation(monkeypatch):
    # Assignments are converted and validated
    monkeypatch.setattr(config, "precision", "12")
    assert config.precision == 12

    monkeypatch.setattr(config, "rounding", "down")
    assert config.rounding == decimal.ROUND_DOWN

    with pytest.raises(ConfigError):
        config.precision = 0

    with pytest.raises(ConfigError):
        config.rounding = "ROUND_NOWHERE"


def test_config_drives_numeric_context(precision):
    precision(5)

    with numeric.context() as ctx:
        assert ctx.prec == 5
        assert decimal.Decimal(2) / decimal.Decimal(3) == decimal.Decimal("0.66667")
