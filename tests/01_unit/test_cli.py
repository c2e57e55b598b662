from typer.testing import CliRunner

from atmospherics.cli import app

runner = CliRunner()


def test_show():
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0, result.output
    assert "atmospherics" in result.output
    assert "ATMOSPHERICS_PRECISION: " in result.output
    assert "PRESSURE_AT_SEA_LEVEL: 101325 Pa" in result.output


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "atmospherics version" in result.output


def test_profile():
    result = runner.invoke(app, ["profile", "0", "11000"])
    assert result.exit_code == 0, result.output
    assert "288.15" in result.output
    assert "101325.0" in result.output
    assert "1.22500" in result.output


def test_profile_units():
    result = runner.invoke(app, ["profile", "--units", "kilometers", "0", "1"])
    assert result.exit_code == 0, result.output
    assert "Altitude [km]" in result.output

    result = runner.invoke(app, ["profile", "-u", "furlongs", "0"])
    assert result.exit_code == 2


def test_profile_humidity():
    dry = runner.invoke(app, ["profile", "0"])
    humid = runner.invoke(app, ["profile", "--humidity", "100", "0"])
    assert humid.exit_code == 0, humid.output
    assert "1.22500" in dry.output
    assert "1.22500" not in humid.output


def test_profile_invalid_altitude():
    # The barometric formula is undefined this high
    result = runner.invoke(app, ["profile", "50000"])
    assert result.exit_code == 2

    result = runner.invoke(app, ["profile"])
    assert result.exit_code == 2
