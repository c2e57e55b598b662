from decimal import Decimal

import pytest

from atmospherics.dimensions import Length, Temperature
from atmospherics.exceptions import DimensionError, InvalidArgumentError
from atmospherics.thermodynamics import RelativeHumidity, TemperatureLapse
from atmospherics.units import unit_registry as ureg


@pytest.mark.parametrize(
    "percent, ratio",
    [
        (0, Decimal("0")),
        (12.5, Decimal("0.125")),
        (37.5, Decimal("0.375")),
        (50, Decimal("0.5")),
        (100, Decimal("1")),
    ],
)
def test_relative_humidity(percent, ratio):
    # Percent and ratio scales are exact inverses
    humidity = RelativeHumidity.from_percent(percent)
    assert humidity.to_ratio() == ratio
    assert humidity.to_percent() == Decimal(str(percent))
    assert humidity == RelativeHumidity.from_ratio(ratio)
    assert RelativeHumidity.from_ratio(ratio).to_percent(float) == float(percent)


def test_relative_humidity_conversions():
    assert RelativeHumidity.from_ratio(0.25).to_percent(float) == 25.0
    assert RelativeHumidity.from_percent(50).to_ratio(float) == 0.5
    assert str(RelativeHumidity.from_percent(50)).endswith("%")

    with pytest.raises(InvalidArgumentError):
        RelativeHumidity.from_percent(None)

    with pytest.raises(InvalidArgumentError):
        RelativeHumidity.from_ratio(None)


def test_relative_humidity_pint():
    humidity = RelativeHumidity.from_pint(ureg.Quantity(40, "percent"))
    assert humidity.to_ratio(float) == pytest.approx(0.4)
    assert RelativeHumidity.from_percent(40).to_pint().m_as("percent") == pytest.approx(
        40.0
    )


def test_temperature_lapse():
    lapse = TemperatureLapse.from_kelvins_per_meter(0.0065)
    assert lapse.to_kelvins_per_meter() == Decimal("0.0065")
    assert lapse.to_kelvins_per_kilometer() == Decimal("6.5")
    assert TemperatureLapse.from_kelvins_per_kilometer(6.5) == lapse
    assert str(lapse) == "0.0065 K/m"

    with pytest.raises(InvalidArgumentError):
        TemperatureLapse.from_kelvins_per_meter(None)


def test_temperature_lapse_times_length():
    lapse = TemperatureLapse.from_kelvins_per_kilometer(6.5)
    delta = lapse * Length.from_kilometers(2)

    # The product is a temperature difference
    assert isinstance(delta, Temperature)
    assert delta.to_kelvins() == 13

    # Negative lengths give negative differences
    assert (lapse * Length.from_meters(-1000)).to_kelvins() == Decimal("-6.5")


def test_temperature_lapse_mismatch():
    lapse = TemperatureLapse.from_kelvins_per_meter(0.0065)

    with pytest.raises(DimensionError):
        lapse + Temperature.from_kelvins(1)

    with pytest.raises(DimensionError):
        lapse * Temperature.from_kelvins(1)

    with pytest.raises(DimensionError):
        TemperatureLapse.from_pint(ureg.Quantity(1, "K"))
