from decimal import Decimal

import attrs
import pytest

from atmospherics.dimensions import Length, Pressure, Temperature
from atmospherics.exceptions import DimensionError, InvalidArgumentError
from atmospherics.quantity import Quantity, Unit
from atmospherics.units import unit_registry as ureg


# ------------------------------------------------------------------------------
#                                   Units
# ------------------------------------------------------------------------------


def test_unit_conversion():
    celsius = Unit("celsius", "°C", "degC", offset=273.15)
    assert celsius.to_si(Decimal(15)) == Decimal("288.15")
    assert celsius.from_si(Decimal("288.15")) == 15
    assert not celsius.is_canonical

    percent = Unit("percent", "%", "percent", divisor=100)
    assert percent.to_si(Decimal("37.5")) == Decimal("0.375")
    assert percent.from_si(Decimal("0.375")) == Decimal("37.5")

    assert Unit("meters", "m", "meter").is_canonical


def test_unit_invalid():
    with pytest.raises(InvalidArgumentError):
        Unit("nothing", "", "dimensionless", divisor=0)

    with pytest.raises(InvalidArgumentError):
        Unit("nothing", "", "dimensionless", factor=0)

    with pytest.raises(TypeError):
        Unit(1, "", "dimensionless")


# ------------------------------------------------------------------------------
#                             Dimension declaration
# ------------------------------------------------------------------------------


def test_generated_methods():
    for name in Temperature.units_by_name():
        assert callable(getattr(Temperature, f"from_{name}"))
        assert callable(getattr(Temperature.from_kelvins(0), f"to_{name}"))

    assert Temperature.from_fahrenheit.__name__ == "from_fahrenheit"
    assert "fahrenheit" in Temperature.from_fahrenheit.__doc__
    assert "°F" in Temperature.to_fahrenheit.__doc__


def test_declaration_requires_single_canonical_unit():
    with pytest.raises(DimensionError):

        class NoCanonical(Quantity):
            si_units = "meter"
            units = (Unit("kilometers", "km", "kilometer", factor=1000),)

    with pytest.raises(DimensionError):

        class TwoCanonical(Quantity):
            si_units = "meter"
            units = (Unit("meters", "m", "meter"), Unit("metres", "m", "metre"))


def test_declaration_rejects_incompatible_units():
    with pytest.raises(DimensionError):

        class Mixed(Quantity):
            si_units = "meter"
            units = (Unit("meters", "m", "meter"), Unit("seconds", "s", "second"))


def test_declaration_rejects_duplicate_units():
    with pytest.raises(DimensionError):

        class Duplicate(Quantity):
            si_units = "meter"
            units = (
                Unit("meters", "m", "meter"),
                Unit("meters", "km", "kilometer", factor=1000),
            )


def test_base_class_is_not_a_dimension():
    with pytest.raises(DimensionError):
        Quantity._from_si(1)


def test_constructor_is_private():
    # Quantities are created from named units only
    with pytest.raises(TypeError):
        Length(5)

    with pytest.raises(TypeError):
        Length(si=5)

    assert Length._from_si(5) == Length.from_meters(5)


# ------------------------------------------------------------------------------
#                              Construction
# ------------------------------------------------------------------------------


def test_from_unit():
    assert Temperature.from_celsius(15).si == Decimal("288.15")
    assert Temperature.from_unit(15, "celsius") == Temperature.from_celsius(15)
    assert Pressure.from_unit(1, "bars").to_pascals(float) == 100000.0
    assert Pressure.from_hectopascals(1013.25).to_unit("atmospheres") == 1

    with pytest.raises(InvalidArgumentError):
        Pressure.from_unit(1, "furlongs")

    with pytest.raises(InvalidArgumentError):
        Pressure.from_pascals(1).to_unit("furlongs")


@pytest.mark.parametrize(
    "constructor",
    [
        Temperature.from_celsius,
        Temperature.from_kelvins,
        Length.from_meters,
        lambda value: Pressure.from_unit(value, "pascals"),
    ],
)
def test_from_none(constructor):
    with pytest.raises(InvalidArgumentError):
        constructor(None)


def test_fahrenheit():
    assert Temperature.from_fahrenheit(32).to_celsius(float) == 0.0
    assert Temperature.from_fahrenheit(212).to_celsius(float) == 100.0
    assert Temperature.from_celsius(-40).to_fahrenheit(float) == pytest.approx(-40.0)


def test_immutable():
    temperature = Temperature.from_kelvins(288.15)

    with pytest.raises(attrs.exceptions.FrozenInstanceError):
        temperature._si = Decimal(0)

    # Arithmetic returns new values
    warmer = temperature + Temperature.from_kelvins(1)
    assert temperature.si == Decimal("288.15")
    assert warmer is not temperature


# ------------------------------------------------------------------------------
#                                Arithmetic
# ------------------------------------------------------------------------------


def test_add_subtract():
    a = Length.from_kilometers(1)
    b = Length.from_meters(250)
    assert (a + b).to_meters() == 1250
    assert (a - b).to_meters() == 750
    assert isinstance(a + b, Length)


def test_sum():
    lengths = [Length.from_meters(1), Length.from_kilometers(1), Length.from_feet(10)]
    total = sum(lengths)
    assert isinstance(total, Length)
    assert total.to_meters() == Decimal("1004.048")
    assert sum(lengths, Length.from_meters(0)) == total
    assert sum([], Length.from_meters(0)) == Length.from_meters(0)

    # Only integer zero starts a sum
    with pytest.raises(DimensionError):
        1 + Length.from_meters(1)


@pytest.mark.parametrize(
    "other",
    [Temperature.from_kelvins(1), 1, 1.0, Decimal(1)],
    ids=["temperature", "int", "float", "decimal"],
)
def test_add_subtract_mismatch(other):
    length = Length.from_meters(1)

    with pytest.raises(DimensionError):
        length + other

    with pytest.raises(DimensionError):
        length - other

    with pytest.raises(DimensionError):
        other + length

    with pytest.raises(DimensionError):
        other - length


def test_scalar_multiply_divide():
    length = Length.from_meters(2)
    assert (length * 3).to_meters() == 6
    assert (3 * length).to_meters() == 6
    assert (length * Decimal("0.5")).to_meters() == 1
    assert (length / 4).to_meters() == Decimal("0.5")
    assert isinstance(length * 3, Length)

    with pytest.raises(InvalidArgumentError):
        length * "3"


def test_same_dimension_ratio():
    ratio = Length.from_kilometers(1) / Length.from_meters(250)
    assert isinstance(ratio, Decimal)
    assert ratio == 4


def test_undeclared_products():
    with pytest.raises(DimensionError):
        Pressure.from_pascals(1) * Length.from_meters(1)

    with pytest.raises(DimensionError):
        Pressure.from_pascals(1) / Length.from_meters(1)

    with pytest.raises(DimensionError):
        1 / Length.from_meters(1)


def test_unary():
    temperature = Temperature.from_kelvins(-1.5)
    assert (-temperature).to_kelvins() == Decimal("1.5")
    assert abs(temperature).to_kelvins() == Decimal("1.5")
    assert +temperature is temperature


def test_compare():
    assert Length.from_meters(1000) == Length.from_kilometers(1)
    assert hash(Length.from_meters(1000)) == hash(Length.from_kilometers(1))
    assert Length.from_meters(999) < Length.from_kilometers(1)
    assert Length.from_meters(1000) <= Length.from_kilometers(1)
    assert Length.from_feet(10000) > Length.from_kilometers(3)
    assert Length.from_feet(10000) >= Length.from_meters(3048)

    # Quantities of different dimensions are never equal...
    assert Length.from_meters(1) != Temperature.from_kelvins(1)

    # ... and cannot be ordered
    with pytest.raises(DimensionError):
        Length.from_meters(1) < Temperature.from_kelvins(1)

    with pytest.raises(DimensionError):
        Length.from_meters(1) >= 0


def test_round():
    temperature = Temperature.from_kelvins(288.15)
    assert temperature.round(3).si == Decimal("288")
    assert isinstance(temperature.round(3), Temperature)


# ------------------------------------------------------------------------------
#                              Representation
# ------------------------------------------------------------------------------


def test_repr():
    temperature = Temperature.from_kelvins(288.15)
    assert str(temperature) == "288.15 K"
    assert repr(temperature) == "Temperature(288.15 K)"
    assert f"{Temperature.from_kelvins(288.16):.1f}" == "288.2 K"
    assert temperature.symbol == "K"


# ------------------------------------------------------------------------------
#                            Pint interoperability
# ------------------------------------------------------------------------------


def test_to_pint():
    quantity = Temperature.from_celsius(15).to_pint()
    assert quantity.units == ureg.kelvin
    assert quantity.magnitude == pytest.approx(288.15)


def test_from_pint():
    assert Temperature.from_pint(ureg.Quantity(15, "degC")).to_celsius(
        float
    ) == pytest.approx(15.0)
    assert Pressure.from_pint(ureg.Quantity(1013.25, "hPa")).to_pascals(
        float
    ) == pytest.approx(101325.0)

    with pytest.raises(DimensionError):
        Temperature.from_pint(ureg.Quantity(1.0, "m"))

    with pytest.raises(InvalidArgumentError):
        Temperature.from_pint(288.15)

    with pytest.raises(InvalidArgumentError):
        Temperature.from_pint(None)
