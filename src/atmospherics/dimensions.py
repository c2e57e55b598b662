"""
Base physical dimensions consumed by the atmosphere model.

Each dimension lists the units it can be expressed in; conversion methods
(*e.g.* :meth:`Temperature.from_celsius`, :meth:`Pressure.to_hectopascals`)
are generated from these declarations.
"""

from .operators import integral
from .quantity import Quantity, Unit

__all__ = [
    "Acceleration",
    "Density",
    "Length",
    "MolarHeatCapacity",
    "MolarMass",
    "Pressure",
    "SpecificEnergy",
    "SpecificHeatCapacity",
    "Temperature",
]


class Length(Quantity):
    """A length, in metres."""

    si_units = "meter"
    units = (
        Unit("meters", "m", "meter"),
        Unit("kilometers", "km", "kilometer", factor=1000),
        Unit("feet", "ft", "foot", factor=0.3048),
    )


class Temperature(Quantity):
    """
    A thermodynamic temperature, in kelvins. Temperatures are also used to
    represent temperature differences; the offset of Celsius and Fahrenheit
    scales only makes sense for absolute temperatures.
    """

    si_units = "kelvin"
    units = (
        Unit("kelvins", "K", "kelvin"),
        Unit("celsius", "°C", "degree_Celsius", offset=273.15),
        Unit(
            "fahrenheit",
            "°F",
            "degree_Fahrenheit",
            offset=459.67,
            factor=5,
            divisor=9,
        ),
        Unit("rankine", "°R", "degree_Rankine", factor=5, divisor=9),
    )


class Pressure(Quantity):
    """A pressure, in pascals."""

    si_units = "pascal"
    units = (
        Unit("pascals", "Pa", "pascal"),
        Unit("hectopascals", "hPa", "hectopascal", factor=100),
        Unit("kilopascals", "kPa", "kilopascal", factor=1000),
        Unit("millibars", "mbar", "millibar", factor=100),
        Unit("bars", "bar", "bar", factor=100000),
        Unit("atmospheres", "atm", "atmosphere", factor=101325),
    )


class SpecificEnergy(Quantity):
    """An energy per unit mass, in joules per kilogram."""

    si_units = "joule / kilogram"
    units = (Unit("joules_per_kilogram", "J/kg", "joule / kilogram"),)


@integral(SpecificEnergy, into=Pressure)
class Density(Quantity):
    """
    A mass density, in kilograms per cubic metre. The product of a density and
    a specific energy is a pressure (energy per unit volume).
    """

    si_units = "kilogram / meter ** 3"
    units = (
        Unit("kilograms_per_cubic_meter", "kg/m³", "kilogram / meter ** 3"),
        Unit(
            "grams_per_cubic_centimeter",
            "g/cm³",
            "gram / centimeter ** 3",
            factor=1000,
        ),
    )


class MolarMass(Quantity):
    """A molar mass, in kilograms per mole."""

    si_units = "kilogram / mole"
    units = (
        Unit("kilograms_per_mole", "kg/mol", "kilogram / mole"),
        Unit("grams_per_mole", "g/mol", "gram / mole", divisor=1000),
    )


@integral(Temperature, into=SpecificEnergy)
class SpecificHeatCapacity(Quantity):
    """
    A specific heat capacity (or specific gas constant), in joules per kelvin
    per kilogram. The product of a specific heat capacity and a temperature is
    a specific energy.
    """

    si_units = "joule / kelvin / kilogram"
    units = (
        Unit(
            "joules_per_kelvin_per_kilogram",
            "J/(K·kg)",
            "joule / kelvin / kilogram",
        ),
        Unit(
            "kilojoules_per_kelvin_per_kilogram",
            "kJ/(K·kg)",
            "kilojoule / kelvin / kilogram",
            factor=1000,
        ),
    )


class MolarHeatCapacity(Quantity):
    """A molar heat capacity (or molar gas constant), in J/(mol·K)."""

    si_units = "joule / mole / kelvin"
    units = (
        Unit("joules_per_mole_per_kelvin", "J/(mol·K)", "joule / mole / kelvin"),
    )


class Acceleration(Quantity):
    """An acceleration, in metres per second squared."""

    si_units = "meter / second ** 2"
    units = (
        Unit("meters_per_second_squared", "m/s²", "meter / second ** 2"),
        Unit("standard_gravities", "g₀", "standard_gravity", factor=9.80665),
    )
