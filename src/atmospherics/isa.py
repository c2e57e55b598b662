"""
International Standard Atmosphere model, according to ISO 2533:1975.

All functions are pure: they take quantities and return new quantities.
Temperature decreases linearly with geopotential altitude and pressure follows
the barometric formula for a constant lapse rate, which makes the model valid
in the troposphere only.
"""

from __future__ import annotations

__all__ = [
    "DENSITY_AT_SEA_LEVEL",
    "HUMIDITY_AT_SEA_LEVEL",
    "MOLAR_MASS_OF_DRY_AIR",
    "MOLAR_MASS_OF_WATER_VAPOR",
    "PRESSURE_AT_SEA_LEVEL",
    "SPECIFIC_GAS_CONSTANT_OF_DRY_AIR",
    "SPECIFIC_GAS_CONSTANT_OF_HUMID_AIR",
    "TEMPERATURE_AT_SEA_LEVEL",
    "TEMPERATURE_LAPSE",
    "barometric_formula",
    "density_at_altitude",
    "density_of_humid_air",
    "pressure_at_altitude",
    "relative_humidity",
    "saturated_vapor_pressure",
    "temperature_at_altitude",
    "vapor_pressure",
]

import logging
from decimal import Decimal

from . import earth, numeric
from .constants import MOLAR_GAS_CONSTANT
from .dimensions import (
    Density,
    Length,
    MolarMass,
    Pressure,
    SpecificEnergy,
    SpecificHeatCapacity,
    Temperature,
)
from .exceptions import InvalidArgumentError
from .operators import derive, integrate
from .thermodynamics import RelativeHumidity, TemperatureLapse
from .validators import ensure_quantity

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------
#
# Nominal values of the International Standard Atmosphere at sea level
# (ISO 2533:1975).
#
# ------------------------------------------------------------------------------

PRESSURE_AT_SEA_LEVEL = Pressure.from_pascals(101325)
TEMPERATURE_AT_SEA_LEVEL = Temperature.from_celsius(15)
DENSITY_AT_SEA_LEVEL = Density.from_kilograms_per_cubic_meter(1.225)
HUMIDITY_AT_SEA_LEVEL = RelativeHumidity.from_percent(0)
TEMPERATURE_LAPSE = TemperatureLapse.from_kelvins_per_meter(0.0065)
MOLAR_MASS_OF_DRY_AIR = MolarMass.from_kilograms_per_mole(0.02896968)
MOLAR_MASS_OF_WATER_VAPOR = MolarMass.from_grams_per_mole(18.01528)
SPECIFIC_GAS_CONSTANT_OF_DRY_AIR = (
    SpecificHeatCapacity.from_joules_per_kelvin_per_kilogram(287.0528)
)
SPECIFIC_GAS_CONSTANT_OF_HUMID_AIR = (
    SpecificHeatCapacity.from_joules_per_kelvin_per_kilogram(461.495)
)

# Magnus formula coefficients (Buck, 1996)
_MAGNUS_PRESSURE = Decimal("611.21")  # [Pa]
_MAGNUS_B = Decimal("18.678")
_MAGNUS_C = Decimal("257.14")  # [°C]
_MAGNUS_D = Decimal("234.5")  # [°C]


# ------------------------------------------------------------------------------
#
# Altitude-dependent properties.
#
# ------------------------------------------------------------------------------


def temperature_at_altitude(geometric_altitude: Length) -> Temperature:
    """
    Computes the temperature at a given altitude. Temperature decreases
    linearly with geopotential altitude.

    Parameters
    ----------
    geometric_altitude : Length
        Geometric altitude.

    Returns
    -------
    Temperature

    Raises
    ------
    InvalidArgumentError
        If ``geometric_altitude`` is ``None``.

    DimensionError
        If ``geometric_altitude`` is not a :class:`.Length`.
    """
    ensure_quantity(geometric_altitude, Length, "geometric_altitude")
    geopotential_altitude = earth.geopotential_altitude(geometric_altitude)
    temperature_drop = integrate(
        TEMPERATURE_LAPSE, geopotential_altitude, into=Temperature
    )
    return TEMPERATURE_AT_SEA_LEVEL - temperature_drop


def pressure_at_altitude(geometric_altitude: Length) -> Pressure:
    """
    Computes the pressure at a given altitude using
    :func:`barometric_formula`.

    Parameters
    ----------
    geometric_altitude : Length
        Geometric altitude.

    Returns
    -------
    Pressure
    """
    ensure_quantity(geometric_altitude, Length, "geometric_altitude")
    return barometric_formula(geometric_altitude)


def _barometric_exponent() -> Decimal:
    # g·M / (R·L) mixes several dimensions into a dimensionless number and is
    # evaluated on canonical magnitudes
    g = earth.GRAVITY_AT_SEA_LEVEL.si
    m = MOLAR_MASS_OF_DRY_AIR.si
    r = MOLAR_GAS_CONSTANT.si
    lapse = TEMPERATURE_LAPSE.si

    with numeric.context():
        return (g * m) / (r * lapse)


def barometric_formula(geometric_altitude: Length) -> Pressure:
    r"""
    Computes the pressure at a given altitude with the barometric formula for
    a constant temperature lapse rate:

    .. math::

        p = p_0 \left( 1 - \frac{L h}{T_0} \right)^{\frac{g M}{R L}}

    Parameters
    ----------
    geometric_altitude : Length
        Geometric altitude :math:`h`.

    Returns
    -------
    Pressure

    Raises
    ------
    InvalidArgumentError
        If ``geometric_altitude`` is ``None``, or if it is so high that the
        base of the power is not positive (above approximately 44.3 km).

    DimensionError
        If ``geometric_altitude`` is not a :class:`.Length`.
    """
    h = ensure_quantity(geometric_altitude, Length, "geometric_altitude")

    # Temperature / Temperature is a dimensionless ratio
    relative_drop = (
        integrate(TEMPERATURE_LAPSE, h, into=Temperature) / TEMPERATURE_AT_SEA_LEVEL
    )

    with numeric.context():
        base = 1 - relative_drop

    if base <= 0:
        raise InvalidArgumentError(
            f"barometric formula is undefined at altitude {h} "
            f"(1 - L·h/T0 = {base})"
        )

    exponent = _barometric_exponent()
    logger.debug("barometric_formula: h=%s, base=%s, exponent=%s", h, base, exponent)

    return PRESSURE_AT_SEA_LEVEL * numeric.power(base, exponent)


def density_at_altitude(geometric_altitude: Length) -> Density:
    r"""
    Computes the density of dry air at a given altitude using the ideal gas
    law:

    .. math::

        \rho = \frac{p}{R_d T}

    Parameters
    ----------
    geometric_altitude : Length
        Geometric altitude.

    Returns
    -------
    Density
    """
    ensure_quantity(geometric_altitude, Length, "geometric_altitude")
    pressure = pressure_at_altitude(geometric_altitude)
    temperature = temperature_at_altitude(geometric_altitude)
    return _ideal_gas_density(pressure, SPECIFIC_GAS_CONSTANT_OF_DRY_AIR, temperature)


def _ideal_gas_density(
    pressure: Pressure,
    specific_gas_constant: SpecificHeatCapacity,
    temperature: Temperature,
) -> Density:
    specific_energy = integrate(
        specific_gas_constant, temperature, into=SpecificEnergy
    )
    return derive(pressure, specific_energy, into=Density)


# ------------------------------------------------------------------------------
#
# Humidity.
#
# ------------------------------------------------------------------------------


def saturated_vapor_pressure(temperature: Temperature) -> Pressure:
    r"""
    Computes the saturated vapor pressure of water over a flat surface with
    the Magnus-type approximation of :cite:`Buck1996`:

    .. math::

        e_s = 611.21 \, \exp \left(
            \left( 18.678 - \frac{t}{234.5} \right)
            \left( \frac{t}{257.14 + t} \right)
        \right)

    where :math:`t` is the temperature in degrees Celsius.

    Parameters
    ----------
    temperature : Temperature
        Air temperature.

    Returns
    -------
    Pressure

    Raises
    ------
    InvalidArgumentError
        If ``temperature`` is ``None``.

    DimensionError
        If ``temperature`` is not a :class:`.Temperature`.
    """
    ensure_quantity(temperature, Temperature, "temperature")
    t = temperature.to_celsius()

    with numeric.context():
        argument = (_MAGNUS_B - t / _MAGNUS_D) * (t / (_MAGNUS_C + t))
        return Pressure.from_pascals(_MAGNUS_PRESSURE * numeric.exp(argument))


def vapor_pressure(
    temperature: Temperature, humidity: RelativeHumidity
) -> Pressure:
    """
    Computes the partial pressure of water vapor in air of a given temperature
    and relative humidity.

    Parameters
    ----------
    temperature : Temperature
        Air temperature.

    humidity : RelativeHumidity
        Relative humidity.

    Returns
    -------
    Pressure
    """
    ensure_quantity(temperature, Temperature, "temperature")
    ensure_quantity(humidity, RelativeHumidity, "humidity")
    return saturated_vapor_pressure(temperature) * humidity.to_ratio()


def relative_humidity(
    vapor_pressure: Pressure, temperature: Temperature
) -> RelativeHumidity:
    """
    Computes the relative humidity of air of a given temperature holding water
    vapor at a given partial pressure. This is the inverse of
    :func:`vapor_pressure`.

    Parameters
    ----------
    vapor_pressure : Pressure
        Partial pressure of water vapor.

    temperature : Temperature
        Air temperature.

    Returns
    -------
    RelativeHumidity
    """
    ensure_quantity(vapor_pressure, Pressure, "vapor_pressure")
    ensure_quantity(temperature, Temperature, "temperature")
    return RelativeHumidity.from_ratio(
        vapor_pressure / saturated_vapor_pressure(temperature)
    )


def density_of_humid_air(
    geometric_altitude: Length, humidity: RelativeHumidity
) -> Density:
    r"""
    Computes the density of humid air at a given altitude as the sum of the
    partial densities of dry air and water vapor:

    .. math::

        \rho = \frac{p - e}{R_d T} + \frac{e}{R_v T}

    where :math:`e` is the :func:`vapor_pressure` at the local temperature.

    Parameters
    ----------
    geometric_altitude : Length
        Geometric altitude.

    humidity : RelativeHumidity
        Relative humidity.

    Returns
    -------
    Density
    """
    ensure_quantity(geometric_altitude, Length, "geometric_altitude")
    ensure_quantity(humidity, RelativeHumidity, "humidity")

    pressure = pressure_at_altitude(geometric_altitude)
    temperature = temperature_at_altitude(geometric_altitude)
    e = vapor_pressure(temperature, humidity)

    dry = _ideal_gas_density(
        pressure - e, SPECIFIC_GAS_CONSTANT_OF_DRY_AIR, temperature
    )
    vapor = _ideal_gas_density(e, SPECIFIC_GAS_CONSTANT_OF_HUMID_AIR, temperature)
    return dry + vapor
