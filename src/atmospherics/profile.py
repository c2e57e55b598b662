"""
Atmospheric vertical profile data set generator.
"""

from __future__ import annotations

import logging
from datetime import datetime

import numpy as np
import pint
import pinttr
import xarray as xr

from atmospherics import __version__

from . import isa
from .dimensions import Length
from .exceptions import DimensionError, InvalidArgumentError
from .thermodynamics import RelativeHumidity
from .units import unit_registry as ureg
from .validators import ensure_quantity

logger = logging.getLogger(__name__)


def make_profile(
    levels=ureg.Quantity(np.linspace(0.0, 1.1e4, 12), "m"),
    humidity: RelativeHumidity | None = None,
) -> xr.Dataset:
    """
    Makes an atmosphere vertical profile based on the International Standard
    Atmosphere model.

    Parameters
    ----------
    levels : quantity or array-like, default: np.linspace(0, 1.1e4, 12) * ureg.m
        Geometric altitudes at which the profile is evaluated. Unitless values
        are interpreted as metres. Values must be non-negative.

    humidity : RelativeHumidity, optional
        If set, the density is that of humid air with this relative humidity,
        and the water vapor partial pressure is added to the data set.

    Returns
    -------
    Dataset
        Data set holding the values of temperature, pressure and mass density
        at each altitude.

    Raises
    ------
    InvalidArgumentError
        If ``levels`` is ``None`` or holds negative altitudes.

    DimensionError
        If ``levels`` has units incompatible with length, or if ``humidity``
        is not a :class:`.RelativeHumidity`.
    """
    if levels is None:
        raise InvalidArgumentError("'levels' must not be None")

    if humidity is not None:
        ensure_quantity(humidity, RelativeHumidity, "humidity")

    if not isinstance(levels, pint.Quantity):
        levels = np.asarray(levels, dtype=float)

    levels = pinttr.util.ensure_units(levels, default_units=ureg.m)

    try:
        z = np.atleast_1d(levels.m_as(ureg.m)).astype(float)
    except pint.DimensionalityError as e:
        raise DimensionError(f"levels must be lengths, got '{levels.units}'") from e

    if np.any(z < 0.0):
        raise InvalidArgumentError("level altitudes must be non-negative")

    logger.debug("Computing ISA profile on %d levels", z.size)

    t, p, rho, e = [], [], [], []

    for value in z:
        altitude = Length.from_meters(value)
        temperature = isa.temperature_at_altitude(altitude)
        t.append(temperature.to_kelvins(float))
        p.append(isa.pressure_at_altitude(altitude).to_pascals(float))

        if humidity is None:
            density = isa.density_at_altitude(altitude)
        else:
            density = isa.density_of_humid_air(altitude, humidity)
            e.append(isa.vapor_pressure(temperature, humidity).to_pascals(float))

        rho.append(density.to_kilograms_per_cubic_meter(float))

    data_vars = {
        "t": (
            "z",
            np.array(t),
            dict(standard_name="air_temperature", long_name="temperature", units="K"),
        ),
        "p": (
            "z",
            np.array(p),
            dict(standard_name="air_pressure", long_name="pressure", units="Pa"),
        ),
        "rho": (
            "z",
            np.array(rho),
            dict(
                standard_name="air_density",
                long_name="air density",
                units="kg/m^3",
            ),
        ),
    }

    if humidity is not None:
        data_vars["e"] = (
            "z",
            np.array(e),
            dict(
                standard_name="water_vapor_partial_pressure_in_air",
                long_name="water vapor partial pressure",
                units="Pa",
            ),
        )

    return xr.Dataset(
        data_vars=data_vars,
        coords={
            "z": (
                "z",
                z,
                dict(standard_name="altitude", long_name="altitude", units="m"),
            )
        },
        attrs=dict(
            convention="CF-1.8",
            title="International Standard Atmosphere",
            history=f"{datetime.now().strftime('%Y-%m-%d %H:%M:%S')} - "
            f"data creation - atmospherics.profile.make_profile",
            source=f"atmospherics, version {__version__}",
            references="ISO 2533:1975, Standard Atmosphere",
        ),
    )