"""
Earth model helpers: gravity and the conversion between geometric altitude and
geopotential altitude, after :cite:`NASA1976USStandardAtmosphere`.
"""

__all__ = [
    "EARTH_RADIUS",
    "GRAVITY_AT_SEA_LEVEL",
    "geometric_altitude",
    "geopotential_altitude",
    "gravity_at_altitude",
]

from decimal import Decimal

from . import numeric
from .dimensions import Acceleration, Length
from .exceptions import InvalidArgumentError
from .validators import ensure_quantity

#: Standard acceleration of gravity at sea level.
GRAVITY_AT_SEA_LEVEL = Acceleration.from_meters_per_second_squared(9.80665)

#: Effective Earth radius used for geopotential altitude conversion.
EARTH_RADIUS = Length.from_meters(6356766)


def geopotential_altitude(geometric_altitude: Length) -> Length:
    r"""
    Converts geometric altitude to geopotential altitude.

    .. math::

        h = \frac{r_0 z}{r_0 + z}

    Parameters
    ----------
    geometric_altitude : Length
        Geometric altitude :math:`z`.

    Returns
    -------
    Length
        Geopotential altitude :math:`h`.
    """
    z = ensure_quantity(geometric_altitude, Length, "geometric_altitude")
    return EARTH_RADIUS * (z / (EARTH_RADIUS + z))


def geometric_altitude(geopotential_altitude: Length) -> Length:
    r"""
    Converts geopotential altitude to geometric altitude.

    .. math::

        z = \frac{r_0 h}{r_0 - h}

    Parameters
    ----------
    geopotential_altitude : Length
        Geopotential altitude :math:`h`.

    Returns
    -------
    Length
        Geometric altitude :math:`z`.

    Raises
    ------
    InvalidArgumentError
        If the geopotential altitude is not smaller than the Earth radius.
    """
    h = ensure_quantity(geopotential_altitude, Length, "geopotential_altitude")

    if h >= EARTH_RADIUS:
        raise InvalidArgumentError(
            f"geopotential altitude must be smaller than the Earth radius, got {h}"
        )

    return EARTH_RADIUS * (h / (EARTH_RADIUS - h))


def gravity_at_altitude(geometric_altitude: Length) -> Acceleration:
    r"""
    Computes the acceleration of gravity at a given geometric altitude.

    .. math::

        g = g_0 \left( \frac{r_0}{r_0 + z} \right)^2

    Parameters
    ----------
    geometric_altitude : Length
        Geometric altitude :math:`z`.

    Returns
    -------
    Acceleration
    """
    z = ensure_quantity(geometric_altitude, Length, "geometric_altitude")
    ratio = EARTH_RADIUS / (EARTH_RADIUS + z)
    return GRAVITY_AT_SEA_LEVEL * numeric.power(ratio, Decimal(2))
