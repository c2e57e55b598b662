"""Thermodynamic dimensions defined by the atmosphere model."""

from .dimensions import Length, Temperature
from .operators import integral
from .quantity import Quantity, Unit

__all__ = ["RelativeHumidity", "TemperatureLapse"]


class RelativeHumidity(Quantity):
    """
    A relative humidity, stored as a ratio where 1 means saturated air.

    Values are created with :meth:`from_ratio` or :meth:`from_percent` and read
    with :meth:`to_ratio` or :meth:`to_percent`.
    """

    si_units = "dimensionless"
    units = (
        Unit("ratio", "", "dimensionless"),
        Unit("percent", "%", "percent", divisor=100),
    )

    def __str__(self):
        return f"{self.to_percent()} %"


@integral(Length, into=Temperature)
class TemperatureLapse(Quantity):
    """
    A temperature lapse rate, in kelvins per metre.

    Multiplying a lapse rate by a length yields a :class:`.Temperature`
    holding a signed temperature difference, not an absolute temperature.
    """

    si_units = "kelvin / meter"
    units = (
        Unit("kelvins_per_meter", "K/m", "kelvin / meter"),
        Unit("kelvins_per_kilometer", "K/km", "kelvin / kilometer", divisor=1000),
    )
