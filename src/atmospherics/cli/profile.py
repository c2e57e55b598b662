import logging
import typing as t
from enum import Enum

import typer
from rich.markup import escape
from rich.table import Table
from typing_extensions import Annotated

from atmospherics import isa
from atmospherics.dimensions import Length
from atmospherics.exceptions import InvalidArgumentError
from atmospherics.thermodynamics import RelativeHumidity

from ._console import console

logger = logging.getLogger(__name__)

#: Units accepted for altitude values.
LengthUnit = Enum(
    "LengthUnit", {name: name for name in sorted(Length.units_by_name())}, type=str
)


def main(
    altitudes: Annotated[
        t.List[float],
        typer.Argument(help="Geometric altitudes at which the model is evaluated."),
    ],
    units: Annotated[
        LengthUnit,
        typer.Option("--units", "-u", help="Units of the altitude values."),
    ] = LengthUnit["meters"],
    humidity: Annotated[
        t.Optional[float],
        typer.Option(
            "--humidity",
            "-h",
            help="Relative humidity in percent. If set, densities are those of "
            "humid air.",
        ),
    ] = None,
):
    """
    Print temperature, pressure and density at the geometric ALTITUDES.
    """
    rh = None if humidity is None else RelativeHumidity.from_percent(humidity)
    unit = Length.units_by_name()[units.value]

    table = Table(title="International Standard Atmosphere")
    table.add_column(escape(f"Altitude [{unit.symbol}]"), justify="right")
    table.add_column(escape("Temperature [K]"), justify="right")
    table.add_column(escape("Pressure [Pa]"), justify="right")
    table.add_column(escape("Density [kg/m³]"), justify="right")

    for value in altitudes:
        altitude = Length.from_unit(value, unit.name)
        logger.debug("Evaluating ISA at %s", altitude)

        try:
            temperature = isa.temperature_at_altitude(altitude)
            pressure = isa.pressure_at_altitude(altitude)
            density = (
                isa.density_at_altitude(altitude)
                if rh is None
                else isa.density_of_humid_air(altitude, rh)
            )
        except InvalidArgumentError as e:
            raise typer.BadParameter(str(e), param_hint="ALTITUDES") from e

        table.add_row(
            f"{value:g}",
            f"{temperature.to_kelvins(float):.2f}",
            f"{pressure.to_pascals(float):.1f}",
            f"{density.to_kilograms_per_cubic_meter(float):.5f}",
        )

    console.print(table)


__doc__ = main.__doc__
