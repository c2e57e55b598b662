from __future__ import annotations

__all__ = [
    "dimensionality",
    "symbol",
    "unit_registry",
    "units_compatible",
]

import logging
from importlib.resources import files

import pint

logger = logging.getLogger(__name__)

# -- Global data members -------------------------------------------------------

#: Unit registry common to all atmospherics components. All Pint units used in
#: atmospherics must be created using this registry. Aliased in
#: :mod:`atmospherics`.
unit_registry = pint.get_application_registry()


def _parse_definitions(path):
    # Parse a unit definition file (i.e. strip it from line comments and empty
    # lines)
    definitions = []
    with open(path, "r") as f:
        for line in f:
            line = line.strip()

            if line.startswith("#") or not line:  # Skip comments and empty lines
                continue
            else:
                definitions.append(line)

    return definitions


def _load_definitions(ureg: pint.UnitRegistry, definitions: list[str]) -> None:
    # Add extra definitions, possibly skipping those that already exist. This is
    # a very simple wrapper around Pint's usual unit definition logic.

    for definition in definitions:
        _unit_name, _unit_definition = list(
            map(lambda x: x.strip(), definition.split("="))
        )[0:2]

        if _unit_name in ureg:
            if 1.0 * ureg(_unit_definition) == 1.0 * ureg(_unit_name):
                # Definitions are identical: skip
                continue
            else:
                # Definitions are different: attempt a redefinition and let
                # user-controlled conflict handling policy apply
                logger.debug("Redefining unit '%s'", _unit_name)
                ureg.define(definition)
        else:
            ureg.define(definition)


_load_definitions(
    unit_registry, _parse_definitions(files("atmospherics") / "units.txt")
)


# -- Public functions ----------------------------------------------------------


def symbol(units: pint.Unit | str) -> str:
    """
    Normalize a string or Pint units to a symbol string.

    Parameters
    ----------
    units : :class:`pint.Unit` or str
        Value to convert to a symbol string.

    Returns
    -------
    str
        Symbol string (*e.g.* ``'m'`` for ``'metre'``, ``'K / m'`` for
        ``'kelvin/meter'``, etc.).
    """
    units = unit_registry.Unit(units)
    return format(units, "~")


def dimensionality(units: pint.Unit | str):
    """
    Return the dimensionality of a unit expression.

    Parameters
    ----------
    units : :class:`pint.Unit` or str
        Unit or unit expression.

    Returns
    -------
    :class:`pint.util.UnitsContainer`
    """
    return unit_registry.Unit(units).dimensionality


def units_compatible(units1: pint.Unit | str, units2: pint.Unit | str) -> bool:
    """
    Check if two units have the same dimensionality. Unlike
    :func:`pinttr.util.units_compatible`, this also works with offset units
    (*e.g.* ``degC``).

    Parameters
    ----------
    units1, units2 : :class:`pint.Unit` or str
        Units to compare.

    Returns
    -------
    bool
    """
    return dimensionality(units1) == dimensionality(units2)
