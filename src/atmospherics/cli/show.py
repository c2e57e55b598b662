import atmospherics
from atmospherics import isa
from atmospherics._config import config

from ._console import message, section

# Sea-level constants listed by the command
_CONSTANTS = [
    "PRESSURE_AT_SEA_LEVEL",
    "TEMPERATURE_AT_SEA_LEVEL",
    "DENSITY_AT_SEA_LEVEL",
    "HUMIDITY_AT_SEA_LEVEL",
    "TEMPERATURE_LAPSE",
    "MOLAR_MASS_OF_DRY_AIR",
    "MOLAR_MASS_OF_WATER_VAPOR",
    "SPECIFIC_GAS_CONSTANT_OF_DRY_AIR",
    "SPECIFIC_GAS_CONSTANT_OF_HUMID_AIR",
]


def main():
    """
    Display version, configuration and model constants.
    """
    section("Versions", newline=False)
    message(f"• atmospherics {atmospherics.__version__}")

    section("Configuration")
    for var in sorted(x.name for x in config.__attrs_attrs__):
        message(f"• ATMOSPHERICS_{var.upper()}: {getattr(config, var)}")

    section("Sea level constants")
    for name in _CONSTANTS:
        message(f"• {name}: {getattr(isa, name)}")


__doc__ = main.__doc__
