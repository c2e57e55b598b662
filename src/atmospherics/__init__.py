"""A typed-quantity model of the International Standard Atmosphere."""

from ._version import _version

__version__ = _version  #: atmospherics version string.

# -- Lazy imports ------------------------------------------------------

import lazy_loader  # noqa: E402

__getattr__, __dir__, __all__ = lazy_loader.attach(
    __name__,
    submodules=[
        "constants",
        "dimensions",
        "earth",
        "exceptions",
        "isa",
        "numeric",
        "operators",
        "profile",
        "quantity",
        "thermodynamics",
        "units",
        "validators",
    ],
    submod_attrs={
        "_config": ["config"],
        "dimensions": [
            "Acceleration",
            "Density",
            "Length",
            "MolarHeatCapacity",
            "MolarMass",
            "Pressure",
            "SpecificEnergy",
            "SpecificHeatCapacity",
            "Temperature",
        ],
        "exceptions": ["DimensionError", "InvalidArgumentError"],
        "operators": ["derive", "integral", "integrate"],
        "quantity": ["Quantity", "Unit"],
        "thermodynamics": ["RelativeHumidity", "TemperatureLapse"],
        "units": ["unit_registry"],
    },
)

del lazy_loader
