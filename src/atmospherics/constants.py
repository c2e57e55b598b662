"""Physical constants used by the atmosphere model."""

from decimal import Decimal

from .dimensions import MolarHeatCapacity

#: Molar gas constant (CODATA 2018, exact).
MOLAR_GAS_CONSTANT = MolarHeatCapacity.from_joules_per_mole_per_kelvin(
    Decimal("8.31446261815324")
)
