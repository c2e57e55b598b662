"""
Dimension-tagged quantities.

A physical dimension is declared by subclassing :class:`Quantity` and listing
its units. Each declared unit automatically provides a ``from_<unit>()``
constructor and a ``to_<unit>()`` accessor:

.. code:: python

    class Pressure(Quantity):
        si_units = "pascal"
        units = (
            Unit("pascals", "Pa", "pascal"),
            Unit("hectopascals", "hPa", "hectopascal", factor=100),
        )

    p = Pressure.from_hectopascals(1013.25)
    p.to_pascals(float)  # 101325.0

Quantities store their magnitude in canonical (SI) units as a
:class:`~decimal.Decimal` and are immutable.
"""

from __future__ import annotations

__all__ = ["Quantity", "Unit"]

import typing as t
from decimal import Decimal
from types import MappingProxyType

import attrs
import pint

from . import numeric, operators
from .exceptions import DimensionError, InvalidArgumentError
from .units import unit_registry, units_compatible

Q = t.TypeVar("Q", bound="Quantity")


@attrs.frozen
class Unit:
    """
    A named unit and its conversion to the canonical unit of a dimension.

    Values convert to the canonical scale as
    ``(value + offset) * factor / divisor``.
    """

    #: Unit name, used to generate conversion method names (*e.g.*
    #: ``"kelvins_per_meter"``).
    name: str = attrs.field(validator=attrs.validators.instance_of(str))

    #: Display symbol.
    symbol: str = attrs.field(validator=attrs.validators.instance_of(str))

    #: Equivalent Pint unit expression.
    pint_units: str = attrs.field(validator=attrs.validators.instance_of(str))

    factor: Decimal = attrs.field(default=1, converter=numeric.to_decimal)
    divisor: Decimal = attrs.field(default=1, converter=numeric.to_decimal)
    offset: Decimal = attrs.field(default=0, converter=numeric.to_decimal)

    @divisor.validator
    def _divisor_validator(self, attribute, value):
        if value.is_zero():
            raise InvalidArgumentError(f"unit '{self.name}' has a zero divisor")

    @factor.validator
    def _factor_validator(self, attribute, value):
        if value.is_zero():
            raise InvalidArgumentError(f"unit '{self.name}' has a zero factor")

    @property
    def is_canonical(self) -> bool:
        """``True`` iff this unit is the canonical unit of its dimension."""
        return self.factor == 1 and self.divisor == 1 and self.offset == 0

    def to_si(self, value: Decimal) -> Decimal:
        """Convert a value expressed in this unit to the canonical scale."""
        with numeric.context():
            return (value + self.offset) * self.factor / self.divisor

    def from_si(self, value: Decimal) -> Decimal:
        """Convert a canonical value to this unit."""
        with numeric.context():
            return value * self.divisor / self.factor - self.offset


def _make_from_unit(unit: Unit):
    def from_unit(cls, value):
        return cls._from_unit(value, unit)

    from_unit.__name__ = f"from_{unit.name}"
    from_unit.__doc__ = (
        f"Create a quantity from a value in {unit.name.replace('_', ' ')} "
        f"[{unit.symbol}]."
    )
    return classmethod(from_unit)


def _make_to_unit(unit: Unit):
    def to_unit(self, kind=Decimal):
        return self._to_unit(unit, kind)

    to_unit.__name__ = f"to_{unit.name}"
    to_unit.__doc__ = (
        f"Return the value of this quantity in {unit.name.replace('_', ' ')} "
        f"[{unit.symbol}] as a ``kind`` number (default: Decimal)."
    )
    return to_unit


@attrs.frozen(repr=False)
class Quantity:
    """
    Base class for dimension-tagged quantities.

    Subclasses declare a dimension by setting the :attr:`si_units` and
    :attr:`units` class attributes. The dimension of a quantity is its class:
    quantities of different classes cannot be added, subtracted or ordered, and
    they can be multiplied or divided only if an operator was declared with
    :func:`.integral`.

    Instances are created with the generated ``from_<unit>()`` class methods,
    :meth:`from_unit` or :meth:`from_pint`. The constructor only takes the
    private keyword argument ``_si`` and is reserved for internal use.
    """

    #: Pint expression of the canonical unit.
    si_units: t.ClassVar[str] = "dimensionless"

    #: Units in which quantities of this dimension can be expressed. Exactly one
    #: of them must be canonical.
    units: t.ClassVar[tuple[Unit, ...]] = ()

    _units_by_name: t.ClassVar[t.Mapping[str, Unit]] = MappingProxyType({})
    _canonical_unit: t.ClassVar[Unit | None] = None

    _si: Decimal = attrs.field(
        converter=numeric.to_decimal, kw_only=True, alias="_si"
    )

    def __attrs_post_init__(self):
        if type(self)._canonical_unit is None:
            raise DimensionError(
                f"{type(self).__name__} does not declare a dimension"
            )

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        if "units" not in cls.__dict__:
            return

        canonical = [unit for unit in cls.units if unit.is_canonical]
        if len(canonical) != 1:
            raise DimensionError(
                f"{cls.__name__} must declare exactly one canonical unit, "
                f"got {len(canonical)}"
            )

        units_by_name = {}

        for unit in cls.units:
            if unit.name in units_by_name:
                raise DimensionError(
                    f"{cls.__name__} declares unit '{unit.name}' twice"
                )

            if not units_compatible(unit.pint_units, cls.si_units):
                raise DimensionError(
                    f"unit '{unit.name}' ({unit.pint_units}) is incompatible with "
                    f"{cls.__name__} ({cls.si_units})"
                )

            units_by_name[unit.name] = unit

            # Explicit definitions in the class body take precedence
            for method_name, method in [
                (f"from_{unit.name}", _make_from_unit(unit)),
                (f"to_{unit.name}", _make_to_unit(unit)),
            ]:
                if method_name not in cls.__dict__:
                    setattr(cls, method_name, method)

        cls._units_by_name = MappingProxyType(units_by_name)
        cls._canonical_unit = canonical[0]

    # --------------------------------------------------------------------------
    #                              Unit conversion
    # --------------------------------------------------------------------------

    @property
    def si(self) -> Decimal:
        """Magnitude in canonical units."""
        return self._si

    @classmethod
    def _from_si(cls: type[Q], value: Decimal) -> Q:
        return cls(_si=value)

    @classmethod
    def _from_unit(cls: type[Q], value: numeric.NativeNumber, unit: Unit) -> Q:
        if value is None:
            raise InvalidArgumentError(
                f"cannot create {cls.__name__} from None ({unit.name})"
            )
        return cls._from_si(unit.to_si(numeric.to_decimal(value)))

    def _to_unit(self, unit: Unit, kind: type = Decimal):
        return numeric.from_decimal(unit.from_si(self._si), kind)

    @classmethod
    def units_by_name(cls) -> t.Mapping[str, Unit]:
        """Read-only mapping of the units declared for this dimension."""
        return cls._units_by_name

    @classmethod
    def _get_unit(cls, name: str) -> Unit:
        try:
            return cls._units_by_name[name]
        except KeyError as e:
            raise InvalidArgumentError(
                f"unknown {cls.__name__} unit '{name}'; "
                f"known units are {', '.join(cls._units_by_name)}"
            ) from e

    @classmethod
    def from_unit(cls: type[Q], value: numeric.NativeNumber, unit: str) -> Q:
        """
        Create a quantity from a value expressed in a named unit.

        Parameters
        ----------
        value : int or float or Decimal or numpy scalar
            Value to convert.

        unit : str
            Unit name (*e.g.* ``"celsius"``).

        Returns
        -------
        Quantity

        Raises
        ------
        InvalidArgumentError
            If the value is ``None`` or of an unsupported type, or if the unit
            is not declared for this dimension.
        """
        return cls._from_unit(value, cls._get_unit(unit))

    def to_unit(self, unit: str, kind: type = Decimal):
        """
        Return the value of this quantity in a named unit.

        Parameters
        ----------
        unit : str
            Unit name (*e.g.* ``"celsius"``).

        kind : type, default: Decimal
            Returned number type (see :func:`.numeric.from_decimal`).

        Returns
        -------
        number
        """
        return self._to_unit(self._get_unit(unit), kind)

    # --------------------------------------------------------------------------
    #                            Pint interoperability
    # --------------------------------------------------------------------------

    def to_pint(self) -> pint.Quantity:
        """Convert to a Pint quantity expressed in canonical units."""
        return unit_registry.Quantity(float(self._si), self.si_units)

    @classmethod
    def from_pint(cls: type[Q], value: pint.Quantity) -> Q:
        """
        Create a quantity from a Pint quantity with compatible units.

        Raises
        ------
        DimensionError
            If the Pint quantity's dimensionality does not match this
            dimension.
        """
        if value is None:
            raise InvalidArgumentError(f"cannot create {cls.__name__} from None")

        if not isinstance(value, pint.Quantity):
            raise InvalidArgumentError(
                f"expected a pint.Quantity, got {type(value).__name__}"
            )

        if not units_compatible(value.units, cls.si_units):
            raise DimensionError(
                f"cannot convert '{value.units}' to {cls.__name__} "
                f"({cls.si_units})"
            )

        return cls._from_si(numeric.to_decimal(value.m_as(cls.si_units)))

    # --------------------------------------------------------------------------
    #                                Arithmetic
    # --------------------------------------------------------------------------

    def _check_same_dimension(self, other, operation: str) -> None:
        if type(other) is not type(self):
            raise DimensionError(
                f"cannot {operation} {type(self).__name__} and "
                f"{type(other).__name__}",
                expected=type(self),
                actual=other,
            )

    def __add__(self: Q, other: Q) -> Q:
        self._check_same_dimension(other, "add")
        with numeric.context():
            return self._from_si(self._si + other._si)

    def __radd__(self, other):
        # Integer zero is the start value of sum()
        if type(other) is int and other == 0:
            return self

        self._check_same_dimension(other, "add")
        return other.__add__(self)

    def __sub__(self: Q, other: Q) -> Q:
        self._check_same_dimension(other, "subtract")
        with numeric.context():
            return self._from_si(self._si - other._si)

    def __rsub__(self, other):
        self._check_same_dimension(other, "subtract")
        return other.__sub__(self)

    def __mul__(self, other):
        if isinstance(other, Quantity):
            return operators.integrate(self, other)

        factor = numeric.to_decimal(other)
        with numeric.context():
            return self._from_si(self._si * factor)

    def __rmul__(self, other):
        # Quantity * Quantity is always dispatched to __mul__
        factor = numeric.to_decimal(other)
        with numeric.context():
            return self._from_si(factor * self._si)

    def __truediv__(self, other):
        if type(other) is type(self):
            with numeric.context():
                return self._si / other._si

        if isinstance(other, Quantity):
            return operators.derive(self, other)

        divisor = numeric.to_decimal(other)
        with numeric.context():
            return self._from_si(self._si / divisor)

    def __rtruediv__(self, other):
        raise DimensionError(
            f"no dimension declared for the inverse of {type(self).__name__}",
            actual=self,
        )

    def __neg__(self: Q) -> Q:
        return self._from_si(-self._si)

    def __pos__(self: Q) -> Q:
        return self

    def __abs__(self: Q) -> Q:
        return self._from_si(abs(self._si))

    def __lt__(self, other) -> bool:
        self._check_same_dimension(other, "compare")
        return self._si < other._si

    def __le__(self, other) -> bool:
        self._check_same_dimension(other, "compare")
        return self._si <= other._si

    def __gt__(self, other) -> bool:
        self._check_same_dimension(other, "compare")
        return self._si > other._si

    def __ge__(self, other) -> bool:
        self._check_same_dimension(other, "compare")
        return self._si >= other._si

    def round(self: Q, digits: int) -> Q:
        """Round the canonical magnitude to ``digits`` significant figures."""
        return self._from_si(numeric.round_significant(self._si, digits))

    # --------------------------------------------------------------------------
    #                              Representation
    # --------------------------------------------------------------------------

    @property
    def symbol(self) -> str:
        """Symbol of the canonical unit."""
        return type(self)._canonical_unit.symbol

    def __str__(self):
        return f"{self._si} {self.symbol}".rstrip()

    def __repr__(self):
        return f"{type(self).__name__}({self})"

    def __format__(self, format_spec):
        return f"{format(self._si, format_spec)} {self.symbol}".rstrip()

