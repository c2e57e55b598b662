"""
Derived operators between quantity dimensions.

A dimension declares with the :func:`integral` class decorator that multiplying
it by a second dimension yields a third one. A single generic algorithm
(:func:`integrate`) then implements every declared product, and its inverse
(:func:`derive`) every corresponding quotient. Declarations are checked
against Pint dimensionalities when they are made.
"""

from __future__ import annotations

__all__ = ["derive", "integral", "integrate", "result_dimension"]

import typing as t

from . import numeric
from .exceptions import DimensionError
from .units import dimensionality
from .validators import ensure_not_none

if t.TYPE_CHECKING:
    from .quantity import Quantity

A = t.TypeVar("A", bound="Quantity")
B = t.TypeVar("B", bound="Quantity")
C = t.TypeVar("C", bound="Quantity")

# (factor dimension, factor dimension) -> product dimension
_INTEGRALS: dict[tuple[type, type], type] = {}

# (product dimension, divisor dimension) -> quotient dimension
_DERIVATIVES: dict[tuple[type, type], type] = {}


def _register(registry: dict, key: tuple[type, type], value: type) -> None:
    existing = registry.get(key)

    if existing is not None and existing is not value:
        raise DimensionError(
            f"conflicting operator declaration for "
            f"({key[0].__name__}, {key[1].__name__})",
            expected=existing,
            actual=value,
        )

    registry[key] = value


def integral(variable: type[B], into: type[C]) -> t.Callable[[type[A]], type[A]]:
    """
    Class decorator declaring that the decorated dimension multiplied by
    ``variable`` yields ``into``.

    The product is commutative, and the quotients ``into / variable`` and
    ``into / decorated`` are declared at the same time.

    Parameters
    ----------
    variable : type
        Dimension the decorated dimension is integrated over.

    into : type
        Dimension of the product.

    Returns
    -------
    callable

    Raises
    ------
    DimensionError
        If the dimensionalities of the three dimensions are inconsistent or if
        the declaration conflicts with an existing one.

    Examples
    --------
    >>> @integral(Length, into=Temperature)
    ... class TemperatureLapse(Quantity):
    ...     si_units = "kelvin / meter"
    ...     units = (Unit("kelvins_per_meter", "K/m", "kelvin / meter"),)
    """

    def decorator(cls: type[A]) -> type[A]:
        product = dimensionality(cls.si_units) * dimensionality(variable.si_units)

        if product != dimensionality(into.si_units):
            raise DimensionError(
                f"{cls.__name__} × {variable.__name__} has dimensionality "
                f"{product}, not {dimensionality(into.si_units)}",
                expected=into,
            )

        _register(_INTEGRALS, (cls, variable), into)
        _register(_INTEGRALS, (variable, cls), into)
        _register(_DERIVATIVES, (into, variable), cls)
        _register(_DERIVATIVES, (into, cls), variable)

        return cls

    return decorator


def result_dimension(
    left: type, right: type, operation: str = "mul"
) -> type | None:
    """
    Look up the dimension produced by a declared operator.

    Parameters
    ----------
    left, right : type
        Operand dimensions.

    operation : {"mul", "div"}
        Operator to look up.

    Returns
    -------
    type or None
        The result dimension, or ``None`` if no operator is declared.
    """
    if operation == "mul":
        return _INTEGRALS.get((left, right))
    elif operation == "div":
        return _DERIVATIVES.get((left, right))
    else:
        raise ValueError(f"unknown operation '{operation}'")


def _resolve(registry, a, b, into, symbol) -> type:
    result = registry.get((type(a), type(b)))

    if result is None:
        raise DimensionError(
            f"no operator declared for {type(a).__name__} {symbol} "
            f"{type(b).__name__}"
        )

    if into is not None and into is not result:
        raise DimensionError(
            f"{type(a).__name__} {symbol} {type(b).__name__} does not yield "
            f"{into.__name__}",
            expected=into,
            actual=result,
        )

    return result


def integrate(a: A, b: B, into: type[C] | None = None) -> C:
    """
    Multiply two quantities whose product is a declared dimension.

    The canonical magnitudes are multiplied and the product is reinterpreted as
    the declared result dimension.

    Parameters
    ----------
    a, b : Quantity
        Operands.

    into : type, optional
        Expected result dimension. If set, it must match the declared one.

    Returns
    -------
    Quantity

    Raises
    ------
    InvalidArgumentError
        If an operand is ``None``.

    DimensionError
        If no operator is declared for the operand dimensions, or if the
        declared result does not match ``into``.
    """
    ensure_not_none(a, "a")
    ensure_not_none(b, "b")
    result = _resolve(_INTEGRALS, a, b, into, "×")

    with numeric.context():
        return result._from_si(a.si * b.si)


def derive(c: C, b: B, into: type[A] | None = None) -> A:
    """
    Divide a quantity by another one when the quotient is a declared dimension.
    This is the inverse of :func:`integrate`.

    Parameters
    ----------
    c, b : Quantity
        Dividend and divisor.

    into : type, optional
        Expected result dimension. If set, it must match the declared one.

    Returns
    -------
    Quantity

    Raises
    ------
    InvalidArgumentError
        If an operand is ``None``.

    DimensionError
        If no operator is declared for the operand dimensions, or if the
        declared result does not match ``into``.
    """
    ensure_not_none(c, "c")
    ensure_not_none(b, "b")
    result = _resolve(_DERIVATIVES, c, b, into, "/")

    with numeric.context():
        return result._from_si(c.si / b.si)
