"""
Significant-precision numeric layer.

All quantity arithmetic is carried out on :class:`decimal.Decimal` values
evaluated under a context built from the global configuration
(:data:`atmospherics.config`). Native numbers enter and leave this layer
through :func:`to_decimal` and :func:`from_decimal` only.
"""

from __future__ import annotations

__all__ = [
    "NativeNumber",
    "context",
    "exp",
    "from_decimal",
    "power",
    "round_significant",
    "significant_digits",
    "to_decimal",
]

import decimal
import math
import typing as t
from decimal import Decimal

import numpy as np

from ._config import config
from .exceptions import InvalidArgumentError

#: Native number types accepted by :func:`to_decimal`.
NativeNumber = t.Union[int, float, Decimal, np.integer, np.floating]

#: Output types supported by :func:`from_decimal`.
_CONVERTERS: dict[type, t.Callable[[Decimal], t.Any]] = {
    Decimal: lambda x: x,
    float: float,
    int: int,
    np.float32: lambda x: np.float32(str(x)),
    np.float64: lambda x: np.float64(str(x)),
}


def context(precision: int | None = None) -> t.ContextManager[decimal.Context]:
    """
    Return a context manager activating the configured decimal context for the
    current thread.

    Parameters
    ----------
    precision : int, optional
        Override for the configured number of significant digits.

    Returns
    -------
    context manager
    """
    ctx = decimal.Context(
        prec=config.precision if precision is None else precision,
        rounding=config.rounding,
    )
    return decimal.localcontext(ctx)


def to_decimal(value: NativeNumber) -> Decimal:
    """
    Convert a native number to a :class:`~decimal.Decimal` without losing
    information.

    Floating point values are converted through their shortest round-tripping
    representation, *e.g.* ``0.0065`` becomes ``Decimal("0.0065")`` rather than
    the exact binary expansion of the float.

    Parameters
    ----------
    value : int or float or Decimal or numpy scalar
        Value to convert.

    Returns
    -------
    Decimal

    Raises
    ------
    InvalidArgumentError
        If ``value`` is ``None``, a boolean, not finite or of an unsupported
        type.
    """
    if value is None:
        raise InvalidArgumentError("expected a number, got None")

    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgumentError(f"expected a number, got a boolean ({value})")

    if isinstance(value, Decimal):
        result = value

    elif isinstance(value, (int, np.integer)):
        return Decimal(int(value))

    # numpy.float64 subclasses float: test NumPy scalars first
    elif isinstance(value, np.floating):
        if not np.isfinite(value):
            raise InvalidArgumentError(f"expected a finite number, got {value}")
        # Shortest representation for the scalar's own precision
        result = Decimal(np.format_float_positional(value, unique=True, trim="-"))

    elif isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgumentError(f"expected a finite number, got {value}")
        result = Decimal(repr(value))

    else:
        raise InvalidArgumentError(
            f"expected a number, got {value!r} which is a {type(value).__name__}"
        )

    if not result.is_finite():
        raise InvalidArgumentError(f"expected a finite number, got {value}")

    return result


def from_decimal(value: Decimal, kind: type = Decimal) -> t.Any:
    """
    Convert a :class:`~decimal.Decimal` to a native number type.

    Parameters
    ----------
    value : Decimal
        Value to convert.

    kind : type, default: Decimal
        Target type. Supported types are :class:`~decimal.Decimal`,
        :class:`float`, :class:`int`, :class:`numpy.float32` and
        :class:`numpy.float64`.

    Returns
    -------
    number

    Raises
    ------
    InvalidArgumentError
        If ``kind`` is not supported, or if ``kind`` is :class:`int` and
        ``value`` is not integral.
    """
    try:
        converter = _CONVERTERS[kind]
    except KeyError as e:
        raise InvalidArgumentError(
            f"cannot convert to {getattr(kind, '__name__', kind)}; supported "
            f"types are {', '.join(k.__name__ for k in _CONVERTERS)}"
        ) from e

    if kind is int and value != value.to_integral_value():
        raise InvalidArgumentError(f"{value} cannot be converted to int without loss")

    return converter(value)


def exp(x: Decimal) -> Decimal:
    """Precision-preserving exponential."""
    with context():
        return x.exp()


def power(base: Decimal, exponent: Decimal) -> Decimal:
    """
    Precision-preserving power. Non-integral exponents require a non-negative
    base.

    Raises
    ------
    InvalidArgumentError
        If the power is not defined for the passed values.
    """
    if base < 0 and exponent != exponent.to_integral_value():
        raise InvalidArgumentError(
            f"cannot raise negative value {base} to non-integral power {exponent}"
        )

    with context():
        return base**exponent


def significant_digits(x: Decimal) -> int:
    """
    Number of significant digits carried by ``x``. Trailing zeros count, *e.g.*
    ``Decimal("1.50")`` has 3 significant digits.
    """
    return len(x.as_tuple().digits)


def round_significant(x: Decimal, digits: int) -> Decimal:
    """Round ``x`` to ``digits`` significant digits."""
    if digits < 1:
        raise InvalidArgumentError(f"digits must be at least 1, got {digits}")

    with context(precision=digits):
        return +x
