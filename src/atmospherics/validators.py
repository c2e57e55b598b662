from __future__ import annotations

import typing as t

from .exceptions import DimensionError, InvalidArgumentError

T = t.TypeVar("T")


def ensure_not_none(value: T | None, name: str = "value") -> T:
    """
    Validate iff value is not ``None``.

    Raises
    ------
    InvalidArgumentError
        If the value is ``None``.
    """
    if value is None:
        raise InvalidArgumentError(f"'{name}' must not be None")
    return value


def ensure_quantity(value: t.Any, dimension: type[T], name: str = "value") -> T:
    """
    Validate iff value is a quantity of the requested dimension. This is the
    guard run at the entry of every public formula.

    Parameters
    ----------
    value
        Value to check.

    dimension : type
        Expected :class:`.Quantity` subclass.

    name : str
        Argument name used in error messages.

    Returns
    -------
    The validated value.

    Raises
    ------
    InvalidArgumentError
        If the value is ``None``.

    DimensionError
        If the value is not an instance of ``dimension``.
    """
    ensure_not_none(value, name)

    if not isinstance(value, dimension):
        raise DimensionError(
            f"'{name}' has the wrong dimension", expected=dimension, actual=value
        )

    return value
