"""
Global configuration components. The central part is the
:class:`.AtmosphericsConfig` class, whose defaults can be set using environment
variables. A single instance :data:`.config` is aliased in the top-level module
for convenience.
"""

import decimal

import attrs
import environ
from environ._environ_config import CNF_KEY, RAISE, _ConfigEntry
from environ.exceptions import ConfigError

#: Names of the rounding modes accepted by the ``decimal`` module.
ROUNDING_MODES = (
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
)


def var(
    default=RAISE,
    converter=None,
    name=None,
    validator=None,
    help=None,
    on_setattr=None,
):
    """
    Reimplementation of `environ-config`'s :func:`var` with `on_setattr` support.

    Declare a configuration attribute on the body of `config`-decorated class.

    It will be attempted to be filled from an environment variable based on the
    prefix and *name*.

    Parameters
    ----------
    default
        Setting this to a value makes the config attribute optional.

    name : str
        Overwrite name detection with a string.  If not set, the name of the
        attribute is used.

    converter
        A callable that is run with the found value and its return value is
        used.  Please note that it is also run for default values.

    validator
        A callable that is run with the final value. See ``attrs``'s
        `chapter on validation <https://www.attrs.org/en/stable/init.html#validators>`_
        for details.

    help : str
        A help string that is used by `generate_help`.

    on_setattr : callable or list of callables or None or attrs.setters.NO_OP, optional
        This argument is directly forwarded to :func:`attrs.field`, with the notable
        difference that the default behaviour executes converters and
        validators.
    """
    if on_setattr is None:
        on_setattr = attrs.setters.pipe(attrs.setters.convert, attrs.setters.validate)

    return attrs.field(
        default=default,
        metadata={CNF_KEY: _ConfigEntry(name, default, None, None, help)},
        converter=converter,
        validator=validator,
        on_setattr=on_setattr,
    )


def _to_precision(value) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"decimal precision must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"decimal precision must be an integer, got {value!r}") from e


def _to_rounding(value) -> str:
    value = str(value).strip().upper()
    if not value.startswith("ROUND_"):
        value = f"ROUND_{value}"
    return value


@environ.config(prefix="ATMOSPHERICS")
class AtmosphericsConfig:
    """
    Global configuration for atmospherics.

    This class, instantiated once as the :data:`atmospherics.config` attribute,
    contains global configuration parameters for the numeric layer. It is
    initialized using environment variables as defaults.

    See Also
    --------
    :data:`atmospherics.config`,
    `the environ-config library <https://environ-config.readthedocs.io>`_
    """

    #: Number of significant digits carried by decimal arithmetic.
    precision = var(
        default=28,
        converter=_to_precision,
        help="Number of significant digits carried by decimal arithmetic.",
    )

    @precision.validator
    def _precision_validator(self, var, value):
        if value < 1:
            raise ConfigError(f"decimal precision must be at least 1, got {value}")

    #: Rounding mode applied by decimal arithmetic. Values are names of the
    #: ``decimal`` module rounding constants, with or without the ``ROUND_``
    #: prefix (*e.g.* ``"HALF_EVEN"``, ``"ROUND_HALF_UP"``).
    rounding = var(
        default=decimal.ROUND_HALF_EVEN,
        converter=_to_rounding,
        help="Rounding mode applied by decimal arithmetic (name of a `decimal` "
        "rounding constant, *e.g.* 'ROUND_HALF_EVEN').",
    )

    @rounding.validator
    def _rounding_validator(self, var, value):
        if value not in ROUNDING_MODES:
            raise ConfigError(
                f"unknown rounding mode {value!r}; "
                f"expected one of {', '.join(ROUNDING_MODES)}"
            )


#: Global configuration object instance.
#: See :class:`AtmosphericsConfig`.
config = AtmosphericsConfig.from_environ()
