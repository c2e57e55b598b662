"""Exceptions specific to atmospherics."""

# ------------------------------------------------------------------------------
#                                   Exceptions
# ------------------------------------------------------------------------------


class InvalidArgumentError(ValueError):
    """
    Raised when a function receives an argument it cannot work with, *e.g.* a
    missing (``None``) quantity or a number of an unsupported type.
    """

    pass


class DimensionError(InvalidArgumentError):
    """
    Raised when quantities of incompatible dimensions are combined, or when a
    quantity of the wrong dimension is passed to a function.
    """

    def __init__(self, msg=None, expected=None, actual=None):
        super(DimensionError, self).__init__(msg)
        self.expected = expected
        self.actual = actual

    def __str__(self):
        msg = self.args[0] if self.args and self.args[0] is not None else ""
        extra_msg = []

        if self.expected is not None:
            extra_msg.append(f"expected: {_dimension_name(self.expected)}")

        if self.actual is not None:
            extra_msg.append(f"got: {_dimension_name(self.actual)}")

        if extra_msg:
            msg += f" ({'; '.join(extra_msg)})" if msg else "; ".join(extra_msg)

        return msg


def _dimension_name(value) -> str:
    return value.__name__ if isinstance(value, type) else type(value).__name__
