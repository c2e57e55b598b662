from importlib.metadata import PackageNotFoundError, version

try:
    _version = version("atmospherics")
except PackageNotFoundError as e:
    raise PackageNotFoundError(
        "atmospherics is not installed; please install it in your Python "
        "environment."
    ) from e
