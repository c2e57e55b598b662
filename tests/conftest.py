import pytest

from atmospherics._config import config as atmospherics_config

# ------------------------------------------------------------------------------
#                              Fixtures
# ------------------------------------------------------------------------------


@pytest.fixture
def precision(monkeypatch):
    """
    Return a function setting the global decimal precision for the duration of
    the test.
    """

    def set_precision(value):
        monkeypatch.setattr(atmospherics_config, "precision", value)

    return set_precision


# ------------------------------------------------------------------------------
#                              Other configuration
# ------------------------------------------------------------------------------


def pytest_configure(config):
    markexpr = config.getoption("markexpr", "False")
    has_regression = "not regression" not in markexpr

    if has_regression:
        print(
            "\033[93m"
            "Running regression tests. To skip them, please run "
            "'pytest -m \"not regression\"' "
            "\033[0m"
        )
