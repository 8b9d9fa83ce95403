import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings from the developer's shell out of the tests."""
    for var in (
        "TENPIN_STRICT_TENTH_FRAME",
        "TENPIN_LOG_LEVEL",
        "SENTRY_DSN",
        "SENTRY_ENVIRONMENT",
        "SENTRY_TRACES_SAMPLE_RATE",
    ):
        monkeypatch.delenv(var, raising=False)
    yield
