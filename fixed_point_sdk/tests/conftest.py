"""Pytest configuration for fixed-point SDK tests."""

import logging

import pytest

from fixed_point_sdk.constants import ENV_BITS_KEY, ENV_PRECISION_KEY

# Setup basic logging for the test session
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s:%(lineno)d - %(message)s")
logger = logging.getLogger(__name__)


@pytest.fixture
def clean_format_env(monkeypatch):
    """Blank out the format env vars so tests see only what they set.

    setenv (rather than delenv) makes monkeypatch restore the original state
    on teardown, whether or not the variables existed before.
    """
    monkeypatch.setenv(ENV_BITS_KEY, "")
    monkeypatch.setenv(ENV_PRECISION_KEY, "")
    return monkeypatch
