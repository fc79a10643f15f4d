"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from ryandata_mailaddress import HeaderParser, MailAddressService
from ryandata_mailaddress.core.charset import CONVERTER_ENV

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture(autouse=True)
def _default_charset_converter(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the converter environment variable from leaking into tests."""
    monkeypatch.delenv(CONVERTER_ENV, raising=False)


@pytest.fixture
def parser() -> HeaderParser:
    """A fresh header parser with the default charset converter."""
    return HeaderParser()


@pytest.fixture
def service() -> MailAddressService:
    """A fresh service with default configuration."""
    return MailAddressService()
