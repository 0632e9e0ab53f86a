"""Shared fixtures: fresh settings per test, diagnostics switched on."""

from __future__ import annotations

import pytest

from roster.config import get_settings
from roster.domain.model.address import Address


@pytest.fixture(autouse=True)
def developer_mode(monkeypatch):
    monkeypatch.setenv("ROSTER_DEVELOPER_MODE", "true")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def valid_address() -> Address:
    address = Address.create("Main St", "Athens", 19840)
    assert isinstance(address, Address)
    return address
