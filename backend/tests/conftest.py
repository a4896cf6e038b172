"""Pytest configuration and fixtures for agency tests.

Provides record factories so each test only spells out the fields it cares
about.
"""

import itertools
from datetime import date

import pytest

from agency.schemas import PortAgent, ShippingLine, ShippingRate


_ids = itertools.count(1)


# ── Record Factories ─────────────────────────────────────────

@pytest.fixture
def make_shipping_line():
    """Build a ShippingLine with sensible defaults."""

    def _make(**overrides) -> ShippingLine:
        n = next(_ids)
        data = {
            "id": f"line-{n:03d}",
            "line_code": f"LN{n:03d}",
            "line_name": f"Test Line {n}",
            "is_active": True,
            "is_preferred": False,
        }
        data.update(overrides)
        return ShippingLine(**data)

    return _make


@pytest.fixture
def make_port_agent():
    """Build a PortAgent with sensible defaults."""

    def _make(**overrides) -> PortAgent:
        n = next(_ids)
        data = {
            "id": f"agent-{n:03d}",
            "agent_code": f"IDJKT-A{n:02d}",
            "agent_name": f"Test Agent {n}",
            "port_name": "Tanjung Priok",
            "port_country": "Indonesia",
            "is_active": True,
            "is_preferred": False,
        }
        data.update(overrides)
        return PortAgent(**data)

    return _make


@pytest.fixture
def make_shipping_rate():
    """Build an active 20GP rate JKT -> SIN valid for all of 2025."""

    def _make(**overrides) -> ShippingRate:
        n = next(_ids)
        data = {
            "id": f"rate-{n:03d}",
            "shipping_line_id": "line-001",
            "origin_port_id": "port-jkt",
            "destination_port_id": "port-sin",
            "container_type": "20GP",
            "ocean_freight": 1000.0,
            "currency": "USD",
            "baf": 100.0,
            "caf": 50.0,
            "pss": 0.0,
            "ens": 0.0,
            "total_rate": 1150.0,
            "valid_from": date(2025, 1, 1),
            "valid_to": date(2025, 12, 31),
            "terms": "CY-CY",
            "is_active": True,
        }
        data.update(overrides)
        return ShippingRate(**data)

    return _make


@pytest.fixture
def mid_2025() -> date:
    return date(2025, 6, 15)


# ── Test Markers ─────────────────────────────────────────────

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "codes: Code generation tests")
    config.addinivalue_line("markers", "validation: Form validation tests")
    config.addinivalue_line("markers", "stats: Dashboard statistics tests")
    config.addinivalue_line("markers", "rates: Rate calculation tests")
