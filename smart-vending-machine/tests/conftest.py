"""
Pytest configuration.

This file adds the parent directory to the Python path so that tests
can import from the domain, services, config and api modules.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the smart-vending-machine directory to the Python path
# so tests can import domain, services, etc.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.vending_machine import VendingMachine  # noqa: E402


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def machine(fixed_clock) -> VendingMachine:
    return VendingMachine(clock=fixed_clock)
