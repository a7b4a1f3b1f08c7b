"""
Centralized pytest fixtures for the time-value test suite.

Fixture Categories:
1. Tolerances - Cent-level and analytical comparison bounds
2. Cash Flow Series - Common repeated, explicit and empty schedules
"""

from dataclasses import dataclass

import pytest

from time_value.config.tolerances import (
    ANALYTICAL_TOLERANCE,
    MONEY_TOLERANCE,
    ROUND_TRIP_TOLERANCE,
)
from time_value.valuation.cashflows import CashFlowSeries

# =============================================================================
# TOLERANCES
# =============================================================================

@dataclass(frozen=True)
class ToleranceTiers:
    """Tolerance tiers used across tests."""

    analytical: float = ANALYTICAL_TOLERANCE
    money: float = MONEY_TOLERANCE
    round_trip: float = ROUND_TRIP_TOLERANCE


TOLERANCES = ToleranceTiers()


@pytest.fixture(scope="session")
def tolerances() -> ToleranceTiers:
    """Provide tiered tolerance settings for all tests."""
    return TOLERANCES


# =============================================================================
# CASH FLOW SERIES
# =============================================================================

@pytest.fixture
def level_series() -> CashFlowSeries:
    """5,000 per period for 10 periods."""
    return CashFlowSeries.repeated(5_000, 10)


@pytest.fixture
def varying_series() -> CashFlowSeries:
    """Growing payments: 100, 200, 300."""
    return CashFlowSeries.explicit([100, 200, 300])


@pytest.fixture
def empty_series() -> CashFlowSeries:
    """Series with no cash flows."""
    return CashFlowSeries.explicit([])
