"""
time-value: Present and future value of single sums and annuities.

Quick Start
-----------
>>> from time_value import Annuity, SingleSum, Timing
>>> SingleSum(amount=1000, rate=0.10, period=3).present_value()
751.31
>>> Annuity.repeated(5000, 0.12, 10, Timing.DUE).present_value()
31641.25

Version: 0.1.0
"""

__version__ = "0.1.0"

# =============================================================================
# Valuation - Primary API
# =============================================================================
from time_value.valuation.single_sum import (
    SingleSum,
    single_sum_future_value,
    single_sum_present_value,
)
from time_value.valuation.annuity import (
    Annuity,
    annuity_future_value,
    annuity_present_value,
)
from time_value.valuation.batch import value_annuities

# Data model
from time_value.valuation.base import TimeValue
from time_value.valuation.cashflows import CashFlowKind, CashFlowSeries, Timing

# =============================================================================
# Errors
# =============================================================================
from time_value.errors import EmptyCashFlowError, NegativeDiscountError, ValuationError

# =============================================================================
# Configuration
# =============================================================================
from time_value.config.settings import SETTINGS

__all__ = [
    # Version
    "__version__",
    # Single sum
    "SingleSum",
    "single_sum_present_value",
    "single_sum_future_value",
    # Annuity
    "Annuity",
    "annuity_present_value",
    "annuity_future_value",
    "value_annuities",
    # Data model
    "TimeValue",
    "CashFlowKind",
    "CashFlowSeries",
    "Timing",
    # Errors
    "ValuationError",
    "NegativeDiscountError",
    "EmptyCashFlowError",
    # Config
    "SETTINGS",
]
