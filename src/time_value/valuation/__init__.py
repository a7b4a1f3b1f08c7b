"""
Valuation engine: single sums and annuities, regular and due timing.

All results are rounded once to cents. Negative rates raise
NegativeDiscountError; empty annuity series raise EmptyCashFlowError.
"""

from .annuity import Annuity, annuity_future_value, annuity_present_value
from .base import TimeValue
from .batch import value_annuities
from .cashflows import CashFlowKind, CashFlowSeries, Timing
from .rounding import (
    check_amount,
    check_period,
    check_rate,
    check_rate_is_number,
    round_money,
)
from .single_sum import SingleSum, single_sum_future_value, single_sum_present_value

__all__ = [
    # Data model
    "CashFlowKind",
    "CashFlowSeries",
    "Timing",
    "TimeValue",
    # Single sum
    "SingleSum",
    "single_sum_present_value",
    "single_sum_future_value",
    # Annuity
    "Annuity",
    "annuity_present_value",
    "annuity_future_value",
    # Batch
    "value_annuities",
    # Helpers
    "round_money",
    "check_rate",
    "check_period",
    "check_amount",
    "check_rate_is_number",
]
