"""
Anti-pattern tests for regular/due timing conventions.

Guards against the classic off-by-one mistakes:
- compounding the last regular payment
- re-deriving due PV instead of scaling the regular result
- treating due FV as regular FV with one extra payment
"""

import pytest

from time_value.valuation.annuity import annuity_future_value, annuity_present_value
from time_value.valuation.cashflows import CashFlowSeries, Timing

RATES = [0.0, 0.01, 0.05, 0.12, 0.5]
SERIES = [
    CashFlowSeries.repeated(5_000, 10),
    CashFlowSeries.explicit([100, 250, -50, 400]),
    CashFlowSeries.explicit([1_000]),
]


class TestDuePresentValueDelegation:
    """Due PV is the rounded regular PV scaled by one period of growth."""

    @pytest.mark.anti_pattern
    @pytest.mark.parametrize("rate", RATES)
    @pytest.mark.parametrize("series", SERIES)
    def test_due_pv_scales_regular_pv(self, series, rate) -> None:
        regular = annuity_present_value(series, rate, Timing.REGULAR)
        due = annuity_present_value(series, rate, Timing.DUE)
        assert due == round(regular * (1 + rate), 2)


class TestFutureValueExponents:
    """Regular FV does not compound the final payment; due FV compounds all."""

    @pytest.mark.anti_pattern
    def test_regular_fv_last_payment_not_compounded(self) -> None:
        """Only the final payment is non-zero: FV equals that payment."""
        series = CashFlowSeries.explicit([0, 0, 0, 1_000])
        assert annuity_future_value(series, 0.10, Timing.REGULAR) == 1_000.0

    @pytest.mark.anti_pattern
    def test_due_fv_last_payment_compounded_once(self) -> None:
        series = CashFlowSeries.explicit([0, 0, 0, 1_000])
        assert annuity_future_value(series, 0.10, Timing.DUE) == 1_100.0

    @pytest.mark.anti_pattern
    def test_first_payment_exponents(self) -> None:
        """First payment compounds n - 1 periods (regular) and n periods (due)."""
        series = CashFlowSeries.explicit([1_000, 0, 0])
        assert annuity_future_value(series, 0.10, Timing.REGULAR) == round(1_000 * 1.1**2, 2)
        assert annuity_future_value(series, 0.10, Timing.DUE) == round(1_000 * 1.1**3, 2)

    @pytest.mark.anti_pattern
    @pytest.mark.parametrize("rate", RATES)
    def test_due_fv_is_regular_fv_grown_one_period(self, rate, tolerances) -> None:
        """[T1] FV_due = FV_regular × (1 + r), up to one rounding step."""
        series = CashFlowSeries.repeated(5_000, 10)
        regular = annuity_future_value(series, rate, Timing.REGULAR)
        due = annuity_future_value(series, rate, Timing.DUE)
        assert abs(due - regular * (1 + rate)) <= tolerances.money * (1 + rate)

    @pytest.mark.anti_pattern
    def test_zero_rate_timing_irrelevant(self) -> None:
        series = CashFlowSeries.explicit([100, 250, -50, 400])
        for measure in (annuity_present_value, annuity_future_value):
            assert measure(series, 0.0, Timing.REGULAR) == measure(series, 0.0, Timing.DUE) == 700.0


class TestNoIntermediateRounding:
    """Rounding happens once, on the total."""

    @pytest.mark.anti_pattern
    def test_sub_cent_payments_accumulate(self) -> None:
        """1,000 payments of 0.004 would vanish if each term were rounded."""
        series = CashFlowSeries.repeated(0.004, 1_000)
        assert annuity_future_value(series, 0.0) == 4.0
        assert annuity_present_value(series, 0.0) == 4.0
