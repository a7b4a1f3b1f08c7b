"""
Annuity present and future value, regular and due timing.

Every formula is written once over an explicit cash-flow sequence
C_1..C_n; a repeated amount is expanded to a sequence first.

Theory
------
[T1] Regular PV = Σ C_i / (1 + r)^i,            i = 1..n
[T1] Regular FV = Σ C_i × (1 + r)^(n - i),      i = 1..n
[T1] Due PV     = Regular PV × (1 + r)
[T1] Due FV     = Σ C_i × (1 + r)^(n - i + 1),  i = 1..n

Under regular timing the last flow lands on the valuation date and earns
no interest. Under due timing every flow, the last included, earns one
period more than its regular counterpart.

Validation order: rate (NegativeDiscountError), then series
(EmptyCashFlowError). Both run before any summation.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from time_value.errors import EmptyCashFlowError
from time_value.valuation.cashflows import CashFlowSeries, Timing
from time_value.valuation.rounding import check_rate, check_rate_is_number, round_money

logger = logging.getLogger(__name__)


def _validate(
    cashflows: CashFlowSeries | Iterable[float],
    rate: float,
) -> tuple[CashFlowSeries, float]:
    """Check rate first, then the series; return the coerced inputs."""
    rate = check_rate(rate)
    series = CashFlowSeries.coerce(cashflows)
    if series.is_empty:
        logger.debug("Rejected empty cash flow series")
        raise EmptyCashFlowError()
    return series, rate


def annuity_present_value(
    cashflows: CashFlowSeries | Iterable[float],
    rate: float,
    timing: Timing | str | None = None,
) -> float:
    """
    Present value of a cash-flow series.

    Parameters
    ----------
    cashflows : CashFlowSeries or sequence of float
        One amount per period, first element is period 1
    rate : float
        Per-period discount rate (decimal), must be >= 0
    timing : Timing or str, optional
        REGULAR (end of period) or DUE (start of period).
        Default: SETTINGS.valuation.default_timing (regular).

    Returns
    -------
    float
        Present value rounded to cents

    Raises
    ------
    NegativeDiscountError
        If rate < 0
    EmptyCashFlowError
        If the series has no cash flows

    Examples
    --------
    >>> annuity_present_value(CashFlowSeries.repeated(5000, 10), 0.12)
    28251.12
    >>> annuity_present_value(CashFlowSeries.repeated(5000, 10), 0.12, Timing.DUE)
    31641.25
    """
    rate = check_rate(rate)
    timing = Timing.parse(timing)

    if timing is Timing.DUE:
        # Due flows arrive one period earlier: scale the regular result
        regular_pv = annuity_present_value(cashflows, rate, Timing.REGULAR)
        result = round_money(regular_pv * (1 + rate))
        logger.debug(f"annuity PV (due): rate={rate} regular={regular_pv} -> {result}")
        return result

    series, rate = _validate(cashflows, rate)
    amounts = series.to_array()
    periods = np.arange(1, series.n_periods + 1)

    pv = np.sum(amounts / (1 + rate) ** periods)
    result = round_money(pv)
    logger.debug(
        f"annuity PV (regular): n={series.n_periods} rate={rate} -> {result}"
    )
    return result


def annuity_future_value(
    cashflows: CashFlowSeries | Iterable[float],
    rate: float,
    timing: Timing | str | None = None,
) -> float:
    """
    Future value of a cash-flow series at the end of period n.

    Parameters
    ----------
    cashflows : CashFlowSeries or sequence of float
        One amount per period, first element is period 1
    rate : float
        Per-period growth rate (decimal), must be >= 0
    timing : Timing or str, optional
        REGULAR (end of period) or DUE (start of period).
        Default: SETTINGS.valuation.default_timing (regular).

    Returns
    -------
    float
        Future value rounded to cents

    Raises
    ------
    NegativeDiscountError
        If rate < 0
    EmptyCashFlowError
        If the series has no cash flows

    Examples
    --------
    >>> annuity_future_value(CashFlowSeries.repeated(50_000, 7), 0.09)
    460021.73
    >>> annuity_future_value(CashFlowSeries.repeated(200_000, 7), 0.12, "due")
    2259938.63
    """
    rate = check_rate(rate)
    timing = Timing.parse(timing)
    series, rate = _validate(cashflows, rate)

    n = series.n_periods
    amounts = series.to_array()
    # C_1 compounds n - 1 periods, C_n compounds 0 (regular)
    exponents = np.arange(n - 1, -1, -1)
    if timing is Timing.DUE:
        exponents = exponents + 1

    fv = np.sum(amounts * (1 + rate) ** exponents)
    result = round_money(fv)
    logger.debug(
        f"annuity FV ({timing.value}): n={n} rate={rate} -> {result}"
    )
    return result


@dataclass(frozen=True)
class Annuity:
    """
    A cash-flow series valued at a fixed per-period rate.

    Attributes
    ----------
    cashflows : CashFlowSeries
        One amount per period. A plain sequence is accepted and converted
        to an explicit series.
    rate : float
        Per-period rate (decimal). NaN is rejected here; the sign is
        checked when a value is computed.
    timing : Timing
        REGULAR or DUE. None (or omitted) selects the configured default.

    Examples
    --------
    >>> Annuity.repeated(5000, 0.12, 10).present_value()
    28251.12
    >>> Annuity([100, 200, 300], 0.05, Timing.DUE).future_value()
    651.26
    """

    cashflows: CashFlowSeries
    rate: float
    timing: Timing = None  # type: ignore[assignment]  # Set in __post_init__

    def __post_init__(self) -> None:
        # Frozen dataclass workaround: use object.__setattr__
        object.__setattr__(self, "cashflows", CashFlowSeries.coerce(self.cashflows))
        object.__setattr__(self, "rate", check_rate_is_number(self.rate))
        object.__setattr__(self, "timing", Timing.parse(self.timing))

    @classmethod
    def repeated(
        cls,
        amount: float,
        rate: float,
        period: int,
        timing: Timing | str | None = None,
    ) -> "Annuity":
        """Annuity paying ``amount`` in each of ``period`` periods."""
        return cls(CashFlowSeries.repeated(amount, period), rate, timing)

    @property
    def n_periods(self) -> int:
        return self.cashflows.n_periods

    def present_value(self) -> float:
        return annuity_present_value(self.cashflows, self.rate, self.timing)

    def future_value(self) -> float:
        return annuity_future_value(self.cashflows, self.rate, self.timing)
