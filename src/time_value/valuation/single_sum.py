"""
Single-sum (lump sum) present and future value.

Theory
------
[T1] PV = A / (1 + r)^n
[T1] FV = A × (1 + r)^n

A may be negative (a liability or outflow). n = 0 returns A unchanged.
A growth factor beyond float range gives inf for FV and 0.0 for PV,
the same as the annuity path.
"""

import logging

import numpy as np

from time_value.valuation.rounding import (
    check_amount,
    check_period,
    check_rate,
    check_rate_is_number,
    round_money,
)

logger = logging.getLogger(__name__)


def single_sum_present_value(amount: float, rate: float, period: int) -> float:
    """
    Present value of one amount received after ``period`` periods.

    Parameters
    ----------
    amount : float
        Amount at the end of period ``period``
    rate : float
        Per-period discount rate (decimal), must be >= 0
    period : int
        Number of periods, >= 0

    Returns
    -------
    float
        Present value rounded to cents

    Raises
    ------
    NegativeDiscountError
        If rate < 0
    ValueError
        If amount is NaN or infinite

    Examples
    --------
    >>> single_sum_present_value(1000, 0.10, 3)
    751.31
    """
    rate = check_rate(rate)
    period = check_period(period)
    amount = check_amount(amount)

    pv = amount / np.power(1.0 + rate, period)
    result = round_money(pv)
    logger.debug(f"single sum PV: amount={amount} rate={rate} n={period} -> {result}")
    return result


def single_sum_future_value(amount: float, rate: float, period: int) -> float:
    """
    Future value of one amount invested for ``period`` periods.

    Parameters
    ----------
    amount : float
        Amount today
    rate : float
        Per-period growth rate (decimal), must be >= 0
    period : int
        Number of periods, >= 0

    Returns
    -------
    float
        Future value rounded to cents

    Raises
    ------
    NegativeDiscountError
        If rate < 0
    ValueError
        If amount is NaN or infinite

    Examples
    --------
    >>> single_sum_future_value(150_000, 0.12, 10)
    465877.23
    """
    rate = check_rate(rate)
    period = check_period(period)
    amount = check_amount(amount)

    fv = amount * np.power(1.0 + rate, period)
    result = round_money(fv)
    logger.debug(f"single sum FV: amount={amount} rate={rate} n={period} -> {result}")
    return result


class SingleSum:
    """
    A lump sum with a rate and a period count.

    Mutable: amount, rate and period can each be changed after
    construction. The sign of the rate is checked when a value is
    computed, so a negative rate can be stored and is reported by
    present_value() / future_value(). NaN rates and non-finite amounts
    are rejected when set.

    Examples
    --------
    >>> s = SingleSum(amount=1000, rate=0.10, period=3)
    >>> s.present_value()
    751.31
    >>> s.set_period(0)
    >>> s.future_value()
    1000.0
    """

    def __init__(self, amount: float, rate: float, period: int):
        self._amount = check_amount(amount)
        self._rate = check_rate_is_number(rate)
        self._period = check_period(period)

    def __repr__(self) -> str:
        return f"SingleSum(amount={self._amount}, rate={self._rate}, period={self._period})"

    @property
    def amount(self) -> float:
        return self._amount

    @amount.setter
    def amount(self, value: float) -> None:
        self._amount = check_amount(value)

    @property
    def rate(self) -> float:
        return self._rate

    @rate.setter
    def rate(self, value: float) -> None:
        self._rate = check_rate_is_number(value)

    @property
    def period(self) -> int:
        return self._period

    @period.setter
    def period(self, value: int) -> None:
        self._period = check_period(value)

    def set_amount(self, amount: float) -> None:
        self.amount = amount

    def set_rate(self, rate: float) -> None:
        self.rate = rate

    def set_period(self, period: int) -> None:
        self.period = period

    def present_value(self) -> float:
        return single_sum_present_value(self._amount, self._rate, self._period)

    def future_value(self) -> float:
        return single_sum_future_value(self._amount, self._rate, self._period)
