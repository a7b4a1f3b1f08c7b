"""
Rounding and input-validation helpers shared by every valuation path.

[T1] Results are rounded exactly once, on the final summed or multiplied
value. Per-period terms are never rounded.
"""

import logging
import math
import numbers

from time_value.config.settings import SETTINGS
from time_value.errors import NegativeDiscountError

logger = logging.getLogger(__name__)


def round_money(value: float, decimal_places: int | None = None) -> float:
    """
    Round a final result to money precision.

    Uses the built-in ``round`` so results are reproducible for identical
    inputs.

    Parameters
    ----------
    value : float
        Unrounded result
    decimal_places : int, optional
        Places to keep. Defaults to SETTINGS.rounding.decimal_places (2).

    Returns
    -------
    float
        Rounded value as a plain Python float

    Examples
    --------
    >>> round_money(751.3148009015778)
    751.31
    """
    places = SETTINGS.rounding.decimal_places if decimal_places is None else decimal_places
    return round(float(value), places)


def check_rate(rate: float) -> float:
    """
    Validate a per-period rate.

    Parameters
    ----------
    rate : float
        Per-period interest/discount rate (decimal)

    Returns
    -------
    float
        The rate as a float

    Raises
    ------
    NegativeDiscountError
        If rate < 0
    ValueError
        If rate is NaN
    """
    rate = check_rate_is_number(rate)
    if rate < 0:
        logger.debug(f"Rejected negative rate {rate}")
        raise NegativeDiscountError(rate)
    return rate


def check_rate_is_number(rate: float) -> float:
    """
    Reject a NaN rate without judging its sign.

    Used when a rate is stored, so that a negative rate can still be
    reported as NegativeDiscountError at valuation time.

    Raises
    ------
    ValueError
        If rate is NaN
    """
    rate = float(rate)
    if math.isnan(rate):
        raise ValueError("CRITICAL: rate must be a number, got NaN")
    return rate


def check_amount(amount: float) -> float:
    """
    Validate a monetary amount.

    Raises
    ------
    ValueError
        If amount is NaN or infinite
    """
    amount = float(amount)
    if not math.isfinite(amount):
        raise ValueError(f"CRITICAL: amount must be finite, got {amount}")
    return amount


def check_period(period: int) -> int:
    """
    Validate a period count.

    Accepts integral floats (``10.0``) but not fractional ones.

    Raises
    ------
    ValueError
        If period is negative or not a whole number
    """
    if isinstance(period, float) and period.is_integer():
        period = int(period)
    if isinstance(period, bool) or not isinstance(period, numbers.Integral):
        raise ValueError(f"CRITICAL: period must be a whole number, got {period!r}")
    if period < 0:
        raise ValueError(f"CRITICAL: period must be >= 0, got {period}")
    return int(period)
