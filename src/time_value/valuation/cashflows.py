"""
Cash-flow data model: payment timing and cash-flow series.

A series is a tagged variant over two input shapes:

- repeated(amount, count): one amount paid for ``count`` periods
- explicit(sequence): possibly varying amounts, one per period

Both shapes expand to the same ordered tuple of amounts, indexed from
period 1, so every valuation formula is written once over a sequence.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

import numpy as np

from time_value.config.settings import SETTINGS
from time_value.valuation.rounding import check_amount, check_period


class Timing(Enum):
    """
    When each cash flow occurs within its period.

    REGULAR: end of period (ordinary annuity, annuity-immediate)
    DUE: start of period (annuity-due)
    """

    REGULAR = "regular"
    DUE = "due"

    @classmethod
    def parse(cls, value: "Timing | str | None") -> "Timing":
        """
        Resolve a timing from an enum member, a string, or None.

        Parameters
        ----------
        value : Timing, str, or None
            ``"regular"`` / ``"due"`` (case-insensitive). None selects the
            configured default.

        Returns
        -------
        Timing

        Raises
        ------
        ValueError
            If the string is not a known timing
        """
        if value is None:
            return cls(SETTINGS.valuation.default_timing)
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"CRITICAL: timing must be 'regular' or 'due', got {value!r}"
            ) from None


class CashFlowKind(Enum):
    """Input shape a series was built from."""

    REPEATED = "repeated"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class CashFlowSeries:
    """
    Ordered cash flows, one per period, starting at period 1.

    May be empty; emptiness is reported by the valuation call, not here.

    Attributes
    ----------
    kind : CashFlowKind
        Shape the series was built from
    amounts : tuple[float, ...]
        Amount for each period, ``amounts[0]`` belongs to period 1

    Examples
    --------
    >>> CashFlowSeries.repeated(5000, 3).amounts
    (5000.0, 5000.0, 5000.0)
    >>> CashFlowSeries.explicit([100, 200]).n_periods
    2
    """

    kind: CashFlowKind
    amounts: tuple[float, ...]

    @classmethod
    def repeated(cls, amount: float, count: int) -> "CashFlowSeries":
        """
        Build a series of ``count`` copies of ``amount``.

        Raises
        ------
        ValueError
            If amount is not finite, or count is negative or fractional
        """
        count = check_period(count)
        amount = check_amount(amount)
        return cls(kind=CashFlowKind.REPEATED, amounts=(amount,) * count)

    @classmethod
    def explicit(cls, values: Iterable[float]) -> "CashFlowSeries":
        """
        Build a series from an explicit sequence of amounts.

        Raises
        ------
        ValueError
            If the input is not one-dimensional or holds non-finite values
        """
        arr = np.asarray(list(values), dtype=float)
        if arr.ndim != 1:
            raise ValueError(
                f"CRITICAL: cash flows must be one-dimensional, got shape {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise ValueError("CRITICAL: cash flows must be finite")
        return cls(kind=CashFlowKind.EXPLICIT, amounts=tuple(float(x) for x in arr))

    @classmethod
    def coerce(cls, cashflows: "CashFlowSeries | Iterable[float]") -> "CashFlowSeries":
        """Return ``cashflows`` unchanged if it is a series, else build an explicit one."""
        if isinstance(cashflows, cls):
            return cashflows
        return cls.explicit(cashflows)

    @property
    def n_periods(self) -> int:
        """Number of periods covered (== number of cash flows)."""
        return len(self.amounts)

    @property
    def is_empty(self) -> bool:
        return not self.amounts

    def to_array(self) -> np.ndarray:
        """Amounts as a float64 array."""
        return np.asarray(self.amounts, dtype=float)

    def __len__(self) -> int:
        return len(self.amounts)

    def __iter__(self) -> Iterator[float]:
        return iter(self.amounts)
