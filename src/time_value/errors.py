"""
Valuation error types.

Both errors are terminal input-validation failures: callers correct the
input and call again. They subclass ValueError so that code written
against the plain ``ValueError`` contract keeps working.
"""


class ValuationError(ValueError):
    """Base class for errors raised by a valuation call."""

    kind: str = "valuation_error"


class NegativeDiscountError(ValuationError):
    """
    Rate is negative.

    Checked before any other validation and before any arithmetic.
    """

    kind = "negative_discount"

    def __init__(self, rate: float):
        self.rate = rate
        super().__init__(f"CRITICAL: rate must be >= 0, got {rate}")


class EmptyCashFlowError(ValuationError):
    """Cash-flow series has no elements (annuity operations only)."""

    kind = "empty_cash_flow"

    def __init__(self) -> None:
        super().__init__("CRITICAL: cash flow series is empty")
