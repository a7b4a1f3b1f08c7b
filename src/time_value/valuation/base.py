"""
Common interface for anything with a time value.

Implemented by SingleSum and Annuity.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TimeValue(Protocol):
    """Protocol for present/future value calculation."""

    def present_value(self) -> float:
        """
        Value today, rounded to cents.

        Raises
        ------
        ValuationError
            If the inputs cannot be valued
        """
        ...

    def future_value(self) -> float:
        """
        Value at the end of the last period, rounded to cents.

        Raises
        ------
        ValuationError
            If the inputs cannot be valued
        """
        ...
