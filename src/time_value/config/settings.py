"""
Frozen configuration settings for time-value calculations.

All configuration is immutable (frozen dataclasses) so that results are
reproducible across calls and across processes.
"""

import os
from dataclasses import dataclass, field

# =============================================================================
# Rounding Configuration
# =============================================================================

DEFAULT_DECIMAL_PLACES = 2


def _resolve_decimal_places() -> int:
    """
    Resolve output precision with environment variable override.

    Priority:
    1. TIME_VALUE_DECIMAL_PLACES environment variable (if set)
    2. Default: 2 (cents)

    Returns
    -------
    int
        Number of decimal places applied to every result

    Raises
    ------
    ValueError
        If the override is not a non-negative integer
    """
    env_value = os.environ.get("TIME_VALUE_DECIMAL_PLACES")
    if not env_value:
        return DEFAULT_DECIMAL_PLACES
    places = int(env_value)
    if places < 0:
        raise ValueError(
            f"CRITICAL: TIME_VALUE_DECIMAL_PLACES must be >= 0, got {places}"
        )
    return places


@dataclass(frozen=True)
class RoundingConfig:
    """
    Immutable output rounding configuration.

    Attributes
    ----------
    decimal_places : int
        Places kept by the single final rounding step. Override with the
        TIME_VALUE_DECIMAL_PLACES environment variable.
    """

    decimal_places: int = field(default_factory=_resolve_decimal_places)


# =============================================================================
# Valuation Configuration
# =============================================================================

@dataclass(frozen=True)
class ValuationConfig:
    """
    Immutable valuation defaults.

    Attributes
    ----------
    default_timing : str
        Timing used when a caller does not pass one ("regular" or "due")
    """

    default_timing: str = "regular"

    def __post_init__(self) -> None:
        if self.default_timing not in ("regular", "due"):
            raise ValueError(
                f"CRITICAL: default_timing must be 'regular' or 'due', "
                f"got {self.default_timing!r}"
            )


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Master frozen configuration combining all sub-configs.

    Usage
    -----
    >>> from time_value.config.settings import SETTINGS
    >>> SETTINGS.rounding.decimal_places
    2
    """

    rounding: RoundingConfig = field(default_factory=RoundingConfig)
    valuation: ValuationConfig = field(default_factory=ValuationConfig)


# Singleton instance - import this
SETTINGS = Settings()
