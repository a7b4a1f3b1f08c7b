"""
Centralized tolerances for time-value calculations.

Results are rounded to cents, so comparisons between rounded outputs are
made at the cent level; comparisons between unrounded intermediate values
are made near machine precision.

Tolerance Tiers:
    Tier 1 (Analytical): Unrounded arithmetic, float64 accumulation only
    Tier 2 (Money): Rounded outputs, one cent
"""

from typing import Final

# =============================================================================
# Tier 1: Analytical Tolerances (Unrounded)
# =============================================================================

#: Closed-form annuity factor vs term-by-term summation
#: Tolerance: ~1e-9 allows for float64 accumulation over long schedules
ANALYTICAL_TOLERANCE: Final[float] = 1e-9


# =============================================================================
# Tier 2: Money Tolerances (Rounded to cents)
# =============================================================================

#: Two rounded results that should agree
MONEY_TOLERANCE: Final[float] = 0.01

#: PV -> FV -> PV round trip: each leg rounds once, so allow one cent plus
#: float noise on the final comparison
ROUND_TRIP_TOLERANCE: Final[float] = 0.01 + 1e-9


# =============================================================================
# Tolerance Registry (For Dynamic Access)
# =============================================================================

TOLERANCE_REGISTRY: dict[str, float] = {
    "analytical": ANALYTICAL_TOLERANCE,
    "money": MONEY_TOLERANCE,
    "round_trip": ROUND_TRIP_TOLERANCE,
}


def get_tolerance(name: str) -> float:
    """
    Get tolerance by name from registry.

    Parameters
    ----------
    name : str
        Tolerance name (see TOLERANCE_REGISTRY keys)

    Returns
    -------
    float
        Tolerance value

    Raises
    ------
    KeyError
        If tolerance name not found
    """
    if name not in TOLERANCE_REGISTRY:
        available = ", ".join(sorted(TOLERANCE_REGISTRY.keys()))
        raise KeyError(f"Unknown tolerance '{name}'. Available: {available}")
    return TOLERANCE_REGISTRY[name]
