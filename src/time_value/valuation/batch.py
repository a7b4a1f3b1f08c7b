"""
Batch valuation of independent annuities.

Each request is valued on its own; a failed request records its error kind
in the ``error`` column instead of aborting the batch.
"""

import logging
from collections.abc import Iterable

import numpy as np
import pandas as pd

from time_value.errors import ValuationError
from time_value.valuation.annuity import Annuity

logger = logging.getLogger(__name__)

BATCH_COLUMNS = (
    "timing",
    "rate",
    "n_periods",
    "present_value",
    "future_value",
    "error",
)


def value_annuities(requests: Iterable[Annuity]) -> pd.DataFrame:
    """
    Value many annuities, one row per request.

    Parameters
    ----------
    requests : iterable of Annuity
        Independent valuation requests

    Returns
    -------
    pd.DataFrame
        Columns: timing, rate, n_periods, present_value, future_value, error.
        Values are NaN and ``error`` holds the error kind for rows that
        failed validation; ``error`` is None for rows that succeeded.

    Examples
    --------
    >>> df = value_annuities([
    ...     Annuity.repeated(5000, 0.12, 10),
    ...     Annuity.repeated(5000, -0.01, 10),
    ... ])
    >>> df["error"].tolist()
    [None, 'negative_discount']
    """
    rows = []
    for i, annuity in enumerate(requests):
        row = {
            "timing": annuity.timing.value,
            "rate": annuity.rate,
            "n_periods": annuity.n_periods,
            "present_value": np.nan,
            "future_value": np.nan,
            "error": None,
        }
        try:
            row["present_value"] = annuity.present_value()
            row["future_value"] = annuity.future_value()
        except ValuationError as e:
            logger.warning(f"  Request {i} FAILED: {e}")
            row["error"] = e.kind
        rows.append(row)

    n_failed = sum(1 for r in rows if r["error"] is not None)
    logger.info(f"Valued {len(rows)} annuities ({n_failed} failed)")
    df = pd.DataFrame(rows, columns=list(BATCH_COLUMNS))
    # Object dtype keeps None for successful rows (string dtype would give NaN)
    df["error"] = pd.Series([r["error"] for r in rows], index=df.index, dtype=object)
    return df
