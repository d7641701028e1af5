"""
daycount_table.py
Tabular and vectorised helpers on top of daycount.py.

- conventions_table(date1, date2, date3, compounding, conventions)
    -> DataFrame[Convention, Days, Fraction], one row per convention
- day_counts(starts, ends, convention)
    -> np.ndarray of day counts, element-wise over two date sequences

ACTACT rows without a usable coupon period (no date3, date3 == date1,
non-positive compounding) get Fraction = NaN.
"""

from __future__ import annotations
from datetime import date
from typing import Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from daycount import day_count, day_count_fraction, list_conventions, resolve


def conventions_table(
    date1: date,
    date2: date,
    date3: Optional[date] = None,
    compounding: int = 1,
    conventions: Optional[Iterable[str]] = None,
) -> pd.DataFrame:
    """Days and fraction for date1 -> date2 under each convention, sorted by name."""
    names = sorted(list_conventions()) if conventions is None else list(conventions)
    rows = []
    for name in names:
        conv = resolve(name)
        days = day_count(date1, date2, conv.name)
        try:
            frac = day_count_fraction(date1, date2, date3, compounding, conv.name)
        except ValueError:
            # ACTACT without a usable coupon period
            frac = np.nan
        rows.append({"Convention": conv.name, "Days": days, "Fraction": frac})
    return pd.DataFrame(rows, columns=["Convention", "Days", "Fraction"])


def day_counts(starts: Sequence[date], ends: Sequence[date], convention: str = "") -> np.ndarray:
    """Vectorised day_count over paired start/end dates."""
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    conv = resolve(convention)
    return np.array([conv.numerator(d1, d2) for d1, d2 in zip(starts, ends)], dtype=float)
