"""
date_utils.py
Calendar-date arithmetic shared by the day-count conventions.

- actual_days(d1, d2)             -> signed exact day difference
- is_last_day_of_february(d)      -> bool
- days_30_360(d1, d2, day1, day2) -> 360*(Y2-Y1) + 30*(M2-M1) + (day2-day1)
- adjust_30e360 / adjust_eurobond / adjust_bondbasis
                                  -> (day1, day2) end-of-month adjusted days

All functions are total: date2 before date1 simply gives a negative count.

Known limitation (30E360): ISDA exempts the termination date from the
last-day-of-February adjustment on date2. Which date terminates the trade is
caller context, so date2 is always adjusted here.
"""

from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import Tuple
from calendar import monthrange

_ONE_DAY = timedelta(days=1)


# ------------------------------
# Helpers
# ------------------------------
def _as_date(d: date) -> date:
    # datetimes count from midnight of their calendar day
    if isinstance(d, datetime):
        return d.date()
    return d


def days_in_month(y: int, m: int) -> int:
    return monthrange(y, m)[1]


def is_last_day_of_february(d: date) -> bool:
    """True iff d is Feb 28 in a common year or Feb 29 in a leap year."""
    return d.month == 2 and d.day == days_in_month(d.year, 2)


def actual_days(d1: date, d2: date) -> float:
    """Exact number of calendar days from d1 to d2 (negative if d2 < d1)."""
    return (_as_date(d2) - _as_date(d1)) / _ONE_DAY


# ------------------------------
# 30/360 family
# ------------------------------
def days_30_360(d1: date, d2: date, day1: int, day2: int) -> float:
    """
    Shared 30/360 count. day1/day2 are the day-of-month values after the
    active convention's end-of-month rule has been applied.
    """
    return float(360 * (d2.year - d1.year) + 30 * (d2.month - d1.month) + (day2 - day1))


def adjust_30e360(d1: date, d2: date) -> Tuple[int, int]:
    """Day 31 or last day of February -> 30, each date on its own."""
    day1, day2 = d1.day, d2.day
    if day1 == 31 or is_last_day_of_february(d1):
        day1 = 30
    # date2 is adjusted even when it is the termination date (see module docstring)
    if day2 == 31 or is_last_day_of_february(d2):
        day2 = 30
    return day1, day2


def adjust_eurobond(d1: date, d2: date) -> Tuple[int, int]:
    """Day 31 -> 30, each date on its own. No February rule."""
    day1 = 30 if d1.day == 31 else d1.day
    day2 = 30 if d2.day == 31 else d2.day
    return day1, day2


def adjust_bondbasis(d1: date, d2: date) -> Tuple[int, int]:
    """US bond basis: day2 only moves off 31 when the adjusted day1 is >= 30."""
    day1, day2 = d1.day, d2.day
    if day1 == 31:
        day1 = 30
    if day2 == 31 and day1 >= 30:
        day2 = 30
    return day1, day2


def days_30e360(d1: date, d2: date) -> float:
    d1, d2 = _as_date(d1), _as_date(d2)
    return days_30_360(d1, d2, *adjust_30e360(d1, d2))


def days_eurobond(d1: date, d2: date) -> float:
    d1, d2 = _as_date(d1), _as_date(d2)
    return days_30_360(d1, d2, *adjust_eurobond(d1, d2))


def days_bondbasis(d1: date, d2: date) -> float:
    d1, d2 = _as_date(d1), _as_date(d2)
    return days_30_360(d1, d2, *adjust_bondbasis(d1, d2))
