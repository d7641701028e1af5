"""
daycount.py
Day counts and day-count fractions for the common bond conventions.

Supported conventions (case-sensitive names):
- "30E360"    (30E/360 ISDA: day 31 and last day of February -> 30)
- "EUROBOND"  (30/360 Eurobond: day 31 -> 30)
- "BONDBASIS" (30/360 US bond basis)
- "ACT360"    (Actual/360)
- "ACTACT"    (Actual/Actual: period days x compounding frequency)

Entry points:
- day_count(date1, date2, convention)                            -> days
- day_count_fraction(date1, date2, date3, compounding, convention) -> fraction
- year_fraction(start, end, convention)                           -> two-date fraction

date1: accrual start (last coupon), date2: accrual end (settlement),
date3: next coupon date (ACTACT only).

An empty convention name selects DEFAULT_CONVENTION, which can be set with the
DAYCOUNT_DEFAULT_CONVENTION environment variable before import.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Literal, Mapping, Optional

from date_utils import actual_days, days_30e360, days_bondbasis, days_eurobond

logger = logging.getLogger(__name__)

ConventionName = Literal["30E360", "EUROBOND", "BONDBASIS", "ACT360", "ACTACT"]

Numerator = Callable[[date, date], float]
Denominator = Callable[[date, date, Optional[date], int], float]

DEFAULT_CONVENTION_ENV = "DAYCOUNT_DEFAULT_CONVENTION"


def default_convention_from_env() -> str:
    """Default convention name, overridable through DAYCOUNT_DEFAULT_CONVENTION."""
    return os.getenv(DEFAULT_CONVENTION_ENV) or "30E360"


DEFAULT_CONVENTION: str = default_convention_from_env()


class ConventionNotFound(ValueError):
    """Raised when a day count convention name has no registry entry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"day count convention {self.name} not implemented"


@dataclass(frozen=True)
class Convention:
    name: str
    numerator: Numerator
    denominator: Denominator


# ------------------------------
# Denominators
# ------------------------------
def _fixed_360(date1: date, date2: date, date3: Optional[date], compounding: int) -> float:
    return 360.0


def _actual_period(date1: date, date2: date, date3: Optional[date], compounding: int) -> float:
    """compounding x actual days of the coupon period date1 -> date3."""
    if date3 is None:
        raise ValueError("ACTACT requires the next coupon date (date3)")
    if compounding <= 0:
        raise ValueError("compounding must be positive")
    period = actual_days(date1, date3)
    if period == 0:
        raise ValueError("zero-length reference period: date3 equals date1")
    return compounding * period


# ------------------------------
# Registry
# ------------------------------
_registry: Dict[str, Convention] = {}


def _register(name: str, numerator: Numerator, denominator: Denominator) -> None:
    if name in _registry:
        raise ValueError(f"Duplicate day count convention: {name}")
    _registry[name] = Convention(name, numerator, denominator)


# https://www.isda.org/2008/12/22/30-360-day-count-conventions
_register("30E360", days_30e360, _fixed_360)
_register("EUROBOND", days_eurobond, _fixed_360)
_register("BONDBASIS", days_bondbasis, _fixed_360)
_register("ACT360", actual_days, _fixed_360)
_register("ACTACT", actual_days, _actual_period)

CONVENTIONS: Mapping[str, Convention] = MappingProxyType(_registry)


def list_conventions() -> FrozenSet[str]:
    """Names of all implemented day count conventions."""
    return frozenset(CONVENTIONS)


def resolve(name: Optional[str] = "") -> Convention:
    """Look up a convention; an empty name means DEFAULT_CONVENTION."""
    if not name:
        logger.debug("No day count convention given, using default %s", DEFAULT_CONVENTION)
        name = DEFAULT_CONVENTION
    try:
        return CONVENTIONS[name]
    except KeyError:
        logger.warning("Unknown day count convention %r", name)
        raise ConventionNotFound(name) from None


# ------------------------------
# Public API
# ------------------------------
def day_count(date1: date, date2: date, convention: str = "") -> float:
    """Days from date1 to date2 under the convention (numerator only)."""
    return resolve(convention).numerator(date1, date2)


def day_count_fraction(
    date1: date,
    date2: date,
    date3: Optional[date] = None,
    compounding: int = 1,
    convention: str = "",
) -> float:
    """
    Fraction of the coupon accrued between date1 and date2.

    date3 and compounding only matter for ACTACT, whose denominator is
    compounding x actual days from date1 to date3.
    """
    conv = resolve(convention)
    return conv.numerator(date1, date2) / conv.denominator(date1, date2, date3, compounding)


def year_fraction(start: date, end: date, convention: str = "") -> float:
    """Two-date fraction; ACTACT needs day_count_fraction with a coupon date."""
    return day_count_fraction(start, end, None, 1, convention)
