# tests/test_date_utils.py
from datetime import date, datetime

import pytest

from date_utils import (
    actual_days,
    adjust_30e360,
    adjust_bondbasis,
    adjust_eurobond,
    days_30_360,
    days_30e360,
    days_bondbasis,
    days_eurobond,
    days_in_month,
    is_last_day_of_february,
)


def closed_form(d1, d2, adj1, adj2):
    return 360 * (d2.year - d1.year) + 30 * (d2.month - d1.month) + (adj2 - adj1)


# ----------------------------
# Actual days
# ----------------------------

def test_actual_days_across_leap_year():
    assert actual_days(date(2008, 2, 28), date(2008, 3, 1)) == 2.0
    assert actual_days(date(2007, 2, 28), date(2007, 3, 1)) == 1.0
    assert actual_days(date(2007, 12, 31), date(2008, 12, 31)) == 366.0


@pytest.mark.parametrize(
    "d1,d2",
    [
        (date(2007, 1, 15), date(2007, 1, 30)),
        (date(2006, 8, 31), date(2008, 2, 29)),
        (date(1999, 12, 31), date(2000, 3, 1)),
    ],
)
def test_actual_days_antisymmetric(d1, d2):
    assert actual_days(d1, d2) == -actual_days(d2, d1)
    assert actual_days(d1, d2) > 0


def test_actual_days_ignores_time_of_day():
    late = datetime(2024, 1, 1, 23, 0)
    early = datetime(2024, 1, 2, 1, 0)
    assert actual_days(late, early) == 1.0
    assert actual_days(date(2024, 1, 1), early) == 1.0


# ----------------------------
# February
# ----------------------------

def test_is_last_day_of_february():
    assert is_last_day_of_february(date(2008, 2, 29))
    assert not is_last_day_of_february(date(2008, 2, 28))
    assert is_last_day_of_february(date(2007, 2, 28))
    assert is_last_day_of_february(date(2100, 2, 28))  # 2100 is not a leap year
    assert is_last_day_of_february(date(2000, 2, 29))
    assert not is_last_day_of_february(date(2007, 3, 31))
    assert not is_last_day_of_february(date(2007, 1, 28))


def test_days_in_month():
    assert days_in_month(2008, 2) == 29
    assert days_in_month(2007, 2) == 28
    assert days_in_month(2007, 4) == 30


# ----------------------------
# 30/360 family
# ----------------------------

def test_days_30_360_formula():
    d1, d2 = date(2006, 11, 5), date(2008, 2, 20)
    assert days_30_360(d1, d2, 5, 20) == 360 * 2 + 30 * (2 - 11) + 15


# (d1, d2, 30E360 adjusted days, EUROBOND adjusted days, BONDBASIS adjusted days)
BOUNDARY = [
    (date(2007, 1, 31), date(2007, 3, 31), (30, 30), (30, 30), (30, 30)),
    (date(2007, 1, 15), date(2007, 1, 31), (15, 30), (15, 30), (15, 31)),
    (date(2007, 1, 31), date(2007, 2, 28), (30, 30), (30, 28), (30, 28)),
    (date(2007, 2, 28), date(2007, 3, 31), (30, 30), (28, 30), (28, 31)),
    (date(2008, 2, 29), date(2008, 3, 31), (30, 30), (29, 30), (29, 31)),
    (date(2007, 8, 31), date(2008, 2, 29), (30, 30), (30, 29), (30, 29)),
    (date(2008, 2, 28), date(2008, 3, 30), (28, 30), (28, 30), (28, 30)),
    (date(2007, 9, 30), date(2007, 10, 31), (30, 30), (30, 30), (30, 30)),
]


@pytest.mark.parametrize("d1,d2,e360,eurobond,bondbasis", BOUNDARY)
def test_adjustment_rules(d1, d2, e360, eurobond, bondbasis):
    assert adjust_30e360(d1, d2) == e360
    assert adjust_eurobond(d1, d2) == eurobond
    assert adjust_bondbasis(d1, d2) == bondbasis


@pytest.mark.parametrize("d1,d2,e360,eurobond,bondbasis", BOUNDARY)
def test_counters_match_closed_form(d1, d2, e360, eurobond, bondbasis):
    assert days_30e360(d1, d2) == closed_form(d1, d2, *e360)
    assert days_eurobond(d1, d2) == closed_form(d1, d2, *eurobond)
    assert days_bondbasis(d1, d2) == closed_form(d1, d2, *bondbasis)


def test_bondbasis_31_to_31_both_become_30():
    d1, d2 = date(2007, 1, 31), date(2007, 3, 31)
    assert days_bondbasis(d1, d2) == 60.0

