"""Coverage end-date calculation for data links."""

import calendar
from datetime import date
from typing import Callable

from dataset_publisher.domain.enums import Frequency

# Quarters of a financial year starting in April, mapped to
# (end month, year offset)
_QUARTER_END_MONTHS: dict[int, tuple[int, int]] = {
    1: (6, 0),
    2: (9, 0),
    3: (12, 0),
    4: (3, 1),
}

# Strategy pattern: Map frequencies to end-date rules
_END_DATE_RULES: dict[Frequency, Callable[..., date | None]] = {}


def _register_rule(frequency: Frequency, rule: Callable[..., date | None]) -> None:
    """Register an end-date rule."""
    _END_DATE_RULES[frequency] = rule


def end_of_month(year: int, month: int) -> date:
    """Last calendar day of a month."""
    return date(year, month, calendar.monthrange(year, month)[1])


def _never(**_: int | None) -> None:
    return None


def _exact_day(day: int, month: int, year: int, **_: int | None) -> date:
    return date(year, month, day)


def _monthly(month: int, year: int, **_: int | None) -> date:
    return end_of_month(year, month)


def _quarterly(quarter: int, year: int, **_: int | None) -> date:
    end_month, year_offset = _QUARTER_END_MONTHS[quarter]
    return end_of_month(year + year_offset, end_month)


def _annually(year: int, **_: int | None) -> date:
    return date(year, 12, 31)


def _financial_year(year: int, **_: int | None) -> date:
    return _quarterly(quarter=4, year=year)


_register_rule(Frequency.NEVER, _never)
_register_rule(Frequency.DAILY, _exact_day)
_register_rule(Frequency.WEEKLY, _exact_day)
_register_rule(Frequency.MONTHLY, _monthly)
_register_rule(Frequency.QUARTERLY, _quarterly)
_register_rule(Frequency.ANNUALLY, _annually)
_register_rule(Frequency.FINANCIAL_YEAR, _financial_year)

_missing_rules = set(Frequency) - set(_END_DATE_RULES)
if _missing_rules:
    raise RuntimeError(f"No end-date rule for frequencies: {sorted(f.value for f in _missing_rules)}")


def compute_end_date(
    frequency: Frequency,
    day: int | None = None,
    month: int | None = None,
    quarter: int | None = None,
    year: int | None = None,
) -> date | None:
    """Compute the end of the period covered by a data link.

    Inputs must already be validated for the frequency: daily and weekly use
    the exact date, monthly the last day of the month, quarterly the last day
    of the quarter's end month in an April-March financial year, annually
    December 31, and financial-year the end of March of the following year.
    ``never`` has no coverage period and yields None.
    """
    rule = _END_DATE_RULES[Frequency(frequency)]
    return rule(day=day, month=month, quarter=quarter, year=year)
