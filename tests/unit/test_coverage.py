"""Unit tests for coverage end-date calculation."""

from datetime import date

import pytest

from dataset_publisher.application.services.coverage import compute_end_date, end_of_month
from dataset_publisher.domain.enums import Frequency


def test_never_has_no_end_date():
    """Test one-off datasets have no coverage period."""
    assert compute_end_date(Frequency.NEVER) is None
    assert compute_end_date(Frequency.NEVER, day=1, month=1, quarter=1, year=2020) is None


@pytest.mark.parametrize(
    "frequency,fields",
    [
        (Frequency.DAILY, {"day": 15, "month": 1, "year": 2020}),
        (Frequency.WEEKLY, {"day": 7, "month": 2, "year": 2021}),
        (Frequency.MONTHLY, {"month": 2, "year": 2020}),
        (Frequency.QUARTERLY, {"quarter": 2, "year": 2019}),
        (Frequency.ANNUALLY, {"year": 2015}),
        (Frequency.FINANCIAL_YEAR, {"year": 2015}),
    ],
)
def test_dated_frequencies_have_end_date(frequency, fields):
    """Test every frequency other than never yields an end date."""
    assert isinstance(compute_end_date(frequency, **fields), date)


def test_daily_is_exact_date():
    """Test daily end date is the entered date."""
    assert compute_end_date(Frequency.DAILY, day=15, month=1, year=2020) == date(2020, 1, 15)


def test_weekly_is_exact_date():
    """Test weekly end date is the entered date."""
    assert compute_end_date(Frequency.WEEKLY, day=31, month=12, year=2021) == date(2021, 12, 31)


def test_monthly_is_end_of_month():
    """Test monthly end date is the last day of the month."""
    assert compute_end_date(Frequency.MONTHLY, month=1, year=2020) == date(2020, 1, 31)
    assert compute_end_date(Frequency.MONTHLY, month=2, year=2020) == date(2020, 2, 29)
    assert compute_end_date(Frequency.MONTHLY, month=2, year=2019) == date(2019, 2, 28)


@pytest.mark.parametrize(
    "quarter,expected",
    [
        (1, date(2024, 6, 30)),
        (2, date(2024, 9, 30)),
        (3, date(2024, 12, 31)),
        (4, date(2025, 3, 31)),
    ],
)
def test_quarterly_uses_april_financial_year(quarter, expected):
    """Test quarters map to the end of June, September, December and next March."""
    assert compute_end_date(Frequency.QUARTERLY, quarter=quarter, year=2024) == expected


def test_annually_is_december_31():
    """Test annual end date."""
    assert compute_end_date(Frequency.ANNUALLY, year=2015) == date(2015, 12, 31)


def test_financial_year_matches_fourth_quarter():
    """Test financial-year end date equals the quarterly Q4 end date."""
    financial = compute_end_date(Frequency.FINANCIAL_YEAR, year=2015)

    assert financial == date(2016, 3, 31)
    assert financial == compute_end_date(Frequency.QUARTERLY, quarter=4, year=2015)


def test_accepts_wire_values():
    """Test frequency can be passed as its wire value."""
    assert compute_end_date("financial-year", year=2019) == date(2020, 3, 31)


def test_end_of_month():
    """Test last calendar day helper."""
    assert end_of_month(2023, 4) == date(2023, 4, 30)
    assert end_of_month(2023, 12) == date(2023, 12, 31)
