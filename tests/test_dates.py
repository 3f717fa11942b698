import datetime as dt

import numpy as np
import pandas as pd
import pytest

from appointments.data.dates import (
    excel_serial_to_date,
    format_date,
    normalize_date,
    parse_date_text,
)


@pytest.mark.parametrize("text", ["07/03/2024", "07-03-2024", "07.03.2024"])
def test_day_month_year_delimiters(text):
    assert format_date(normalize_date(text)) == "07/03/2024"


@pytest.mark.parametrize("text", ["29/02/2024", "01/01/1900", "31/12/2100", "31/01/2025"])
def test_reformat_preserves_valid_dates(text):
    assert format_date(normalize_date(text)) == text


@pytest.mark.parametrize("delim", ["/", "-", "."])
@pytest.mark.parametrize("year", [1900, 2024, 2100])
def test_every_day_of_year_round_trips(delim, year):
    day = dt.date(year, 1, 1)
    while day.year == year:
        text = f"{day.day:02d}{delim}{day.month:02d}{delim}{year}"
        assert format_date(normalize_date(text)) == format_date(day)
        day += dt.timedelta(days=1)


def test_time_suffix_is_ignored():
    assert normalize_date("01/08/2025 14:30:00") == dt.date(2025, 8, 1)


@pytest.mark.parametrize("text", [
    "31/04/2025",   # April has 30 days
    "00/01/2025",
    "29/02/2023",
    "15/13/2025",
    "",
    "   ",
    "tomorrow",
    "1 March 2025",
    "12/2025",
])
def test_rejects_invalid_strings(text):
    assert normalize_date(text) is None


def test_year_first_text_uses_fallback():
    assert normalize_date("2025-08-03") == dt.date(2025, 8, 3)
    assert normalize_date("2025-08-03T09:00:00") == dt.date(2025, 8, 3)


def test_month_first_text_uses_fallback():
    assert normalize_date("12/25/2025") == dt.date(2025, 12, 25)
    assert normalize_date("08/13/2025 10:00") == dt.date(2025, 8, 13)


def test_fallback_still_rejects_impossible_days():
    assert normalize_date("31/04/2025") is None
    assert normalize_date("00/01/2025") is None
    assert normalize_date("02/30/2025") is None


def test_serial_45_is_valentines_1900():
    assert format_date(normalize_date(45)) == "14/02/1900"


def test_serial_days_around_phantom_leap_day():
    assert normalize_date(59) == dt.date(1900, 2, 28)
    assert normalize_date(61) - normalize_date(60) == dt.timedelta(days=1)
    assert normalize_date(61) == dt.date(1900, 3, 1)


def test_modern_serial_with_time_fraction():
    assert excel_serial_to_date(45870.75) == dt.date(2025, 8, 1)
    assert normalize_date(np.int64(45870)) == dt.date(2025, 8, 1)


def test_zero_cell_is_empty():
    assert normalize_date(0) is None
    assert normalize_date(0.0) is None


def test_serial_overflow_and_nan():
    assert excel_serial_to_date(1e12) is None
    assert normalize_date(float("nan")) is None
    assert normalize_date(float("inf")) is None


def test_decoded_date_cells():
    assert normalize_date(dt.datetime(2025, 8, 1, 10, 30)) == dt.date(2025, 8, 1)
    assert normalize_date(pd.Timestamp("2025-08-01 10:30")) == dt.date(2025, 8, 1)
    assert normalize_date(dt.date(2025, 8, 1)) == dt.date(2025, 8, 1)
    assert normalize_date(pd.NaT) is None


def test_non_dates_are_none():
    assert normalize_date(None) is None
    assert normalize_date(True) is None
    assert normalize_date(["01/01/2025"]) is None


def test_format_zero_pads():
    assert format_date(dt.date(905, 1, 2)) == "02/01/0905"


def test_parse_date_text_accepts_both_forms():
    assert parse_date_text("2025-08-01") == dt.date(2025, 8, 1)
    assert parse_date_text(" 01/08/2025 ") == dt.date(2025, 8, 1)


@pytest.mark.parametrize("text", ["", "31/04/2025", "soon"])
def test_parse_date_text_raises(text):
    with pytest.raises(ValueError):
        parse_date_text(text)
