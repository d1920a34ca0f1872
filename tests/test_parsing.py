"""
Tests for date and number parsing.
"""

import math
from datetime import date

import pytest

from exercise_tracker.app.core.parsing import (
    format_date,
    parse_date,
    parse_number,
    render_number,
)


@pytest.mark.parametrize(
    "text",
    [
        "2023-01-15",
        "2023-1-15",
        "2023/01/15",
        " 2023-01-15 ",
        "2023-01-15T08:30:00",
        "2023-01-15T08:30:00Z",
        "Sun Jan 15 2023",
        "Jan 15 2023",
        "January 15, 2023",
    ],
)
def test_parse_date_accepts_common_forms(text):
    assert parse_date(text) == date(2023, 1, 15)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "abc",
        "2023-02-30",
        "2023-13-01",
        "15/01/2023",
        "Foo Jan 15 2023",
        "Jam 15 2023",
        "20230115",
        "2023-01-15T10",
        "2023-02-30T10:00:00",
        "\uff12\uff10\uff12\uff13-01-15",
        "Jan \u0661\u0665 2023",
    ],
)
def test_parse_date_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_format_date_pads_day_and_uses_english_names():
    assert format_date(date(2023, 1, 15)) == "Sun Jan 15 2023"
    assert format_date(date(2023, 1, 5)) == "Thu Jan 05 2023"
    assert format_date(date(2024, 2, 29)) == "Thu Feb 29 2024"


def test_rendered_date_parses_back():
    value = date(2022, 12, 31)
    assert parse_date(format_date(value)) == value


@pytest.mark.parametrize(
    "text, expected",
    [("30", 30.0), (" 45 ", 45.0), ("12.5", 12.5), ("-5", -5.0), (".5", 0.5), ("1e2", 100.0)],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_number_infinity():
    assert parse_number("Infinity") == math.inf
    assert parse_number("-Infinity") == -math.inf


@pytest.mark.parametrize(
    "text",
    ["abc", "", " ", "NaN", "nan", "inf", "0x1A", "1_000", "3 4", "\u0663\u0660", "\uff13\uff10"],
)
def test_parse_number_rejects(text):
    with pytest.raises(ValueError):
        parse_number(text)


def test_render_number_keeps_whole_values_integral():
    assert render_number(30.0) == 30
    assert isinstance(render_number(30.0), int)
    assert render_number(12.5) == 12.5
