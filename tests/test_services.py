"""
Tests for exercise logging and log queries at the service layer.
"""

from datetime import date

import pytest

from exercise_tracker.app.core.errors import NotFoundError, ValidationError
from exercise_tracker.app.services.exercise_service import ExerciseService
from exercise_tracker.app.services.log_service import LogFilter, LogService


@pytest.fixture
def user(store):
    return store.add_user("fcc_test")


@pytest.fixture
def exercises(store):
    return ExerciseService(store)


@pytest.fixture
def logs(store):
    return LogService(store)


def test_add_exercise_returns_user_and_entry(exercises, user):
    added = exercises.add_exercise(user.id, "test run", "30", "2023-01-15")
    assert added.model_dump() == {
        "username": "fcc_test",
        "description": "test run",
        "duration": 30,
        "date": "Sun Jan 15 2023",
        "id": user.id,
    }
    assert user.log[-1].date == date(2023, 1, 15)


def test_add_exercise_defaults_to_today(exercises, user, monkeypatch):
    monkeypatch.setattr(
        "exercise_tracker.app.services.exercise_service.today", lambda: date(2024, 3, 1)
    )
    added = exercises.add_exercise(user.id, "swim", "45")
    assert added.date == "Fri Mar 01 2024"


def test_add_exercise_keeps_fractional_and_negative_durations(exercises, user):
    assert exercises.add_exercise(user.id, "walk", "12.5", "2023-01-01").duration == 12.5
    assert exercises.add_exercise(user.id, "walk", "-5", "2023-01-01").duration == -5


def test_add_exercise_unknown_user(exercises):
    with pytest.raises(NotFoundError, match="unknown user id"):
        exercises.add_exercise("missing", "run", "30")


@pytest.mark.parametrize(
    "description, duration, when, message",
    [
        (None, "30", None, "description and duration are required"),
        ("run", "", None, "description and duration are required"),
        ("run", "abc", None, "duration must be a number"),
        ("run", "Infinity", None, "duration must be a number"),
        ("run", "30", "not-a-date", "Invalid Date"),
        ("run", "30", "2023-02-30", "Invalid Date"),
    ],
)
def test_add_exercise_rejects_bad_input_without_appending(
    exercises, user, description, duration, when, message
):
    with pytest.raises(ValidationError, match=message):
        exercises.add_exercise(user.id, description, duration, when)
    assert user.log == []


@pytest.fixture
def january(exercises, user):
    for day in (5, 10, 15, 20, 25):
        exercises.add_exercise(user.id, f"day {day}", str(day), f"2023-01-{day:02d}")
    return user


def test_query_logs_without_filters_returns_everything_in_order(logs, january):
    result = logs.query_logs(january.id)
    assert result.count == 5
    assert [entry.description for entry in result.log] == [
        "day 5", "day 10", "day 15", "day 20", "day 25",
    ]


def test_query_logs_date_range_is_inclusive(logs, january):
    result = logs.query_logs(january.id, "2023-01-10", "2023-01-20")
    assert [entry.date for entry in result.log] == [
        "Tue Jan 10 2023", "Sun Jan 15 2023", "Fri Jan 20 2023",
    ]


def test_query_logs_inverted_range_is_empty(logs, january):
    result = logs.query_logs(january.id, "2023-01-20", "2023-01-10")
    assert result.count == 0
    assert result.log == []


def test_query_logs_limit_is_prefix_after_filtering(logs, january):
    result = logs.query_logs(january.id, "2023-01-10", None, "2")
    assert [entry.description for entry in result.log] == ["day 10", "day 15"]
    assert result.count == 2


def test_query_logs_keeps_insertion_order_not_date_order(logs, exercises, user):
    exercises.add_exercise(user.id, "late", "10", "2023-06-01")
    exercises.add_exercise(user.id, "early", "10", "2023-01-01")
    result = logs.query_logs(user.id, limit="1")
    assert [entry.description for entry in result.log] == ["late"]


def test_query_logs_does_not_mutate_stored_log(logs, january):
    logs.query_logs(january.id, "2023-01-20", None, "1")
    assert len(january.log) == 5


@pytest.mark.parametrize("limit", ["abc", "-1", "Infinity", ""])
def test_query_logs_ignores_unusable_limit(logs, january, limit):
    assert logs.query_logs(january.id, limit=limit).count == 5


def test_query_logs_zero_and_fractional_limit(logs, january):
    assert logs.query_logs(january.id, limit="0").count == 0
    assert logs.query_logs(january.id, limit="2.9").count == 2


def test_query_logs_rejects_bad_dates(logs, january):
    with pytest.raises(ValidationError, match="Invalid from date"):
        logs.query_logs(january.id, date_from="yesterday")
    with pytest.raises(ValidationError, match="Invalid to date"):
        logs.query_logs(january.id, date_to="2023-99-01")


def test_query_logs_unknown_user_checked_before_dates(logs):
    with pytest.raises(NotFoundError):
        logs.query_logs("missing", date_from="garbage")


def test_log_filter_parse_defaults():
    assert LogFilter.parse() == LogFilter()
    parsed = LogFilter.parse("2023-01-01", "2023-12-31", "3")
    assert parsed == LogFilter(date(2023, 1, 1), date(2023, 12, 31), 3)
