import pytest

from yellowbelt.condition_parser import parse_condition
from yellowbelt.date import Date, DateError


def test_date_not_equal():
    root = parse_condition("date != 2017-11-18")
    assert root.evaluate(Date(2017, 1, 1), "")
    assert not root.evaluate(Date(2017, 11, 18), "")


def test_event_equal():
    root = parse_condition('event == "sport event"')
    assert root.evaluate(Date(2017, 1, 1), "sport event")
    assert not root.evaluate(Date(2017, 1, 1), "holiday")


def test_date_range():
    root = parse_condition("date >= 2017-01-01 AND date < 2017-07-01")
    assert root.evaluate(Date(2017, 1, 1), "")
    assert root.evaluate(Date(2017, 3, 1), "")
    assert root.evaluate(Date(2017, 6, 30), "")
    assert not root.evaluate(Date(2017, 7, 1), "")
    assert not root.evaluate(Date(2016, 12, 31), "")


def test_two_event_exclusions():
    root = parse_condition('event != "sport event" AND event != "Wednesday"')
    assert root.evaluate(Date(2017, 1, 1), "holiday")
    assert not root.evaluate(Date(2017, 1, 1), "sport event")
    assert not root.evaluate(Date(2017, 1, 1), "Wednesday")


def test_keywords_inside_quotes():
    root = parse_condition('event == "holiday AND date == 2017-11-18"')
    assert not root.evaluate(Date(2017, 11, 18), "holiday")
    assert not root.evaluate(Date(2017, 11, 18), "work day")
    assert root.evaluate(Date(1, 1, 1), "holiday AND date == 2017-11-18")


def test_nested_parentheses_event_first():
    root = parse_condition('((event == "holiday" AND date == 2017-01-01))')
    assert root.evaluate(Date(2017, 1, 1), "holiday")
    assert not root.evaluate(Date(2017, 1, 2), "holiday")


def test_parenthesised_or():
    root = parse_condition('date > 2017-01-01 AND (event == "holiday" OR date < 2017-07-01)')
    assert not root.evaluate(Date(2016, 1, 1), "holiday")
    assert root.evaluate(Date(2017, 1, 2), "holiday")
    assert root.evaluate(Date(2017, 1, 2), "workday")
    assert not root.evaluate(Date(2018, 1, 2), "workday")


def test_and_binds_tighter_than_or():
    root = parse_condition('date > 2017-01-01 AND event == "holiday" OR date < 2017-07-01')
    assert root.evaluate(Date(2016, 1, 1), "event")
    assert root.evaluate(Date(2017, 1, 2), "holiday")
    assert root.evaluate(Date(2017, 1, 2), "workday")
    assert not root.evaluate(Date(2018, 1, 2), "workday")


def test_nested_parentheses_date_first():
    root = parse_condition('((date == 2017-01-01 AND event == "holiday"))')
    assert root.evaluate(Date(2017, 1, 1), "holiday")
    assert not root.evaluate(Date(2017, 1, 2), "holiday")


def test_date_like_event_text():
    root = parse_condition('((event == "2017-01-01" OR date > 2016-01-01))')
    assert root.evaluate(Date(1, 1, 1), "2017-01-01")
    assert not root.evaluate(Date(2016, 1, 1), "event")
    assert root.evaluate(Date(2016, 1, 2), "event")


def test_empty_condition_matches_everything():
    root = parse_condition("   ")
    assert root.evaluate(Date(1, 1, 1), "")
    assert root.evaluate(Date(2017, 5, 5), "anything")


@pytest.mark.parametrize(
    "text, message",
    [
        ("date", "Expected comparison operation"),
        ("date ==", "Expected right value of comparison"),
        ("== 2017-01-01", "Expected column name: date or event"),
        ("(date == 2017-01-01", "Missing right paren"),
        ("date == 2017-01-01 date == 2017-01-01", "Expected logic operation"),
        ("date == 2017-01-01)", "Unexpected tokens after condition"),
        ("date == 2017-01-01 AND", "Expected expression after logical operation"),
    ],
)
def test_syntax_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_condition(text)


def test_invalid_date_value():
    with pytest.raises(DateError, match="Month value is invalid: 13"):
        parse_condition("date == 2017-13-01")