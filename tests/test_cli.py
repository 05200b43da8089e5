import io

import pytest

from yellowbelt.cli import execute, main, run
from yellowbelt.database import Database
from yellowbelt.date import DateError


@pytest.fixture
def db():
    database = Database()
    for line in [
        "Add 2017-01-01 Holiday",
        "Add 2017-03-08 Holiday",
        "Add 2017-01-01 New Year",
        "Add 2017-01-01 New Year",
    ]:
        assert execute(database, line) == []
    return database


def test_print_lists_entries(db):
    assert execute(db, "Print") == [
        "2017-01-01 Holiday",
        "2017-01-01 New Year",
        "2017-03-08 Holiday",
    ]


def test_add_keeps_event_text_after_date(db):
    execute(db, "Add 2018-02-02   party  time ")
    assert execute(db, "Last 2018-02-02") == ["2018-02-02 party  time "]


def test_del_reports_count_and_removes(db):
    assert execute(db, 'Del event == "Holiday"') == ["Removed 2 entries"]
    assert execute(db, "Print") == ["2017-01-01 New Year"]


def test_del_without_condition_removes_all(db):
    total = len(execute(db, "Print"))
    assert execute(db, "Del") == [f"Removed {total} entries"]
    assert execute(db, "Print") == []


def test_find(db):
    assert execute(db, "Find date == 2017-03-08") == ["2017-03-08 Holiday", "Found 1 entries"]


def test_last(db):
    assert execute(db, "Last 2017-06-01") == ["2017-03-08 Holiday"]
    assert execute(db, "Last 2016-12-31") == ["No entries"]


def test_last_with_bad_date_raises(db):
    with pytest.raises(DateError, match="Wrong date format: 2017/01/01"):
        execute(db, "Last 2017/01/01")


def test_blank_line_is_ignored(db):
    assert execute(db, "   ") == []


def test_unknown_command(db):
    with pytest.raises(ValueError, match="Unknown command: Frobnicate"):
        execute(db, "Frobnicate now")


def test_run_strips_newlines():
    output = list(run(["Add 2017-01-01 Holiday\n", "Print\n"]))
    assert output == ["2017-01-01 Holiday"]


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Add 2017-01-01 Holiday\nLast 2017-01-02\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "2017-01-01 Holiday\n"


def test_main_reports_errors(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Bogus\n"))
    assert main([]) == 1
    assert "Unknown command: Bogus" in capsys.readouterr().err