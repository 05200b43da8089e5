# yellowbelt

A collection of small, self-contained tools and library functions. The main
tool is a dated event database with a short command language and a condition
query syntax. The package also has a bus route directory, an arithmetic
expression bracketer and a set of general algorithms.

Nothing beyond the Python standard library is needed (Python 3.10 or later).

## The event database

Start it with:

    yellowbelt-db

Commands are read from standard input, one per line:

| Command                 | Effect                                                        |
|-------------------------|---------------------------------------------------------------|
| `Add <date> <event>`    | store an event for a date; an event already on that date is ignored |
| `Print`                 | list every entry as `YYYY-MM-DD event`, ordered by date       |
| `Find <condition>`      | list the matching entries, then `Found N entries`             |
| `Del <condition>`       | remove the matching entries, then print `Removed N entries`   |
| `Last <date>`           | the last event added on the latest date not after `<date>`, or `No entries` |

Dates are written `year-month-day`. The month must be between 1 and 12 and the
day between 1 and 31, or the date is rejected. Empty lines are skipped. An
unknown command or a malformed date or condition stops the run: the error is
written to standard error and the exit status is 1.

Conditions compare the `date` or `event` columns using `<`, `<=`, `>`, `>=`,
`==` and `!=`. You can combine them with `AND` and `OR` and group them with
parentheses. `AND` binds more tightly than `OR`. Event values go in double
quotes. An empty condition matches everything.

    Add 2017-01-01 Holiday
    Add 2017-03-08 Holiday
    Add 2017-01-01 New Year
    Find event != "working day"
    Del date > 2017-01-01 AND event == "Holiday"
    Last 2017-06-01

The same machinery can be used from Python:

```python
from yellowbelt.condition_parser import parse_condition
from yellowbelt.database import Database
from yellowbelt.date import parse_date

db = Database()
db.add(parse_date("2017-01-01"), "Holiday")
db.add(parse_date("2017-03-08"), "Holiday")

condition = parse_condition('date >= 2017-01-01 AND event == "Holiday"')
print(db.find_if(condition.evaluate))
print(db.last(parse_date("2017-02-01")))
```

`Database.last` raises `LookupError` when there is no entry on or before the
date. `Database.remove_if` returns the number of entries removed, and
`Database.render` returns all entries as text.

Other parts of the database code:

* `yellowbelt.tokens.tokenize` splits a condition into tokens.
* `yellowbelt.nodes` holds the expression tree that `parse_condition` builds.
* `yellowbelt.events.EventList` keeps the events of one date, in order and without duplicates.
* `yellowbelt.cli.execute` runs a single command and `yellowbelt.cli.run` runs a whole script. Neither reads standard input.

Date problems raise `yellowbelt.date.DateError`. Condition problems raise
`ValueError`.

The database exists only in memory. Nothing is saved between runs, and there
is no file or server storage.

## Bus routes

    yellowbelt-buses

The first input word is the number of queries. Each query that follows is one
of these:

* `NEW_BUS <bus> <stop count> <stop> ...`
* `BUSES_FOR_STOP <stop>`: the buses that call there, in the order they were added, or `No stop`
* `STOPS_FOR_BUS <bus>`: each stop on the route with the other buses that serve it (`no interchange` if there are none), or `No bus`
* `ALL_BUSES`: every route, ordered by bus name, or `No buses`

Programs can get the same answers from `yellowbelt.buses.BusManager`.
`yellowbelt.buses.read_queries` parses query text into `Query` objects.

## Expression bracketing

    yellowbelt-expression [--minimal]

This command reads a starting number, an operation count and that many
`<operator> <operand>` pairs. It prints the expression you get by applying the
operations in order. By default every intermediate result is wrapped in
parentheses (`yellowbelt.expression.bracket_all`). With `--minimal`,
parentheses are added only where a `+` or `-` step is followed by `*` or `/`
(`yellowbelt.expression.bracket_minimal`).

## Library modules

* `yellowbelt.algorithms`:
  * `vector_part`
  * `find_greater_elements`
  * `split_into_words`
  * `remove_duplicates`
  * `reverse_permutations`
  * `find_nearest_element`
  * `find_starts_with` (an index range in sorted strings)
  * `is_even`
* `yellowbelt.sorting`: `merge_sort_halves` and `merge_sort_thirds`.
* `yellowbelt.quadratic.distinct_real_root_count`: the number of distinct real roots of `a·x² + b·x + c = 0`.
* `yellowbelt.name_history.Person`: first and last names recorded by year. `full_name(year)` gives the name as of that year.
* `yellowbelt.palindrome.is_palindrome`.
* `yellowbelt.phone_number.PhoneNumber`: parses `+country-city-local` numbers and raises `ValueError` on malformed input.
* `yellowbelt.basics`: `add`, `reverse`, `sort_numbers` and a `Rectangle` with `area` and `perimeter`.
* `yellowbelt.demographics`: `compute_median_age` and `stats_report` for groups by gender and employment.
* `yellowbelt.people`: `Teacher`, `Policeman`, `Student` and `Dog`. Their actions are printed to standard output. `visit_places` walks a person through a list of places.
* `yellowbelt.testkit`:
  * `assert_equal` and `assert_true`, which raise `AssertionFailure` with readable messages.
  * `format_value`.
  * A `TestRunner` context manager. It counts failures and exits with status 1 if any test failed.
  * `RandomYearGenerator`.