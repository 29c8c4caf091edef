from __future__ import annotations

from datetime import date

from src.attendance_analytics.attendance_analytics.analytics.filters import MonthFilter, build_month_filter


def test_no_params_means_no_filter():
    assert build_month_filter(None, None) is None
    assert build_month_filter("", "") is None


def test_unparseable_year_and_unknown_months_are_ignored():
    assert build_month_filter("twenty", "Foo,jan") is None


def test_year_and_months_are_normalized():
    f = build_month_filter(" 2025 ", " Jan , Mar,Foo")
    assert f == MonthFilter(year=2025, months=frozenset({1, 3}))


def test_months_accepts_a_list():
    f = build_month_filter(None, ["Jan", "Dec"])
    assert f.year is None
    assert f.months == frozenset({1, 12})


def test_month_names_are_case_sensitive():
    assert build_month_filter(None, "JAN,feb") is None


def test_matches_requires_both_constraints():
    f = MonthFilter(year=2025, months=frozenset({1, 2}))

    assert f.matches(2025, 1)
    assert f(2025, 2)
    assert not f.matches(2025, 3)
    assert not f.matches(2024, 1)
    assert f.matches_date(date(2025, 2, 28))


def test_missing_constraint_matches_everything():
    assert MonthFilter(year=2024).matches(2024, 7)
    assert MonthFilter(months=frozenset({7})).matches(1999, 7)
    assert MonthFilter().matches(2030, 12)


def test_sql_predicate():
    f = MonthFilter(year=2025, months=frozenset({2, 1}))
    assert f.sql_predicate("work_date") == (
        "YEAR(work_date) = %s AND MONTH(work_date) IN (%s, %s)",
        (2025, 1, 2),
    )
    assert MonthFilter(months=frozenset({3})).sql_predicate("d") == ("MONTH(d) IN (%s)", (3,))
    assert MonthFilter().sql_predicate("d") == ("1=1", ())
