"""Tests for median/average and aggregate comp statistics."""
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from conftest import make_comp
from flip_analyzer.models.comp_models import ComparableSale, days_since
from flip_analyzer.services.comp_statistics import (
    average,
    compute_aggregate_statistics,
    median,
)


def test_median():
    assert median([]) == 0
    assert median([5]) == 5
    assert median([1, 3]) == 2
    assert median([1, 2, 9]) == 2
    assert median([9, 1, 2]) == 2


def test_median_does_not_mutate_input():
    values = [9, 1, 5, 3]
    assert median(values) == 4
    assert values == [9, 1, 5, 3]


def test_average():
    assert average([]) == 0
    assert average([2, 4, 6]) == 4
    assert average([1.5]) == 1.5


def test_empty_comps_give_all_zero_stats():
    stats = compute_aggregate_statistics([])
    assert stats.count == 0
    assert stats.median_days_on_market == 0
    assert stats.average_days_on_market == 0
    assert stats.median_price == 0
    assert stats.average_price == 0
    assert stats.median_price_per_sqft == 0
    assert stats.average_price_per_sqft == 0


def test_aggregate_statistics(comps):
    stats = compute_aggregate_statistics(comps)
    assert stats.count == 5
    assert stats.median_days_on_market == 30
    assert stats.average_days_on_market == 30
    assert stats.median_price == 288000
    assert stats.average_price == pytest.approx(321200)
    assert stats.median_price_per_sqft == 220
    assert stats.average_price_per_sqft == pytest.approx(218)


def test_excluding_a_comp_removes_exactly_that_comp(comps):
    comps[2] = comps[2].model_copy(update={"excluded": True})
    stats = compute_aggregate_statistics(comps)
    assert stats.count == 4
    # c3 (500000, 250/sqft, 30 DOM) no longer counted
    assert stats.median_price == 288000
    assert stats.average_price == pytest.approx((200000 + 330000 + 288000 + 288000) / 4)
    assert stats.median_price_per_sqft == 210
    assert stats.average_days_on_market == pytest.approx(30)

    comps[2] = comps[2].model_copy(update={"excluded": False})
    assert compute_aggregate_statistics(comps).count == 5


def test_all_excluded_is_empty(comps):
    excluded = [c.model_copy(update={"excluded": True}) for c in comps]
    stats = compute_aggregate_statistics(excluded)
    assert stats.count == 0
    assert stats.median_price == 0


def test_statistics_ignore_comp_order(comps):
    assert compute_aggregate_statistics(comps) == compute_aggregate_statistics(list(reversed(comps)))


def test_price_per_sqft_is_derived():
    comp = make_comp("x", 1000, 333333)
    assert comp.price_per_sqft == 333.33


def test_supplied_price_per_sqft_is_ignored():
    comp = ComparableSale.model_validate({
        "id": "x",
        "address": "1 Elm St",
        "bedrooms": 2,
        "bathrooms": 1,
        "sqft": 1000,
        "days_on_market": 5,
        "sales_price": 150000,
        "date_sold": "2025-01-02",
        "days_ago": 30,
        "price_per_sqft": 999,
    })
    assert comp.price_per_sqft == 150


def test_days_ago_derived_from_date_sold():
    sold = date.today() - timedelta(days=12)
    comp = ComparableSale(
        id="x",
        address="1 Elm St",
        bedrooms=2,
        bathrooms=1,
        sqft=1000,
        days_on_market=5,
        sales_price=150000,
        date_sold=sold.isoformat(),
    )
    assert comp.days_ago == 12


def test_days_since_never_negative():
    today = date(2025, 6, 1)
    assert days_since(date(2025, 5, 1), today) == 31
    assert days_since(date(2025, 6, 5), today) == 0


def test_comp_requires_positive_sqft():
    with pytest.raises(ValidationError):
        make_comp("x", 0, 100000)
