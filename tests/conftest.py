"""Shared fixtures for comp and calculator tests."""
from datetime import date, timedelta

import pytest

from flip_analyzer.models.comp_models import ComparableSale
from flip_analyzer.models.property_models import SubjectProperty


def make_comp(comp_id, sqft, sales_price, days_on_market=14, days_ago=10, excluded=False):
    """Build a comp sold `days_ago` days before today."""
    return ComparableSale(
        id=comp_id,
        address=f"{comp_id} Main St, Nashville, TN",
        bedrooms=3,
        bathrooms=2,
        sqft=sqft,
        days_on_market=days_on_market,
        sales_price=sales_price,
        date_sold=date.today() - timedelta(days=days_ago),
        days_ago=days_ago,
        excluded=excluded,
    )


@pytest.fixture
def comps():
    # price/sqft: 200, 220, 250, 240, 180
    return [
        make_comp("c1", 1000, 200000, days_on_market=10, days_ago=10),
        make_comp("c2", 1500, 330000, days_on_market=20, days_ago=45),
        make_comp("c3", 2000, 500000, days_on_market=30, days_ago=75),
        make_comp("c4", 1200, 288000, days_on_market=40, days_ago=100),
        make_comp("c5", 1600, 288000, days_on_market=50, days_ago=150),
    ]


@pytest.fixture
def subject():
    return SubjectProperty(
        address="1208 Porter Rd, Nashville, TN 37206",
        bedrooms=3,
        bathrooms=2,
        sqft=1500,
        year_built=1955,
    )
