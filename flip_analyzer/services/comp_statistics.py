"""
Comparable sales statistics.
Median/average primitives and the per-set rollup shown next to the comps.
"""

import logging
from typing import Iterable, List, Sequence

import numpy as np

from flip_analyzer.models.comp_models import AggregateStatistics, ComparableSale

logger = logging.getLogger(__name__)


def median(values: Sequence[float]) -> float:
    """Median of values; 0 for an empty sequence."""
    if len(values) == 0:
        return 0
    return float(np.median(values))


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of values; 0 for an empty sequence."""
    if len(values) == 0:
        return 0
    # sorted so the sum does not depend on input order
    return float(np.mean(sorted(values)))


def active_comps(comps: Iterable[ComparableSale]) -> List[ComparableSale]:
    """Comps that participate in statistics (not excluded)."""
    return [c for c in comps if not c.excluded]


def compute_aggregate_statistics(comps: Iterable[ComparableSale]) -> AggregateStatistics:
    """
    Roll up days on market, price and price/sqft over the non-excluded comps.

    Args:
        comps: Comparable sales, excluded ones included.

    Returns:
        AggregateStatistics; every field is 0 when no comp is active.
    """
    active = active_comps(comps)
    doms = [c.days_on_market for c in active]
    prices = [c.sales_price for c in active]
    ppsf = [c.price_per_sqft for c in active]

    logger.debug("Aggregating %d active comps", len(active))

    return AggregateStatistics(
        median_days_on_market=median(doms),
        average_days_on_market=average(doms),
        median_price=median(prices),
        average_price=average(prices),
        median_price_per_sqft=median(ppsf),
        average_price_per_sqft=average(ppsf),
        count=len(active),
    )
