"""
Time bucketing of comparable sales.
Splits comps into day-age windows (30/60/90/120/180 days) and rolls up
statistics per window.
"""

import logging
from typing import List, Sequence, Union

from flip_analyzer.models.comp_models import (
    TIME_PERIODS,
    BucketMode,
    ComparableSale,
    TimeBucket,
)
from flip_analyzer.services.comp_statistics import compute_aggregate_statistics

logger = logging.getLogger(__name__)


def _in_window(days_ago: int, lower: int, upper: int) -> bool:
    # Lower bound is exclusive, except a window starting at 0 keeps same-day sales
    if lower == 0:
        return 0 <= days_ago <= upper
    return lower < days_ago <= upper


def _label(lower: int, upper: int) -> str:
    start = 0 if lower == 0 else lower + 1
    return f"{start}–{upper} days"


def build_time_buckets(
    comps: Sequence[ComparableSale],
    mode: Union[BucketMode, str] = BucketMode.EXCLUSIVE,
) -> List[TimeBucket]:
    """
    Build one bucket per threshold in TIME_PERIODS, ascending.

    exclusive: a comp lands in the window (previous threshold, threshold],
    so every comp up to 180 days old is in exactly one bucket.
    cumulative: every window starts at 0, so each bucket contains all
    smaller ones.

    Bucket comps keep their excluded flag; stats only count active comps.
    """
    mode = BucketMode(mode)
    previous_thresholds = (0,) + TIME_PERIODS[:-1]

    buckets = []
    for previous, threshold in zip(previous_thresholds, TIME_PERIODS):
        lower = previous if mode == BucketMode.EXCLUSIVE else 0
        bucket_comps = [c for c in comps if _in_window(c.days_ago, lower, threshold)]
        buckets.append(
            TimeBucket(
                label=_label(lower, threshold),
                min_days=lower,
                max_days=threshold,
                comps=bucket_comps,
                stats=compute_aggregate_statistics(bucket_comps),
            )
        )

    logger.debug(
        "Built %d %s buckets from %d comps", len(buckets), mode.value, len(comps)
    )
    return buckets
