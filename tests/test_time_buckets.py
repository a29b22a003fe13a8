"""Tests for exclusive and cumulative time buckets."""
from conftest import make_comp
from flip_analyzer.models.comp_models import TIME_PERIODS, BucketMode
from flip_analyzer.services.time_buckets import build_time_buckets


def _ids(bucket):
    return [c.id for c in bucket.comps]


def test_exclusive_labels_and_bounds(comps):
    buckets = build_time_buckets(comps, BucketMode.EXCLUSIVE)
    assert [b.label for b in buckets] == [
        "0–30 days",
        "31–60 days",
        "61–90 days",
        "91–120 days",
        "121–180 days",
    ]
    assert [b.max_days for b in buckets] == list(TIME_PERIODS)
    assert [b.min_days for b in buckets] == [0, 30, 60, 90, 120]


def test_exclusive_membership(comps):
    buckets = build_time_buckets(comps, "exclusive")
    assert [_ids(b) for b in buckets] == [["c1"], ["c2"], ["c3"], ["c4"], ["c5"]]
    assert [b.stats.count for b in buckets] == [1, 1, 1, 1, 1]
    assert buckets[2].stats.median_price == 500000


def test_exclusive_boundaries():
    ages = [0, 1, 30, 31, 60, 61, 90, 91, 120, 121, 179, 180]
    comps = [make_comp(f"d{age}", 1000, 100000, days_ago=age) for age in ages]
    buckets = build_time_buckets(comps, BucketMode.EXCLUSIVE)

    assert _ids(buckets[0]) == ["d0", "d1", "d30"]
    assert _ids(buckets[1]) == ["d31", "d60"]
    assert _ids(buckets[4]) == ["d121", "d179", "d180"]

    # every comp up to 180 days lands in exactly one bucket
    placed = [cid for b in buckets for cid in _ids(b)]
    assert sorted(placed) == sorted(c.id for c in comps)


def test_comps_older_than_180_days_are_left_out():
    comps = [make_comp("old", 1000, 100000, days_ago=181)]
    for mode in BucketMode:
        assert all(b.comps == [] for b in build_time_buckets(comps, mode))


def test_cumulative_buckets(comps):
    buckets = build_time_buckets(comps, BucketMode.CUMULATIVE)
    assert [b.label for b in buckets] == [f"0–{t} days" for t in TIME_PERIODS]
    assert all(b.min_days == 0 for b in buckets)
    assert [b.stats.count for b in buckets] == [1, 2, 3, 4, 5]


def test_cumulative_buckets_are_nested(comps):
    buckets = build_time_buckets(comps, BucketMode.CUMULATIVE)
    for smaller, larger in zip(buckets, buckets[1:]):
        assert set(_ids(smaller)) <= set(_ids(larger))
    assert set(_ids(buckets[0])) <= set(_ids(buckets[-1]))


def test_same_day_sale_in_every_cumulative_bucket():
    comps = [make_comp("t", 1000, 100000, days_ago=0)]
    cumulative = build_time_buckets(comps, BucketMode.CUMULATIVE)
    exclusive = build_time_buckets(comps, BucketMode.EXCLUSIVE)
    assert [b.stats.count for b in cumulative] == [1, 1, 1, 1, 1]
    assert [b.stats.count for b in exclusive] == [1, 0, 0, 0, 0]


def test_bucket_stats_respect_excluded(comps):
    comps[0] = comps[0].model_copy(update={"excluded": True})
    buckets = build_time_buckets(comps, BucketMode.EXCLUSIVE)
    assert _ids(buckets[0]) == ["c1"]
    assert buckets[0].stats.count == 0
    assert buckets[0].stats.median_price == 0


def test_empty_comps_give_five_empty_buckets():
    buckets = build_time_buckets([], BucketMode.EXCLUSIVE)
    assert len(buckets) == 5
    assert all(b.stats.count == 0 for b in buckets)


def test_buckets_are_idempotent(comps):
    assert build_time_buckets(comps, "cumulative") == build_time_buckets(comps, "cumulative")
