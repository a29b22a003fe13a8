"""
Comparable sales API routes
"""

from fastapi import APIRouter, Query
from typing import List

from flip_analyzer.models.comp_models import (
    AggregateStatistics,
    ArvRequest,
    ArvResponse,
    BucketMode,
    CompsRequest,
    StatMode,
    TimeBucket
)
from flip_analyzer.services.arv_estimator import compute_arv
from flip_analyzer.services.comp_statistics import active_comps, compute_aggregate_statistics
from flip_analyzer.services.flip_analysis import AnalysisReport, FlipAnalysis, build_report
from flip_analyzer.services.time_buckets import build_time_buckets

router = APIRouter(prefix="/api/comps", tags=["comps"])


@router.post("/statistics", response_model=AggregateStatistics)
async def comp_statistics(request: CompsRequest):
    """
    Median and average days on market, price and price/sqft.

    Excluded comps are ignored; an empty set returns all zeros.
    """
    return compute_aggregate_statistics(request.comps)


@router.post("/buckets", response_model=List[TimeBucket])
async def comp_buckets(
    request: CompsRequest,
    mode: BucketMode = Query(BucketMode.EXCLUSIVE, description="exclusive or cumulative windows")
):
    """
    Comps grouped into 30/60/90/120/180 day windows with per-window statistics.
    """
    return build_time_buckets(request.comps, mode)


@router.post("/arv", response_model=ArvResponse)
async def comp_arv(
    request: ArvRequest,
    mode: StatMode = Query(StatMode.MEDIAN, description="median or average price/sqft")
):
    """
    Estimate ARV from the comps' central price/sqft and the subject's sqft.
    """
    return ArvResponse(
        arv=compute_arv(request.comps, request.subject_sqft, mode),
        stat_mode=mode,
        comps_used=len(active_comps(request.comps))
    )


@router.post("/analyze", response_model=AnalysisReport)
async def analyze(analysis: FlipAnalysis):
    """
    Full analysis of a subject property.

    Returns comp statistics, time buckets, the ARV in use (recomputed from
    the comps unless it was entered manually) and the max offer breakdown.
    """
    return build_report(analysis)
