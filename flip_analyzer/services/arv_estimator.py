"""
ARV (After Repair Value) Estimation.
Values the subject property from the central price/sqft of its comps.
"""

import logging
from typing import Iterable, Union

from flip_analyzer.models.comp_models import ComparableSale, StatMode
from flip_analyzer.services.comp_statistics import active_comps, average, median

logger = logging.getLogger(__name__)


def compute_arv(
    comps: Iterable[ComparableSale],
    subject_sqft: float,
    mode: Union[StatMode, str] = StatMode.MEDIAN,
) -> float:
    """
    Estimate After Repair Value as central price/sqft times subject sqft.

    Args:
        comps: Comparable sales; excluded comps are ignored.
        subject_sqft: Living area of the subject property.
        mode: "median" or "average" price/sqft.

    Returns:
        Unrounded ARV, or 0 when no comp is active or subject_sqft is 0.
    """
    mode = StatMode(mode)
    active = active_comps(comps)
    if not active or subject_sqft == 0:
        return 0

    ppsfs = [c.price_per_sqft for c in active]
    central_ppsf = median(ppsfs) if mode == StatMode.MEDIAN else average(ppsfs)

    logger.debug(
        "ARV from %d comps: %s $/sqft %.2f x %s sqft",
        len(active), mode.value, central_ppsf, subject_sqft,
    )
    return central_ppsf * subject_sqft
