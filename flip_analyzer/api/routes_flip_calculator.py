"""
Max Offer Calculator API Routes
"""
import logging
from fastapi import APIRouter, HTTPException
from typing import List

from flip_analyzer.config import settings
from flip_analyzer.models.flip_calculator_models import (
    CalculatorInputs,
    CalculatorResult
)
from flip_analyzer.services.flip_calculator import calculate_max_offer

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/flip",
    tags=["flip-calculator"],
    responses={400: {"description": "Batch too large"}},
)


@router.post("/max-offer", response_model=CalculatorResult)
async def max_offer(input_data: CalculatorInputs):
    """
    Solve for the maximum purchase price

    Takes the ARV and cost assumptions and returns the highest offer that
    still leaves the desired profit, with the full cost breakdown:
    - Closing costs and agent fees at sale (% of ARV)
    - Holding costs over the hold period
    - Loan interest and points on purchase price plus repairs
    - Closing costs at purchase

    ## Example Request:
    ```json
    {
        "arv": {"source": "manual", "value": 300000},
        "repair_costs": 85000,
        "hold_time_months": 6
    }
    ```
    """
    return calculate_max_offer(input_data)


@router.post("/max-offer/batch", response_model=List[CalculatorResult])
async def max_offer_batch(scenarios: List[CalculatorInputs]):
    """
    Solve max offers for several scenarios at once

    Useful for comparing assumption sets side by side.
    Maximum 100 scenarios per request.
    """
    if len(scenarios) > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {settings.max_batch_size} scenarios per batch request"
        )

    logger.debug("Solving %d max offer scenarios", len(scenarios))
    return [calculate_max_offer(scenario) for scenario in scenarios]


@router.get("/defaults")
async def get_defaults():
    """
    Get default values for calculator assumptions

    Percentages are whole numbers (5 means 5%).
    """
    return {
        "closing_costs_sale_pct": settings.default_closing_costs_sale_pct,
        "agent_fees_pct": settings.default_agent_fees_pct,
        "desired_profit": settings.default_desired_profit,
        "hold_time_months": settings.default_hold_time_months,
        "loan_interest_rate": settings.default_loan_interest_rate,
        "points_pct": settings.default_points_pct,
        "repair_costs": settings.default_repair_costs,
        "monthly_holding_costs": settings.default_monthly_holding_costs,
        "closing_costs_buy_pct": settings.default_closing_costs_buy_pct,
        "stat_mode": settings.default_stat_mode.value,
        "bucket_mode": settings.default_bucket_mode.value
    }
