"""
Max Offer Calculator Data Models
Inputs, cost breakdown and result for solving the maximum purchase price
"""
from pydantic import BaseModel, Field
from typing import Annotated, Literal, Union


# Constants
DEFAULT_CLOSING_COSTS_SALE_PCT = 2
DEFAULT_AGENT_FEES_PCT = 5
DEFAULT_DESIRED_PROFIT = 60000
DEFAULT_HOLD_MONTHS = 6
DEFAULT_LOAN_INTEREST_RATE = 13  # % annual, hard money
DEFAULT_POINTS_PCT = 2
DEFAULT_REPAIR_COSTS = 85000
DEFAULT_MONTHLY_HOLDING_COSTS = 125
DEFAULT_CLOSING_COSTS_BUY_PCT = 2
MAX_HOLD_MONTHS = 36


class AutoArv(BaseModel):
    """ARV derived from comparable sales; replaced whenever comps change"""
    source: Literal["auto"] = "auto"
    value: float = Field(default=0, ge=0, description="After Repair Value")


class ManualArv(BaseModel):
    """ARV typed in by the user; never replaced by recomputation"""
    source: Literal["manual"] = "manual"
    value: float = Field(..., ge=0, description="After Repair Value")


Arv = Annotated[Union[AutoArv, ManualArv], Field(discriminator="source")]


class CalculatorInputs(BaseModel):
    """
    Assumptions for the max offer calculation
    All rates are whole-number percentages (5 means 5%)
    """

    # ==========================================
    # SALE
    # ==========================================
    arv: Arv = Field(default_factory=AutoArv, description="After Repair Value (auto or manual)")
    closing_costs_sale_pct: float = Field(default=DEFAULT_CLOSING_COSTS_SALE_PCT, ge=0, le=100, description="Closing costs at sale, % of ARV")
    agent_fees_pct: float = Field(default=DEFAULT_AGENT_FEES_PCT, ge=0, le=100, description="Agent fees, % of ARV")
    desired_profit: float = Field(default=DEFAULT_DESIRED_PROFIT, ge=0, description="Target profit")

    # ==========================================
    # HOLDING & FINANCING
    # ==========================================
    hold_time_months: int = Field(default=DEFAULT_HOLD_MONTHS, ge=1, le=MAX_HOLD_MONTHS, description="Expected hold time in months")
    loan_interest_rate: float = Field(default=DEFAULT_LOAN_INTEREST_RATE, ge=0, le=100, description="Annual loan interest rate, %")
    points_pct: float = Field(default=DEFAULT_POINTS_PCT, ge=0, le=100, description="Loan origination points, % of loan")
    monthly_holding_costs: float = Field(default=DEFAULT_MONTHLY_HOLDING_COSTS, ge=0, description="Taxes, insurance, utilities per month")

    # ==========================================
    # PURCHASE & RENOVATION
    # ==========================================
    repair_costs: float = Field(default=DEFAULT_REPAIR_COSTS, ge=0, description="Total repair budget (financed)")
    closing_costs_buy_pct: float = Field(default=DEFAULT_CLOSING_COSTS_BUY_PCT, ge=0, le=100, description="Closing costs at purchase, % of price")

    @property
    def arv_value(self) -> float:
        return self.arv.value

    @property
    def arv_is_manual(self) -> bool:
        return isinstance(self.arv, ManualArv)

    class Config:
        json_schema_extra = {
            "example": {
                "arv": {"source": "manual", "value": 300000},
                "closing_costs_sale_pct": 2,
                "agent_fees_pct": 5,
                "desired_profit": 60000,
                "hold_time_months": 6,
                "loan_interest_rate": 13,
                "points_pct": 2,
                "monthly_holding_costs": 125,
                "repair_costs": 85000,
                "closing_costs_buy_pct": 2
            }
        }


class CostBreakdown(BaseModel):
    """Every cost line that together with the max offer adds up to the ARV"""
    arv: float
    closing_costs_at_sale: float  # = arv * sale %
    agent_fees: float  # = arv * agent %
    desired_profit: float
    repair_costs: float
    holding_costs: float  # = monthly_holding_costs * months
    loan_interest: float  # = (max_offer + repairs) * monthly rate * months
    points: float  # = (max_offer + repairs) * points %
    closing_costs_at_buy: float  # = max_offer * buy %

    def total_costs(self) -> float:
        return (
            self.closing_costs_at_sale +
            self.agent_fees +
            self.desired_profit +
            self.repair_costs +
            self.holding_costs +
            self.loan_interest +
            self.points +
            self.closing_costs_at_buy
        )


class CalculatorResult(BaseModel):
    """
    Max offer calculator output
    The breakdown reconciles: arv == breakdown.total_costs() + max_offer
    """
    max_offer: float
    breakdown: CostBreakdown

    class Config:
        json_schema_extra = {
            "example": {
                "max_offer": 114049.77,
                "breakdown": {
                    "arv": 300000,
                    "closing_costs_at_sale": 6000,
                    "agent_fees": 15000,
                    "desired_profit": 60000,
                    "repair_costs": 85000,
                    "holding_costs": 750,
                    "loan_interest": 12938.24,
                    "points": 3981.0,
                    "closing_costs_at_buy": 2281.0
                }
            }
        }
