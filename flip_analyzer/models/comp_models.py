"""
Comparable sales data models
Comp records as handed over by the data-acquisition layer, plus the
statistics and time buckets derived from them
"""
from pydantic import BaseModel, Field, computed_field, model_validator
from typing import List, Optional
from datetime import date, datetime
from enum import Enum


# Day-age thresholds for time buckets, ascending
TIME_PERIODS = (30, 60, 90, 120, 180)
MAX_COMP_AGE_DAYS = TIME_PERIODS[-1]


class StatMode(str, Enum):
    """Central tendency used for ARV"""
    MEDIAN = "median"
    AVERAGE = "average"


class BucketMode(str, Enum):
    """How time buckets partition the comps"""
    EXCLUSIVE = "exclusive"
    CUMULATIVE = "cumulative"


def days_since(sold: date, today: Optional[date] = None) -> int:
    """Whole days between the sale date and today (never negative)"""
    today = today or date.today()
    if isinstance(sold, datetime):
        sold = sold.date()
    return max(0, (today - sold).days)


class ComparableSale(BaseModel):
    """
    A recently sold property used as a pricing reference.
    price_per_sqft is always derived from sales_price and sqft.
    """
    id: str = Field(..., description="Comp identifier")
    address: str = Field(..., description="Street address")
    bedrooms: int = Field(..., ge=0, description="Number of bedrooms")
    bathrooms: float = Field(..., ge=0, description="Number of bathrooms")
    sqft: float = Field(..., gt=0, description="Living area in square feet")
    days_on_market: int = Field(..., ge=0, description="Days on market before sale")
    sales_price: float = Field(..., ge=0, description="Sold price")
    date_sold: date = Field(..., description="Date the sale closed")
    days_ago: int = Field(..., ge=0, description="Age of the sale in days when the record was produced")
    excluded: bool = Field(default=False, description="Left out of statistics and ARV")

    @model_validator(mode="before")
    @classmethod
    def derive_days_ago(cls, data):
        if isinstance(data, dict) and data.get("days_ago") is None and data.get("date_sold"):
            sold = data["date_sold"]
            if isinstance(sold, str):
                sold = date.fromisoformat(sold[:10])
            data = {**data, "days_ago": days_since(sold)}
        return data

    @computed_field
    @property
    def price_per_sqft(self) -> float:
        return round(self.sales_price / self.sqft, 2)

    class Config:
        json_schema_extra = {
            "example": {
                "id": "comp-1",
                "address": "412 Greenwood Ave, Nashville, TN",
                "bedrooms": 3,
                "bathrooms": 2,
                "sqft": 1650,
                "days_on_market": 21,
                "sales_price": 329000,
                "date_sold": "2025-03-14",
                "days_ago": 45,
                "excluded": False
            }
        }


class AggregateStatistics(BaseModel):
    """Rollup over the non-excluded comps of a set; all zero when count == 0"""
    median_days_on_market: float = 0
    average_days_on_market: float = 0
    median_price: float = 0
    average_price: float = 0
    median_price_per_sqft: float = 0
    average_price_per_sqft: float = 0
    count: int = 0


class TimeBucket(BaseModel):
    """Comps sold within a day-age window"""
    label: str  # e.g. "31–60 days"
    min_days: int  # exclusive lower bound, inclusive when 0
    max_days: int  # inclusive upper bound
    comps: List[ComparableSale]
    stats: AggregateStatistics


class CompsRequest(BaseModel):
    """Request carrying a set of comps"""
    comps: List[ComparableSale] = Field(default_factory=list)


class ArvRequest(BaseModel):
    """Request for an ARV estimate"""
    comps: List[ComparableSale] = Field(default_factory=list)
    subject_sqft: float = Field(..., ge=0, description="Subject living area in square feet")


class ArvResponse(BaseModel):
    """ARV estimate with the inputs that produced it"""
    arv: float
    stat_mode: StatMode
    comps_used: int
