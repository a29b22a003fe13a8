"""
Pydantic models for the subject property and shared API responses
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


HOME_TYPES = ["Single Family", "Attached / Multi-unit", "Manufactured", "Land / Lots"]


class SubjectProperty(BaseModel):
    """The property being evaluated for a flip"""
    address: str = Field(..., description="Full property address")
    bedrooms: int = Field(default=0, ge=0, description="Number of bedrooms")
    bathrooms: float = Field(default=0, ge=0, description="Number of bathrooms")
    sqft: float = Field(..., ge=0, description="Living area in square feet")
    year_built: Optional[int] = Field(None, ge=1800, description="Year property was built")
    home_type: str = Field(default="Single Family", description="Type of property")
    lot_size: Optional[str] = Field(None, description="Lot size as reported by the listing")

    @field_validator('home_type')
    @classmethod
    def validate_home_type(cls, v):
        if v not in HOME_TYPES:
            raise ValueError(f'home_type must be one of: {HOME_TYPES}')
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "address": "1208 Porter Rd, Nashville, TN 37206",
                "bedrooms": 3,
                "bathrooms": 2,
                "sqft": 1500,
                "year_built": 1955,
                "home_type": "Single Family",
                "lot_size": "0.21 acres"
            }
        }


class HealthCheck(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime
    version: str
