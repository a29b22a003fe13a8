from pydantic_settings import BaseSettings

from flip_analyzer.models.comp_models import BucketMode, StatMode
from flip_analyzer.models.flip_calculator_models import (
    DEFAULT_AGENT_FEES_PCT,
    DEFAULT_CLOSING_COSTS_BUY_PCT,
    DEFAULT_CLOSING_COSTS_SALE_PCT,
    DEFAULT_DESIRED_PROFIT,
    DEFAULT_HOLD_MONTHS,
    DEFAULT_LOAN_INTEREST_RATE,
    DEFAULT_MONTHLY_HOLDING_COSTS,
    DEFAULT_POINTS_PCT,
    DEFAULT_REPAIR_COSTS,
)


class Settings(BaseSettings):
    # Calculator defaults (whole-number percentages)
    default_closing_costs_sale_pct: float = DEFAULT_CLOSING_COSTS_SALE_PCT
    default_agent_fees_pct: float = DEFAULT_AGENT_FEES_PCT
    default_desired_profit: float = DEFAULT_DESIRED_PROFIT
    default_hold_time_months: int = DEFAULT_HOLD_MONTHS
    default_loan_interest_rate: float = DEFAULT_LOAN_INTEREST_RATE
    default_points_pct: float = DEFAULT_POINTS_PCT
    default_repair_costs: float = DEFAULT_REPAIR_COSTS
    default_monthly_holding_costs: float = DEFAULT_MONTHLY_HOLDING_COSTS
    default_closing_costs_buy_pct: float = DEFAULT_CLOSING_COSTS_BUY_PCT

    # Comp analysis
    default_stat_mode: StatMode = StatMode.MEDIAN
    default_bucket_mode: BucketMode = BucketMode.EXCLUSIVE

    # API
    max_batch_size: int = 100
    frontend_url: str = "http://localhost:3000"
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
