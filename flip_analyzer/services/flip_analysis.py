"""
Flip analysis pipeline.

A FlipAnalysis holds everything the user has entered for one subject
property. Every transition returns a new FlipAnalysis; whenever comps,
subject sqft or stat mode change, an automatic ARV is recomputed from the
comps while a manual ARV is left alone.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from flip_analyzer.config import Settings, settings
from flip_analyzer.models.comp_models import (
    AggregateStatistics,
    BucketMode,
    ComparableSale,
    StatMode,
    TimeBucket,
)
from flip_analyzer.models.flip_calculator_models import (
    AutoArv,
    CalculatorInputs,
    CalculatorResult,
    ManualArv,
)
from flip_analyzer.models.property_models import SubjectProperty
from flip_analyzer.services.arv_estimator import compute_arv
from flip_analyzer.services.comp_statistics import compute_aggregate_statistics
from flip_analyzer.services.flip_calculator import calculate_max_offer
from flip_analyzer.services.time_buckets import build_time_buckets

logger = logging.getLogger(__name__)


def default_calculator_inputs(config: Optional[Settings] = None) -> CalculatorInputs:
    """Calculator inputs seeded from configured defaults, with an automatic ARV of 0."""
    config = config or settings
    return CalculatorInputs(
        arv=AutoArv(value=0),
        closing_costs_sale_pct=config.default_closing_costs_sale_pct,
        agent_fees_pct=config.default_agent_fees_pct,
        desired_profit=config.default_desired_profit,
        hold_time_months=config.default_hold_time_months,
        loan_interest_rate=config.default_loan_interest_rate,
        points_pct=config.default_points_pct,
        repair_costs=config.default_repair_costs,
        monthly_holding_costs=config.default_monthly_holding_costs,
        closing_costs_buy_pct=config.default_closing_costs_buy_pct,
    )


class FlipAnalysis(BaseModel):
    """Inputs for one subject property"""
    subject: Optional[SubjectProperty] = None
    comps: List[ComparableSale] = Field(default_factory=list)
    stat_mode: StatMode = Field(default_factory=lambda: settings.default_stat_mode)
    bucket_mode: BucketMode = Field(default_factory=lambda: settings.default_bucket_mode)
    calculator: CalculatorInputs = Field(default_factory=default_calculator_inputs)

    def refresh_arv(self) -> "FlipAnalysis":
        """Recompute an automatic ARV from the comps; manual ARVs are kept."""
        if self.calculator.arv_is_manual or self.subject is None:
            return self
        arv = compute_arv(self.comps, self.subject.sqft, self.stat_mode)
        calculator = self.calculator.model_copy(update={"arv": AutoArv(value=arv)})
        return self.model_copy(update={"calculator": calculator})

    def with_subject(self, subject: SubjectProperty) -> "FlipAnalysis":
        return self.model_copy(update={"subject": subject}).refresh_arv()

    def with_comps(self, comps: List[ComparableSale]) -> "FlipAnalysis":
        return self.model_copy(update={"comps": list(comps)}).refresh_arv()

    def with_stat_mode(self, mode: StatMode) -> "FlipAnalysis":
        return self.model_copy(update={"stat_mode": StatMode(mode)}).refresh_arv()

    def with_bucket_mode(self, mode: BucketMode) -> "FlipAnalysis":
        return self.model_copy(update={"bucket_mode": BucketMode(mode)})

    def toggle_comp_excluded(self, comp_id: str) -> "FlipAnalysis":
        """Flip the excluded flag of one comp; unknown ids leave the analysis unchanged."""
        if not any(c.id == comp_id for c in self.comps):
            logger.warning("Cannot toggle unknown comp %s", comp_id)
            return self
        comps = [
            c.model_copy(update={"excluded": not c.excluded}) if c.id == comp_id else c
            for c in self.comps
        ]
        return self.with_comps(comps)

    def update_calculator(self, **changes) -> "FlipAnalysis":
        """Apply calculator field changes, validated like any other input."""
        changes = {
            key: value.model_dump() if isinstance(value, BaseModel) else value
            for key, value in changes.items()
        }
        data = {**self.calculator.model_dump(), **changes}
        return self.model_copy(update={"calculator": CalculatorInputs.model_validate(data)})

    def set_manual_arv(self, value: float) -> "FlipAnalysis":
        return self.update_calculator(arv=ManualArv(value=value))

    def clear_manual_arv(self) -> "FlipAnalysis":
        """Switch back to an ARV derived from the comps."""
        return self.update_calculator(arv=AutoArv()).refresh_arv()


class AnalysisReport(BaseModel):
    """Everything derived from a FlipAnalysis for display"""
    statistics: AggregateStatistics
    buckets: List[TimeBucket]
    arv: float
    arv_is_manual: bool
    result: CalculatorResult


def build_report(analysis: FlipAnalysis) -> AnalysisReport:
    """
    Derive statistics, time buckets and the max offer from an analysis.

    Runs refresh_arv first so a stale automatic ARV never reaches the
    calculator.
    """
    analysis = analysis.refresh_arv()
    return AnalysisReport(
        statistics=compute_aggregate_statistics(analysis.comps),
        buckets=build_time_buckets(analysis.comps, analysis.bucket_mode),
        arv=analysis.calculator.arv_value,
        arv_is_manual=analysis.calculator.arv_is_manual,
        result=calculate_max_offer(analysis.calculator),
    )
