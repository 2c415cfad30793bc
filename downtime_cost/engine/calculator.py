"""
Calculator: ValidatedInputs -> CostBreakdown.

Inputs must come from validate(). No checks happen here and there is no
failure path. Plain float math, no rounding; display code rounds.
"""

import logging

from .fields import ANNUAL_HOURS
from .models import CalculationBasis, CostBreakdown, ValidatedInputs

logger = logging.getLogger(__name__)


def annual_hours_for(basis: CalculationBasis) -> int:
    """8760 for 24/7 operations, 2000 for business hours only."""
    return ANNUAL_HOURS[CalculationBasis(basis)]


def calculate(v: ValidatedInputs) -> CostBreakdown:
    annual_hours = annual_hours_for(v.calculation_basis)

    hourly_revenue_rate = v.annual_revenue / annual_hours
    revenue_loss = hourly_revenue_rate * v.downtime_duration

    profit_loss = None
    if v.profit_margin_percent is not None:
        profit_loss = revenue_loss * (v.profit_margin_percent / 100)

    productivity_loss = v.affected_employees * v.hourly_wage * v.downtime_duration

    overhead_loss = None
    if v.annual_overhead:
        overhead_loss = (v.annual_overhead / annual_hours) * v.downtime_duration

    penalty_cost = v.penalty_cost if v.penalty_cost is not None else 0.0

    total = revenue_loss + productivity_loss
    if profit_loss is not None:
        # DECISION: a margin replaces the running total, productivity loss included.
        # Kept as the 1.0 calculator computed it, pending product clarification.
        total = profit_loss
    if overhead_loss is not None:
        total += overhead_loss
    if penalty_cost > 0:
        total += penalty_cost

    logger.debug("Downtime cost (%s, %.2f hrs): total=%.2f",
                 v.calculation_basis.value, v.downtime_duration, total)

    return CostBreakdown(
        hourly_revenue_rate=hourly_revenue_rate,
        revenue_loss=revenue_loss,
        profit_loss=profit_loss,
        productivity_loss=productivity_loss,
        overhead_loss=overhead_loss,
        penalty_cost=penalty_cost,
        total_estimated_cost=total,
    )
