"""
Validate-then-calculate entry point for callers that want one call.

Raises InvalidDowntimeInput when any field fails validation; no partial
breakdown is ever built from partly valid input.
"""

import logging
from typing import Dict, Mapping, Optional

from .config import settings
from .engine import calculate, validate
from .engine.models import CostBreakdown, ErrorKind

logger = logging.getLogger(__name__)


class InvalidDowntimeInput(ValueError):
    """Raised by estimate() with the full per-field error map."""

    def __init__(self, errors: Dict[str, str], kinds: Dict[str, ErrorKind]):
        self.errors = dict(errors)
        self.kinds = dict(kinds)
        super().__init__(
            "Invalid downtime input: "
            + ", ".join(f"{name}: {msg}" for name, msg in sorted(self.errors.items()))
        )


def estimate(raw: Mapping[str, Optional[str]]) -> CostBreakdown:
    result = validate(raw, default_basis=settings.DEFAULT_CALCULATION_BASIS)
    if not result.is_valid:
        logger.info("Downtime estimate rejected, invalid fields: %s", sorted(result.errors))
        raise InvalidDowntimeInput(result.errors, result.kinds)

    breakdown = calculate(result.inputs)
    logger.info(
        "Downtime estimate: basis=%s duration=%s total=%.2f",
        result.inputs.calculation_basis.value,
        result.inputs.downtime_duration,
        breakdown.total_estimated_cost,
    )
    return breakdown
