"""
Validator: raw form strings -> ValidatedInputs or a per-field error map.

Every field is checked on its own and all errors are collected, so the caller
can show every problem at once. A value that doesn't parse and a value out of
range get the same message.
"""

import logging
from typing import Dict, Mapping, Optional

from .fields import (
    FIELD_RULES,
    MSG_BASIS,
    MSG_REQUIRED,
    ParseStatus,
    parse_basis,
    parse_number,
)
from .models import CalculationBasis, ErrorKind, ValidatedInputs, ValidationResult

logger = logging.getLogger(__name__)


def _in_range(rule: str, value: float) -> bool:
    if rule == "positive":
        return value > 0
    if rule == "non_negative":
        return value >= 0
    if rule == "non_negative_int":
        return value >= 0 and value.is_integer()
    if rule == "percent":
        return 0 <= value <= 100
    raise ValueError(f"Unknown field rule: {rule}")


def validate(raw: Mapping[str, Optional[str]],
             default_basis: CalculationBasis = CalculationBasis.ALWAYS_ON) -> ValidationResult:
    """
    Check every form field and build ValidatedInputs if all pass.

    Args:
        raw: {field_name: string} as typed by the user. Missing keys count as
             empty. Unknown keys are ignored.
        default_basis: basis used when calculationBasis is empty or absent.

    Returns:
        ValidationResult with either .inputs set (valid) or .errors/.kinds
        populated (invalid). Never both.
    """
    errors: Dict[str, str] = {}
    kinds: Dict[str, ErrorKind] = {}
    values: Dict[str, Optional[float]] = {}

    basis = parse_basis(raw.get("calculationBasis"), default_basis)
    if basis is None:
        errors["calculationBasis"] = MSG_BASIS
        kinds["calculationBasis"] = ErrorKind.OUT_OF_RANGE

    for name, field in FIELD_RULES.items():
        parsed = parse_number(raw.get(name))

        if parsed.status == ParseStatus.EMPTY:
            if field["required"]:
                errors[name] = MSG_REQUIRED
                kinds[name] = ErrorKind.MISSING
            else:
                values[name] = None
            continue

        if parsed.status == ParseStatus.INVALID or not _in_range(field["rule"], parsed.value):
            errors[name] = field["message"]
            kinds[name] = ErrorKind.OUT_OF_RANGE
            continue

        values[name] = parsed.value

    if errors:
        logger.debug("Validation rejected fields: %s", sorted(errors))
        return ValidationResult(errors=errors, kinds=kinds)

    inputs = ValidatedInputs(
        calculation_basis=basis,
        annual_revenue=values["annualRevenue"],
        downtime_duration=values["downtimeDuration"],
        affected_employees=int(values["affectedEmployees"]),
        hourly_wage=values["hourlyWage"],
        annual_overhead=values["annualOverhead"],
        profit_margin_percent=values["profitMargin"],
        penalty_cost=values["penaltyCost"],
    )
    return ValidationResult(inputs=inputs)
