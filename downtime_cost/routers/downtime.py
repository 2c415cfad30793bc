"""
Downtime Cost API: thin JSON wrapper around the engine.

GET  /api/downtime/fields    : form field metadata and basis options
POST /api/downtime/validate  : per-field errors, always 200
POST /api/downtime/calculate : cost breakdown, 422 with errors when invalid

Field values are strings as typed in the form; JSON numbers are converted to
strings first, so both go through the same validation and error map.
"""

import logging

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..engine import validate
from ..engine.fields import ANNUAL_HOURS, BASIS_LABELS, FIELD_RULES
from ..formatting import format_breakdown
from ..schemas import (
    BasisOption,
    CalculationResponse,
    DowntimeInputRequest,
    FieldInfo,
    FormFieldsResponse,
    ValidationResponse,
)
from ..service import InvalidDowntimeInput, estimate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/downtime", tags=["downtime"])


@router.get("/fields", response_model=FormFieldsResponse)
def list_fields():
    return FormFieldsResponse(
        basis_options=[
            BasisOption(value=basis.value, label=BASIS_LABELS[basis], annual_hours=hours)
            for basis, hours in ANNUAL_HOURS.items()
        ],
        default_basis=settings.DEFAULT_CALCULATION_BASIS.value,
        fields=[
            FieldInfo(
                name=name,
                label=field["label"],
                required=field["required"],
                # Optional fields live behind "Show advanced options"
                advanced=not field["required"],
            )
            for name, field in FIELD_RULES.items()
        ],
    )


@router.post("/validate", response_model=ValidationResponse)
def validate_inputs(request: DowntimeInputRequest):
    result = validate(request.to_raw(), default_basis=settings.DEFAULT_CALCULATION_BASIS)
    return ValidationResponse(valid=result.is_valid, errors=result.errors)


@router.post("/calculate", response_model=CalculationResponse)
def calculate_cost(request: DowntimeInputRequest):
    """
    Validate and calculate in one step.

    Invalid input never produces a partial breakdown: the response is a 422
    with detail={"message": ..., "errors": {field: reason}}.
    """
    try:
        breakdown = estimate(request.to_raw())
    except InvalidDowntimeInput as e:
        raise HTTPException(
            status_code=422,
            detail={"message": "Invalid input", "errors": e.errors},
        )
    return CalculationResponse(breakdown=breakdown, formatted=format_breakdown(breakdown))
