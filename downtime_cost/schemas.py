from pydantic import BaseModel
from typing import Optional, Dict, List

from .engine.models import CostBreakdown


class DowntimeInputRequest(BaseModel):
    """
    Raw form values, keyed by the form's field names.
    JSON numbers are accepted and turned into strings before validation.
    An empty calculationBasis falls back to DEFAULT_CALCULATION_BASIS.
    """
    calculationBasis: Optional[str] = ""
    annualRevenue: Optional[str] = ""
    downtimeDuration: Optional[str] = ""
    affectedEmployees: Optional[str] = ""
    hourlyWage: Optional[str] = ""
    annualOverhead: Optional[str] = ""
    profitMargin: Optional[str] = ""
    penaltyCost: Optional[str] = ""

    class Config:
        coerce_numbers_to_str = True

    def to_raw(self) -> Dict[str, Optional[str]]:
        return self.model_dump()


class ValidationResponse(BaseModel):
    valid: bool
    errors: Dict[str, str] = {}


class CalculationResponse(BaseModel):
    breakdown: CostBreakdown
    formatted: Dict[str, str]


class FieldInfo(BaseModel):
    name: str
    label: str
    required: bool
    advanced: bool


class BasisOption(BaseModel):
    value: str
    label: str
    annual_hours: int


class FormFieldsResponse(BaseModel):
    basis_options: List[BasisOption]
    default_basis: str
    fields: List[FieldInfo]
