from pydantic import BaseModel, Field
from typing import Optional, Dict
import enum


class CalculationBasis(str, enum.Enum):
    ALWAYS_ON = "24/7"
    BUSINESS = "business"


class ErrorKind(str, enum.Enum):
    MISSING = "missing"
    OUT_OF_RANGE = "out_of_range"


# --- Engine contracts ---

class ValidatedInputs(BaseModel):
    """Typed, range-checked inputs. Only the validator builds these."""
    calculation_basis: CalculationBasis
    annual_revenue: float = Field(gt=0)
    downtime_duration: float = Field(gt=0)
    affected_employees: int = Field(ge=0)
    hourly_wage: float = Field(ge=0)
    annual_overhead: Optional[float] = Field(default=None, ge=0)
    profit_margin_percent: Optional[float] = Field(default=None, ge=0, le=100)
    penalty_cost: Optional[float] = Field(default=None, ge=0)

    class Config:
        frozen = True


class CostBreakdown(BaseModel):
    hourly_revenue_rate: float
    revenue_loss: float
    profit_loss: Optional[float] = None
    productivity_loss: float
    overhead_loss: Optional[float] = None
    penalty_cost: float = 0.0
    total_estimated_cost: float

    class Config:
        frozen = True


class ValidationResult(BaseModel):
    """Either inputs (valid) or errors (invalid), never both."""
    inputs: Optional[ValidatedInputs] = None
    errors: Dict[str, str] = {}
    kinds: Dict[str, ErrorKind] = {}

    class Config:
        frozen = True

    @property
    def is_valid(self) -> bool:
        return not self.errors
