"""
Downtime cost engine.

Pure Python math. No I/O, no state.
validate() turns raw form strings into ValidatedInputs or a per-field error map,
calculate() turns ValidatedInputs into a CostBreakdown.
"""

from .calculator import calculate, annual_hours_for
from .models import CalculationBasis, CostBreakdown, ErrorKind, ValidatedInputs, ValidationResult
from .validator import validate

__all__ = [
    "CalculationBasis",
    "CostBreakdown",
    "ErrorKind",
    "ValidatedInputs",
    "ValidationResult",
    "annual_hours_for",
    "calculate",
    "validate",
]
