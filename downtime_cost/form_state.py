"""
Form state for an interactive downtime calculator.

Owned by whatever renders the form (web page, CLI prompt, notebook widget).
Holds the raw strings, the last error map, the advanced-options toggle and
the last breakdown. All decisions are delegated to the engine.
"""

from typing import Dict, Optional

from .config import settings
from .engine import calculate, validate
from .engine.fields import FIELD_RULES, REQUIRED_FIELDS
from .engine.models import CostBreakdown

FORM_FIELDS = ["calculationBasis"] + list(FIELD_RULES.keys())


def _blank_fields() -> Dict[str, str]:
    fields = {name: "" for name in FORM_FIELDS}
    fields["calculationBasis"] = settings.DEFAULT_CALCULATION_BASIS.value
    return fields


class FormState:

    def __init__(self):
        self.fields: Dict[str, str] = _blank_fields()
        self.errors: Dict[str, str] = {}
        self.show_advanced: bool = False
        self.results: Optional[CostBreakdown] = None

    def update(self, name: str, value: str) -> None:
        """Set one raw field. Unknown names raise KeyError."""
        if name not in self.fields:
            raise KeyError(f"Unknown form field: {name}")
        self.fields[name] = "" if value is None else str(value)

    def validate(self) -> Dict[str, str]:
        """Re-run validation (the form does this on every blur) and keep the errors."""
        result = validate(self.fields, default_basis=settings.DEFAULT_CALCULATION_BASIS)
        self.errors = dict(result.errors)
        return self.errors

    def is_form_valid(self) -> bool:
        """Calculate button enabled: every required field filled in, no known errors."""
        filled = all(self.fields[name] for name in REQUIRED_FIELDS)
        return filled and not self.errors

    def calculate(self) -> Optional[CostBreakdown]:
        """
        Validate, then calculate on success.
        On failure returns None and leaves the previous results in place.
        """
        result = validate(self.fields, default_basis=settings.DEFAULT_CALCULATION_BASIS)
        self.errors = dict(result.errors)
        if not result.is_valid:
            return None
        self.results = calculate(result.inputs)
        return self.results

    def toggle_advanced(self) -> bool:
        self.show_advanced = not self.show_advanced
        return self.show_advanced

    def reset(self) -> None:
        self.fields = _blank_fields()
        self.errors = {}
        self.results = None
        self.show_advanced = False
