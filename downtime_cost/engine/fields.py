"""
Form field definitions and the typed numeric parse step.

Every raw value is a string as typed by the user. parse_number() classifies it
as EMPTY, PARSED or INVALID instead of coercing blindly, so the validator can
tell "missing" apart from "present but bad".
"""

import math
import re
from typing import NamedTuple, Optional
import enum

from .models import CalculationBasis


# Annual operating hours per calculation basis
ANNUAL_HOURS = {
    CalculationBasis.ALWAYS_ON: 8760,   # 24 * 365
    CalculationBasis.BUSINESS: 2000,    # 8 hrs * 250 days
}

BASIS_LABELS = {
    CalculationBasis.ALWAYS_ON: "24/7 (8760 hrs/yr)",
    CalculationBasis.BUSINESS: "Business hours only (2000 hrs/yr)",
}

MSG_REQUIRED = "Required"
MSG_POSITIVE = "Must be a positive number"
MSG_NON_NEGATIVE = "Must be a non-negative number"
MSG_NON_NEGATIVE_INT = "Must be a non-negative integer"
MSG_PERCENT = "Must be between 0 and 100"
MSG_BASIS = 'Must be "24/7" or "business"'

# Form field name -> rule. "rule" keys are checked in validator._in_range().
# Optional fields sit behind the "advanced options" toggle in the form.
FIELD_RULES = {
    "annualRevenue": {
        "label": "Annual Revenue ($)",
        "required": True,
        "rule": "positive",
        "message": MSG_POSITIVE,
    },
    "downtimeDuration": {
        "label": "Downtime Duration (hours)",
        "required": True,
        "rule": "positive",
        "message": MSG_POSITIVE,
    },
    "affectedEmployees": {
        "label": "# Affected Employees",
        "required": True,
        "rule": "non_negative_int",
        "message": MSG_NON_NEGATIVE_INT,
    },
    "hourlyWage": {
        "label": "Average Hourly Wage ($)",
        "required": True,
        "rule": "non_negative",
        "message": MSG_NON_NEGATIVE,
    },
    "annualOverhead": {
        "label": "Annual Overhead Cost ($)",
        "required": False,
        "rule": "non_negative",
        "message": MSG_NON_NEGATIVE,
    },
    "profitMargin": {
        "label": "Profit Margin (%)",
        "required": False,
        "rule": "percent",
        "message": MSG_PERCENT,
    },
    "penaltyCost": {
        "label": "Compliance/Penalty Cost ($)",
        "required": False,
        "rule": "non_negative",
        "message": MSG_NON_NEGATIVE,
    },
}

REQUIRED_FIELDS = [name for name, field in FIELD_RULES.items() if field["required"]]

# Plain decimal with optional exponent: "1500", "-0.1", ".5", "2.", "1e6".
# ASCII digits only. No hex, no "inf"/"nan", no digit-group separators.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParseStatus(str, enum.Enum):
    EMPTY = "empty"
    PARSED = "parsed"
    INVALID = "invalid"


class ParsedValue(NamedTuple):
    status: ParseStatus
    value: Optional[float] = None


def parse_number(raw) -> ParsedValue:
    """Classify a raw form value. Whitespace-only counts as empty."""
    if raw is None:
        return ParsedValue(ParseStatus.EMPTY)
    text = str(raw).strip()
    if not text:
        return ParsedValue(ParseStatus.EMPTY)
    if not _NUMBER_RE.fullmatch(text):
        return ParsedValue(ParseStatus.INVALID)
    value = float(text)
    if not math.isfinite(value):
        # e.g. "1e400" overflows to inf
        return ParsedValue(ParseStatus.INVALID)
    return ParsedValue(ParseStatus.PARSED, value)


def parse_basis(raw, default: CalculationBasis = CalculationBasis.ALWAYS_ON) -> Optional[CalculationBasis]:
    """Map a raw basis value to the enum. Empty or absent means `default`."""
    text = str(raw or "").strip()
    if not text:
        return CalculationBasis(default)
    try:
        return CalculationBasis(text)
    except ValueError:
        return None
