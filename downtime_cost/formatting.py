"""
Currency display helpers.

The engine never rounds. These turn CostBreakdown values into strings like
"$1,500.00" for whatever shows them (API response, form, report).
"""

from typing import Dict, Optional

from .config import settings
from .engine.models import CostBreakdown


def format_currency(value: float, symbol: Optional[str] = None) -> str:
    """Two decimals, thousands separators, sign before the symbol: -2.5 -> "-$2.50"."""
    if symbol is None:
        symbol = settings.CURRENCY_SYMBOL
    amount = round(float(value), 2)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_breakdown(breakdown: CostBreakdown, symbol: Optional[str] = None) -> Dict[str, str]:
    """Format every present breakdown value. Absent (None) lines are left out."""
    return {
        name: format_currency(value, symbol)
        for name, value in breakdown.model_dump().items()
        if value is not None
    }
