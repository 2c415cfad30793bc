"""
Form state tests.

Tests:
1. Defaults and reset
2. update() rejects unknown fields
3. validate() stores errors, is_form_valid() gating
4. calculate() success and failure
5. Advanced toggle
6. Configured default basis
"""

import pytest

from downtime_cost.config import settings
from downtime_cost.engine import CalculationBasis
from downtime_cost.form_state import FormState


def _filled_form():
    state = FormState()
    state.update("annualRevenue", "8760000")
    state.update("downtimeDuration", "1")
    state.update("affectedEmployees", "10")
    state.update("hourlyWage", "50")
    return state


def test_defaults():
    state = FormState()
    assert state.fields["calculationBasis"] == "24/7"
    assert state.fields["annualRevenue"] == ""
    assert state.errors == {}
    assert state.results is None
    assert state.show_advanced is False
    assert not state.is_form_valid()


def test_update_unknown_field_raises():
    state = FormState()
    with pytest.raises(KeyError):
        state.update("theme", "dark")


def test_validate_stores_errors_and_blocks_form():
    state = _filled_form()
    state.update("affectedEmployees", "3.5")
    errors = state.validate()
    assert errors == {"affectedEmployees": "Must be a non-negative integer"}
    assert state.errors == errors
    assert not state.is_form_valid()

    state.update("affectedEmployees", "3")
    assert state.validate() == {}
    assert state.is_form_valid()


def test_calculate_success_stores_results():
    state = _filled_form()
    breakdown = state.calculate()
    assert breakdown is not None
    assert state.results is breakdown
    assert breakdown.total_estimated_cost == pytest.approx(1500)


def test_calculate_failure_keeps_previous_results():
    state = _filled_form()
    first = state.calculate()
    state.update("hourlyWage", "-3")
    assert state.calculate() is None
    assert state.errors == {"hourlyWage": "Must be a non-negative number"}
    assert state.results is first


def test_toggle_advanced_and_reset():
    state = _filled_form()
    assert state.toggle_advanced() is True
    state.update("profitMargin", "20")
    state.calculate()
    state.reset()
    assert state.show_advanced is False
    assert state.results is None
    assert state.errors == {}
    assert state.fields["profitMargin"] == ""
    assert state.fields["calculationBasis"] == "24/7"


def test_defaults_follow_configured_basis(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_CALCULATION_BASIS", CalculationBasis.BUSINESS)
    state = _filled_form()
    assert state.fields["calculationBasis"] == "business"
    state.update("calculationBasis", "")
    state.update("annualRevenue", "2000000")
    assert state.calculate().hourly_revenue_rate == pytest.approx(1000)
