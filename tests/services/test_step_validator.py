# -*- coding: utf-8 -*-
"""
Tests for StepValidator over the logistics analysis steps.
"""

import pytest

from app.config import PowerSources
from services.wizard import StepValidator
from ui.wizards.framework import StepSelector
from ui.wizards.logistics_analysis import build_logistics_catalog
from ui.wizards.logistics_analysis.form_defaults import blank_values


@pytest.fixture
def validator():
    sequence = StepSelector.derive_sequence(build_logistics_catalog())
    return StepValidator(StepSelector(sequence))


@pytest.fixture
def complete_values():
    values = blank_values()
    values.update({
        "operation_notes": "Cold storage, two docks",
        "product_description": "Euro pallets",
        "last_rack_level_height": 8.5,
        "max_lift_height": 9.0,
        "load_weight_at_max_height": 800,
        "load_weight_first_level": 1200,
        "work_area_width": 30,
        "work_area_depth": 50,
        "work_shifts": 0,
        "load_dimensions": [
            {"product": "Frozen", "percentage": 40},
            {"product": "Chilled", "percentage": 35},
            {"product": "Dry", "percentage": 25},
        ],
    })
    return values


class TestValidateStep:
    """Test per-step validation."""

    def test_blank_operation_step(self, validator):
        values = blank_values()
        assert not validator.validate_step(1, values)
        assert validator.field_errors(1, values) == {"operation_notes": "validation.required"}

    def test_application_step_reports_every_missing_number(self, validator):
        values = blank_values()
        values["product_description"] = "Boxes"
        errors = validator.field_errors(2, values)
        assert set(errors) == {
            "last_rack_level_height",
            "max_lift_height",
            "load_weight_at_max_height",
            "load_weight_first_level",
            "work_area_width",
            "work_area_depth",
            "work_shifts",
        }
        assert set(errors.values()) == {"validation.number_required"}

    def test_hidden_step_is_always_valid(self, validator):
        values = blank_values()
        values["power_source"] = PowerSources.DIESEL
        values["electrical_equipment"] = None
        assert validator.validate_step(3, values)
        assert validator.field_errors(3, values) == {}

    def test_visible_electrical_step_requires_object(self, validator):
        values = blank_values()
        values["electrical_equipment"] = None
        assert not validator.validate_step(3, values)

    def test_unknown_step_is_valid(self, validator):
        assert validator.validate_step(42, blank_values())


class TestValidateAll:
    """Test whole-form validation."""

    def test_complete_form(self, validator, complete_values):
        assert validator.validate_all(complete_values)
        assert validator.first_invalid_step(complete_values) is None

    def test_incomplete_load_breakdown(self, validator, complete_values):
        complete_values["load_dimensions"][2]["percentage"] = 24
        assert not validator.validate_all(complete_values)
        assert validator.first_invalid_step(complete_values) == 4

    def test_non_electric_form_ignores_equipment(self, validator, complete_values):
        complete_values["power_source"] = PowerSources.LPG
        complete_values["electrical_equipment"] = None
        assert validator.validate_all(complete_values)

    def test_first_invalid_step_is_the_earliest(self, validator):
        assert validator.first_invalid_step(blank_values()) == 1
