# -*- coding: utf-8 -*-
"""
Logistics analysis step catalog.

The electrical equipment step only applies to electric power sources and
is skipped by navigation otherwise.
"""

from typing import Any, Mapping

from app.config import PowerSources
from services.validation import (
    ConditionalObject,
    LoadBreakdown,
    OptionalField,
    RequiredNumber,
    RequiredObject,
    RequiredText,
)
from ui.wizards.framework.step_catalog import StepCatalog, StepDefinition

from .form_defaults import LOGISTICS_FORM_FIELDS

CATALOG_NAME = "logistics_analysis"


def is_electric(values: Mapping[str, Any]) -> bool:
    return values.get("power_source") == PowerSources.ELECTRIC


def _step(key, number, fields, color, icon, visibility_rule=None):
    prefix = f"wizard.logistics.steps.{key}"
    return StepDefinition(
        key=key,
        number=number,
        fields=fields,
        visibility_rule=visibility_rule,
        title=f"{prefix}.title",
        short_title=f"{prefix}.short_title",
        description=f"{prefix}.description",
        color=color,
        icon=icon,
    )


def build_logistics_catalog() -> StepCatalog:
    """Build the logistics analysis catalog."""
    customer_step = _step("customer_data", 1, {
        "company_name": RequiredText(),
        "contact_person": OptionalField(),
        "email": OptionalField(),
        "address": RequiredText(),
        "city": OptionalField(),
        "state": OptionalField(),
        "country": OptionalField(),
        "postal_code": OptionalField(),
        "website": OptionalField(),
        "tax_id": OptionalField(),
        "distributor": OptionalField(),
        "distributor_contact": OptionalField(),
    }, "indigo", "building")

    optional = OptionalField()
    steps = [
        _step("operation", 1, {
            "closing_date": optional,
            "operation_notes": RequiredText(),
            "has_ramps": optional,
            "ramp_notes": optional,
            "has_door_passages": optional,
            "door_passage_notes": optional,
            "has_restrictions": optional,
            "restriction_notes": optional,
            "max_building_height": optional,
            "current_aisle_width": optional,
            "work_surface": optional,
            "floor_conditions": optional,
            "operation_type": optional,
        }, "primary", "file-text"),
        _step("application", 2, {
            "product_description": RequiredText(),
            "last_rack_level_height": RequiredNumber(),
            "max_lift_height": RequiredNumber(),
            "load_weight_at_max_height": RequiredNumber(),
            "load_weight_first_level": RequiredNumber(),
            "work_area_width": RequiredNumber(),
            "work_area_depth": RequiredNumber(),
            "work_shifts": RequiredNumber(),
            "estimated_definition_date": optional,
            "power_source": RequiredText(),
        }, "blue", "package"),
        _step("electrical_equipment", 3, {
            "electrical_equipment": ConditionalObject("power_source", PowerSources.ELECTRIC),
        }, "amber", "zap", visibility_rule=is_electric),
        _step("loads", 4, {
            "load_dimensions": LoadBreakdown(),
        }, "emerald", "ruler"),
        _step("aisle", 5, {
            "current_aisle": RequiredObject(),
        }, "violet", "route"),
        _step("files", 6, {
            "files": optional,
        }, "rose", "paperclip"),
    ]

    return StepCatalog(CATALOG_NAME, steps, LOGISTICS_FORM_FIELDS, extra_steps=[customer_step])
