# -*- coding: utf-8 -*-
"""Vehicle inspection step catalog. Inspections have no customer step."""

from app.config import Config
from services.validation import OptionalField, RequiredList, RequiredNumber, RequiredText
from ui.wizards.framework.step_catalog import StepCatalog, StepDefinition

from .form_defaults import CHECKLIST_ITEMS, INSPECTION_FORM_FIELDS

CATALOG_NAME = "vehicle_inspection"


def _step(key, number, fields, color, icon):
    prefix = f"wizard.inspection.steps.{key}"
    return StepDefinition(
        key=key,
        number=number,
        fields=fields,
        title=f"{prefix}.title",
        short_title=f"{prefix}.short_title",
        description=f"{prefix}.description",
        color=color,
        icon=icon,
    )


def build_inspection_catalog() -> StepCatalog:
    """Build the vehicle inspection catalog."""
    steps = [
        _step("vehicle_data", 1, {
            "vehicle_id": RequiredText(),
            "mileage": RequiredNumber(),
        }, "primary", "car"),
        # Unchecked items are a valid answer
        _step("checklist", 2, {item: OptionalField() for item in CHECKLIST_ITEMS}, "blue", "clipboard-check"),
        _step("photos", 3, {
            "photos": RequiredList(min_items=Config.INSPECTION_REQUIRED_PHOTOS),
        }, "amber", "camera"),
        _step("observations", 4, {
            "observations": OptionalField(),
        }, "violet", "message-square"),
        _step("signature", 5, {
            "signature_url": RequiredText(),
            "signature_file_id": OptionalField(),
        }, "emerald", "pen-tool"),
    ]
    return StepCatalog(CATALOG_NAME, steps, INSPECTION_FORM_FIELDS)
