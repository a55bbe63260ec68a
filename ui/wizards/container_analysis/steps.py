# -*- coding: utf-8 -*-
"""
Container analysis step catalog.

Four product/technical steps ending with the files step, plus a block of
three customer steps (company, location, commercial) that dealer visits
prepend to the wizard.
"""

from app.config import Config
from services.validation import OptionalField, RequiredList, RequiredText
from ui.wizards.framework.step_catalog import StepCatalog, StepDefinition

from .form_defaults import CONTAINER_FORM_FIELDS

CATALOG_NAME = "container_analysis"


def _step(key, number, fields, color, icon):
    prefix = f"wizard.container.steps.{key}"
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


def build_container_catalog() -> StepCatalog:
    """Build the container analysis catalog."""
    customer_steps = [
        _step("company", 1, {
            "company_name": RequiredText(),
            "contact_person": OptionalField(),
            "email": OptionalField(),
            "tax_id": OptionalField(),
            "website": OptionalField(),
        }, "primary", "building"),
        _step("location", 2, {
            "address": RequiredText(),
            "city": OptionalField(),
            "postal_code": OptionalField(),
            "state": OptionalField(),
            "country": OptionalField(),
        }, "blue", "map-pin"),
        _step("commercial", 3, {
            "distributor": OptionalField(),
            "distributor_contact": OptionalField(),
            "end_customer_data": OptionalField(),
        }, "violet", "briefcase"),
    ]

    steps = [
        _step("product", 1, {
            "product_description": RequiredText(min_length=Config.CONTAINER_DESCRIPTION_MIN_LENGTH),
            "closing_date": OptionalField(),
        }, "amber", "file-text"),
        _step("container", 2, {
            "container_types": RequiredList(),
            "containers_per_week": OptionalField(),
            "floor_conditions": OptionalField(),
        }, "emerald", "package"),
        _step("measurements", 3, {
            "container_measures": RequiredList(),
            "other_measure": OptionalField(),
        }, "rose", "ruler"),
        _step("files", 4, {
            "files": OptionalField(),
        }, "cyan", "paperclip"),
    ]

    return StepCatalog(CATALOG_NAME, steps, CONTAINER_FORM_FIELDS, extra_steps=customer_steps)
