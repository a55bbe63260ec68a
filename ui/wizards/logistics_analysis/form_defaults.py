# -*- coding: utf-8 -*-
"""Default form values of the logistics analysis wizard."""

from typing import Any, Dict, Mapping

from app.config import PowerSources
from ui.wizards.framework.form_values import first_of, merge_record_values

DATE_FIELDS = ("closing_date", "estimated_definition_date")


def blank_electrical_equipment() -> Dict[str, Any]:
    return {
        "not_applicable": False,
        "current_type": None,
        "voltage": None,
        "frequency": None,
        "amperage": None,
        "ambient_temperature": None,
        "working_hours_per_day": None,
        "notes": "",
    }


def blank_aisle() -> Dict[str, Any]:
    return {
        "rack_distance": None,
        "product_distance": None,
        "available_aisle_width": None,
        "rack_type": None,
        "rack_levels": None,
        "max_rack_height": None,
    }


def blank_values() -> Dict[str, Any]:
    return {
        # Customer data
        "company_name": "",
        "contact_person": "",
        "email": "",
        "address": "",
        "city": "",
        "state": "",
        "country": "",
        "postal_code": "",
        "website": "",
        "tax_id": "",
        "distributor": "",
        "distributor_contact": "",
        # Operation
        "closing_date": None,
        "operation_notes": "",
        "has_ramps": False,
        "ramp_notes": "",
        "has_door_passages": False,
        "door_passage_notes": "",
        "has_restrictions": False,
        "restriction_notes": "",
        "max_building_height": None,
        "current_aisle_width": None,
        "work_surface": None,
        "floor_conditions": "",
        "operation_type": "",
        # Application
        "product_description": "",
        "last_rack_level_height": None,
        "max_lift_height": None,
        "load_weight_at_max_height": None,
        "load_weight_first_level": None,
        "work_area_width": None,
        "work_area_depth": None,
        "work_shifts": None,
        "estimated_definition_date": None,
        "power_source": PowerSources.ELECTRIC,
        # Electrical equipment
        "electrical_equipment": blank_electrical_equipment(),
        # Loads
        "load_dimensions": [],
        # Aisle
        "current_aisle": blank_aisle(),
        # Files
        "files": [],
    }


LOGISTICS_FORM_FIELDS = tuple(blank_values())


def values_for_new(customer: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Blank values prefilled from a CRM customer.

    Shipping address fields take precedence over billing ones.
    """
    values = blank_values()
    values.update({
        "company_name": first_of(customer, "company_name", "account_name"),
        "email": first_of(customer, "email"),
        "address": first_of(customer, "shipping_street", "billing_street"),
        "city": first_of(customer, "shipping_city", "billing_city"),
        "state": first_of(customer, "shipping_state", "billing_state"),
        "country": first_of(customer, "shipping_country", "billing_country"),
        "postal_code": first_of(customer, "shipping_code", "billing_code"),
        "website": first_of(customer, "website"),
        "tax_id": first_of(customer, "tax_id"),
    })
    return values


def values_for_edit(form_data: Mapping[str, Any]) -> Dict[str, Any]:
    """Values of a persisted record; partial sub-objects are completed with blanks."""
    values = merge_record_values(blank_values(), form_data, DATE_FIELDS)
    equipment = form_data.get("electrical_equipment") or {}
    values["electrical_equipment"] = dict(blank_electrical_equipment(), **equipment)
    return values
