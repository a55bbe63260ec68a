# -*- coding: utf-8 -*-
"""Default form values of the vehicle inspection wizard."""

from typing import Any, Dict, Mapping

from ui.wizards.framework.form_values import merge_record_values

CHECKLIST_ITEMS = (
    # Fluid levels
    "oil_level",
    "coolant_level",
    "brake_fluid_level",
    "hydraulic_level",
    # Pedals
    "brake_pedal",
    "clutch_pedal",
    "gas_pedal",
    # Lights
    "headlights",
    "tail_lights",
    "brake_lights",
    "turn_signals",
    "hazard_lights",
    "reversing_lights",
    "dashboard_lights",
)


def blank_values() -> Dict[str, Any]:
    values = {
        "vehicle_id": "",
        "mileage": None,
    }
    values.update({item: False for item in CHECKLIST_ITEMS})
    values.update({
        "photos": [],
        "observations": "",
        "signature_url": "",
        "signature_file_id": "",
    })
    return values


INSPECTION_FORM_FIELDS = tuple(blank_values())


def values_for_new(vehicle: Mapping[str, Any]) -> Dict[str, Any]:
    """Blank values, preselecting the vehicle when one is given."""
    values = blank_values()
    if vehicle.get("vehicle_id"):
        values["vehicle_id"] = vehicle["vehicle_id"]
    if vehicle.get("mileage") is not None:
        values["mileage"] = vehicle["mileage"]
    return values


def values_for_edit(form_data: Mapping[str, Any]) -> Dict[str, Any]:
    """Values of a persisted record; the saved checklist is nested."""
    flat = dict(form_data)
    flat.update(form_data.get("checklist") or {})
    return merge_record_values(blank_values(), flat)
