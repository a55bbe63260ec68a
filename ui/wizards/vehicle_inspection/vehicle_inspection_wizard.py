# -*- coding: utf-8 -*-
"""
Vehicle Inspection Wizard.

Steps:
1. Vehicle data
2. Checklist
3. Photos
4. Observations
5. Signature
"""

from typing import Any, Dict, Mapping

from models.form_record import FormRecord, FormType
from ui.wizards.framework import StepCatalog, WizardController

from .form_defaults import CHECKLIST_ITEMS, values_for_edit, values_for_new
from .steps import build_inspection_catalog


class VehicleInspectionWizard(WizardController):
    """Controller of the vehicle inspection wizard."""

    FORM_TYPE = FormType.VEHICLE_INSPECTION
    REFERENCE_PREFIX = "INS"

    def create_catalog(self) -> StepCatalog:
        return build_inspection_catalog()

    def create_default_values(self, customer: Mapping[str, Any]) -> Dict[str, Any]:
        return values_for_new(customer)

    def create_edit_values(self, record: FormRecord) -> Dict[str, Any]:
        return values_for_edit(record.form_data)

    def failed_checklist_items(self):
        """Checklist items left unchecked, for the review summary."""
        return [item for item in CHECKLIST_ITEMS if not self.values.get(item)]

    def sanitize_form_data(self, values: Dict[str, Any]) -> Dict[str, Any]:
        data = super().sanitize_form_data(values)
        data["checklist"] = {item: bool(data.pop(item, False)) for item in CHECKLIST_ITEMS}
        return data
