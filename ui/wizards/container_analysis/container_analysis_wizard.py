# -*- coding: utf-8 -*-
"""
Container Analysis Wizard - Commercial container handling analysis.

Steps:
1. Product description
2. Container types and throughput
3. Container measurements
4. Files

Dealer visits prepend the company, location and commercial steps.
"""

from typing import Any, Dict, Mapping

from models.form_record import FormRecord, FormType
from ui.wizards.framework import StepCatalog, WizardController

from .form_defaults import values_for_edit, values_for_new
from .steps import build_container_catalog

OTHER_MEASURE = "OTHER"


class ContainerAnalysisWizard(WizardController):
    """Controller of the container analysis wizard."""

    FORM_TYPE = FormType.CONTAINER_ANALYSIS
    REFERENCE_PREFIX = "CSS"

    def create_catalog(self) -> StepCatalog:
        return build_container_catalog()

    def create_default_values(self, customer: Mapping[str, Any]) -> Dict[str, Any]:
        return values_for_new(customer)

    def create_edit_values(self, record: FormRecord) -> Dict[str, Any]:
        return values_for_edit(record.form_data)

    def sanitize_form_data(self, values: Dict[str, Any]) -> Dict[str, Any]:
        data = super().sanitize_form_data(values)
        # Free-text measure only travels with the "other" selection
        if OTHER_MEASURE not in (data.get("container_measures") or []):
            data["other_measure"] = ""
        return data
