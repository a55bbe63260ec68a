# -*- coding: utf-8 -*-
"""
Logistics Analysis Wizard - Warehouse operation analysis.

Steps:
1. Operation description
2. Application data (incl. power source)
3. Electrical equipment (electric power sources only)
4. Load dimensions
5. Current aisle
6. Files

The customer data step is prepended, or placed right before the files
step for industrial visits.
"""

from typing import Any, Dict, Mapping

from models.form_record import FormRecord, FormType
from ui.wizards.framework import StepCatalog, WizardController
from utils.logger import get_logger

from .form_defaults import values_for_edit, values_for_new
from .steps import build_logistics_catalog, is_electric

logger = get_logger(__name__)

NOT_APPLICABLE = {"not_applicable": True}


class LogisticsAnalysisWizard(WizardController):
    """Controller of the logistics analysis wizard."""

    FORM_TYPE = FormType.LOGISTICS_ANALYSIS
    REFERENCE_PREFIX = "LOG"

    def create_catalog(self) -> StepCatalog:
        return build_logistics_catalog()

    def create_default_values(self, customer: Mapping[str, Any]) -> Dict[str, Any]:
        return values_for_new(customer)

    def create_edit_values(self, record: FormRecord) -> Dict[str, Any]:
        return values_for_edit(record.form_data)

    def sanitize_form_data(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """
        The electrical equipment sub-form is sent whole or not at all.

        It is kept only for electric power sources that did not flag it
        as not applicable; anything else is replaced by the marker.
        """
        data = super().sanitize_form_data(values)
        equipment = data.get("electrical_equipment")

        include = (
            is_electric(data)
            and isinstance(equipment, dict)
            and not equipment.get("not_applicable")
        )
        if not include:
            logger.debug("Electrical equipment not applicable, sending marker")
            data["electrical_equipment"] = dict(NOT_APPLICABLE)
        return data
