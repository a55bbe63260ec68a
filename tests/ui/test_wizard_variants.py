# -*- coding: utf-8 -*-
"""
Tests for the container analysis, logistics analysis and vehicle
inspection wizards: default values, step rules and saved payloads.
"""

from datetime import date

import pytest

from app.config import PowerSources
from controllers.base_controller import OperationResult
from models.form_record import FormRecord, FormType, RecordStatus
from ui.wizards.container_analysis import ContainerAnalysisWizard
from ui.wizards.logistics_analysis import LogisticsAnalysisWizard
from ui.wizards.vehicle_inspection import VehicleInspectionWizard
from ui.wizards.vehicle_inspection.form_defaults import CHECKLIST_ITEMS


class RecordingPersistence:
    def __init__(self):
        self.payloads = []

    def submit_record(self, payload, status, record_id=None):
        self.payloads.append(payload)
        return OperationResult.ok()


@pytest.fixture
def persistence():
    return RecordingPersistence()


@pytest.fixture
def build(qtbot, persistence):
    """Factory of wizards that are disposed after the test."""
    created = []

    def factory(wizard_class, **kwargs):
        wizard = wizard_class(persistence, **kwargs)
        created.append(wizard)
        return wizard

    yield factory
    for wizard in created:
        wizard.dispose()


CUSTOMER = {
    "account_name": "ACME Logistics",
    "email": "ops@acme.test",
    "billing_street": "Billing 1",
    "shipping_street": "Shipping 2",
    "billing_city": "Valencia",
    "owner_name": "Dealer Co",
    "owner_email": "dealer@acme.test",
}


class TestContainerAnalysis:
    """Test the container analysis wizard."""

    def test_customer_block_prefilled_from_billing_address(self, build):
        wizard = build(ContainerAnalysisWizard, include_extra_step=True, customer=CUSTOMER)

        assert wizard.values["company_name"] == "ACME Logistics"
        assert wizard.values["address"] == "Billing 1"
        assert wizard.values["distributor"] == "Dealer Co"
        assert wizard.effective_sequence.keys[:3] == ["company", "location", "commercial"]

    def test_customer_steps_valid_when_prefilled(self, build):
        wizard = build(ContainerAnalysisWizard, include_extra_step=True, customer=CUSTOMER)

        assert wizard.go_next()
        assert wizard.go_next()
        assert wizard.go_next()
        assert wizard.current_step.key == "product"

    def test_description_needs_ten_characters(self, build):
        wizard = build(ContainerAnalysisWizard, translate=lambda key, **kw: key)
        wizard.set_value("product_description", "Boxes")

        assert not wizard.go_next()
        assert wizard.field_errors == {"product_description": "validation.min_length"}

        wizard.set_value("product_description", "Reefer boxes")
        assert wizard.go_next()

    def test_complete_form(self, build):
        wizard = build(ContainerAnalysisWizard)
        wizard.update_values({
            "product_description": "Frozen seafood",
            "container_types": ["REEFER"],
            "container_measures": ["40FT"],
        })
        assert wizard.all_complete()

    def test_other_measure_dropped_without_other_selection(self, build, persistence):
        wizard = build(ContainerAnalysisWizard)
        wizard.update_values({"container_measures": ["20FT"], "other_measure": "45FT HC"})

        wizard.save("draft")

        assert persistence.payloads[0]["form_data"]["other_measure"] == ""

    def test_other_measure_kept_with_other_selection(self, build, persistence):
        wizard = build(ContainerAnalysisWizard)
        wizard.update_values({"container_measures": ["OTHER"], "other_measure": "45FT HC"})

        wizard.save("draft")

        assert persistence.payloads[0]["form_data"]["other_measure"] == "45FT HC"

    def test_edit_values_ignore_unknown_keys(self, build):
        record = FormRecord(
            record_id="v-1",
            form_type=FormType.CONTAINER_ANALYSIS,
            status=RecordStatus.DRAFT,
            form_data={"product_description": "Frozen seafood", "legacy": 1, "closing_date": "2026-05-04T00:00:00"},
        )
        wizard = build(ContainerAnalysisWizard, existing_record=record)

        assert "legacy" not in wizard.values
        assert wizard.values["product_description"] == "Frozen seafood"
        assert wizard.values["closing_date"] == date(2026, 5, 4)
        assert not wizard.is_record_completed


class TestLogisticsAnalysis:
    """Test the logistics analysis payload."""

    def test_customer_prefilled_from_shipping_address(self, build):
        wizard = build(LogisticsAnalysisWizard, customer=CUSTOMER)
        assert wizard.values["address"] == "Shipping 2"

    def test_electrical_equipment_included_when_electric(self, build, persistence):
        wizard = build(LogisticsAnalysisWizard)
        equipment = dict(wizard.values["electrical_equipment"], voltage=48)
        wizard.set_value("electrical_equipment", equipment)

        wizard.save("draft")

        assert persistence.payloads[0]["form_data"]["electrical_equipment"] == equipment

    def test_electrical_equipment_marker_when_not_electric(self, build, persistence):
        wizard = build(LogisticsAnalysisWizard)
        wizard.set_value("power_source", PowerSources.DIESEL)

        wizard.save("draft")

        assert persistence.payloads[0]["form_data"]["electrical_equipment"] == {"not_applicable": True}

    def test_electrical_equipment_marker_when_flagged(self, build, persistence):
        wizard = build(LogisticsAnalysisWizard)
        wizard.set_value("electrical_equipment", {"not_applicable": True, "voltage": 48})

        wizard.save("draft")

        assert persistence.payloads[0]["form_data"]["electrical_equipment"] == {"not_applicable": True}

    def test_payload_does_not_alias_form_values(self, build, persistence):
        wizard = build(LogisticsAnalysisWizard)
        wizard.set_value("power_source", PowerSources.DIESEL)

        wizard.save("draft")

        assert wizard.values["electrical_equipment"]["not_applicable"] is False

    def test_dates_serialized(self, build, persistence):
        wizard = build(LogisticsAnalysisWizard)
        wizard.set_value("estimated_definition_date", date(2026, 11, 2))

        wizard.save("draft")

        assert persistence.payloads[0]["form_data"]["estimated_definition_date"] == "2026-11-02"

    def test_partial_equipment_completed_on_edit(self, build):
        record = FormRecord(
            record_id="v-2",
            form_type=FormType.LOGISTICS_ANALYSIS,
            form_data={"electrical_equipment": {"voltage": 80}},
        )
        wizard = build(LogisticsAnalysisWizard, existing_record=record)

        equipment = wizard.values["electrical_equipment"]
        assert equipment["voltage"] == 80
        assert equipment["not_applicable"] is False
        assert "amperage" in equipment


class TestVehicleInspection:
    """Test the vehicle inspection wizard."""

    @pytest.fixture
    def inspection(self, build):
        wizard = build(VehicleInspectionWizard, translate=lambda key, **kw: key)
        wizard.update_values({
            "vehicle_id": "veh-1",
            "mileage": 120500,
            "photos": [{"url": f"photo-{i}.jpg"} for i in range(6)],
            "signature_url": "signature.png",
        })
        return wizard

    def test_no_customer_step(self, build):
        wizard = build(VehicleInspectionWizard)
        assert wizard.effective_sequence.keys == [
            "vehicle_data", "checklist", "photos", "observations", "signature",
        ]

    def test_checklist_never_blocks(self, inspection):
        inspection.go_to(2)
        assert inspection.go_next()
        assert inspection.current_step.key == "photos"

    def test_six_photos_required(self, inspection):
        inspection.set_value("photos", inspection.values["photos"][:5])
        inspection.go_to(3)

        assert not inspection.go_next()
        assert inspection.field_errors == {"photos": "validation.list_required"}

    def test_signature_required(self, inspection):
        inspection.set_value("signature_url", "")
        assert not inspection.all_complete()

    def test_complete_inspection(self, inspection, persistence):
        assert inspection.save("submit")

        form_data = persistence.payloads[0]["form_data"]
        assert form_data["checklist"] == {item: False for item in CHECKLIST_ITEMS}
        assert "oil_level" not in form_data
        assert persistence.payloads[0]["visit_data"]["form_type"] == "VEHICLE_INSPECTION"

    def test_failed_checklist_items(self, inspection):
        for item in CHECKLIST_ITEMS:
            inspection.set_value(item, True)
        inspection.set_value("headlights", False)

        assert inspection.failed_checklist_items() == ["headlights"]

    def test_edit_flattens_saved_checklist(self, build):
        record = FormRecord(
            record_id="ins-1",
            form_type=FormType.VEHICLE_INSPECTION,
            form_data={"vehicle_id": "veh-9", "checklist": {"oil_level": True}},
        )
        wizard = build(VehicleInspectionWizard, existing_record=record)

        assert wizard.values["oil_level"] is True
        assert wizard.values["coolant_level"] is False
        assert "checklist" not in wizard.values
