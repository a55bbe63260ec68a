# -*- coding: utf-8 -*-
"""
Form record entity model.

A persisted visit or inspection as returned by the backend. Wizards use
it in edit mode to seed their form values and to know which status an
in-place "save changes" must keep.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class RecordStatus(str, Enum):
    """Status values understood by the persistence backend."""
    DRAFT = "DRAFT"
    COMPLETED = "COMPLETED"


class SaveKind(str, Enum):
    """The three save intents of a wizard."""
    SUBMIT = "submit"
    DRAFT = "draft"
    CHANGES = "changes"


class FormType(str, Enum):
    """Wizard families backed by the engine."""
    CONTAINER_ANALYSIS = "CONTAINER_ANALYSIS"
    LOGISTICS_ANALYSIS = "LOGISTICS_ANALYSIS"
    VEHICLE_INSPECTION = "VEHICLE_INSPECTION"


@dataclass
class FormRecord:
    """A persisted wizard record (visit or inspection)."""

    record_id: str
    form_type: FormType
    status: RecordStatus = RecordStatus.DRAFT
    form_data: Dict[str, Any] = field(default_factory=dict)
    customer_id: Optional[str] = None
    task_id: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == RecordStatus.COMPLETED

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FormRecord':
        """Create a record from an API response dictionary."""
        record_id = data.get("id") or data.get("record_id")
        if record_id is None or record_id == "":
            raise ValueError("record data carries no id")
        return cls(
            record_id=str(record_id),
            form_type=FormType(data.get("form_type", data.get("formType"))),
            status=RecordStatus(data.get("status", RecordStatus.DRAFT.value)),
            form_data=dict(data.get("form_data") or data.get("formData") or {}),
            customer_id=data.get("customer_id", data.get("customerId")),
            task_id=data.get("task_id", data.get("taskId")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.record_id,
            "form_type": self.form_type.value,
            "status": self.status.value,
            "form_data": self.form_data,
            "customer_id": self.customer_id,
            "task_id": self.task_id,
        }
