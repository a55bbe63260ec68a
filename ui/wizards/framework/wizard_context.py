# -*- coding: utf-8 -*-
"""
Wizard Context - Session state of one in-progress record edit.

Holds:
- Form values (field name -> value)
- Current step and completed steps
- Busy flags of the save operations
- Record identity for edit mode
"""

import copy
from typing import Any, Dict, Optional, Set
from datetime import datetime
import uuid

from models.form_record import RecordStatus, SaveKind


class WizardContext:
    """
    State of one wizard session (new record or edit of an existing one).

    Only the WizardController mutates a context.
    """

    def __init__(
        self,
        values: Dict[str, Any],
        record_id: Optional[str] = None,
        existing_status: Optional[RecordStatus] = None,
        reference_prefix: str = "WIZ"
    ):
        """
        Initialize context properties.

        Args:
            values: Initial form values (blank or edit defaults)
            record_id: Id of the record being edited, None for a new one
            existing_status: Status of the record being edited
            reference_prefix: Prefix of the session reference number
        """
        self.wizard_id: str = str(uuid.uuid4())
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.reference_number: str = self._generate_reference_number(reference_prefix)

        self.values: Dict[str, Any] = values
        self.record_id = record_id
        self.existing_status = existing_status

        self.current_step_number: int = 1
        self.completed_steps: Set[int] = set()

        self.is_submitting: bool = False
        self.is_saving_draft: bool = False
        self.is_saving_changes: bool = False

        self.is_dirty: bool = False

    def _generate_reference_number(self, prefix: str) -> str:
        """
        Generate a unique reference number for the wizard session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: LOG-20260118153045-A3F2
        """
        timestamp = self.created_at.strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        return f"{prefix}-{timestamp}-{short_id}"

    @property
    def is_editing(self) -> bool:
        return self.record_id is not None

    # =========================================================================
    # Form values
    # =========================================================================

    def update_value(self, key: str, value: Any):
        """Update a form value."""
        self.values[key] = value
        self.is_dirty = True
        self.updated_at = datetime.now()

    def get_value(self, key: str, default: Any = None) -> Any:
        """Get a form value."""
        return self.values.get(key, default)

    def snapshot(self) -> Dict[str, Any]:
        """Deep copy of the form values, safe to hand to rules and payloads."""
        return copy.deepcopy(self.values)

    # =========================================================================
    # Busy flags
    # =========================================================================

    @property
    def is_busy(self) -> bool:
        return self.is_submitting or self.is_saving_draft or self.is_saving_changes

    def set_busy(self, kind: SaveKind, busy: bool):
        """Set the busy flag matching a save kind."""
        if kind == SaveKind.SUBMIT:
            self.is_submitting = busy
        elif kind == SaveKind.DRAFT:
            self.is_saving_draft = busy
        else:
            self.is_saving_changes = busy

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the session state (for logs and diagnostics)."""
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "record_id": self.record_id,
            "existing_status": self.existing_status.value if self.existing_status else None,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_number": self.current_step_number,
            "completed_steps": sorted(self.completed_steps),
            "is_submitting": self.is_submitting,
            "is_saving_draft": self.is_saving_draft,
            "is_saving_changes": self.is_saving_changes,
            "is_dirty": self.is_dirty,
        }
