# -*- coding: utf-8 -*-
"""
Wizard Controller - Core state machine of the multi-step wizards.

Handles:
- Step progression (next/previous/jump) over visible steps
- Step validation before forward navigation
- Debounced recomputation of completed steps after every edit
- Progress tracking
- Save operations (submit, draft, changes) through the persistence
  collaborator
"""

from abc import ABCMeta, abstractmethod
from datetime import date, datetime
from typing import Any, Callable, Dict, Mapping, Optional, Set

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController, OperationResult
from models.form_record import FormRecord, FormType, RecordStatus, SaveKind
from services.error_mapper import map_exception
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from utils.logger import get_logger

from .step_catalog import StepCatalog, StepDefinition
from .step_selector import EffectiveStepSequence, ExtraStepPlacement, StepSelector
from .wizard_context import WizardContext

logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round like a progress bar expects (0.5 goes up)."""
    return int(value + 0.5)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQObjectMeta(type(QObject), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class WizardController(BaseController, metaclass=ABCQObjectMeta):
    """
    Owns the session state of one wizard and every transition on it.

    Subclasses must implement:
    - create_catalog(): The wizard's step catalog
    - create_default_values(): Blank form values for a new record
    - create_edit_values(record): Form values copied from a persisted record

    and may override sanitize_form_data() to shape the saved payload.

    The persistence collaborator only needs
    ``submit_record(payload, status, record_id) -> OperationResult``.
    """

    FORM_TYPE: FormType = None
    REFERENCE_PREFIX = "WIZ"

    # Signals
    step_changed = pyqtSignal(int, int)  # old_number, new_number
    completed_steps_changed = pyqtSignal(object)  # set of step numbers
    progress_changed = pyqtSignal(int)
    validation_failed = pyqtSignal(dict)  # field name -> message
    validation_summary = pyqtSignal(str)
    busy_changed = pyqtSignal(str, bool)  # save kind, busy
    save_succeeded = pyqtSignal(str, str)  # save kind, message
    save_failed = pyqtSignal(str, str)  # save kind, message

    def __init__(
        self,
        persistence,
        existing_record: Optional[FormRecord] = None,
        include_extra_step: bool = False,
        extra_step_placement: ExtraStepPlacement = ExtraStepPlacement.PREPEND,
        on_success: Optional[Callable[[], None]] = None,
        translate: Callable[..., str] = tr,
        customer: Optional[Mapping[str, Any]] = None,
        customer_id: Optional[str] = None,
        task_id: Optional[str] = None,
        debounce_ms: Optional[int] = None,
        parent=None
    ):
        """
        Initialize the controller.

        Args:
            persistence: Save collaborator
            existing_record: Record being edited, None for a new record
            include_extra_step: Whether the customer data block is shown
            extra_step_placement: Where the customer data block goes
            on_success: Called after every successful save
            translate: Translation function for user-facing messages
            customer: Customer data used to prefill a new record
            customer_id: Customer the record belongs to
            task_id: External task the record belongs to
            debounce_ms: Delay of the completion recompute after edits
            parent: Parent QObject
        """
        super().__init__(parent)
        self.persistence = persistence
        self.existing_record = existing_record
        self.on_success = on_success
        self.translate = translate
        self.customer_id = customer_id or (existing_record.customer_id if existing_record else None)
        self.task_id = task_id or (existing_record.task_id if existing_record else None)

        self.catalog = self.create_catalog()
        self.sequence = StepSelector.derive_sequence(
            self.catalog, include_extra_step, extra_step_placement
        )
        self.selector = StepSelector(self.sequence)
        self.validator = StepValidator(self.selector)

        if existing_record is not None:
            values = self.create_edit_values(existing_record)
            self.context = WizardContext(
                values,
                record_id=existing_record.record_id,
                existing_status=existing_record.status,
                reference_prefix=self.REFERENCE_PREFIX,
            )
            # Steps of a persisted record are presumed validated
            self.context.completed_steps = set(self.sequence.numbers)
        else:
            values = self.create_default_values(customer or {})
            self.context = WizardContext(values, reference_prefix=self.REFERENCE_PREFIX)

        self._field_errors: Dict[str, str] = {}
        self._disposed = False

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.setInterval(
            Config.VALIDATION_DEBOUNCE_MS if debounce_ms is None else debounce_ms
        )
        self._debounce_timer.timeout.connect(self.recompute_completed_steps)

        logger.info(
            f"{self.__class__.__name__} ready: {self.context.reference_number} "
            f"steps={self.sequence.keys} editing={self.is_editing}"
        )

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_catalog(self) -> StepCatalog:
        """Create and return the wizard's step catalog."""
        pass

    @abstractmethod
    def create_default_values(self, customer: Mapping[str, Any]) -> Dict[str, Any]:
        """Create blank form values, optionally prefilled from a customer."""
        pass

    @abstractmethod
    def create_edit_values(self, record: FormRecord) -> Dict[str, Any]:
        """Create form values from a persisted record."""
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def sanitize_form_data(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Shape the form values sent to persistence. Default: dates as ISO strings."""
        return {
            key: value.isoformat() if isinstance(value, (date, datetime)) else value
            for key, value in values.items()
        }

    def build_payload(self, status: RecordStatus) -> Dict[str, Any]:
        """Build the body handed to the persistence collaborator."""
        visit_data = {
            "form_type": self.FORM_TYPE.value if self.FORM_TYPE else None,
            "status": status.value,
        }
        if self.customer_id:
            visit_data["customer_id"] = self.customer_id
        if self.task_id:
            visit_data["task_id"] = self.task_id
        if not self.is_editing:
            visit_data["visit_date"] = datetime.now().isoformat()

        return {
            "visit_data": visit_data,
            "form_data": self.sanitize_form_data(self.context.snapshot()),
        }

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def values(self) -> Dict[str, Any]:
        return self.context.values

    @property
    def effective_sequence(self) -> EffectiveStepSequence:
        return self.sequence

    @property
    def current_step_number(self) -> int:
        return self.context.current_step_number

    @property
    def current_step(self) -> Optional[StepDefinition]:
        return self.sequence.get_step(self.context.current_step_number)

    @property
    def completed_steps(self) -> Set[int]:
        return set(self.context.completed_steps)

    @property
    def field_errors(self) -> Dict[str, str]:
        """Translated field errors of the displayed step."""
        return dict(self._field_errors)

    @property
    def total_steps(self) -> int:
        return len(self.selector.visible_numbers(self.values))

    @property
    def is_first_step(self) -> bool:
        return self.selector.prev_visible(self.current_step_number, self.values) is None

    @property
    def is_last_step(self) -> bool:
        return self.selector.next_visible(self.current_step_number, self.values) is None

    @property
    def is_editing(self) -> bool:
        return self.context.is_editing

    @property
    def is_record_completed(self) -> bool:
        """Editing a record that was already submitted."""
        return self.context.existing_status == RecordStatus.COMPLETED

    @property
    def has_unsaved_changes(self) -> bool:
        return self.context.is_dirty

    @property
    def is_submitting(self) -> bool:
        return self.context.is_submitting

    @property
    def is_saving_draft(self) -> bool:
        return self.context.is_saving_draft

    @property
    def is_saving_changes(self) -> bool:
        return self.context.is_saving_changes

    def is_step_visible(self, step_number: int) -> bool:
        return self.selector.is_step_visible(step_number, self.values)

    def progress(self) -> int:
        """
        Completion percentage over visible steps.

        Hidden steps are excluded from both sides so that a legitimately
        skipped step never keeps progress below 100.
        """
        visible = set(self.selector.visible_numbers(self.values))
        if not visible:
            return 0
        done = len(self.context.completed_steps & visible)
        return round_half_up(100 * done / len(visible))

    def all_complete(self) -> bool:
        """Check every visible step; gates submission."""
        return self.validator.validate_all(self.values)

    # =========================================================================
    # Form values
    # =========================================================================

    def set_value(self, field_name: str, value: Any):
        """Store one field value and schedule a completion recompute."""
        self.context.update_value(field_name, value)
        self._schedule_recompute()

    def update_values(self, changes: Mapping[str, Any]):
        """Store several field values and schedule one completion recompute."""
        for field_name, value in changes.items():
            self.context.update_value(field_name, value)
        self._schedule_recompute()

    def _schedule_recompute(self):
        if self._disposed:
            logger.debug("Ignoring edit on a disposed wizard")
            return
        # Restarting supersedes any pending recompute
        self._debounce_timer.start()

    def recompute_completed_steps(self):
        """Re-run validation of every step and refresh completed steps."""
        if self._disposed:
            return

        values = self.values
        completed = {n for n in self.sequence.numbers if self.validator.validate_step(n, values)}

        if completed != self.context.completed_steps:
            self.context.completed_steps = completed
            logger.debug(f"Completed steps: {sorted(completed)}")
            self.completed_steps_changed.emit(set(completed))
        self.progress_changed.emit(self.progress())

    def dispose(self):
        """Cancel pending work; the controller must not change state afterwards."""
        self._debounce_timer.stop()
        self._disposed = True
        logger.debug(f"Wizard {self.context.reference_number} disposed")

    # =========================================================================
    # Navigation
    # =========================================================================

    def go_next(self) -> bool:
        """
        Validate the current step and move to the next visible one.

        Returns:
            True if the current step was valid
        """
        current = self.current_step_number
        errors = self.validator.field_errors(current, self.values)
        if errors:
            self._report_validation_errors(errors)
            logger.warning(f"Step {current} validation failed: {list(errors)}")
            return False

        self._field_errors = {}
        if current not in self.context.completed_steps:
            self.context.completed_steps.add(current)
            self.completed_steps_changed.emit(self.completed_steps)
            self.progress_changed.emit(self.progress())

        next_number = self.selector.next_visible(current, self.values)
        if next_number is None:
            logger.debug(f"Step {current} is the last visible step")
            return True

        self._navigate_to(next_number)
        return True

    def go_prev(self) -> bool:
        """Move back to the previous visible step; never validates."""
        prev_number = self.selector.prev_visible(self.current_step_number, self.values)
        if prev_number is None:
            logger.debug(f"Cannot go back from step {self.current_step_number}")
            return False
        self._navigate_to(prev_number)
        return True

    def go_to(self, step_number: int) -> bool:
        """
        Jump to a step without validating the one being left.

        Returns:
            False if the step does not exist or is currently hidden
        """
        if not self.is_step_visible(step_number):
            logger.warning(f"Refusing jump to unknown or hidden step {step_number}")
            return False
        if step_number != self.current_step_number:
            self._navigate_to(step_number)
        return True

    def _navigate_to(self, new_number: int):
        old_number = self.context.current_step_number
        self.context.current_step_number = new_number
        self._field_errors = {}
        logger.info(f"Navigation: step {old_number} → {new_number}")
        self.step_changed.emit(old_number, new_number)

    def _report_validation_errors(self, errors: Dict[str, str]):
        self._field_errors = {name: self.translate(key) for name, key in errors.items()}
        self.validation_failed.emit(dict(self._field_errors))
        self.validation_summary.emit(self.translate("validation.check_data"))

    # =========================================================================
    # Save
    # =========================================================================

    def save(self, kind) -> bool:
        """
        Save the record through the persistence collaborator.

        Args:
            kind: "submit", "draft" or "changes"

        Returns:
            True if the record was saved
        """
        kind = SaveKind(kind)

        if self.context.is_busy:
            logger.warning(f"Save '{kind.value}' ignored: another save is in progress")
            return False

        if kind == SaveKind.CHANGES and not self.is_editing:
            logger.warning("Save 'changes' ignored: not editing an existing record")
            return False

        if kind == SaveKind.SUBMIT:
            invalid_step = self.validator.first_invalid_step(self.values)
            if invalid_step is not None:
                logger.warning(f"Submit blocked: step {invalid_step} is incomplete")
                self._report_validation_errors(
                    self.validator.field_errors(invalid_step, self.values)
                )
                return False

        status = self._status_for(kind)
        operation = f"save_{kind.value}"
        self._set_busy(kind, True)
        self._emit_started(operation)
        try:
            payload = self.build_payload(status)
            result = self.persistence.submit_record(payload, status.value, self.context.record_id)
            if isinstance(result, OperationResult) and not result.success:
                raise RuntimeError(result.message or "persistence rejected the record")
        except Exception as e:
            logger.error(f"Save '{kind.value}' failed for {self.context.reference_number}", exc_info=True)
            message = map_exception(e, context="visit", translate=self.translate)
            self._emit_error(operation, message)
            self.save_failed.emit(kind.value, message)
            return False
        finally:
            self._set_busy(kind, False)

        self.context.is_dirty = False
        self._emit_completed(operation, True)
        self._log_operation(operation, reference=self.context.reference_number, status=status.value)
        self.save_succeeded.emit(kind.value, self.translate(f"save.success.{kind.value}"))
        if self.on_success is not None:
            self.on_success()
        return True

    def _status_for(self, kind: SaveKind) -> RecordStatus:
        if kind == SaveKind.SUBMIT:
            return RecordStatus.COMPLETED
        if kind == SaveKind.DRAFT:
            return RecordStatus.DRAFT
        return self.context.existing_status or RecordStatus.DRAFT

    def _set_busy(self, kind: SaveKind, busy: bool):
        self.context.set_busy(kind, busy)
        self.busy_changed.emit(kind.value, busy)
