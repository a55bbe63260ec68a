# -*- coding: utf-8 -*-
"""
Step validation service for the visit and inspection wizards.

Validates form values for each step without UI coupling.
"""

from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ui.wizards.framework.step_selector import StepSelector


class StepValidator:
    """Validates wizard step data against the rules declared by each step."""

    def __init__(self, selector: 'StepSelector'):
        """
        Args:
            selector: Selector over the effective sequence being validated
        """
        self.selector = selector

    @property
    def sequence(self):
        return self.selector.sequence

    def field_errors(self, step_number: int, values: Mapping[str, Any]) -> Dict[str, str]:
        """
        Collect field errors of one step.

        Args:
            step_number: Effective step number
            values: Current form values

        Returns:
            Mapping of field name -> translation key (empty if valid).
            Hidden and unknown steps never report errors.
        """
        step = self.sequence.get_step(step_number)
        if step is None or not self.selector.is_step_visible(step_number, values):
            return {}

        errors = {}
        for field_name, rule in step.fields.items():
            error = rule.check(field_name, values)
            if error:
                errors[field_name] = error
        return errors

    def validate_step(self, step_number: int, values: Mapping[str, Any]) -> bool:
        """
        Check if every field of a step is complete.

        A step hidden by its visibility rule is always complete so it can
        never block submission.
        """
        step = self.sequence.get_step(step_number)
        if step is None or not self.selector.is_step_visible(step_number, values):
            return True
        return all(rule.is_valid(name, values) for name, rule in step.fields.items())

    def validate_all(self, values: Mapping[str, Any]) -> bool:
        """Check every visible step, whatever step is being displayed."""
        return self.first_invalid_step(values) is None

    def first_invalid_step(self, values: Mapping[str, Any]) -> Optional[int]:
        """Get the first visible step that is not complete, or None."""
        for number in self.selector.visible_numbers(values):
            if not self.validate_step(number, values):
                return number
        return None
