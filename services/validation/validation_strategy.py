# -*- coding: utf-8 -*-
"""
Field Rules - Strategy pattern for per-field completion checks.

Each wizard step declares which rule governs each of its fields. Rules
are a small closed set of variants; adding a new kind of field means
adding a variant here, never another branch keyed by field name.

A rule answers with a translation key describing the problem, or None
when the field is complete.
"""

from abc import ABC, abstractmethod
from numbers import Number
from typing import Any, Mapping, Optional

from app.config import Config


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


class FieldRule(ABC):
    """
    Abstract base class for field rules.

    Rules receive the whole form values mapping so that conditional rules
    can look at sibling fields.
    """

    @abstractmethod
    def check(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        """
        Check one field.

        Args:
            field_name: Name of the field owned by the step
            values: Current form values

        Returns:
            Translation key of the error, or None if the field is valid
        """
        pass

    def is_valid(self, field_name: str, values: Mapping[str, Any]) -> bool:
        """Check if the field passes the rule."""
        return self.check(field_name, values) is None

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class RequiredText(FieldRule):
    """Text that must not be blank once trimmed."""

    def __init__(self, min_length: int = 1):
        self.min_length = max(1, min_length)

    def check(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        value = values.get(field_name)
        if not isinstance(value, str) or not value.strip():
            return "validation.required"
        if len(value.strip()) < self.min_length:
            return "validation.min_length"
        return None

    def __repr__(self):
        return f"RequiredText(min_length={self.min_length})"


class RequiredNumber(FieldRule):
    """Numeric input that must be present. Zero is a valid answer."""

    def check(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        value = values.get(field_name)
        if value is None:
            return "validation.number_required"
        if not _is_number(value):
            return "validation.number_invalid"
        return None


class OptionalField(FieldRule):
    """Always valid."""

    def check(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        return None


class LoadBreakdown(FieldRule):
    """
    Load/dimension breakdown list.

    Every entry needs a non-blank ``product`` and the entries' ``percentage``
    values must add up to 100 within ``tolerance``. Missing percentages
    count as zero.
    """

    def __init__(self, tolerance: float = None,
                 product_key: str = "product", percentage_key: str = "percentage"):
        self.tolerance = Config.LOAD_PERCENTAGE_TOLERANCE if tolerance is None else tolerance
        self.product_key = product_key
        self.percentage_key = percentage_key

    def check(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        entries = values.get(field_name)
        if not isinstance(entries, (list, tuple)) or len(entries) == 0:
            return "validation.loads.empty"

        for entry in entries:
            product = entry.get(self.product_key) if isinstance(entry, Mapping) else None
            if not isinstance(product, str) or not product.strip():
                return "validation.loads.product_required"

        percentages = (entry.get(self.percentage_key) for entry in entries)
        total = sum(p for p in percentages if _is_number(p))
        if abs(total - Config.LOAD_PERCENTAGE_TOTAL) > self.tolerance:
            return "validation.loads.total"
        return None

    def __repr__(self):
        return f"LoadBreakdown(tolerance={self.tolerance})"


class RequiredObject(FieldRule):
    """Structurally required nested record (e.g. the aisle layout)."""

    def check(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        if not isinstance(values.get(field_name), Mapping):
            return "validation.object_required"
        return None


class ConditionalObject(FieldRule):
    """
    Nested record required only while a sibling field holds a given value.

    Models sub-forms that only apply to one variant of the record, such as
    electrical equipment for electric power sources.
    """

    def __init__(self, condition_field: str, condition_value: Any):
        self.condition_field = condition_field
        self.condition_value = condition_value

    def applies(self, values: Mapping[str, Any]) -> bool:
        return values.get(self.condition_field) == self.condition_value

    def check(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        if not self.applies(values):
            return None
        if not isinstance(values.get(field_name), Mapping):
            return "validation.object_required"
        return None

    def __repr__(self):
        return f"ConditionalObject({self.condition_field!r}, {self.condition_value!r})"


class RequiredList(FieldRule):
    """List with at least ``min_items`` entries (selections, photos)."""

    def __init__(self, min_items: int = 1):
        self.min_items = max(1, min_items)

    def check(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        items = values.get(field_name)
        if not isinstance(items, (list, tuple)) or len(items) < self.min_items:
            return "validation.list_required"
        return None

    def __repr__(self):
        return f"RequiredList(min_items={self.min_items})"
