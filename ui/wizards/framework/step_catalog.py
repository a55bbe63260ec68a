# -*- coding: utf-8 -*-
"""
Step Catalog - Static step declarations of a wizard.

A catalog lists, in order, the steps of one wizard type and the fields
each step owns together with the rule that governs each field. Catalogs
are checked when they are built; a broken catalog is a programming error
and raises CatalogConfigurationError right away.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from services.exceptions import CatalogConfigurationError
from services.validation import FieldRule

VisibilityRule = Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True, eq=False)
class StepDefinition:
    """
    One step of a wizard.

    Attributes:
        key: Unique key within the catalog
        number: 1-based position in the (effective) sequence
        fields: Ordered mapping of owned field name -> governing rule
        visibility_rule: Optional predicate over form values; a step
            whose rule returns False is skipped by navigation and does not
            count toward progress or completeness
        title, short_title, description: Translation keys
        color, icon: Display tags for the stepper
    """
    key: str
    number: int
    fields: Dict[str, FieldRule] = field(default_factory=dict)
    visibility_rule: Optional[VisibilityRule] = None
    title: str = ""
    short_title: str = ""
    description: str = ""
    color: str = "primary"
    icon: str = ""

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(self.fields)

    def renumbered(self, number: int) -> 'StepDefinition':
        """Return a copy of this step at another position."""
        return StepDefinition(
            key=self.key,
            number=number,
            fields=self.fields,
            visibility_rule=self.visibility_rule,
            title=self.title,
            short_title=self.short_title,
            description=self.description,
            color=self.color,
            icon=self.icon,
        )

    def __repr__(self):
        return f"StepDefinition(key={self.key!r}, number={self.number})"


def check_dense_numbering(steps: Iterable[StepDefinition], catalog: str = None):
    """Raise if step numbers are not exactly 1..N in order."""
    for expected, step in enumerate(steps, start=1):
        if step.number != expected:
            raise CatalogConfigurationError(
                f"Step '{step.key}' is numbered {step.number}, expected {expected}",
                catalog=catalog,
                step_key=step.key,
            )


class StepCatalog:
    """
    Ordered step declarations of one wizard type.

    Besides its regular steps a catalog may carry an ``extra_steps`` block
    (the customer data steps) that a wizard run can inject; see
    StepSelector.derive_sequence.
    """

    def __init__(
        self,
        name: str,
        steps: List[StepDefinition],
        schema_fields: Iterable[str],
        extra_steps: Optional[List[StepDefinition]] = None
    ):
        """
        Initialize and check the catalog.

        Args:
            name: Catalog name used in error messages
            steps: Regular steps, numbered 1..N
            schema_fields: Every field name known to the wizard's form
            extra_steps: Optional injectable block, numbered 1..K

        Raises:
            CatalogConfigurationError: If the declarations are inconsistent
        """
        self.name = name
        self.steps: Tuple[StepDefinition, ...] = tuple(steps)
        self.extra_steps: Tuple[StepDefinition, ...] = tuple(extra_steps or ())
        self.schema_fields = frozenset(schema_fields)
        self._check()

    # =========================================================================
    # Lookup
    # =========================================================================

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[StepDefinition]:
        return iter(self.steps)

    @property
    def has_extra_steps(self) -> bool:
        return len(self.extra_steps) > 0

    def get_by_number(self, number: int) -> Optional[StepDefinition]:
        """Get a regular step by its catalog number."""
        if 1 <= number <= len(self.steps):
            return self.steps[number - 1]
        return None

    def get_by_key(self, key: str) -> Optional[StepDefinition]:
        """Get a regular or extra step by key."""
        for step in self.steps + self.extra_steps:
            if step.key == key:
                return step
        return None

    def field_names(self) -> List[str]:
        """All field names owned by regular and extra steps, in order."""
        names = []
        for step in self.steps + self.extra_steps:
            names.extend(step.field_names)
        return names

    # =========================================================================
    # Configuration check
    # =========================================================================

    def _check(self):
        if not self.steps:
            raise CatalogConfigurationError("Catalog has no steps", catalog=self.name)

        check_dense_numbering(self.steps, self.name)
        check_dense_numbering(self.extra_steps, self.name)

        seen_keys = set()
        owners: Dict[str, str] = {}
        for step in self.steps + self.extra_steps:
            if step.key in seen_keys:
                raise CatalogConfigurationError(
                    f"Duplicated step key '{step.key}'", catalog=self.name, step_key=step.key
                )
            seen_keys.add(step.key)

            for field_name, rule in step.fields.items():
                if not isinstance(rule, FieldRule):
                    raise CatalogConfigurationError(
                        f"Field '{field_name}' has no rule", catalog=self.name, step_key=step.key
                    )
                if field_name not in self.schema_fields:
                    raise CatalogConfigurationError(
                        f"Field '{field_name}' is not part of the form schema",
                        catalog=self.name,
                        step_key=step.key,
                    )
                if field_name in owners:
                    raise CatalogConfigurationError(
                        f"Field '{field_name}' is owned by both '{owners[field_name]}' and '{step.key}'",
                        catalog=self.name,
                        step_key=step.key,
                    )
                owners[field_name] = step.key
