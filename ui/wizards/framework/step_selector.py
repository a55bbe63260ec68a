# -*- coding: utf-8 -*-
"""
Step Selector - Builds the effective step sequence of a wizard run.

Handles:
- Injection of the optional customer data block (prepended or right
  before the terminal files step) with dense renumbering
- Runtime visibility of steps driven by form values
- Next/previous navigation over visible steps only
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from services.exceptions import CatalogConfigurationError
from utils.logger import get_logger

from .step_catalog import StepCatalog, StepDefinition, check_dense_numbering

logger = get_logger(__name__)


class ExtraStepPlacement(str, Enum):
    """Where the extra (customer data) block goes."""
    PREPEND = "prepend"
    BEFORE_LAST = "before-last"


@dataclass(frozen=True)
class EffectiveStepSequence:
    """Renumbered steps of one wizard run. Numbers are always 1..total."""
    steps: Tuple[StepDefinition, ...]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[StepDefinition]:
        return iter(self.steps)

    @property
    def total(self) -> int:
        return len(self.steps)

    @property
    def numbers(self) -> List[int]:
        return [step.number for step in self.steps]

    @property
    def keys(self) -> List[str]:
        return [step.key for step in self.steps]

    def get_step(self, number: int) -> Optional[StepDefinition]:
        """Get a step by its effective number."""
        if 1 <= number <= len(self.steps):
            return self.steps[number - 1]
        return None

    def number_of(self, key: str) -> Optional[int]:
        """Get the effective number of a step key."""
        for step in self.steps:
            if step.key == key:
                return step.number
        return None


class StepSelector:
    """
    Visibility and navigation over an effective step sequence.

    Usage:
        sequence = StepSelector.derive_sequence(catalog, True, ExtraStepPlacement.BEFORE_LAST)
        selector = StepSelector(sequence)
        selector.next_visible(2, values)
    """

    def __init__(self, sequence: EffectiveStepSequence):
        self.sequence = sequence

    # =========================================================================
    # Sequence derivation
    # =========================================================================

    @staticmethod
    def derive_sequence(
        catalog: StepCatalog,
        include_extra_step: bool = False,
        extra_step_placement: ExtraStepPlacement = ExtraStepPlacement.PREPEND
    ) -> EffectiveStepSequence:
        """
        Produce the renumbered step sequence for one wizard run.

        Args:
            catalog: The wizard's step catalog
            include_extra_step: Whether the customer data block is shown
            extra_step_placement: "prepend" or "before-last"

        Returns:
            EffectiveStepSequence numbered 1..total

        Raises:
            CatalogConfigurationError: If the block is requested on a
                catalog without one, or the numbering is not dense
        """
        placement = ExtraStepPlacement(extra_step_placement)

        if not include_extra_step:
            ordered = list(catalog.steps)
        elif not catalog.has_extra_steps:
            raise CatalogConfigurationError(
                "Extra step requested but the catalog declares none", catalog=catalog.name
            )
        elif placement == ExtraStepPlacement.PREPEND:
            ordered = list(catalog.extra_steps) + list(catalog.steps)
        else:
            # The files step stays the visual terminus
            ordered = list(catalog.steps[:-1]) + list(catalog.extra_steps) + [catalog.steps[-1]]

        steps = tuple(step.renumbered(index) for index, step in enumerate(ordered, start=1))
        check_dense_numbering(steps, catalog.name)

        logger.debug(
            f"Derived sequence for '{catalog.name}' "
            f"(extra={include_extra_step}, placement={placement.value}): "
            f"{[step.key for step in steps]}"
        )
        return EffectiveStepSequence(steps=steps)

    # =========================================================================
    # Visibility
    # =========================================================================

    def is_step_visible(self, step_number: int, values: Mapping[str, Any]) -> bool:
        """
        Check if a step currently counts for navigation and progress.

        Steps without a visibility rule are always visible. Unknown step
        numbers are never visible.
        """
        step = self.sequence.get_step(step_number)
        if step is None:
            return False
        if step.visibility_rule is None:
            return True
        return bool(step.visibility_rule(values))

    def visible_numbers(self, values: Mapping[str, Any]) -> List[int]:
        """Get the numbers of all currently visible steps."""
        return [n for n in self.sequence.numbers if self.is_step_visible(n, values)]

    # =========================================================================
    # Navigation
    # =========================================================================

    def next_visible(self, from_number: int, values: Mapping[str, Any]) -> Optional[int]:
        """Nearest visible step after ``from_number``, or None at the end."""
        for number in range(from_number + 1, self.sequence.total + 1):
            if self.is_step_visible(number, values):
                return number
        return None

    def prev_visible(self, from_number: int, values: Mapping[str, Any]) -> Optional[int]:
        """Nearest visible step before ``from_number``, or None at the start."""
        for number in range(min(from_number, self.sequence.total + 1) - 1, 0, -1):
            if self.is_step_visible(number, values):
                return number
        return None

    def first_visible(self, values: Mapping[str, Any]) -> Optional[int]:
        return self.next_visible(0, values)

    def last_visible(self, values: Mapping[str, Any]) -> Optional[int]:
        return self.prev_visible(self.sequence.total + 1, values)
