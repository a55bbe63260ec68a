# -*- coding: utf-8 -*-
"""
Wizard Framework - Form orchestration engine of the field visit wizards.

Provides the step catalog, the effective step sequence, the session
state and the controller shared by every wizard type.
"""

from .step_catalog import StepDefinition, StepCatalog
from .step_selector import ExtraStepPlacement, EffectiveStepSequence, StepSelector
from .wizard_context import WizardContext
from .wizard_controller import WizardController
from .form_values import merge_record_values, parse_date

__all__ = [
    'StepDefinition',
    'StepCatalog',
    'ExtraStepPlacement',
    'EffectiveStepSequence',
    'StepSelector',
    'WizardContext',
    'WizardController',
    'merge_record_values',
    'parse_date',
]
