# -*- coding: utf-8 -*-
"""
Vehicle Inspection Wizard Package.

This package contains:
- VehicleInspectionWizard: Wizard controller
- build_inspection_catalog: Step catalog (vehicle, checklist, photos,
  observations, signature)
"""

from .vehicle_inspection_wizard import VehicleInspectionWizard
from .steps import build_inspection_catalog

__all__ = [
    'VehicleInspectionWizard',
    'build_inspection_catalog'
]
