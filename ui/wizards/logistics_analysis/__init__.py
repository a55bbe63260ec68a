# -*- coding: utf-8 -*-
"""
Logistics Analysis Wizard Package.

This package contains:
- LogisticsAnalysisWizard: Wizard controller
- build_logistics_catalog: Step catalog with the conditional electrical
  equipment step
"""

from .logistics_analysis_wizard import LogisticsAnalysisWizard
from .steps import build_logistics_catalog

__all__ = [
    'LogisticsAnalysisWizard',
    'build_logistics_catalog'
]
