# -*- coding: utf-8 -*-
"""
Container Analysis Wizard Package.

This package contains:
- ContainerAnalysisWizard: Wizard controller
- build_container_catalog: Step catalog (product, container, measurements, files
  plus the customer steps)
"""

from .container_analysis_wizard import ContainerAnalysisWizard
from .steps import build_container_catalog

__all__ = [
    'ContainerAnalysisWizard',
    'build_container_catalog'
]
