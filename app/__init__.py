# -*- coding: utf-8 -*-
"""
Field Visits Application Core Module
"""

from .config import Config, PowerSources

__all__ = ["Config", "PowerSources"]
