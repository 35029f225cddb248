"""
Road Tax Calculator System

Provides region-specific road tax calculation implementations.

Copyright (c) 2026 Andre. All rights reserved.
"""

from .base import RoadTaxCalculator, get_calculator, list_available_regions
from .peninsular import PeninsularRoadTaxCalculator
from .sabah_sarawak import SabahSarawakRoadTaxCalculator

__all__ = [
    "RoadTaxCalculator",
    "PeninsularRoadTaxCalculator",
    "SabahSarawakRoadTaxCalculator",
    "get_calculator",
    "list_available_regions",
]
