"""
Peninsular Malaysia Road Tax Calculator

Private car road tax for vehicles registered in Peninsular Malaysia:
- Flat RM20 up to 1000 cc
- Stepped amounts up to 1600 cc
- RM200 from 1601 cc

Copyright (c) 2026 Andre. All rights reserved.
"""

from typing import List

from calculators.road_tax_config import ROAD_TAX_RATES, RateBand
from calculators.road_tax_models import Region
from calculators.tax_calculators.base import RoadTaxCalculator, register_calculator


@register_calculator(Region.PENINSULAR)
class PeninsularRoadTaxCalculator(RoadTaxCalculator):
    """Road tax calculator for Peninsular Malaysia."""

    def get_region_name(self) -> str:
        """Return human-readable region name."""
        return Region.PENINSULAR.display_name

    def get_region_code(self) -> str:
        """Return region code."""
        return Region.PENINSULAR.value

    def get_rate_bands(self) -> List[RateBand]:
        return ROAD_TAX_RATES[Region.PENINSULAR.value]
