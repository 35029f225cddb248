"""
Sabah and Sarawak Road Tax Calculator

Private car road tax for vehicles registered in Sabah and Sarawak:
- Same RM20 base as the peninsula up to 1000 cc
- Reduced amounts above 1000 cc (RM160 from 1601 cc)

Copyright (c) 2026 Andre. All rights reserved.
"""

from typing import List

from calculators.road_tax_config import ROAD_TAX_RATES, RateBand
from calculators.road_tax_models import Region
from calculators.tax_calculators.base import RoadTaxCalculator, register_calculator


@register_calculator(Region.SABAH_SARAWAK)
class SabahSarawakRoadTaxCalculator(RoadTaxCalculator):
    """Road tax calculator for Sabah and Sarawak."""

    def get_region_name(self) -> str:
        """Return human-readable region name."""
        return Region.SABAH_SARAWAK.display_name

    def get_region_code(self) -> str:
        """Return region code."""
        return Region.SABAH_SARAWAK.value

    def get_rate_bands(self) -> List[RateBand]:
        return ROAD_TAX_RATES[Region.SABAH_SARAWAK.value]
