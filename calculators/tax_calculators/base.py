"""
Abstract Base Class for Road Tax Calculators

Defines the interface that all region-specific road tax calculators must
implement. Each calculator maps an engine capacity (cc) to a tax amount using
its region's tiered rate table.

Copyright (c) 2026 Andre. All rights reserved.
"""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple, Type, Union

from calculators.road_tax_config import CALCULATOR_VERSION, RateBand
from calculators.road_tax_models import (
    InvalidCapacityError,
    InvalidRegionError,
    Region,
    RoadTaxAssessment,
    normalize_registration_number,
)
from utils.currency import to_ringgit
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


class RoadTaxCalculator(ABC):
    """
    Abstract base class for region-specific road tax calculators.

    Subclasses supply the rate bands; the lookup itself is shared. Bands are
    inclusive on their upper bound and the last band is open-ended.
    """

    @abstractmethod
    def get_region_name(self) -> str:
        """
        Return the human-readable name of this region.

        Returns:
            Region name (e.g., "Peninsular Malaysia")
        """
        pass

    @abstractmethod
    def get_region_code(self) -> str:
        """
        Return the code for this region.

        Returns:
            Region code (e.g., "peninsular")
        """
        pass

    @abstractmethod
    def get_rate_bands(self) -> List[RateBand]:
        """
        Return the ascending (upper_bound_cc, amount) bands for this region.

        The final band has an upper bound of None.
        """
        pass

    def get_region(self) -> Region:
        return Region(self.get_region_code())

    def find_band(self, capacity: int) -> Tuple[int, RateBand]:
        """
        Find the band an engine capacity falls in.

        Args:
            capacity: Engine capacity in cc

        Returns:
            (band index, (upper_bound_cc, amount))

        Raises:
            InvalidCapacityError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(capacity)

        bands = self.get_rate_bands()
        for index, (upper_bound, amount) in enumerate(bands):
            if upper_bound is None or capacity <= upper_bound:
                return index, (upper_bound, amount)

        # Unreachable with a validated table; the last band is open-ended
        raise RuntimeError(f"No road tax band for {capacity}cc in {self.get_region_code()}")

    def calculate(self, capacity: int) -> Decimal:
        """
        Calculate road tax for an engine capacity.

        Args:
            capacity: Engine capacity in cc (positive integer)

        Returns:
            Tax amount in MYR, 2 decimal places
        """
        _, (_, amount) = self.find_band(capacity)
        tax = to_ringgit(amount)
        logger.debug(f"{capacity}cc in {self.get_region_code()} -> RM{tax}")
        return tax

    def assess(
        self,
        capacity: int,
        registration_number: Optional[str] = None
    ) -> RoadTaxAssessment:
        """
        Calculate road tax with the band it came from.

        Args:
            capacity: Engine capacity in cc
            registration_number: Optional vehicle registration, upper-cased with
                whitespace collapsed

        Returns:
            RoadTaxAssessment with band label and amount
        """
        index, (upper_bound, amount) = self.find_band(capacity)

        return RoadTaxAssessment(
            region=self.get_region(),
            capacity=capacity,
            band_label=self.band_label(index),
            band_upper_bound=upper_bound,
            tax_amount=to_ringgit(amount),
            registration_number=normalize_registration_number(registration_number),
            calculation_date=date.today(),
            calculator_version=CALCULATOR_VERSION
        )

    def band_label(self, index: int) -> str:
        """
        Describe a band as a capacity range.

        Examples: "Up to 1000 cc", "1001-1200 cc", "1601 cc and above"
        """
        bands = self.get_rate_bands()
        upper_bound = bands[index][0]
        lower_bound = bands[index - 1][0] + 1 if index > 0 else None

        if lower_bound is None:
            return f"Up to {upper_bound} cc"
        if upper_bound is None:
            return f"{lower_bound} cc and above"
        return f"{lower_bound}-{upper_bound} cc"


# Registry of available calculators
_CALCULATOR_REGISTRY: Dict[str, Type[RoadTaxCalculator]] = {}


def register_calculator(region: Union[Region, str]):
    """
    Decorator to register a road tax calculator class.

    Usage:
        @register_calculator(Region.PENINSULAR)
        class PeninsularRoadTaxCalculator(RoadTaxCalculator):
            ...
    """
    code = Region.normalize(region).value

    def decorator(cls: Type[RoadTaxCalculator]):
        _CALCULATOR_REGISTRY[code] = cls
        return cls
    return decorator


def get_calculator(region: Union[Region, str]) -> RoadTaxCalculator:
    """
    Factory method to get a road tax calculator instance.

    Args:
        region: Region member or region code (case-insensitive)

    Returns:
        Instance of the appropriate RoadTaxCalculator subclass

    Raises:
        InvalidRegionError: If the region is unknown or has no calculator
    """
    code = Region.normalize(region).value

    if code not in _CALCULATOR_REGISTRY:
        available = ", ".join(list_available_regions())
        raise InvalidRegionError(
            region,
            f"Road tax calculator for '{code}' not found. Available: {available}"
        )

    calculator_class = _CALCULATOR_REGISTRY[code]
    return calculator_class()


def list_available_regions() -> List[str]:
    """
    Get list of all supported road tax regions.

    Returns:
        List of region codes (e.g., ["peninsular", "sabah_sarawak"])
    """
    return sorted(_CALCULATOR_REGISTRY.keys())
