"""
Road Tax Data Models

Defines the core data structures for road tax calculation:
- Region: closed set of tax regions (Peninsular, Sabah/Sarawak)
- CalculationRequest: validated input for one calculation
- CalculationResult: tax amount or error kind, never both
- RoadTaxAssessment: detailed breakdown of a calculation

Also defines the error taxonomy shared by calculators and parsers.

Copyright (c) 2026 Andre. All rights reserved.
"""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from utils.currency import format_ringgit


INVALID_CAPACITY_MESSAGE = "Please enter a valid engine capacity (cc)."


# Custom exceptions
class RoadTaxError(ValueError):
    """Base class for road tax errors."""
    pass


class InvalidCapacityError(RoadTaxError):
    """Raised when engine capacity is absent, non-numeric or not positive."""

    def __init__(self, value=None, message: str = INVALID_CAPACITY_MESSAGE):
        super().__init__(message)
        self.value = value


class InvalidRegionError(RoadTaxError):
    """Raised when a region is outside the known set."""

    def __init__(self, value=None, message: Optional[str] = None):
        if message is None:
            available = ", ".join(r.value for r in Region)
            message = f"Road tax region '{value}' not found. Available: {available}"
        super().__init__(message)
        self.value = value


class RateTableError(RoadTaxError):
    """Raised when a configured rate table is malformed."""
    pass


class ErrorKind(str, Enum):
    """Why a calculation could not be performed."""
    INVALID_CAPACITY = "InvalidCapacity"
    INVALID_REGION = "InvalidRegion"


class Region(str, Enum):
    """Malaysian road tax regions."""

    PENINSULAR = "peninsular"
    SABAH_SARAWAK = "sabah_sarawak"

    @property
    def display_name(self) -> str:
        return _REGION_NAMES[self]

    @classmethod
    def default(cls) -> 'Region':
        return cls.PENINSULAR

    @classmethod
    def normalize(cls, value) -> 'Region':
        """
        Normalize a region from a Region member or a code string.

        Raises:
            InvalidRegionError: If the value does not name a known region
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidRegionError(value)

        key = re.sub(r"[\s\-]+", "_", value.strip().lower())

        region = _REGION_ALIASES.get(key)
        if region is None:
            raise InvalidRegionError(value)
        return region


_REGION_NAMES = {
    Region.PENINSULAR: "Peninsular Malaysia",
    Region.SABAH_SARAWAK: "Sabah and Sarawak",
}

_REGION_ALIASES = {
    "peninsular": Region.PENINSULAR,
    "peninsular_malaysia": Region.PENINSULAR,
    "west": Region.PENINSULAR,
    "west_malaysia": Region.PENINSULAR,
    "sabah_sarawak": Region.SABAH_SARAWAK,
    "sabah_and_sarawak": Region.SABAH_SARAWAK,
    "sabah": Region.SABAH_SARAWAK,
    "sarawak": Region.SABAH_SARAWAK,
    "east": Region.SABAH_SARAWAK,
    "east_malaysia": Region.SABAH_SARAWAK,
}


def normalize_registration_number(value: Optional[str]) -> Optional[str]:
    """
    Upper-case a vehicle registration number and collapse its whitespace.

    Returns None for a missing or blank value.
    """
    if value is None:
        return None
    cleaned = " ".join(str(value).split()).upper()
    return cleaned or None


class CalculationRequest(BaseModel):
    """
    Validated input for a single road tax calculation.

    Immutable once built; a new request is created per calculation.
    """
    model_config = ConfigDict(frozen=True)

    capacity: int
    region: Region = Region.PENINSULAR
    registration_number: Optional[str] = None

    @field_validator('capacity', mode='before')
    @classmethod
    def capacity_positive_int(cls, v):
        if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
            raise ValueError(INVALID_CAPACITY_MESSAGE)
        return v

    @field_validator('region', mode='before')
    @classmethod
    def parse_region(cls, v):
        return Region.normalize(v)

    @field_validator('registration_number', mode='before')
    @classmethod
    def clean_registration_number(cls, v):
        return normalize_registration_number(v)


@dataclass(frozen=True)
class CalculationResult:
    """
    Outcome of a calculation at the input boundary.

    Exactly one of tax_amount and error is set.
    """

    tax_amount: Optional[Decimal] = None
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    request: Optional[CalculationRequest] = None

    @classmethod
    def success(cls, request: CalculationRequest, tax_amount: Decimal) -> 'CalculationResult':
        return cls(tax_amount=tax_amount, request=request)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> 'CalculationResult':
        return cls(error=error, error_message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def formatted_amount(self) -> Optional[str]:
        """Tax amount as Ringgit display text, or None on failure."""
        if self.tax_amount is None:
            return None
        return format_ringgit(self.tax_amount)


@dataclass
class RoadTaxAssessment:
    """
    Detailed road tax calculation for one vehicle.

    This is the output of RoadTaxCalculator.assess().
    """

    region: Region
    capacity: int
    band_label: str
    band_upper_bound: Optional[int]
    tax_amount: Decimal
    calculator_version: str

    registration_number: Optional[str] = None
    calculation_date: Optional[date] = None
