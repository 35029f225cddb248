"""Parsing and validation of user-entered vehicle details."""

import numbers
import re
from typing import Optional

from calculators.road_tax_models import (
    CalculationRequest,
    InvalidCapacityError,
    Region,
    normalize_registration_number,
)
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# Capacity field accepts digits only: no sign, decimal point or separators.
# At most 10 digits, and the value must fit a signed 32-bit integer.
_DIGITS = re.compile(r"[0-9]{1,10}")
MAX_ENGINE_CAPACITY = 2_147_483_647


def parse_engine_capacity(raw) -> int:
    """
    Parse engine capacity (cc) from user input.

    Args:
        raw: Text from the capacity field, or an integer

    Returns:
        Positive engine capacity in cc

    Raises:
        InvalidCapacityError: If the value is missing, non-numeric, <= 0
            or larger than MAX_ENGINE_CAPACITY
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidCapacityError(raw)

    if isinstance(raw, numbers.Integral):
        capacity = int(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not _DIGITS.fullmatch(text):
            raise InvalidCapacityError(raw)
        capacity = int(text)
    else:
        raise InvalidCapacityError(raw)

    if capacity <= 0 or capacity > MAX_ENGINE_CAPACITY:
        raise InvalidCapacityError(raw)

    return capacity


def parse_region(raw) -> Region:
    """Parse a region selection; a missing selection falls back to the default region."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return Region.default()
    return Region.normalize(raw)


def parse_vehicle_input(
    capacity,
    region=None,
    registration_number: Optional[str] = None
) -> CalculationRequest:
    """
    Build a validated CalculationRequest from raw form values.

    Raises:
        InvalidCapacityError: If capacity is not a positive integer
        InvalidRegionError: If region does not name a known region
    """
    parsed_capacity = parse_engine_capacity(capacity)
    parsed_region = parse_region(region)

    request = CalculationRequest(
        capacity=parsed_capacity,
        region=parsed_region,
        registration_number=normalize_registration_number(registration_number)
    )
    logger.debug(f"Parsed request: {request.capacity}cc, {request.region.value}")
    return request
