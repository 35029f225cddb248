"""
Road Tax Calculation Entry Points

- calculate_road_tax(): pure lookup for a validated capacity and region
- calculate_from_input(): boundary entry point for raw form values
- calculate_batch(): road tax for a DataFrame of vehicles
- rate_schedule(): the rate table as a DataFrame

Validation failures at the boundary come back as a failed CalculationResult,
never as a zero amount. Direct calls to calculate_road_tax() raise instead.

Copyright (c) 2026 Andre. All rights reserved.
"""

from decimal import Decimal
from typing import Optional, Union

import pandas as pd

from calculators.road_tax_models import (
    CalculationResult,
    ErrorKind,
    InvalidCapacityError,
    InvalidRegionError,
    Region,
    RoadTaxAssessment,
)
from calculators.tax_calculators import get_calculator, list_available_regions
from parsers.vehicle_input import parse_vehicle_input
from utils.logging_config import get_perf_logger, log_dataframe_info, setup_logger

logger = setup_logger(__name__)


def calculate_road_tax(capacity: int, region: Union[Region, str]) -> Decimal:
    """
    Calculate road tax for an engine capacity in a region.

    Args:
        capacity: Engine capacity in cc (positive integer)
        region: Region member or region code

    Returns:
        Tax amount in MYR, 2 decimal places

    Raises:
        InvalidCapacityError: If capacity is not a positive integer
        InvalidRegionError: If region is unknown
    """
    return get_calculator(region).calculate(capacity)


def assess_vehicle(
    capacity: int,
    region: Union[Region, str],
    registration_number: Optional[str] = None
) -> RoadTaxAssessment:
    """Calculate road tax for a vehicle along with the band it falls in."""
    return get_calculator(region).assess(capacity, registration_number)


def calculate_from_input(
    capacity,
    region=Region.PENINSULAR,
    registration_number: Optional[str] = None
) -> CalculationResult:
    """
    Validate raw form values and calculate road tax.

    Args:
        capacity: Capacity field text (or an integer)
        region: Selected region (member, code, or None for the default)
        registration_number: Optional registration number text

    Returns:
        CalculationResult holding either the tax amount or the error
    """
    try:
        request = parse_vehicle_input(capacity, region, registration_number)
    except InvalidCapacityError as e:
        logger.info(f"Rejected engine capacity {capacity!r}")
        return CalculationResult.failure(ErrorKind.INVALID_CAPACITY, str(e))
    except InvalidRegionError as e:
        logger.info(f"Rejected region {region!r}")
        return CalculationResult.failure(ErrorKind.INVALID_REGION, str(e))

    tax = calculate_road_tax(request.capacity, request.region)
    logger.debug(
        f"Road tax RM{tax}",
        extra={"user_context": f"{{reg={request.registration_number}, cc={request.capacity}, region={request.region.value}}}"}
    )
    return CalculationResult.success(request, tax)


def _is_missing(value) -> bool:
    # None, float NaN, pd.NA and NaT all count as an empty cell
    return pd.api.types.is_scalar(value) and pd.isna(value)


def _coerce_capacity(value):
    if _is_missing(value):
        return None
    # Integer columns with gaps come back from pandas as floats
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _coerce_region(value):
    if _is_missing(value):
        return None
    return value


def calculate_batch(
    vehicles: pd.DataFrame,
    capacity_column: str = "engine_capacity",
    region_column: str = "region"
) -> pd.DataFrame:
    """
    Calculate road tax for every row of a DataFrame.

    Invalid rows are reported in the ``error`` column and do not stop the batch.

    Args:
        vehicles: One row per vehicle
        capacity_column: Column holding engine capacity
        region_column: Column holding region codes; missing values use the default region

    Returns:
        Copy of ``vehicles`` with ``road_tax`` (Decimal or None) and ``error`` columns

    Raises:
        KeyError: If a required column is missing
    """
    missing = [c for c in (capacity_column, region_column) if c not in vehicles.columns]
    if missing:
        raise KeyError(f"Missing columns: {', '.join(missing)}")

    log_dataframe_info(logger, vehicles, "Vehicles")

    taxes = []
    errors = []
    with get_perf_logger(logger, f"calculate_batch ({len(vehicles)} rows)", threshold_ms=500):
        for capacity, region in zip(vehicles[capacity_column].tolist(), vehicles[region_column].tolist()):
            result = calculate_from_input(_coerce_capacity(capacity), _coerce_region(region))
            taxes.append(result.tax_amount)
            errors.append(result.error_message)

    result_df = vehicles.copy()
    result_df["road_tax"] = pd.Series(taxes, index=vehicles.index, dtype=object)
    result_df["error"] = pd.Series(errors, index=vehicles.index, dtype=object)

    failed = sum(1 for e in errors if e is not None)
    if failed:
        logger.warning(f"{failed} of {len(errors)} vehicles could not be assessed")

    return result_df


def rate_schedule() -> pd.DataFrame:
    """
    Road tax rate table as a DataFrame.

    One row per capacity band with columns band, min_cc, max_cc (None for the
    open-ended band) and one amount column per region code.
    """
    reference = get_calculator(Region.PENINSULAR)
    regions = list_available_regions()

    bands = []
    min_values = []
    max_values = []
    amounts = {code: [] for code in regions}

    min_cc = 1
    for index, (max_cc, _) in enumerate(reference.get_rate_bands()):
        bands.append(reference.band_label(index))
        min_values.append(min_cc)
        max_values.append(max_cc)
        for code in regions:
            amounts[code].append(calculate_road_tax(min_cc, code))
        if max_cc is not None:
            min_cc = max_cc + 1

    return pd.DataFrame({
        "band": bands,
        "min_cc": min_values,
        "max_cc": pd.Series(max_values, dtype=object),
        **{code: pd.Series(values, dtype=object) for code, values in amounts.items()},
    })
