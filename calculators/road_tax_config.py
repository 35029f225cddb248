"""
Road Tax Rate Configuration

Hard-coded road tax tables for private cars, keyed by region code.

Format:
{
    "region_code": [
        (upper_bound_cc, amount_myr),   # band applies when capacity <= upper_bound_cc
        ...
        (None, amount_myr),             # open-ended final band
    ]
}

Bands are scanned in ascending order and the first band whose upper bound
is >= the engine capacity wins.

Copyright (c) 2026 Andre. All rights reserved.
"""

from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from calculators.road_tax_models import RateTableError

RateBand = Tuple[Optional[int], Decimal]

CALCULATOR_VERSION = "1.0-MY"

ROAD_TAX_RATES: Dict[str, List[RateBand]] = {
    "peninsular": [
        (1000, Decimal("20.00")),
        (1200, Decimal("55.00")),
        (1400, Decimal("70.00")),
        (1600, Decimal("90.00")),
        (None, Decimal("200.00")),  # 1601 cc and above
    ],
    "sabah_sarawak": [
        (1000, Decimal("20.00")),
        (1200, Decimal("44.00")),
        (1400, Decimal("56.00")),
        (1600, Decimal("72.00")),
        (None, Decimal("160.00")),  # 1601 cc and above
    ],
}


def validate_rate_table(code: str, bands: List[RateBand]) -> None:
    """
    Check that a rate table is well formed.

    Raises:
        RateTableError: If bounds are not strictly ascending, the open band is
            missing or not last, or amounts are negative or decreasing
    """
    if not bands:
        raise RateTableError(f"Rate table '{code}' has no bands")

    *bounded, (last_bound, _) = bands
    if last_bound is not None:
        raise RateTableError(f"Rate table '{code}' must end with an open-ended band")

    previous_bound = 0
    previous_amount = Decimal(0)
    for _, amount in bands:
        if amount < 0:
            raise RateTableError(f"Rate table '{code}' has negative amount {amount}")
        if amount < previous_amount:
            raise RateTableError(f"Rate table '{code}' amounts must not decrease ({amount} < {previous_amount})")
        previous_amount = amount

    for bound, _ in bounded:
        if bound is None:
            raise RateTableError(f"Rate table '{code}' has an open-ended band before the last band")
        if bound <= previous_bound:
            raise RateTableError(f"Rate table '{code}' bounds must be strictly ascending ({bound} <= {previous_bound})")
        previous_bound = bound


for _code, _bands in ROAD_TAX_RATES.items():
    validate_rate_table(_code, _bands)
