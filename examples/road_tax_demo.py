"""
Malaysian Road Tax Calculator - Usage Example

Demonstrates single calculations, input validation and batch calculation.

Copyright (c) 2026 Andre. All rights reserved.
"""

import pandas as pd

from calculators.road_tax import assess_vehicle, calculate_batch, calculate_from_input, rate_schedule
from calculators.road_tax_models import Region
from utils.currency import format_ringgit


def main():
    """Demonstrate road tax calculator usage."""

    print("=" * 70)
    print("Malaysia Road Tax Calculator - Demo")
    print("=" * 70)
    print()

    print("RATE SCHEDULE")
    print("-" * 70)
    schedule = rate_schedule()
    for row in schedule.itertuples(index=False):
        print(
            f"  {row.band:<20} "
            f"Peninsular {format_ringgit(row.peninsular):>10}   "
            f"Sabah/Sarawak {format_ringgit(row.sabah_sarawak):>10}"
        )
    print()

    print("FORM INPUT")
    print("-" * 70)
    form_inputs = [
        ("999", Region.PENINSULAR, "wxy 1234"),
        ("1200", Region.PENINSULAR, None),
        ("1400", Region.SABAH_SARAWAK, "sab 77 a"),
        ("1600", Region.SABAH_SARAWAK, None),
        ("2000", Region.PENINSULAR, None),
        ("0", Region.PENINSULAR, None),
        ("abc", Region.PENINSULAR, None),
    ]
    for capacity, region, plate in form_inputs:
        result = calculate_from_input(capacity, region, plate)
        label = f"{capacity!r:>7} cc, {region.display_name}"
        if result.ok:
            plate_text = f" [{result.request.registration_number}]" if result.request.registration_number else ""
            print(f"  {label:<40} Calculated Road Tax: {result.formatted_amount}{plate_text}")
        else:
            print(f"  {label:<40} {result.error_message}")
    print()

    print("ASSESSMENT")
    print("-" * 70)
    assessment = assess_vehicle(1598, Region.SABAH_SARAWAK, "QAA 1598")
    print(f"  Vehicle:   {assessment.registration_number}")
    print(f"  Region:    {assessment.region.display_name}")
    print(f"  Band:      {assessment.band_label}")
    print(f"  Road tax:  {format_ringgit(assessment.tax_amount)}")
    print(f"  Version:   {assessment.calculator_version}")
    print()

    print("BATCH")
    print("-" * 70)
    fleet = pd.DataFrame({
        "plate": ["VAB 1", "SAB 2", "QCD 3", "WPP 4"],
        "engine_capacity": [1332, 1497, 2487, "n/a"],
        "region": ["peninsular", "sabah_sarawak", "sarawak", "peninsular"],
    })
    assessed = calculate_batch(fleet)
    for row in assessed.itertuples(index=False):
        amount = format_ringgit(row.road_tax) if row.road_tax is not None else row.error
        print(f"  {row.plate:<8} {str(row.engine_capacity):>6} cc  {row.region:<15} {amount}")

    print()
    print("=" * 70)


if __name__ == "__main__":
    main()
