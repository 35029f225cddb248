"""
Integration Tests for Road Tax Entry Points

Covers the end-to-end scenarios from form input to displayed amount,
batch calculation over a DataFrame and the rate schedule.

Copyright (c) 2026 Andre. All rights reserved.
"""

import pytest
from decimal import Decimal

import pandas as pd

from calculators.road_tax import (
    assess_vehicle,
    calculate_batch,
    calculate_from_input,
    calculate_road_tax,
    rate_schedule,
)
from calculators.road_tax_config import CALCULATOR_VERSION, ROAD_TAX_RATES, validate_rate_table
from calculators.road_tax_models import (
    INVALID_CAPACITY_MESSAGE,
    CalculationResult,
    ErrorKind,
    InvalidRegionError,
    RateTableError,
    Region,
)
from utils.currency import format_ringgit, to_ringgit


class TestScenarios:
    """End-to-end scenarios: raw input in, amount or error out."""

    @pytest.mark.parametrize("capacity,region,expected", [
        ("999", Region.PENINSULAR, "20.00"),
        ("1200", Region.PENINSULAR, "55.00"),
        ("1400", Region.SABAH_SARAWAK, "56.00"),
        ("1600", Region.SABAH_SARAWAK, "72.00"),
        ("2000", Region.PENINSULAR, "200.00"),
    ])
    def test_valid_input(self, capacity, region, expected):
        result = calculate_from_input(capacity, region)

        assert result.ok
        assert result.tax_amount == Decimal(expected)
        assert result.error is None
        assert result.error_message is None
        assert result.request.capacity == int(capacity)
        assert result.request.region == region

    @pytest.mark.parametrize("capacity", ["0", "abc", "", None, "-1000"])
    def test_invalid_capacity_computes_no_tax(self, capacity):
        result = calculate_from_input(capacity, Region.PENINSULAR)

        assert not result.ok
        assert result.error == ErrorKind.INVALID_CAPACITY
        assert result.error_message == INVALID_CAPACITY_MESSAGE
        assert result.tax_amount is None
        assert result.request is None
        assert result.formatted_amount is None

    def test_unknown_region_is_an_error_not_zero(self):
        result = calculate_from_input("1500", "labuan_island")

        assert result.error == ErrorKind.INVALID_REGION
        assert result.tax_amount is None
        assert "labuan_island" in result.error_message

    def test_region_defaults_to_peninsular(self):
        result = calculate_from_input("1800")
        assert result.tax_amount == Decimal("200.00")

    def test_registration_number_carried_on_request(self):
        result = calculate_from_input("1300", "peninsular", "vbc 88")
        assert result.request.registration_number == "VBC 88"

    def test_formatted_amount(self):
        result = calculate_from_input("1800", Region.SABAH_SARAWAK)
        assert result.formatted_amount == "RM160.00"

    def test_oversized_capacity_is_a_validation_error(self):
        result = calculate_from_input("1" * 5000, "peninsular")

        assert result.error == ErrorKind.INVALID_CAPACITY
        assert result.error_message == INVALID_CAPACITY_MESSAGE
        assert result.tax_amount is None

    def test_each_call_builds_a_fresh_result(self):
        first = calculate_from_input("1500", Region.PENINSULAR)
        second = calculate_from_input("abc", Region.PENINSULAR)

        assert first.tax_amount == Decimal("90.00")
        assert second.tax_amount is None


class TestCalculateRoadTax:

    def test_accepts_region_code(self):
        assert calculate_road_tax(1100, "sabah_sarawak") == Decimal("44.00")

    def test_unknown_region_raises(self):
        with pytest.raises(InvalidRegionError):
            calculate_road_tax(1500, "unknown")

    def test_assess_vehicle(self):
        assessment = assess_vehicle(1450, Region.SABAH_SARAWAK, "SAA 1")

        assert assessment.band_label == "1401-1600 cc"
        assert assessment.tax_amount == Decimal("72.00")
        assert assessment.registration_number == "SAA 1"

    def test_assess_vehicle_normalizes_registration_number(self):
        assessment = assess_vehicle(1450, Region.SABAH_SARAWAK, "  saa   1 ")
        assert assessment.registration_number == "SAA 1"

    def test_assess_vehicle_version(self):
        assert assess_vehicle(999, Region.PENINSULAR).calculator_version == CALCULATOR_VERSION


class TestCalculationResult:

    def test_failure_has_no_amount(self):
        result = CalculationResult.failure(ErrorKind.INVALID_REGION, "bad region")
        assert not result.ok
        assert result.tax_amount is None

    def test_result_is_immutable(self):
        result = CalculationResult.failure(ErrorKind.INVALID_CAPACITY, INVALID_CAPACITY_MESSAGE)
        with pytest.raises(AttributeError):
            result.tax_amount = Decimal("20.00")


class TestCalculateBatch:

    @pytest.fixture
    def vehicles(self):
        return pd.DataFrame({
            "plate": ["WXY 1", "SAB 2", "QAA 3", "JHR 4", "KL 5"],
            "engine_capacity": ["999", 1400, "abc", 2000, 0],
            "region": ["peninsular", "sabah_sarawak", "peninsular", None, "peninsular"],
        })

    def test_batch_amounts_and_errors(self, vehicles):
        result = calculate_batch(vehicles)

        assert result["road_tax"].tolist() == [
            Decimal("20.00"), Decimal("56.00"), None, Decimal("200.00"), None
        ]
        assert result["error"].tolist() == [
            None, None, INVALID_CAPACITY_MESSAGE, None, INVALID_CAPACITY_MESSAGE
        ]

    def test_batch_keeps_input_columns_and_does_not_mutate(self, vehicles):
        result = calculate_batch(vehicles)

        assert list(result.columns) == ["plate", "engine_capacity", "region", "road_tax", "error"]
        assert "road_tax" not in vehicles.columns

    def test_batch_with_float_capacity_column(self):
        vehicles = pd.DataFrame({
            "engine_capacity": [1200.0, float("nan"), 1601.0],
            "region": ["sabah_sarawak", "peninsular", "sabah_sarawak"],
        })
        result = calculate_batch(vehicles)

        assert result["road_tax"].tolist() == [Decimal("44.00"), None, Decimal("160.00")]

    def test_batch_nullable_region_uses_default(self):
        vehicles = pd.DataFrame({
            "engine_capacity": [1500, 1500],
            "region": pd.array([None, "sabah_sarawak"], dtype="string"),
        })
        result = calculate_batch(vehicles)

        assert result["road_tax"].tolist() == [Decimal("90.00"), Decimal("72.00")]
        assert result["error"].tolist() == [None, None]

    def test_batch_nullable_capacity_column(self):
        vehicles = pd.DataFrame({
            "engine_capacity": pd.array([1200, None], dtype="Int64"),
            "region": ["peninsular", "peninsular"],
        })
        result = calculate_batch(vehicles)

        assert result["road_tax"].tolist() == [Decimal("55.00"), None]
        assert result["error"].tolist() == [None, INVALID_CAPACITY_MESSAGE]

    def test_batch_oversized_capacity_does_not_abort(self):
        vehicles = pd.DataFrame({
            "engine_capacity": ["9" * 5000, "1100"],
            "region": ["peninsular", "peninsular"],
        })
        result = calculate_batch(vehicles)

        assert result["road_tax"].tolist() == [None, Decimal("55.00")]
        assert result["error"].tolist() == [INVALID_CAPACITY_MESSAGE, None]

    def test_batch_unknown_region_row(self):
        vehicles = pd.DataFrame({"engine_capacity": [1500], "region": ["mars"]})
        result = calculate_batch(vehicles)

        assert result["road_tax"].tolist() == [None]
        assert "mars" in result["error"].iloc[0]

    def test_custom_column_names(self):
        vehicles = pd.DataFrame({"cc": [1100], "state": ["sabah"]})
        result = calculate_batch(vehicles, capacity_column="cc", region_column="state")

        assert result["road_tax"].tolist() == [Decimal("44.00")]

    def test_missing_column_raises(self):
        with pytest.raises(KeyError, match="region"):
            calculate_batch(pd.DataFrame({"engine_capacity": [1500]}))

    def test_empty_frame(self):
        result = calculate_batch(pd.DataFrame({"engine_capacity": [], "region": []}))
        assert result.empty
        assert "road_tax" in result.columns


class TestRateSchedule:

    def test_schedule_matches_rate_table(self):
        schedule = rate_schedule()

        assert list(schedule.columns) == ["band", "min_cc", "max_cc", "peninsular", "sabah_sarawak"]
        assert schedule["band"].tolist()[0] == "Up to 1000 cc"
        assert schedule["min_cc"].tolist() == [1, 1001, 1201, 1401, 1601]
        assert schedule["max_cc"].tolist() == [1000, 1200, 1400, 1600, None]
        assert schedule["peninsular"].tolist() == [
            Decimal("20.00"), Decimal("55.00"), Decimal("70.00"), Decimal("90.00"), Decimal("200.00")
        ]
        assert schedule["sabah_sarawak"].tolist() == [
            Decimal("20.00"), Decimal("44.00"), Decimal("56.00"), Decimal("72.00"), Decimal("160.00")
        ]


class TestRateTableValidation:

    def test_configured_tables_are_valid(self):
        for code, bands in ROAD_TAX_RATES.items():
            validate_rate_table(code, bands)

    def test_empty_table(self):
        with pytest.raises(RateTableError, match="no bands"):
            validate_rate_table("x", [])

    def test_missing_open_band(self):
        with pytest.raises(RateTableError, match="open-ended"):
            validate_rate_table("x", [(1000, Decimal("20"))])

    def test_open_band_not_last(self):
        bands = [(None, Decimal("20")), (None, Decimal("30"))]
        with pytest.raises(RateTableError, match="before the last band"):
            validate_rate_table("x", bands)

    def test_bounds_not_ascending(self):
        bands = [(1200, Decimal("20")), (1000, Decimal("30")), (None, Decimal("40"))]
        with pytest.raises(RateTableError, match="ascending"):
            validate_rate_table("x", bands)

    def test_negative_amount(self):
        with pytest.raises(RateTableError, match="negative"):
            validate_rate_table("x", [(1000, Decimal("-1")), (None, Decimal("20"))])

    def test_decreasing_amount(self):
        with pytest.raises(RateTableError, match="decrease"):
            validate_rate_table("x", [(1000, Decimal("50")), (None, Decimal("20"))])


class TestCurrency:

    @pytest.mark.parametrize("amount,expected", [
        (Decimal("20"), "RM20.00"),
        (Decimal("55.00"), "RM55.00"),
        (Decimal("1234.5"), "RM1,234.50"),
        (Decimal("0.005"), "RM0.01"),
        (Decimal("-5"), "-RM5.00"),
        (200, "RM200.00"),
        (72.0, "RM72.00"),
    ])
    def test_format_ringgit(self, amount, expected):
        assert format_ringgit(amount) == expected

    def test_to_ringgit_quantizes(self):
        assert str(to_ringgit(Decimal("44"))) == "44.00"
