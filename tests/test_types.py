"""Tests for core types."""

import pytest
from decimal import Decimal

from fueltrack.core.types import (
    DriverSession,
    WORK_DAYS,
    distance_in_range,
)


def create_session(expenses=None, budget="300.00", distance=1200.5) -> DriverSession:
    """Create a session with the standard five test expenses."""
    if expenses is None:
        expenses = ["50.00", "45.50", "60.00", "55.25", "40.00"]
    return DriverSession(
        driver_name="A. Smith",
        weekly_fuel_budget=Decimal(budget),
        total_distance_km=distance,
        fuel_expenses=tuple(Decimal(e) for e in expenses),
    )


class TestDriverSession:
    """Tests for DriverSession dataclass."""

    def test_total_is_exact_sum(self):
        """Test total fuel spent is the exact decimal sum."""
        session = create_session()

        assert session.total_fuel_spent == Decimal("250.75")
        assert isinstance(session.total_fuel_spent, Decimal)
        assert session.days == WORK_DAYS

    def test_no_float_drift(self):
        """Test sums that drift in binary floating point stay exact."""
        session = create_session(expenses=["0.1", "0.2", "0.3", "0.1", "0.2"])

        assert session.total_fuel_spent == Decimal("0.9")

    def test_negative_and_zero_costs_kept(self):
        """Test costs are stored as entered, including zero and negatives."""
        session = create_session(expenses=["0", "-5.00", "10.00", "0", "0"])

        assert session.fuel_expenses[1] == Decimal("-5.00")
        assert session.total_fuel_spent == Decimal("5.00")

    def test_list_normalized_to_tuple(self):
        """Test a list of expenses is stored as a tuple."""
        session = DriverSession(
            driver_name="",
            weekly_fuel_budget=Decimal("0"),
            total_distance_km=1.0,
            fuel_expenses=[Decimal("1")] * 5,
        )

        assert isinstance(session.fuel_expenses, tuple)
        assert session.driver_name == ""

    @pytest.mark.parametrize("count", [0, 4, 6])
    def test_wrong_day_count_rejected(self, count):
        """Test sessions must hold exactly five daily costs."""
        with pytest.raises(ValueError):
            create_session(expenses=["1.00"] * count)

    def test_large_costs_sum_exactly(self):
        """Test totals wider than the default decimal context stay exact."""
        amount = "79228162514264337593543950335.25"
        session = create_session(expenses=[amount] * 5)

        assert session.total_fuel_spent == Decimal("396140812571321687967719751676.25")


class TestDistanceInRange:
    """Tests for the distance range check."""

    @pytest.mark.parametrize("distance,expected", [
        (1.0, True),
        (5000.0, True),
        (1200.5, True),
        (0.999999, False),
        (5000.000001, False),
        (-10.0, False),
        (float("nan"), False),
    ])
    def test_bounds_inclusive(self, distance, expected):
        """Test both bounds are accepted and anything outside is not."""
        assert distance_in_range(distance) is expected

