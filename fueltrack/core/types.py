"""
Core data types for the fuel tracker.
"""

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Tuple

# Working week length; reports always cover exactly five days
WORK_DAYS = 5

# Accepted weekly distance, inclusive on both ends
MIN_DISTANCE_KM = 1.0
MAX_DISTANCE_KM = 5000.0

# Efficiency bands in km per currency unit of fuel
HIGH_EFFICIENCY_THRESHOLD = 15.0      # strictly greater
STANDARD_EFFICIENCY_THRESHOLD = 10.0  # greater or equal

# Context precision for money sums, wide enough that five costs add exactly
MONEY_PRECISION = 60

FuelExpenses = Tuple[Decimal, Decimal, Decimal, Decimal, Decimal]


def distance_in_range(distance_km: float) -> bool:
    """Check a weekly distance against the inclusive bounds."""
    return MIN_DISTANCE_KM <= distance_km <= MAX_DISTANCE_KM


class EfficiencyRating:
    """Efficiency band labels as printed on the audit report."""

    HIGH = "High Efficiency"
    STANDARD = "Standard Efficiency"
    LOW = "Low Efficiency / Maintenance Required"


@dataclass(frozen=True)
class DriverSession:
    """Inputs collected from one driver for one working week."""

    driver_name: str
    weekly_fuel_budget: Decimal
    total_distance_km: float
    fuel_expenses: FuelExpenses

    def __post_init__(self):
        if len(self.fuel_expenses) != WORK_DAYS:
            raise ValueError(
                f"Expected {WORK_DAYS} daily fuel expenses, got {len(self.fuel_expenses)}"
            )
        # Normalize lists to the fixed-size tuple
        object.__setattr__(self, "fuel_expenses", tuple(self.fuel_expenses))

    @property
    def days(self) -> int:
        return len(self.fuel_expenses)

    @property
    def total_fuel_spent(self) -> Decimal:
        """Exact sum of the daily fuel expenses."""
        with localcontext() as ctx:
            ctx.prec = MONEY_PRECISION
            return sum(self.fuel_expenses, Decimal("0"))


@dataclass(frozen=True)
class PerformanceSummary:
    """Metrics derived from a completed DriverSession."""

    total_fuel_spent: Decimal
    average_daily_fuel_expense: Decimal
    km_per_unit_fuel: float
    efficiency_rating: str
    stayed_under_budget: bool
