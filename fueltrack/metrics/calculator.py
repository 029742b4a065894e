"""
Performance metrics calculator for a driver's working week.
Computes average expense, fuel efficiency band and budget compliance.
"""

import logging
from decimal import Decimal, localcontext

from fueltrack.core.types import (
    DriverSession,
    PerformanceSummary,
    EfficiencyRating,
    HIGH_EFFICIENCY_THRESHOLD,
    STANDARD_EFFICIENCY_THRESHOLD,
    MONEY_PRECISION,
)

logger = logging.getLogger(__name__)


class PerformanceCalculator:
    """
    Calculates weekly fuel performance metrics.

    Supports:
    - Total and average daily fuel expense (exact decimals)
    - Distance per currency unit of fuel
    - Efficiency banding
    - Budget compliance
    """

    def __init__(
        self,
        high_threshold: float = HIGH_EFFICIENCY_THRESHOLD,
        standard_threshold: float = STANDARD_EFFICIENCY_THRESHOLD,
    ):
        """
        Initialize calculator.

        Args:
            high_threshold: km/unit above which efficiency is high (exclusive)
            standard_threshold: km/unit from which efficiency is standard (inclusive)
        """
        self.high_threshold = high_threshold
        self.standard_threshold = standard_threshold

    def calculate_all(self, session: DriverSession) -> PerformanceSummary:
        """
        Calculate all metrics for a session.

        Args:
            session: Completed driver session

        Returns:
            PerformanceSummary with every derived value
        """
        total = session.total_fuel_spent
        km_per_unit = self.calculate_km_per_unit_fuel(session.total_distance_km, total)

        summary = PerformanceSummary(
            total_fuel_spent=total,
            average_daily_fuel_expense=self.calculate_average(total),
            km_per_unit_fuel=km_per_unit,
            efficiency_rating=self.rate_efficiency(km_per_unit),
            stayed_under_budget=self.is_within_budget(total, session.weekly_fuel_budget),
        )

        logger.info(
            f"Analysis complete: total={summary.total_fuel_spent}, "
            f"km/unit={summary.km_per_unit_fuel:.2f}, rating={summary.efficiency_rating}"
        )
        return summary

    def calculate_average(self, total_fuel_spent: Decimal) -> Decimal:
        """Average daily expense over the fixed five-day week."""
        with localcontext() as ctx:
            ctx.prec = MONEY_PRECISION
            return total_fuel_spent / 5

    def calculate_km_per_unit_fuel(self, distance_km: float, total_fuel_spent: Decimal) -> float:
        """
        Distance traveled per currency unit spent on fuel.

        Args:
            distance_km: Weekly distance
            total_fuel_spent: Weekly fuel spend

        Returns:
            km per unit, or 0.0 when nothing positive was spent
        """
        total_as_float = float(total_fuel_spent)
        if total_as_float > 0:
            return distance_km / total_as_float
        return 0.0

    def rate_efficiency(self, km_per_unit_fuel: float) -> str:
        """Map km per unit fuel to its efficiency band."""
        if km_per_unit_fuel > self.high_threshold:
            return EfficiencyRating.HIGH
        elif km_per_unit_fuel >= self.standard_threshold:
            return EfficiencyRating.STANDARD
        else:
            return EfficiencyRating.LOW

    def is_within_budget(self, total_fuel_spent: Decimal, weekly_budget: Decimal) -> bool:
        """Spending exactly the budget counts as within it."""
        return total_fuel_spent <= weekly_budget
