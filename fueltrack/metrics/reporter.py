"""
Reporting utilities for driver fuel sessions.
Generates the audit report and a serializable summary.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict

from fueltrack.core.types import DriverSession, PerformanceSummary, MONEY_PRECISION

logger = logging.getLogger(__name__)

RULE_WIDTH = 60
CENT = Decimal("0.01")


def round_to_cents(amount: Decimal) -> Decimal:
    """Round half-up to two places without losing integer digits."""
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal) -> str:
    """Format as $1,234.56, with a leading minus for negatives."""
    rounded = round_to_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${rounded.copy_abs():,.2f}"


def format_distance(distance_km: float) -> str:
    return f"{distance_km:,.2f}"


class Reporter:
    """
    Generates formatted reports from a driver session.

    Supports:
    - Console audit report
    - Dict export for JSON output
    """

    def __init__(self, company_name: str = "Codac Logistics"):
        """
        Initialize reporter.

        Args:
            company_name: Name shown in the banner and closing line
        """
        self.company_name = company_name

    def print_banner(self) -> None:
        """Print the session banner shown before the first prompt."""
        print(f"=== {self.company_name} - Fuel & Performance Tracker ===\n")

    def print_audit_report(self, session: DriverSession, summary: PerformanceSummary) -> None:
        """
        Print the weekly audit report.

        Args:
            session: Collected driver inputs
            summary: Metrics derived from the session
        """
        print("\n" + "=" * RULE_WIDTH)
        print("                    AUDIT REPORT")
        print("=" * RULE_WIDTH)

        print(f"Driver Name:              {session.driver_name}")
        print(f"Total Distance (km):      {format_distance(session.total_distance_km)}")
        print(f"Weekly Fuel Budget:       {format_currency(session.weekly_fuel_budget)}")

        print("-" * RULE_WIDTH)
        print(f"{session.days}-Day Fuel Expense Breakdown:")
        for day, cost in enumerate(session.fuel_expenses, start=1):
            print(f"  Day {day}: {format_currency(cost)}")
        print("-" * RULE_WIDTH)

        print(f"Total Fuel Spent:         {format_currency(summary.total_fuel_spent)}")
        print(f"Average Daily Expense:    {format_currency(summary.average_daily_fuel_expense)}")
        print(f"Fuel Efficiency Rating:   {summary.efficiency_rating}")
        print(f"Stayed Under Budget:      {summary.stayed_under_budget}")
        print("=" * RULE_WIDTH)

        print(f"\nReport generated for {self.company_name} Accounting.")
        logger.info(f"Audit report printed for driver {session.driver_name!r}")

    def generate_report_dict(self, session: DriverSession, summary: PerformanceSummary) -> Dict:
        """
        Generate a dictionary report suitable for JSON serialization.

        Monetary values are rendered as two-decimal strings so no precision
        is lost to floats.

        Args:
            session: Collected driver inputs
            summary: Metrics derived from the session

        Returns:
            Dict with all report data
        """
        def money(value: Decimal) -> str:
            return str(round_to_cents(value))

        return {
            "company": self.company_name,
            "driver": {
                "name": session.driver_name,
                "weekly_fuel_budget": money(session.weekly_fuel_budget),
                "total_distance_km": session.total_distance_km,
            },
            "fuel_expenses": [
                {"day": day, "cost": money(cost)}
                for day, cost in enumerate(session.fuel_expenses, start=1)
            ],
            "metrics": {
                "total_fuel_spent": money(summary.total_fuel_spent),
                "average_daily_fuel_expense": money(summary.average_daily_fuel_expense),
                "km_per_unit_fuel": summary.km_per_unit_fuel,
                "efficiency_rating": summary.efficiency_rating,
                "stayed_under_budget": summary.stayed_under_budget,
            },
        }
