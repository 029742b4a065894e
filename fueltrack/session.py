"""
Session runner for one driver's working week.
Collects inputs, analyzes them and prints the audit report.
"""

import logging
from typing import Callable, Optional, Tuple

from fueltrack.config import TrackerConfig
from fueltrack.core.console import ConsoleInput
from fueltrack.core.types import DriverSession, PerformanceSummary
from fueltrack.metrics.calculator import PerformanceCalculator
from fueltrack.metrics.reporter import Reporter

logger = logging.getLogger(__name__)


class SessionRunner:
    """
    Runs a single tracker session from first prompt to final report.

    Stages:
    1. Driver profile and distance (distance re-prompted until in range)
    2. Five daily fuel costs
    3. Performance analysis
    4. Audit report

    Parse failures are not caught here; they propagate to the caller and
    no report is printed.
    """

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        calculator: Optional[PerformanceCalculator] = None,
        reporter: Optional[Reporter] = None,
    ):
        """
        Initialize session runner.

        Args:
            config: Tracker configuration
            input_fn: Line reader taking a prompt (defaults to builtin input)
            calculator: Metrics calculator
            reporter: Report printer
        """
        self.config = config or TrackerConfig()
        self.console = ConsoleInput(input_fn=input_fn)
        self.calculator = calculator or PerformanceCalculator()
        self.reporter = reporter or Reporter(company_name=self.config.company_name)

    def run(self) -> Tuple[DriverSession, PerformanceSummary]:
        """
        Run the session.

        Returns:
            The collected session and its derived summary
        """
        self.reporter.print_banner()

        session = self.collect_session()
        summary = self.calculator.calculate_all(session)
        self.reporter.print_audit_report(session, summary)

        return session, summary

    def collect_session(self) -> DriverSession:
        """Prompt for every input in order and build the session record."""
        driver_name = self.console.read_text("Enter Driver's Full Name: ")
        weekly_budget = self.console.read_decimal(
            "Enter Weekly Fuel Budget (e.g. 2500.00): ", "weekly fuel budget"
        )
        distance = self.console.read_distance()
        logger.info(f"Profile captured for {driver_name!r}: budget={weekly_budget}, distance={distance}")

        fuel_expenses = self.console.read_fuel_expenses()

        return DriverSession(
            driver_name=driver_name,
            weekly_fuel_budget=weekly_budget,
            total_distance_km=distance,
            fuel_expenses=fuel_expenses,
        )
