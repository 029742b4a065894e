"""Core components: session types and console input."""

from .types import (
    DriverSession,
    PerformanceSummary,
    EfficiencyRating,
    FuelExpenses,
    WORK_DAYS,
    MIN_DISTANCE_KM,
    MAX_DISTANCE_KM,
    HIGH_EFFICIENCY_THRESHOLD,
    STANDARD_EFFICIENCY_THRESHOLD,
    MONEY_PRECISION,
    distance_in_range,
)
from .console import ConsoleInput, parse_decimal, parse_distance

__all__ = [
    "DriverSession",
    "PerformanceSummary",
    "EfficiencyRating",
    "FuelExpenses",
    "WORK_DAYS",
    "MIN_DISTANCE_KM",
    "MAX_DISTANCE_KM",
    "HIGH_EFFICIENCY_THRESHOLD",
    "STANDARD_EFFICIENCY_THRESHOLD",
    "MONEY_PRECISION",
    "distance_in_range",
    "ConsoleInput",
    "parse_decimal",
    "parse_distance",
]
