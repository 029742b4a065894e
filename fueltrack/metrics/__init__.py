"""Metrics and reporting components."""

from .calculator import PerformanceCalculator
from .reporter import Reporter

__all__ = ["PerformanceCalculator", "Reporter"]
