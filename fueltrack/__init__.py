"""
Fueltrack - weekly fuel expense and delivery performance tracker.

This package implements a console session that collects a delivery
driver's five daily fuel costs and weekly distance, derives efficiency and
budget metrics, and prints an audit report for accounting.
"""

__version__ = "0.1.0"
