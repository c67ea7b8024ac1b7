"""Nagios-compatible threshold checks for Prometheus query results."""

__version__ = "0.1.0"
