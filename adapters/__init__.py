"""Adapter package exports."""

from .prometheus import extract_value, fetch_value, query_prometheus

__all__ = ["query_prometheus", "extract_value", "fetch_value"]
