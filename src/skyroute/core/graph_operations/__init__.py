"""Whole-network operations on a flight graph."""

from .metrics import NetworkMetrics, NetworkMetricsCalculator

__all__ = ["NetworkMetrics", "NetworkMetricsCalculator"]
