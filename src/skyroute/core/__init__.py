"""Core flight network and route search functionality."""

from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    LoadError,
    RecordSkippedError,
    ValidationError,
)
from .config import SearchConfig
from .models import City, Flight
from .graph import FlightGraph
from .graph_paths import Route, RouteComparison, RouteFinding
from .graph_operations.metrics import NetworkMetrics, NetworkMetricsCalculator
from .loader import GraphLoader

__all__ = [
    "City",
    "ConfigurationError",
    "Flight",
    "FlightGraph",
    "GraphLoader",
    "GraphOperationError",
    "LoadError",
    "NetworkMetrics",
    "NetworkMetricsCalculator",
    "RecordSkippedError",
    "Route",
    "RouteComparison",
    "RouteFinding",
    "SearchConfig",
    "ValidationError",
]
