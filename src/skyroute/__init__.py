"""
SkyRoute - Multi-criteria flight route search

This package finds optimal itineraries through a directed flight network whose
flights carry two independent weights, cost and duration. It includes:

- A read-only flight graph store with city metadata
- Cheapest and fastest searches returning every tied-optimal route
- A minimum-stops breadth-first search
- A Pareto-optimal (cost vs. duration) labeling search
- JSON data loading, text reports and a command line interface
"""

__version__ = "0.1.0"
__author__ = "SkyRoute Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("SkyRoute requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.config import SearchConfig
from .core.graph import FlightGraph
from .core.graph_paths import RouteFinding
from .core.graph_paths.models import Route
from .core.models import City, Flight

__all__ = [
    "City",
    "Flight",
    "FlightGraph",
    "Route",
    "RouteFinding",
    "SearchConfig",
]
