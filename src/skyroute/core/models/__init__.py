"""
Core domain models package for the flight network.

This package provides the fundamental data structures that represent cities and
flights in the network.
"""

from .base import validate_non_empty, validate_weight
from .edge import Flight
from .node import City

__all__ = [
    # Base utilities
    "validate_non_empty",
    "validate_weight",
    # Node models
    "City",
    # Edge models
    "Flight",
]
