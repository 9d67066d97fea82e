"""
Validation package for SkyRoute.

This package provides validation utilities for ensuring data integrity and type
safety of the network data.
"""

from .base import DataclassRule, ValidationResult, validate_dataclass
from .schema import CITY_RECORD_SCHEMA, FLIGHT_RECORD_SCHEMA, SchemaValidator

__all__ = [
    "CITY_RECORD_SCHEMA",
    "FLIGHT_RECORD_SCHEMA",
    "DataclassRule",
    "SchemaValidator",
    "ValidationResult",
    "validate_dataclass",
]
