"""
Core domain models base module.

This module provides common imports and the field checks shared by the city and
flight models.
"""

import math

from ...utils.validation import validate_dataclass


def validate_non_empty(name: str, value: str) -> None:
    """Validate that a string field is present and not blank."""
    if not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def validate_weight(name: str, value: float) -> None:
    """Validate that an edge weight is finite and non-negative."""
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"{name} must be a finite number")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


__all__ = ["validate_dataclass", "validate_non_empty", "validate_weight"]
