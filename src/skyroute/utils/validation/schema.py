"""
Schema Validation Components for SkyRoute

This module provides JSON schema-based validation for raw city and flight
records before they are turned into model objects. It supports:
- Default schemas matching the cities.json / flights.json data files
- Replacing a schema for either record kind
- Comprehensive validation reporting through ValidationResult
"""

from typing import Any, Dict, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .base import ValidationResult

NON_EMPTY_STRING = {"type": "string", "minLength": 1, "pattern": r"\S"}
OPTIONAL_STRING = {"type": ["string", "null"]}
NON_NEGATIVE_NUMBER = {"type": "number", "minimum": 0}

CITY_RECORD_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "code": NON_EMPTY_STRING,
        "name": NON_EMPTY_STRING,
        "airport_name": OPTIONAL_STRING,
        "country": OPTIONAL_STRING,
        "timezone": OPTIONAL_STRING,
        "latitude": {"type": "number", "minimum": -90, "maximum": 90},
        "longitude": {"type": "number", "minimum": -180, "maximum": 180},
    },
    "required": ["code", "name"],
}

FLIGHT_RECORD_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "source": NON_EMPTY_STRING,
        "destination": NON_EMPTY_STRING,
        "flight_number": NON_EMPTY_STRING,
        "airline": OPTIONAL_STRING,
        "departure_time": OPTIONAL_STRING,
        "arrival_time": OPTIONAL_STRING,
        "aircraft": OPTIONAL_STRING,
        "duration_hours": NON_NEGATIVE_NUMBER,
        "cost_usd": NON_NEGATIVE_NUMBER,
        "seats_available": {"type": "integer", "minimum": 0},
    },
    "required": ["source", "destination", "flight_number"],
}


class SchemaValidator:
    """
    JSON Schema-based validator for raw city and flight records.

    Attributes:
        city_schema (Dict[str, Any]): Schema applied to city records
        flight_schema (Dict[str, Any]): Schema applied to flight records
    """

    def __init__(
        self,
        city_schema: Optional[Dict[str, Any]] = None,
        flight_schema: Optional[Dict[str, Any]] = None,
    ):
        self.city_schema = city_schema if city_schema is not None else CITY_RECORD_SCHEMA
        self.flight_schema = flight_schema if flight_schema is not None else FLIGHT_RECORD_SCHEMA

    def validate_city_record(self, record: Any) -> ValidationResult:
        """
        Validate a raw city record against the city schema.

        Example:
            >>> validator = SchemaValidator()
            >>> validator.validate_city_record({"code": "KHI", "name": "Karachi"}).is_valid
            True
        """
        return self._validate(record, self.city_schema, "city")

    def validate_flight_record(self, record: Any) -> ValidationResult:
        """Validate a raw flight record against the flight schema."""
        return self._validate(record, self.flight_schema, "flight")

    def _validate(self, record: Any, schema: Dict[str, Any], kind: str) -> ValidationResult:
        errors = []
        warnings = []

        try:
            json_validate(instance=record, schema=schema)
        except JsonSchemaError as e:
            errors.append(f"Schema validation failed: {e.message}")

        if isinstance(record, dict):
            unknown = set(record) - set(schema.get("properties", {}))
            if unknown:
                warnings.append(f"Unknown {kind} fields ignored: {sorted(unknown)}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"record_type": kind},
        )
