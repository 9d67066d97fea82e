"""Loading of the flight network from JSON data files.

Two files describe a network: ``cities.json`` holding a ``"cities"`` array and
``flights.json`` holding a ``"flights"`` array. Every record is checked against
a JSON schema before it becomes a model object. A malformed record is skipped
with a warning; a missing file, invalid JSON or an empty collection aborts the
load with a LoadError.
"""

import json
import logging
import os
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .exceptions import LoadError, RecordSkippedError
from .graph import FlightGraph
from .models import City, Flight
from ..utils.validation import SchemaValidator, ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def read_json_file(file_path: str) -> Dict[str, Any]:
    """Read a JSON document from disk.

    Raises:
        LoadError: If the file is missing, unreadable or not valid JSON.
    """
    if not os.path.exists(file_path):
        raise LoadError(f"File not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in file {file_path}: {e.msg}") from e
    except OSError as e:
        raise LoadError(f"Failed to read file {file_path}: {e}") from e


def _text(record: Dict[str, Any], key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def _code(record: Dict[str, Any], key: str) -> str:
    return _text(record, key).strip().upper()


class GraphLoader:
    """
    Builds City and Flight records, and whole graphs, from JSON data.

    Attributes:
        validator (SchemaValidator): Record schema validator
    """

    def __init__(self, validator: Optional[SchemaValidator] = None):
        self.validator = validator or SchemaValidator()

    def load_cities(self, path: str) -> List[City]:
        """Load city records from a cities.json file."""
        return self.parse_cities(read_json_file(path), source=path)

    def load_flights(self, path: str) -> List[Flight]:
        """Load flight records from a flights.json file."""
        return self.parse_flights(read_json_file(path), source=path)

    def load_graph(self, cities_path: str, flights_path: str) -> FlightGraph:
        """
        Load both data files and build the flight graph.

        Args:
            cities_path: Path to the cities file
            flights_path: Path to the flights file

        Returns:
            FlightGraph: The populated graph

        Raises:
            LoadError: If either file cannot be loaded
        """
        cities = self.load_cities(cities_path)
        flights = self.load_flights(flights_path)
        graph = FlightGraph.from_records(cities, flights)

        unknown = sorted(code for code in graph.get_nodes() if not graph.has_city(code))
        if unknown:
            logger.info(f"Flights reference cities without metadata: {', '.join(unknown)}")
        logger.info(
            f"Loaded {graph.get_city_count()} cities and {graph.get_edge_count()} flights"
        )
        return graph

    def parse_cities(self, document: Any, source: str = "<document>") -> List[City]:
        """Build City records from a parsed cities document."""
        return self._parse_collection(
            document,
            "cities",
            "city",
            self.validator.validate_city_record,
            self._build_city,
            source,
        )

    def parse_flights(self, document: Any, source: str = "<document>") -> List[Flight]:
        """Build Flight records from a parsed flights document."""
        return self._parse_collection(
            document,
            "flights",
            "flight",
            self.validator.validate_flight_record,
            self._build_flight,
            source,
        )

    def _parse_collection(
        self,
        document: Any,
        key: str,
        kind: str,
        validate: Callable[[Any], ValidationResult],
        build: Callable[[Dict[str, Any]], T],
        source: str,
    ) -> List[T]:
        if not isinstance(document, dict) or key not in document:
            raise LoadError(f"No '{key}' array found in {source}")

        records = document[key]
        if not isinstance(records, list):
            raise LoadError(f"'{key}' in {source} is not an array")
        if not records:
            raise LoadError(f"'{key}' array in {source} is empty")

        items = []
        for index, record in enumerate(records):
            try:
                items.append(self._parse_record(record, index, kind, validate, build))
            except RecordSkippedError as e:
                logger.warning(str(e))

        if not items:
            raise LoadError(f"No valid {kind} records in {source}")

        logger.debug(f"Parsed {len(items)} of {len(records)} {kind} records from {source}")
        return items

    def _parse_record(
        self,
        record: Any,
        index: int,
        kind: str,
        validate: Callable[[Any], ValidationResult],
        build: Callable[[Dict[str, Any]], T],
    ) -> T:
        result = validate(record)
        if not result.is_valid:
            raise RecordSkippedError(kind, index, "; ".join(result.errors))
        for warning in result.warnings:
            logger.debug(f"{kind} record {index}: {warning}")

        try:
            return build(record)
        except (TypeError, ValueError) as e:
            raise RecordSkippedError(kind, index, str(e)) from e

    @staticmethod
    def _build_city(record: Dict[str, Any]) -> City:
        return City(
            code=_code(record, "code"),
            name=_text(record, "name"),
            airport_name=_text(record, "airport_name"),
            country=_text(record, "country"),
            timezone=_text(record, "timezone"),
            latitude=float(record.get("latitude", 0.0)),
            longitude=float(record.get("longitude", 0.0)),
        )

    @staticmethod
    def _build_flight(record: Dict[str, Any]) -> Flight:
        return Flight(
            source=_code(record, "source"),
            destination=_code(record, "destination"),
            flight_number=_text(record, "flight_number"),
            duration=float(record.get("duration_hours", 0.0)),
            cost=float(record.get("cost_usd", 0.0)),
            airline=_text(record, "airline"),
            departure_time=_text(record, "departure_time"),
            arrival_time=_text(record, "arrival_time"),
            aircraft=_text(record, "aircraft"),
            seats_available=int(record.get("seats_available", 0)),
        )
