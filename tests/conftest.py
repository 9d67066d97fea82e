"""Shared test fixtures."""

import json
from typing import Any, Callable, Dict

import pytest

from skyroute.core.graph import FlightGraph
from skyroute.core.models import City, Flight


def build_flight(
    source: str, destination: str, cost: float, duration: float, number: str = "", **kwargs
) -> Flight:
    """Create a flight, numbering it after its endpoints unless a number is given."""
    return Flight(
        source=source,
        destination=destination,
        flight_number=number or f"{source}{destination}",
        cost=cost,
        duration=duration,
        **kwargs,
    )


@pytest.fixture
def make_flight() -> Callable[..., Flight]:
    """Fixture providing the flight factory."""
    return build_flight


@pytest.fixture
def sample_cities() -> list:
    """Fixture providing metadata for cities A, B and C."""
    return [
        City(code="A", name="Alpha", airport_name="Alpha Intl", country="Aland"),
        City(code="B", name="Bravo", airport_name="Bravo Field", country="Bravia"),
        City(code="C", name="Charlie", airport_name="Charlie Airport", country="Carolia"),
    ]


@pytest.fixture
def triangle_graph(sample_cities) -> FlightGraph:
    """
    Fixture providing the basic trade-off network:
    A -> B  ($100, 2h)
    A -> C  ($50, 5h)
    C -> B  ($40, 1h)

    Cheapest A->B is A-C-B ($90, 6h), fastest is the direct flight ($100, 2h).
    """
    flights = [
        build_flight(
            "A",
            "B",
            100,
            2,
            "AB1",
            airline="Air Alpha",
            departure_time="08:00",
            arrival_time="10:00",
            aircraft="A320",
            seats_available=12,
        ),
        build_flight("A", "C", 50, 5, "AC1", airline="Air Alpha"),
        build_flight("C", "B", 40, 1, "CB1", airline="Charlie Air"),
    ]
    return FlightGraph(flights=flights, cities=sample_cities)


@pytest.fixture
def parallel_graph() -> FlightGraph:
    """
    Fixture providing two identical flights feeding a shared leg:
    A =X1/X2=> B -> C, every flight $10 or $5 and 1h.
    """
    return FlightGraph(
        flights=[
            build_flight("A", "B", 10, 1, "X1"),
            build_flight("A", "B", 10, 1, "X2"),
            build_flight("B", "C", 5, 1, "Y1"),
        ]
    )


@pytest.fixture
def zero_cycle_graph() -> FlightGraph:
    """
    Fixture providing a zero-weight cycle:
    A <-> B (free, instant), B -> C ($10, 1h)
    """
    return FlightGraph(
        flights=[
            build_flight("A", "B", 0, 0),
            build_flight("B", "A", 0, 0),
            build_flight("B", "C", 10, 1),
        ]
    )


@pytest.fixture
def diamond_graph() -> FlightGraph:
    """
    Fixture providing a diamond with a long chain:
    A -> B -> D, A -> C -> D, A -> E -> F -> G -> D
    Every flight costs $10 and takes 1h except the chain, which is free and slow.
    """
    return FlightGraph(
        flights=[
            build_flight("A", "B", 10, 1),
            build_flight("B", "D", 10, 1),
            build_flight("A", "C", 10, 1),
            build_flight("C", "D", 10, 1),
            build_flight("A", "E", 0, 3),
            build_flight("E", "F", 0, 3),
            build_flight("F", "G", 0, 3),
            build_flight("G", "D", 0, 3),
        ]
    )


@pytest.fixture
def cities_document() -> Dict[str, Any]:
    """Fixture providing a cities.json document."""
    return {
        "cities": [
            {
                "code": "KHI",
                "name": "Karachi",
                "airport_name": "Jinnah International",
                "country": "Pakistan",
                "timezone": "PKT",
                "latitude": 24.9,
                "longitude": 67.1,
            },
            {"code": "DXB", "name": "Dubai", "country": "UAE"},
            {"code": "LHR", "name": "London", "country": "United Kingdom"},
        ]
    }


@pytest.fixture
def flights_document() -> Dict[str, Any]:
    """Fixture providing a flights.json document."""
    return {
        "flights": [
            {
                "source": "KHI",
                "destination": "LHR",
                "flight_number": "PK785",
                "airline": "PIA",
                "departure_time": "02:00",
                "arrival_time": "07:30",
                "aircraft": "B777",
                "duration_hours": 9.5,
                "cost_usd": 900,
                "seats_available": 40,
            },
            {
                "source": "KHI",
                "destination": "DXB",
                "flight_number": "EK601",
                "airline": "Emirates",
                "duration_hours": 2,
                "cost_usd": 200,
            },
            {
                "source": "DXB",
                "destination": "LHR",
                "flight_number": "EK001",
                "airline": "Emirates",
                "duration_hours": 8,
                "cost_usd": 450,
            },
        ]
    }


@pytest.fixture
def data_files(tmp_path, cities_document, flights_document):
    """Fixture writing both data documents to disk, returning their paths."""
    cities_path = tmp_path / "cities.json"
    flights_path = tmp_path / "flights.json"
    cities_path.write_text(json.dumps(cities_document))
    flights_path.write_text(json.dumps(flights_document))
    return str(cities_path), str(flights_path)
