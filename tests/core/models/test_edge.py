"""
Tests for flight models.
"""

import math
from dataclasses import replace

import pytest

from skyroute.core.models import Flight


@pytest.fixture
def sample_flight() -> Flight:
    """Fixture providing a fully described flight."""
    return Flight(
        source="KHI",
        destination="DXB",
        flight_number="EK601",
        duration=2.25,
        cost=210.0,
        airline="Emirates",
        departure_time="04:30",
        arrival_time="05:45",
        aircraft="B777",
        seats_available=20,
    )


def test_flight_creation(sample_flight):
    """Test creation of a flight with valid values."""
    assert sample_flight.source == "KHI"
    assert sample_flight.destination == "DXB"
    assert sample_flight.flight_number == "EK601"
    assert sample_flight.duration == pytest.approx(2.25)
    assert sample_flight.cost == pytest.approx(210.0)
    assert sample_flight.seats_available == 20


def test_flight_weight(sample_flight):
    """Test selecting the weight a search optimises."""
    assert sample_flight.weight(by_cost=True) == pytest.approx(210.0)
    assert sample_flight.weight(by_cost=False) == pytest.approx(2.25)


def test_flight_accepts_integer_weights():
    """Test that integer cost and duration pass the float type check."""
    flight = Flight(source="A", destination="B", flight_number="AB1", duration=2, cost=100)
    assert flight.cost == 100
    assert flight.duration == 2


def test_flight_allows_zero_weights_and_self_loop():
    """Test that zero weights and self-loops are valid flights."""
    flight = Flight(source="A", destination="A", flight_number="LOOP", duration=0, cost=0)
    assert flight.source == flight.destination


def test_flight_negative_cost():
    """Test flight validation with negative cost."""
    with pytest.raises(ValueError, match="cost must be non-negative"):
        Flight(source="A", destination="B", flight_number="AB1", duration=1, cost=-5)


def test_flight_negative_duration():
    """Test flight validation with negative duration."""
    with pytest.raises(ValueError, match="duration must be non-negative"):
        Flight(source="A", destination="B", flight_number="AB1", duration=-1, cost=5)


def test_flight_non_finite_weight():
    """Test flight validation with infinite or NaN weights."""
    with pytest.raises(ValueError, match="cost must be a finite number"):
        Flight(source="A", destination="B", flight_number="AB1", duration=1, cost=math.inf)
    with pytest.raises(ValueError, match="duration must be a finite number"):
        Flight(source="A", destination="B", flight_number="AB1", duration=math.nan, cost=1)


def test_flight_missing_identifiers():
    """Test flight validation with empty endpoints or flight number."""
    with pytest.raises(ValueError, match="source must be a non-empty string"):
        Flight(source="", destination="B", flight_number="AB1", duration=1, cost=1)
    with pytest.raises(ValueError, match="destination must be a non-empty string"):
        Flight(source="A", destination=" ", flight_number="AB1", duration=1, cost=1)
    with pytest.raises(ValueError, match="flight_number must be a non-empty string"):
        Flight(source="A", destination="B", flight_number="", duration=1, cost=1)


def test_flight_negative_seats():
    """Test flight validation with negative seat count."""
    with pytest.raises(ValueError, match="seats_available must be non-negative"):
        Flight(
            source="A", destination="B", flight_number="AB1", duration=1, cost=1, seats_available=-1
        )


def test_flight_rejects_boolean_weight():
    """Test runtime type checking rejects booleans as numbers."""
    with pytest.raises(TypeError, match="Invalid field types in Flight"):
        Flight(source="A", destination="B", flight_number="AB1", duration=1, cost=True)


def test_flights_compare_by_value(sample_flight):
    """Test that identical flights are equal and hashable."""
    twin = replace(sample_flight)
    assert twin == sample_flight
    assert len({twin, sample_flight}) == 1
