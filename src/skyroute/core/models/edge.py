"""
Flight models for the flight network.

A flight is a directed edge between two cities carrying the two weights the
searches optimise: cost and duration.
"""

from dataclasses import dataclass

from .base import validate_dataclass, validate_non_empty, validate_weight


@validate_dataclass
@dataclass(frozen=True)
class Flight:
    """
    A directed flight from one city to another.

    The flight number is an opaque label; it does not need to be unique, and the
    destination does not need to be a known city.

    Attributes:
        source (str): Code of the departure city
        destination (str): Code of the arrival city
        flight_number (str): Flight label, e.g. "PK785"
        duration (float): Elapsed time in hours (>= 0)
        cost (float): Ticket price in dollars (>= 0)
        airline (str): Carrier name
        departure_time (str): Scheduled departure, display only
        arrival_time (str): Scheduled arrival, display only
        aircraft (str): Aircraft type, display only
        seats_available (int): Remaining capacity, display only
    """

    source: str
    destination: str
    flight_number: str
    duration: float
    cost: float
    airline: str = ""
    departure_time: str = ""
    arrival_time: str = ""
    aircraft: str = ""
    seats_available: int = 0

    def __post_init__(self):
        """Validate flight after initialization."""
        validate_non_empty("source", self.source)
        validate_non_empty("destination", self.destination)
        validate_non_empty("flight_number", self.flight_number)
        validate_weight("cost", self.cost)
        validate_weight("duration", self.duration)
        if self.seats_available < 0:
            raise ValueError("seats_available must be non-negative")

    def weight(self, by_cost: bool) -> float:
        """Return cost when by_cost is set, duration otherwise."""
        return self.cost if by_cost else self.duration
