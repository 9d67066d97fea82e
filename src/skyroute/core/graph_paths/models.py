"""
Data models for route searches.

This module provides the core data structures used throughout the search package:
- Route: Reconstructed itinerary with its aggregate cost, duration and stops
- Label: (cost, duration) point at a city used by the Pareto search
- RouteComparison: Side-by-side result of the cheapest/fastest/min-stops searches
- PerformanceMetrics: Container for search performance metrics
- RouteValidationError: Exception for route invariant violations

Example:
    >>> route = Route.from_path(["KHI", "DXB", "LHR"], [f1, f2])
    >>> route.stops
    1
    >>> route.total_cost == f1.cost + f2.cost
    True
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..models import Flight
from .types import Recommendation


class RouteValidationError(Exception):
    """
    Raised when a route fails validation checks.

    This exception indicates issues such as:
    - City and flight sequences of mismatched length
    - A flight that does not connect consecutive cities
    """

    pass


@dataclass(frozen=True)
class Route:
    """
    An itinerary from a source city to a destination city.

    Routes are produced only by reconstruction and never change afterwards.
    The empty route (no cities) represents "no route found"; a route from a city
    to itself has one city and no flights.

    Attributes:
        cities: Ordered city codes, source first
        flights: Ordered flights, one fewer than cities
        total_cost: Sum of flight costs
        total_duration: Sum of flight durations
        stops: Number of intermediate layovers (flights - 1, at least 0)
    """

    cities: Tuple[str, ...] = ()
    flights: Tuple[Flight, ...] = ()
    total_cost: float = 0.0
    total_duration: float = 0.0
    stops: int = 0

    def __post_init__(self):
        """Validate the city/flight invariant."""
        if not self.cities:
            if self.flights:
                raise RouteValidationError("empty route cannot contain flights")
            return

        if len(self.cities) != len(self.flights) + 1:
            raise RouteValidationError(
                f"route has {len(self.cities)} cities but {len(self.flights)} flights"
            )

        for i, flight in enumerate(self.flights):
            if flight.source != self.cities[i] or flight.destination != self.cities[i + 1]:
                raise RouteValidationError(
                    f"flight {flight.flight_number} at index {i} does not connect "
                    f"{self.cities[i]} -> {self.cities[i + 1]}"
                )

    @classmethod
    def from_path(cls, cities: Sequence[str], flights: Sequence[Flight]) -> "Route":
        """Build a route, recomputing its aggregates from the flights."""
        total_cost = 0.0
        total_duration = 0.0
        for flight in flights:
            total_cost += flight.cost
            total_duration += flight.duration
        return cls(
            cities=tuple(cities),
            flights=tuple(flights),
            total_cost=total_cost,
            total_duration=total_duration,
            stops=max(0, len(flights) - 1),
        )

    @classmethod
    def empty(cls) -> "Route":
        """The "no route found" result."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.cities

    @property
    def length(self) -> int:
        """Number of flights in the route."""
        return len(self.flights)

    @property
    def source(self) -> Optional[str]:
        return self.cities[0] if self.cities else None

    @property
    def destination(self) -> Optional[str]:
        return self.cities[-1] if self.cities else None

    @property
    def flight_numbers(self) -> List[str]:
        return [flight.flight_number for flight in self.flights]


@dataclass(slots=True)
class Label:
    """
    A reachable (cost, duration) point at a city, with its back-pointer.

    Attributes:
        cost: Total cost from the source
        duration: Total duration from the source
        parent_city: Predecessor city (None for the source label)
        parent_flight: Flight used from the predecessor (None for the source label)
    """

    cost: float
    duration: float
    parent_city: Optional[str] = None
    parent_flight: Optional[Flight] = None

    def dominates(self, other: "Label") -> bool:
        """No worse in both criteria and strictly better in at least one."""
        return (
            self.cost <= other.cost
            and self.duration <= other.duration
            and (self.cost < other.cost or self.duration < other.duration)
        )

    def is_dominated_by(self, other: "Label") -> bool:
        return other.dominates(self)

    def same_point(self, other: "Label") -> bool:
        """Exact equality of both criteria."""
        return self.cost == other.cost and self.duration == other.duration


@dataclass
class RouteComparison:
    """
    Result of running the cheapest, fastest and minimum-stops searches together.

    Attributes:
        cheapest: All routes tied for lowest cost
        fastest: All routes tied for lowest duration
        minimum_stops: Route with fewest flights (empty if unreachable)
        recommendation: Suggested option
    """

    cheapest: List[Route]
    fastest: List[Route]
    minimum_stops: Route
    recommendation: Recommendation


@dataclass
class PerformanceMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of queue entries processed
        routes_found: Number of routes returned
        max_memory_used: Peak memory usage during operation (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="pareto", start_time=time())
        >>> # ... perform search ...
        >>> metrics.end_time = time()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    routes_found: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "routes_found": self.routes_found,
            "max_memory_used": self.max_memory_used,
        }
