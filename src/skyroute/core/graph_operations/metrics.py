"""Network statistics calculation functionality."""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ..graph import FlightGraph

logger = logging.getLogger(__name__)

DEFAULT_HUB_COUNT = 5


@dataclass
class NetworkMetrics:
    """Container for network statistics."""

    city_count: int
    flight_count: int
    origin_count: int
    average_routes_per_city: float
    hub_cities: List[Tuple[str, int]] = field(default_factory=list)


class NetworkMetricsCalculator:
    """
    Calculates summary statistics of a flight network.

    The statistics are the ones shown by the `stats` command:
    - Number of cities with metadata and number of flights
    - Average number of outbound flights per departure city
    - The busiest departure cities (hubs)
    """

    def __init__(self, graph: FlightGraph, hub_count: int = DEFAULT_HUB_COUNT):
        """Initialize calculator with the graph to summarize."""
        self.graph = graph
        self.hub_count = hub_count

    def calculate(self) -> NetworkMetrics:
        """Calculate all network statistics."""
        origins = self.graph.get_origins()
        flight_count = self.graph.get_edge_count()
        average = flight_count / len(origins) if origins else 0.0

        metrics = NetworkMetrics(
            city_count=self.graph.get_city_count(),
            flight_count=flight_count,
            origin_count=len(origins),
            average_routes_per_city=average,
            hub_cities=self.get_hub_cities(),
        )
        logger.debug(f"Network metrics: {metrics}")
        return metrics

    def get_hub_cities(self) -> List[Tuple[str, int]]:
        """Get the cities with the most outbound flights, ties broken by code."""
        counts = [(code, len(self.graph.get_flights(code))) for code in self.graph.get_origins()]
        counts.sort(key=lambda item: (-item[1], item[0]))
        return counts[: self.hub_count]
