"""
Flight network store with an adjacency list representation.

This module provides the FlightGraph class holding the directed flight network:
for every departure city the list of its outbound flights, plus a side table of
city metadata used for presentation.

The store is append-only. It is filled once at startup and is only read by the
searches, so a single graph can be shared by any number of search invocations.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from .models import City, Flight

logger = logging.getLogger(__name__)


@dataclass
class GraphState:
    """Encapsulates the state of a flight graph."""

    adjacency: Dict[str, List[Flight]] = field(default_factory=lambda: defaultdict(list))
    cities: Dict[str, City] = field(default_factory=dict)
    node_set: Set[str] = field(default_factory=set)
    edge_count: int = 0


class FlightGraph:
    """
    Directed multigraph of flights between cities.

    Parallel flights, self-loops and flights to cities without metadata are all
    accepted. A city that is referenced only as a destination has no outbound
    flights and is a dead end for the searches.

    Attributes:
        _state (GraphState): Internal state of the graph
    """

    def __init__(
        self,
        flights: Optional[Iterable[Flight]] = None,
        cities: Optional[Iterable[City]] = None,
    ):
        """
        Initialize the graph from optional flights and cities.

        Args:
            flights: Flights to append, in order
            cities: City metadata records
        """
        self._state = GraphState()
        for city in cities or ():
            self.add_city(city)
        for flight in flights or ():
            self.add_flight(flight)

    def add_flight(self, flight: Flight) -> None:
        """Append a flight to its source city's adjacency list."""
        self._state.adjacency[flight.source].append(flight)
        self._state.node_set.add(flight.source)
        self._state.node_set.add(flight.destination)
        self._state.edge_count += 1

    def add_city(self, city: City) -> None:
        """Insert or overwrite city metadata by code."""
        if city.code in self._state.cities:
            logger.debug(f"Overwriting metadata for city {city.code}")
        self._state.cities[city.code] = city

    def get_city(self, code: str) -> Optional[City]:
        """Get city metadata, or None for an unknown code."""
        return self._state.cities.get(code)

    def city_display_name(self, code: str) -> str:
        """Get "Name (CODE)" for a known city, the bare code otherwise."""
        city = self.get_city(code)
        return city.display_name if city is not None else code

    def get_flights(self, code: str) -> Tuple[Flight, ...]:
        """Get the outbound flights of a city in insertion order."""
        flights = self._state.adjacency.get(code)
        return tuple(flights) if flights else ()

    def get_origins(self) -> List[str]:
        """Get the cities with at least one outbound flight, in insertion order."""
        return [code for code, flights in self._state.adjacency.items() if flights]

    def get_nodes(self) -> Set[str]:
        """Get every city code mentioned as a flight source or destination."""
        return self._state.node_set.copy()

    def get_edges(self) -> Iterator[Flight]:
        """Get all flights in the graph."""
        for flights in self._state.adjacency.values():
            yield from flights

    def get_edge_count(self) -> int:
        """Get the total number of flights in the graph."""
        return self._state.edge_count

    def get_cities(self) -> List[City]:
        """Get all city metadata records sorted by code."""
        return [self._state.cities[code] for code in sorted(self._state.cities)]

    def get_city_count(self) -> int:
        """Get the number of cities with metadata."""
        return len(self._state.cities)

    def has_node(self, code: str) -> bool:
        """Check if a city code appears in any flight."""
        return code in self._state.node_set

    def has_city(self, code: str) -> bool:
        """Check if metadata exists for a city code."""
        return code in self._state.cities

    @classmethod
    def from_records(cls, cities: Iterable[City], flights: Iterable[Flight]) -> "FlightGraph":
        """Create a FlightGraph from city and flight records."""
        return cls(flights=flights, cities=cities)
