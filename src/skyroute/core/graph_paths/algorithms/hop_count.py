"""Minimum-stops route search (breadth-first)."""

import logging
from collections import deque
from typing import Dict, List, Optional, Tuple

from ...models import Flight
from ..base import RouteFinder
from ..models import Route

logger = logging.getLogger(__name__)


class MinimumStopsFinder(RouteFinder):
    """Fewest-flights route search.

    Every flight counts as one hop, so the first time BFS reaches a city it has
    done so with the fewest flights. Only one route is produced; among routes
    with the same number of flights the one discovered first (flight insertion
    order) wins.
    """

    operation = "minimum_stops"

    def find_routes(self, source: str, target: str, **kwargs) -> List[Route]:
        """Find the fewest-flights route as a one-element list, or [] if unreachable."""
        route = self.find_route(source, target)
        return [] if route.is_empty else [route]

    def find_route(self, source: str, target: str, **kwargs) -> Route:
        """Find the fewest-flights route, or the empty route if unreachable."""
        with self._search_context(source, target) as metrics:
            # city -> (predecessor, flight) of its first visit; None for the source
            parents: Dict[str, Optional[Tuple[str, Flight]]] = {source: None}
            queue = deque([source])

            while queue:
                self.memory_manager.check_memory()
                city = queue.popleft()
                metrics.nodes_explored += 1

                if city == target:
                    break

                for flight in self.graph.get_flights(city):
                    if flight.destination not in parents:
                        parents[flight.destination] = (city, flight)
                        queue.append(flight.destination)

            if target not in parents:
                logger.debug(f"No route from {source} to {target}")
                return Route.empty()

            cities = [target]
            flights: List[Flight] = []
            current = target
            while parents[current] is not None:
                previous, flight = parents[current]
                flights.append(flight)
                cities.append(previous)
                current = previous

            cities.reverse()
            flights.reverse()
            metrics.routes_found = 1
            return Route.from_path(cities, flights)
