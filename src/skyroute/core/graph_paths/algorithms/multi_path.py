"""
Single-objective search returning every tied-optimal route.

This is Dijkstra's algorithm over a lexicographic (primary, secondary) distance,
where the primary weight is cost or duration and the other weight breaks ties.
Instead of one predecessor per city it keeps every (predecessor, flight) pair
that reaches the city at the best distance, so the reconstruction step can
enumerate all routes tied on both weights.
"""

import logging
from collections import defaultdict
from typing import Dict, List

from ..base import RouteFinder
from ..models import Route
from ..reconstruction import PathReconstructor
from ..types import CandidateMap, Criterion
from ..utils import is_close, is_less

logger = logging.getLogger(__name__)

INF = float("inf")


class MultiPathFinder(RouteFinder):
    """Cheapest / fastest route search keeping every tied optimum."""

    operation = "multi_path"

    def find_routes(
        self, source: str, target: str, criterion: Criterion = Criterion.COST, **kwargs
    ) -> List[Route]:
        """
        Find every route tied for the best (primary, secondary) distance.

        Args:
            source: Departure city code
            target: Arrival city code
            criterion: Primary weight; the other weight breaks ties

        Returns:
            All optimal routes in reconstruction order, or [] if target is unreachable
        """
        eps = self.config.epsilon
        by_cost = criterion.by_cost

        with self._search_context(source, target) as metrics:
            primary, secondary = self._initial_distances(source, target)
            candidates: CandidateMap = defaultdict(list)

            queue = self._new_queue()
            queue.push(source, (0.0, 0.0))

            while not queue.empty():
                self.memory_manager.check_memory()

                (popped_primary, popped_secondary), city, _ = queue.pop()

                # Skip entries superseded by a later improvement
                if is_less(primary[city], popped_primary, eps):
                    continue
                if is_close(popped_primary, primary[city], eps) and is_less(
                    secondary[city], popped_secondary, eps
                ):
                    continue

                metrics.nodes_explored += 1
                logger.debug(
                    f"Visiting {city} at ({primary[city]}, {secondary[city]}) by {criterion.value}"
                )

                for flight in self.graph.get_flights(city):
                    neighbor = flight.destination
                    new_primary = primary[city] + flight.weight(by_cost)
                    new_secondary = secondary[city] + flight.weight(not by_cost)

                    if is_less(new_primary, primary[neighbor], eps) or (
                        is_close(new_primary, primary[neighbor], eps)
                        and is_less(new_secondary, secondary[neighbor], eps)
                    ):
                        logger.debug(
                            f"  {flight.flight_number}: improved {neighbor} to "
                            f"({new_primary}, {new_secondary})"
                        )
                        primary[neighbor] = new_primary
                        secondary[neighbor] = new_secondary
                        candidates[neighbor] = [(city, flight)]
                        queue.push(neighbor, (new_primary, new_secondary))
                    elif is_close(new_primary, primary[neighbor], eps) and is_close(
                        new_secondary, secondary[neighbor], eps
                    ):
                        logger.debug(f"  {flight.flight_number}: tied route into {neighbor}")
                        candidates[neighbor].append((city, flight))

            if primary[target] == INF:
                logger.debug(f"No route from {source} to {target}")
                return []

            reconstructor = PathReconstructor(source, candidates, self.config.max_paths)
            routes = reconstructor.reconstruct(target)
            metrics.routes_found = len(routes)
            return routes

    def _initial_distances(self, source: str, target: str):
        """Best-distance maps at +inf for every city mentioned by a flight, source at zero."""
        primary: Dict[str, float] = {}
        secondary: Dict[str, float] = {}
        for origin in self.graph.get_origins():
            primary[origin] = INF
            secondary[origin] = INF
            for flight in self.graph.get_flights(origin):
                primary.setdefault(flight.destination, INF)
                secondary.setdefault(flight.destination, INF)

        primary.setdefault(target, INF)
        secondary.setdefault(target, INF)
        primary[source] = 0.0
        secondary[source] = 0.0
        return primary, secondary
