"""
Multi-objective labeling search for Pareto-optimal routes.

Every city keeps a frontier of labels, i.e. (cost, duration) pairs reachable
from the source of which none dominates another. Labels are propagated through
a priority queue; a new label is dropped when an existing label at its city
dominates it, and evicts the labels it dominates itself. Once the queue drains,
every frontier is complete, and each label at the target is walked back to the
source to produce one route.

The queue priority only steers the order of exploration. Correctness comes from
relaxing every popped label that is still on its frontier, so any monotonic
priority gives the same result.

Frontiers are plain lists scanned linearly, which suits networks of tens to
hundreds of cities.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Set

from ...config import SearchConfig
from ...graph import FlightGraph
from ..base import RouteFinder
from ..models import Label, Route
from ..types import PriorityFunc
from ..utils import is_close

logger = logging.getLogger(__name__)


def sum_priority(cost: float, duration: float) -> float:
    """Default queue priority: cost + duration."""
    return cost + duration


class ParetoFrontierFinder(RouteFinder):
    """Search for every non-dominated (cost, duration) route."""

    operation = "pareto"

    def __init__(
        self,
        graph: FlightGraph,
        config: Optional[SearchConfig] = None,
        priority_func: PriorityFunc = sum_priority,
    ):
        super().__init__(graph, config)
        self.priority_func = priority_func

    def find_routes(self, source: str, target: str, **kwargs) -> List[Route]:
        """
        Find every Pareto-optimal route from source to target.

        Returns:
            Routes sorted by (total_cost, total_duration), or [] if unreachable
        """
        with self._search_context(source, target) as metrics:
            labels = self._build_frontiers(source, metrics)

            routes = []
            for label in labels.get(target, ()):
                route = self._reconstruct(label, target, labels)
                if route is not None:
                    routes.append(route)

            routes.sort(key=lambda r: (r.total_cost, r.total_duration))
            if self.config.max_paths is not None and len(routes) > self.config.max_paths:
                logger.warning(
                    f"Pareto routes to {target} truncated to {self.config.max_paths}"
                )
                routes = routes[: self.config.max_paths]

            metrics.routes_found = len(routes)
            return routes

    def _build_frontiers(self, source: str, metrics) -> Dict[str, List[Label]]:
        """Run the labeling search and return the final frontier of every city."""
        tolerance = self.config.label_tolerance
        labels: Dict[str, List[Label]] = defaultdict(list)
        labels[source].append(Label(0.0, 0.0))

        queue = self._new_queue()
        queue.push(source, self.priority_func(0.0, 0.0), (0.0, 0.0))

        while not queue.empty():
            self.memory_manager.check_memory()
            _, city, (cost, duration) = queue.pop()

            # Only labels still on the frontier are expanded
            current = [
                label
                for label in labels[city]
                if is_close(label.cost, cost, tolerance)
                and is_close(label.duration, duration, tolerance)
            ]
            if not current:
                continue

            metrics.nodes_explored += 1
            flights = self.graph.get_flights(city)

            for label in current:
                for flight in flights:
                    new_label = Label(
                        label.cost + flight.cost,
                        label.duration + flight.duration,
                        city,
                        flight,
                    )
                    frontier = labels[flight.destination]

                    if any(existing.dominates(new_label) for existing in frontier):
                        continue

                    frontier[:] = [
                        existing for existing in frontier if not new_label.dominates(existing)
                    ]

                    if any(existing.same_point(new_label) for existing in frontier):
                        continue

                    logger.debug(
                        f"  {flight.flight_number}: new label at {flight.destination} "
                        f"({new_label.cost}, {new_label.duration})"
                    )
                    frontier.append(new_label)
                    queue.push(
                        flight.destination,
                        self.priority_func(new_label.cost, new_label.duration),
                        (new_label.cost, new_label.duration),
                    )

        return labels

    def _reconstruct(
        self, label: Label, target: str, labels: Dict[str, List[Label]]
    ) -> Optional[Route]:
        """Walk a target label back to the source; None if its chain is broken."""
        tolerance = self.config.label_tolerance
        cities = [target]
        flights = []
        visited: Set[int] = {id(label)}
        current = label

        while current.parent_city is not None:
            flight = current.parent_flight
            parent_city = current.parent_city
            expected_cost = current.cost - flight.cost
            expected_duration = current.duration - flight.duration

            parent = next(
                (
                    candidate
                    for candidate in labels.get(parent_city, ())
                    if is_close(candidate.cost, expected_cost, tolerance)
                    and is_close(candidate.duration, expected_duration, tolerance)
                ),
                None,
            )
            if parent is None or id(parent) in visited:
                logger.debug(
                    f"Dropping label ({label.cost}, {label.duration}) at {target}: "
                    f"no consistent predecessor at {parent_city}"
                )
                return None

            visited.add(id(parent))
            flights.append(flight)
            cities.append(parent_city)
            current = parent

        cities.reverse()
        flights.reverse()
        return Route.from_path(cities, flights)
