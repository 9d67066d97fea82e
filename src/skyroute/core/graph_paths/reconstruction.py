"""
Enumeration of every route encoded in a candidate-predecessor map.

The single-objective search records, for every city, all (predecessor, flight)
pairs that reach it at the best distance. Walking that map backwards from the
target and branching on every candidate yields every tied-optimal route.

The walk uses an explicit stack of candidate iterators over one shared path
buffer: each step pushes a (city, flight) pair and each backtrack pops it, so
long tie chains neither grow the interpreter stack nor copy partial routes.
The number of routes can grow exponentially with the number of tied parallel
flights; ``max_paths`` bounds the enumeration.
"""

import logging
from typing import Iterator, List, Optional, Set, Tuple

from ..models import Flight
from .models import Route
from .types import CandidateMap

logger = logging.getLogger(__name__)


class PathReconstructor:
    """Rebuild all routes from source to a target through a candidate map."""

    def __init__(self, source: str, candidates: CandidateMap, max_paths: Optional[int] = None):
        """
        Args:
            source: City where every route starts
            candidates: city -> list of (predecessor, flight) achieving its best distance
            max_paths: Stop after this many routes (None = enumerate all)
        """
        if max_paths is not None and max_paths <= 0:
            raise ValueError("max_paths must be positive")
        self.source = source
        self.candidates = candidates
        self.max_paths = max_paths

    def reconstruct(self, target: str) -> List[Route]:
        """Enumerate every route from the source to target, in depth-first order."""
        if target == self.source:
            return [Route.from_path([self.source], [])]

        routes: List[Route] = []
        # Path buffers hold the route backwards: cities[0] is the target.
        cities: List[str] = [target]
        flights: List[Flight] = []
        on_path: Set[str] = {target}
        stack: List[Iterator[Tuple[str, Flight]]] = [self._candidates_of(target)]

        while stack:
            step = next(stack[-1], None)
            if step is None:
                stack.pop()
                if stack:
                    on_path.discard(cities.pop())
                    flights.pop()
                continue

            parent, flight = step
            # Zero-weight cycles can make the candidate map cyclic
            if parent in on_path:
                continue

            cities.append(parent)
            flights.append(flight)

            if parent == self.source:
                routes.append(Route.from_path(cities[::-1], flights[::-1]))
                cities.pop()
                flights.pop()
                if self.max_paths is not None and len(routes) >= self.max_paths:
                    logger.warning(
                        f"Route enumeration to {target} stopped at {self.max_paths} routes"
                    )
                    break
                continue

            on_path.add(parent)
            stack.append(self._candidates_of(parent))

        return routes

    def _candidates_of(self, city: str) -> Iterator[Tuple[str, Flight]]:
        # A city without candidates ends its branch without producing a route
        return iter(self.candidates.get(city, ()))
