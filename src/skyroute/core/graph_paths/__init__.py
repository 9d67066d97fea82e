"""Route search functionality."""

from typing import List, Optional

from ..config import SearchConfig
from ..graph import FlightGraph
from .algorithms.hop_count import MinimumStopsFinder
from .algorithms.multi_path import MultiPathFinder
from .algorithms.pareto import ParetoFrontierFinder
from .base import RouteFinder
from .models import Label, PerformanceMetrics, Route, RouteComparison, RouteValidationError
from .reconstruction import PathReconstructor
from .types import CandidateMap, Criterion, PriorityFunc, Recommendation, SearchType
from .utils import validate_route

__all__ = [
    "CandidateMap",
    "Criterion",
    "Label",
    "PathReconstructor",
    "PerformanceMetrics",
    "PriorityFunc",
    "Recommendation",
    "Route",
    "RouteComparison",
    "RouteFinder",
    "RouteFinding",
    "RouteValidationError",
    "SearchType",
    "validate_route",
]


def normalize_code(code: str) -> str:
    """City codes are matched case-insensitively."""
    return code.strip().upper()


class RouteFinding:
    """Static interface for route search operations."""

    @staticmethod
    def cheapest_routes(
        graph: FlightGraph, source: str, target: str, config: Optional[SearchConfig] = None
    ) -> List[Route]:
        """Find every route tied for lowest cost (then lowest duration)."""
        finder = MultiPathFinder(graph, config)
        return finder.find_routes(
            normalize_code(source), normalize_code(target), criterion=Criterion.COST
        )

    @staticmethod
    def fastest_routes(
        graph: FlightGraph, source: str, target: str, config: Optional[SearchConfig] = None
    ) -> List[Route]:
        """Find every route tied for lowest duration (then lowest cost)."""
        finder = MultiPathFinder(graph, config)
        return finder.find_routes(
            normalize_code(source), normalize_code(target), criterion=Criterion.DURATION
        )

    @staticmethod
    def minimum_stops_route(
        graph: FlightGraph, source: str, target: str, config: Optional[SearchConfig] = None
    ) -> Route:
        """Find one route with the fewest flights; the empty route if unreachable."""
        finder = MinimumStopsFinder(graph, config)
        return finder.find_route(normalize_code(source), normalize_code(target))

    @staticmethod
    def pareto_optimal_routes(
        graph: FlightGraph, source: str, target: str, config: Optional[SearchConfig] = None
    ) -> List[Route]:
        """Find every non-dominated route, sorted by cost then duration."""
        finder = ParetoFrontierFinder(graph, config)
        return finder.find_routes(normalize_code(source), normalize_code(target))

    @classmethod
    def find_routes(
        cls,
        graph: FlightGraph,
        source: str,
        target: str,
        search_type: SearchType = SearchType.CHEAPEST,
        config: Optional[SearchConfig] = None,
    ) -> List[Route]:
        """Generic search interface; always returns a list of routes."""
        if search_type == SearchType.CHEAPEST:
            return cls.cheapest_routes(graph, source, target, config)
        if search_type == SearchType.FASTEST:
            return cls.fastest_routes(graph, source, target, config)
        if search_type == SearchType.MINIMUM_STOPS:
            route = cls.minimum_stops_route(graph, source, target, config)
            return [] if route.is_empty else [route]
        if search_type == SearchType.PARETO:
            return cls.pareto_optimal_routes(graph, source, target, config)
        raise ValueError(f"Unsupported search type: {search_type}")

    @classmethod
    def compare_routes(
        cls,
        graph: FlightGraph,
        source: str,
        target: str,
        config: Optional[SearchConfig] = None,
    ) -> RouteComparison:
        """Run the cheapest, fastest and minimum-stops searches and recommend one."""
        config = config or SearchConfig()
        cheapest = cls.cheapest_routes(graph, source, target, config)
        fastest = cls.fastest_routes(graph, source, target, config)
        minimum_stops = cls.minimum_stops_route(graph, source, target, config)
        return RouteComparison(
            cheapest=cheapest,
            fastest=fastest,
            minimum_stops=minimum_stops,
            recommendation=recommend(cheapest, fastest, config.recommendation_ratio),
        )


def recommend(cheapest: List[Route], fastest: List[Route], ratio: float) -> Recommendation:
    """
    Pick between the cheapest and fastest options.

    The cheapest option is recommended when it costs less than ``ratio`` times the
    fastest option's cost; otherwise the fastest is recommended when it takes less
    than ``ratio`` times the cheapest option's duration.
    """
    if not cheapest or not fastest:
        return Recommendation.UNAVAILABLE

    cheapest_route = cheapest[0]
    fastest_route = fastest[0]
    if cheapest_route.total_cost < fastest_route.total_cost * ratio:
        return Recommendation.CHEAPEST
    if fastest_route.total_duration < cheapest_route.total_duration * ratio:
        return Recommendation.FASTEST
    return Recommendation.BALANCED
