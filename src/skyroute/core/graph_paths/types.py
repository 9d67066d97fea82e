"""Type definitions for route searches."""

from enum import Enum
from typing import Callable, Dict, List, Tuple

from ..models import Flight


class Criterion(Enum):
    """Primary weight of a single-objective search; the other weight breaks ties."""

    COST = "cost"
    DURATION = "duration"

    @property
    def by_cost(self) -> bool:
        return self is Criterion.COST


class SearchType(Enum):
    """Enumeration of route search types."""

    CHEAPEST = "cheapest"  # All routes tied for lowest cost, then duration
    FASTEST = "fastest"  # All routes tied for lowest duration, then cost
    MINIMUM_STOPS = "min_stops"  # One route with fewest flights
    PARETO = "pareto"  # Every non-dominated (cost, duration) route


class Recommendation(Enum):
    """Outcome of comparing the cheapest and fastest options."""

    CHEAPEST = "cheapest"  # Cheapest route saves significant money
    FASTEST = "fastest"  # Fastest route saves significant time
    BALANCED = "balanced"  # Neither saves enough; inspect the trade-offs
    UNAVAILABLE = "unavailable"  # A cheapest or fastest route is missing


# Type alias for the candidate-predecessor map: city -> [(predecessor, flight)]
CandidateMap = Dict[str, List[Tuple[str, Flight]]]

# Type alias for Pareto queue priority functions: (cost, duration) -> priority
PriorityFunc = Callable[[float, float], float]
