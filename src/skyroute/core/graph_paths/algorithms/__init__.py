"""Route search algorithm implementations."""

from .hop_count import MinimumStopsFinder
from .multi_path import MultiPathFinder
from .pareto import ParetoFrontierFinder, sum_priority

__all__ = [
    "MinimumStopsFinder",
    "MultiPathFinder",
    "ParetoFrontierFinder",
    "sum_priority",
]
