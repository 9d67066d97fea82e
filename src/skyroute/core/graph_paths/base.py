import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from time import time
from typing import Generator, List, Optional

from skyroute.core.config import SearchConfig
from skyroute.core.graph import FlightGraph
from skyroute.core.graph_paths.models import PerformanceMetrics, Route
from skyroute.core.graph_paths.utils import MemoryManager, SearchQueue

logger = logging.getLogger(__name__)


class RouteFinder(ABC):
    """Abstract base class for route search algorithms.

    A finder holds a read-only reference to the graph and its configuration.
    All per-query state (distances, labels, queues) lives inside a single
    find_routes call, so one finder can serve any number of queries.
    """

    operation = "search"

    def __init__(self, graph: FlightGraph, config: Optional[SearchConfig] = None):
        """Initialize finder with graph and configuration."""
        self.graph = graph
        self.config = config or SearchConfig()
        self.memory_manager = MemoryManager(self.config.max_memory_mb)

    @abstractmethod
    def find_routes(self, source: str, target: str, **kwargs) -> List[Route]:
        """Find routes from source to target; an empty list when unreachable."""
        pass

    def find_route(self, source: str, target: str, **kwargs) -> Route:
        """Find a single route.

        Default implementation returns the first route of find_routes, or the
        empty route when there is none.
        """
        routes = self.find_routes(source, target, **kwargs)
        return routes[0] if routes else Route.empty()

    def _new_queue(self) -> SearchQueue:
        return SearchQueue(maxsize=self.config.max_queue_size)

    @contextmanager
    def _search_context(
        self, source: str, target: str
    ) -> Generator[PerformanceMetrics, None, None]:
        """Track memory and timing of one search, logging the metrics at the end."""
        metrics = PerformanceMetrics(operation=self.operation, start_time=time())
        self.memory_manager.reset_peak_memory()
        try:
            yield metrics
        finally:
            metrics.end_time = time()
            metrics.max_memory_used = int(self.memory_manager.peak_memory_mb * 1024 * 1024)
            logger.debug(f"{self.operation} {source} -> {target}: {metrics.to_dict()}")
