"""
Utility functions for route searches.
"""

import gc
import logging
import os
import time
from heapq import heappop, heappush
from typing import Any, Generic, List, Optional, Tuple, TypeVar

import psutil

from ..exceptions import GraphOperationError
from ..graph import FlightGraph
from .models import Route, RouteValidationError

# Configure logging
logger = logging.getLogger(__name__)

P = TypeVar("P")  # Priority type of a search queue


def is_less(value: float, reference: float, epsilon: float) -> bool:
    """True when value is smaller than reference by more than epsilon.

    Works with an infinite reference: any finite value is less than +inf.
    """
    return value < reference - epsilon


def is_close(value: float, reference: float, epsilon: float) -> bool:
    """True when both values are equal within epsilon.

    Two infinities are never close; an unreached city is never tied.
    """
    return abs(value - reference) < epsilon


def validate_route(route: Route, graph: FlightGraph, weight_epsilon: float = 1e-9) -> None:
    """Validate that a route only uses flights of the graph and that its totals add up."""
    if route.is_empty:
        return

    for flight in route.flights:
        if flight not in graph.get_flights(flight.source):
            raise RouteValidationError(
                f"Flight {flight.flight_number} from {flight.source} to "
                f"{flight.destination} not found in graph"
            )

    total_cost = sum(flight.cost for flight in route.flights)
    total_duration = sum(flight.duration for flight in route.flights)
    if abs(total_cost - route.total_cost) > weight_epsilon:
        raise RouteValidationError(
            f"Cost mismatch: calculated {total_cost} != stored {route.total_cost}"
        )
    if abs(total_duration - route.total_duration) > weight_epsilon:
        raise RouteValidationError(
            f"Duration mismatch: calculated {total_duration} != stored {route.total_duration}"
        )
    if route.stops != max(0, route.length - 1):
        raise RouteValidationError(
            f"Stop count {route.stops} does not match {route.length} flights"
        )


class SearchQueue(Generic[P]):
    """Min-priority queue with lazy deletion.

    Entries are never updated in place; callers push a new entry whenever a
    city improves and skip stale entries when they are popped. Equal
    priorities pop in insertion order.
    """

    def __init__(self, maxsize: int):
        self._queue: List[Tuple[P, int, str, Any]] = []
        self._counter = 0  # Unique counter to break ties
        self._maxsize = maxsize

    def push(self, item: str, priority: P, payload: Any = None) -> None:
        if len(self._queue) >= self._maxsize:
            raise GraphOperationError(f"Search queue exceeded maximum size of {self._maxsize}")
        heappush(self._queue, (priority, self._counter, item, payload))
        self._counter += 1

    def pop(self) -> Tuple[P, str, Any]:
        """Remove and return (priority, item, payload) with the lowest priority."""
        priority, _, item, payload = heappop(self._queue)
        return priority, item, payload

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


class MemoryManager:
    """Memory management utilities for search algorithms."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = 0.1  # Check memory every 100ms

    def check_memory(self) -> None:
        """Sample memory usage, raising MemoryError if it exceeds the limit."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if not self.max_memory:
            return

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.time()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
