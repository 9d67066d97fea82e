"""
Search configuration.

All tolerances and resource limits used by the searches live in a single
immutable SearchConfig that is passed explicitly to every finder. Changing the
tolerances changes which routes are judged "tied", so they are never read from
module globals inside the algorithms.

Example:
    >>> config = SearchConfig(epsilon=1e-6, max_paths=50)
    >>> RouteFinding.cheapest_routes(graph, "KHI", "LHR", config=config)
"""

import math
from dataclasses import dataclass, replace
from typing import Optional

from .exceptions import ConfigurationError

# Defaults
DEFAULT_EPSILON = 1e-9  # Tie tolerance for single-objective searches
DEFAULT_LABEL_TOLERANCE = 1e-3  # Label matching tolerance for the labeling search
DEFAULT_MAX_PATHS = 10000  # Cap on enumerated routes per query
DEFAULT_MAX_QUEUE_SIZE = 100000  # Maximum size for search queues
DEFAULT_RECOMMENDATION_RATIO = 0.7


@dataclass(frozen=True)
class SearchConfig:
    """
    Tolerances and resource limits for route searches.

    Attributes:
        epsilon: Absolute tolerance under which two distances are equal in the
            cheapest/fastest searches
        label_tolerance: Absolute tolerance used by the Pareto search to match a
            queue entry or a predecessor against stored labels
        max_paths: Maximum number of routes enumerated per query (None = no cap)
        max_queue_size: Maximum number of pending search queue entries
        max_memory_mb: Optional limit on memory growth during a search
        recommendation_ratio: Savings ratio used when comparing cheapest and
            fastest options
    """

    epsilon: float = DEFAULT_EPSILON
    label_tolerance: float = DEFAULT_LABEL_TOLERANCE
    max_paths: Optional[int] = DEFAULT_MAX_PATHS
    max_queue_size: int = DEFAULT_MAX_QUEUE_SIZE
    max_memory_mb: Optional[float] = None
    recommendation_ratio: float = DEFAULT_RECOMMENDATION_RATIO

    def __post_init__(self):
        """Validate configuration values."""
        for name in ("epsilon", "label_tolerance"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be numeric")
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive finite number")

        if self.max_paths is not None:
            if not isinstance(self.max_paths, int) or isinstance(self.max_paths, bool):
                raise ConfigurationError("max_paths must be an integer")
            if self.max_paths <= 0:
                raise ConfigurationError("max_paths must be positive")

        if not isinstance(self.max_queue_size, int) or self.max_queue_size <= 0:
            raise ConfigurationError("max_queue_size must be a positive integer")

        if self.max_memory_mb is not None and self.max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")

        if not 0 < self.recommendation_ratio <= 1:
            raise ConfigurationError("recommendation_ratio must be in (0, 1]")

    def with_overrides(self, **overrides) -> "SearchConfig":
        """Return a copy with the given fields replaced, ignoring None values."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)
