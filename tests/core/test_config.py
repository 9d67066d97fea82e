"""
Tests for search configuration.
"""

from dataclasses import FrozenInstanceError

import pytest

from skyroute.core.config import (
    DEFAULT_EPSILON,
    DEFAULT_LABEL_TOLERANCE,
    DEFAULT_MAX_PATHS,
    SearchConfig,
)
from skyroute.core.exceptions import ConfigurationError


def test_default_config():
    """Test configuration defaults."""
    config = SearchConfig()

    assert config.epsilon == DEFAULT_EPSILON
    assert config.label_tolerance == DEFAULT_LABEL_TOLERANCE
    assert config.max_paths == DEFAULT_MAX_PATHS
    assert config.max_memory_mb is None
    assert config.recommendation_ratio == pytest.approx(0.7)


def test_config_is_immutable():
    """Test that configuration cannot be modified in place."""
    config = SearchConfig()
    with pytest.raises(FrozenInstanceError):
        config.epsilon = 1.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"epsilon": 0}, "epsilon must be a positive finite number"),
        ({"epsilon": -1e-9}, "epsilon must be a positive finite number"),
        ({"epsilon": float("inf")}, "epsilon must be a positive finite number"),
        ({"label_tolerance": 0.0}, "label_tolerance must be a positive finite number"),
        ({"epsilon": "small"}, "epsilon must be numeric"),
        ({"max_paths": 0}, "max_paths must be positive"),
        ({"max_paths": 2.5}, "max_paths must be an integer"),
        ({"max_queue_size": 0}, "max_queue_size must be a positive integer"),
        ({"max_memory_mb": -10}, "max_memory_mb must be positive"),
        ({"recommendation_ratio": 0}, r"recommendation_ratio must be in \(0, 1\]"),
        ({"recommendation_ratio": 1.5}, r"recommendation_ratio must be in \(0, 1\]"),
    ],
)
def test_invalid_config(kwargs, message):
    """Test configuration validation."""
    with pytest.raises(ConfigurationError, match=message):
        SearchConfig(**kwargs)


def test_unlimited_paths():
    """Test that the path cap can be disabled."""
    assert SearchConfig(max_paths=None).max_paths is None


def test_with_overrides():
    """Test copying a configuration with overrides."""
    config = SearchConfig()
    updated = config.with_overrides(epsilon=1e-6, max_paths=None, max_memory_mb=512)

    assert updated.epsilon == pytest.approx(1e-6)
    assert updated.max_paths == DEFAULT_MAX_PATHS  # None values are ignored
    assert updated.max_memory_mb == 512
    assert config.epsilon == DEFAULT_EPSILON


def test_with_overrides_without_changes():
    """Test that an override without values returns the same configuration."""
    config = SearchConfig()
    assert config.with_overrides(epsilon=None) is config


def test_with_overrides_validates():
    """Test that overridden values are validated."""
    with pytest.raises(ConfigurationError):
        SearchConfig().with_overrides(max_paths=-1)
