"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- SHORTPATH_GRAPH_NORMALIZE_CASE=false
- SHORTPATH_GRAPH_EARLY_EXIT=false
- SHORTPATH_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph store and engine configuration.

    Environment variables prefixed with SHORTPATH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_GRAPH_")

    normalize_case: bool = True
    # Stop as soon as the destination is finalized (needs non-negative weights)
    early_exit: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SHORTPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.normalize_case)

    Environment variables prefixed with SHORTPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
