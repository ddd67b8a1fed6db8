"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PQ_GRAPH_DATA_DIR=/path/to/data
- PQ_OUTPUT_SEPARATOR=" => "
- PQ_OUTPUT_PROMPTS=false
- PQ_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with PQ_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PQ_GRAPH_")

    data_dir: Path = Field(default_factory=lambda: Path.cwd() / "data")
    vertices_file: str = "vertices.csv"
    edges_file: str = "edges.csv"

    @property
    def vertices_path(self) -> Path:
        """Full path to vertices CSV file."""
        return self.data_dir / self.vertices_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class OutputConfig(BaseSettings):
    """Console input/output configuration.

    Environment variables prefixed with PQ_OUTPUT_.
    """

    model_config = SettingsConfigDict(env_prefix="PQ_OUTPUT_")

    separator: str = " -> "
    no_path_message: str = "No path from {source} to {target}"
    prompts: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PQ_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PQ_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.output.separator)
        print(config.graph.edges_path)

    Environment variables prefixed with PQ_.
    """

    model_config = SettingsConfigDict(env_prefix="PQ_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
