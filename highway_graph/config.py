"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration.
Every setting can be overridden via environment variables:
- HWG_GRAPH_DATA_DIR=/path/to/graphs
- HWG_GRAPH_GRAPH_FILE=NY-region.tmg
- HWG_REPORT_LENGTH_DECIMALS=2
- HWG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with HWG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="HWG_GRAPH_")

    data_dir: Path = Field(default_factory=Path.cwd)
    graph_file: Optional[str] = None
    encoding: str = "utf-8"

    @property
    def graph_path(self) -> Optional[Path]:
        """Full path to the graph file, if one is configured."""
        if not self.graph_file:
            return None
        return self.data_dir / self.graph_file


class ReportConfig(BaseSettings):
    """Text report configuration.

    Environment variables prefixed with HWG_REPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="HWG_REPORT_")

    length_decimals: int = Field(default=3, ge=0)


class RenderingConfig(BaseSettings):
    """Map rendering configuration.

    Environment variables prefixed with HWG_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="HWG_MAP_")

    zoom_start: int = 7
    vertex_color: str = "blue"
    edge_color: str = "red"
    edge_weight: int = 3


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with HWG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="HWG_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations are accessed via attributes:

        config = get_config()
        print(config.graph.graph_path)
        print(config.report.length_decimals)

    Environment variables prefixed with HWG_.
    """

    model_config = SettingsConfigDict(env_prefix="HWG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
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
