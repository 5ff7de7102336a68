"""TMG Graph Repository adapter.

This adapter opens a TMG file on disk and hands the stream to the
loader, adding:
- Configuration injection (path and encoding from config)
- Caching of the built graph
- Wrapping of I/O failures into domain errors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import ConfigurationError, GraphLoadError
from ...graph.load_graph import load_graph
from ...graph.model import HighwayGraph


@dataclass
class TMGGraphRepository:
    """Graph repository that loads from a TMG file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (data dir, file name, encoding)
        path: Explicit file path, takes precedence over the configuration
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[HighwayGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph_path(self) -> Path:
        """The file this repository reads.

        Raises:
            ConfigurationError: If neither a path nor a graph file is set.
        """
        if self.path is not None:
            return Path(self.path)
        configured = self.config.graph_path
        if configured is None:
            raise ConfigurationError(
                "No graph file configured",
                setting_name="HWG_GRAPH_GRAPH_FILE",
                expected_type="path to a .tmg file",
            )
        return configured

    @property
    def source(self) -> Optional[str]:
        try:
            return str(self.graph_path)
        except ConfigurationError:
            return None

    def load(self) -> HighwayGraph:
        """Load the highway graph from its TMG file.

        Returns:
            The fully built graph.

        Raises:
            ConfigurationError: If no file is configured.
            GraphLoadError: If the file cannot be read or is malformed.
        """
        if self._graph is not None:
            return self._graph

        path = self.graph_path
        self._logger.debug("Opening graph file", extra={"path": str(path)})

        try:
            with path.open(encoding=self.config.encoding) as f:
                graph = load_graph(f, source=str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise GraphLoadError(
                f"Failed to read graph file {path}",
                file_path=str(path),
                cause=e,
            )

        self._graph = graph
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
