"""Highway graph service - Main orchestrator.

Loads the graph through a repository, runs every query over it and
optionally renders it on a map.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import AppConfig, get_config
from ..domain.errors import EmptyGraphError, RenderingError
from ..domain.models import EdgeExtremes, GraphAnalysis, VertexExtremes
from ..graph.model import HighwayGraph
from ..graph.queries import check_edge_count, find_edge_extremes, find_vertex_extremes
from ..graph.summary import summarize_graph
from ..ports.graph import GraphRepositoryPort
from ..ports.rendering import MapRendererPort


@dataclass
class HighwayGraphService:
    """Main service for analysing a highway graph.

    Attributes:
        graph_repository: Loads the highway graph
        map_renderer: Optional map rendering
        length_decimals: Rounding of edge lengths in the summary
    """

    graph_repository: GraphRepositoryPort
    map_renderer: Optional[MapRendererPort] = None
    length_decimals: int = 3

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def create_default(
        cls, path: Optional[Path] = None, config: Optional[AppConfig] = None
    ) -> HighwayGraphService:
        """Create a service wired with the TMG repository and Folium renderer.

        Args:
            path: Graph file to read; defaults to the configured file.
            config: Optional configuration override.
        """
        from ..adapters.graph import TMGGraphRepository
        from ..adapters.rendering import FoliumMapRenderer

        config = config or get_config()
        return cls(
            graph_repository=TMGGraphRepository(config.graph, path=path),
            map_renderer=FoliumMapRenderer(config.rendering),
            length_decimals=config.report.length_decimals,
        )

    def load(self) -> HighwayGraph:
        """Load the graph.

        Raises:
            GraphLoadError: If the graph cannot be built.
        """
        return self.graph_repository.load()

    def analyze(self) -> GraphAnalysis:
        """Load the graph and run every query over it.

        Extremum queries on an empty graph are reported as None instead
        of failing the whole analysis.

        Returns:
            GraphAnalysis with the summary and all query results.

        Raises:
            GraphLoadError: If the graph cannot be built.
        """
        graph = self.load()

        self._logger.info(
            "Analysing graph",
            extra={"source": self.graph_repository.source},
        )

        vertex_extremes: Optional[VertexExtremes] = None
        try:
            vertex_extremes = find_vertex_extremes(graph)
        except EmptyGraphError as e:
            self._logger.warning("Skipping vertex extremes", extra={"error": str(e)})

        edge_extremes: Optional[EdgeExtremes] = None
        try:
            edge_extremes = find_edge_extremes(graph)
        except EmptyGraphError as e:
            self._logger.warning("Skipping edge extremes", extra={"error": str(e)})

        return GraphAnalysis(
            summary=summarize_graph(graph, self.length_decimals),
            vertex_extremes=vertex_extremes,
            edge_extremes=edge_extremes,
            edge_count=check_edge_count(graph),
        )

    def render_map(self, output_path: Path) -> Path:
        """Render the loaded graph to an HTML map.

        Raises:
            RenderingError: If no renderer is configured or rendering fails.
        """
        if self.map_renderer is None:
            raise RenderingError(
                "No map renderer configured",
                output_path=str(output_path),
            )
        return self.map_renderer.render(self.load(), output_path)
