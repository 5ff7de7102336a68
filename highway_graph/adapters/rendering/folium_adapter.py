"""Folium map renderer adapter.

Draws a whole highway graph on an interactive Folium map:
- one marker per vertex
- one polyline per undirected edge, following its shape points
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...graph.model import HighwayGraph
from ...graph.queries import undirected_edges


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort using Folium for
    generating interactive HTML maps.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        graph: HighwayGraph,
        output_path: Path,
    ) -> Path:
        """Render the graph on a map and save to file.

        Args:
            graph: The graph to draw.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If rendering fails.
        """
        if not graph.vertices:
            raise RenderingError(
                "Cannot render a graph without vertices",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering graph map",
            extra={
                "vertices": graph.vertex_count,
                "output_path": str(output_path),
            },
        )

        try:
            import folium

            lats = [v.location.latitude for v in graph.vertices]
            lons = [v.location.longitude for v in graph.vertices]
            center = [sum(lats) / len(lats), sum(lons) / len(lons)]

            m = folium.Map(
                location=center,
                zoom_start=self.config.zoom_start,
                control_scale=True,
            )

            for edge in undirected_edges(graph):
                start = graph.vertices[edge.source].location
                end = graph.vertices[edge.destination].location
                coords = [[start.latitude, start.longitude]]
                coords.extend([p.latitude, p.longitude] for p in edge.shape_points)
                coords.append([end.latitude, end.longitude])
                folium.PolyLine(
                    coords,
                    weight=self.config.edge_weight,
                    color=self.config.edge_color,
                    opacity=0.8,
                    tooltip=f"{edge.label} ({edge.length:.3f} mi)",
                ).add_to(m)

            for vertex in graph.vertices:
                folium.CircleMarker(
                    location=[vertex.location.latitude, vertex.location.longitude],
                    radius=4,
                    color=self.config.vertex_color,
                    fill=True,
                    popup=f"{vertex.label} {vertex.location}",
                    tooltip=vertex.label,
                ).add_to(m)

            if len(graph.vertices) >= 2:
                m.fit_bounds([[min(lats), min(lons)], [max(lats), max(lons)]])

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )

            return output_path

        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
