"""Rendering port - Abstraction for map generation.

This protocol defines the contract for map rendering, allowing
different implementations (Folium, Plotly, etc.) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..graph.model import HighwayGraph


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py

    Map renderers draw a whole highway graph on an interactive map.
    """

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
        """
        ...
