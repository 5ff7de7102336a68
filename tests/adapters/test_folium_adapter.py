"""Tests for the Folium map renderer adapter."""

import pytest

from highway_graph.adapters.rendering import FoliumMapRenderer
from highway_graph.config import RenderingConfig
from highway_graph.domain.errors import RenderingError
from highway_graph.graph.load_graph import parse_graph


def test_render_writes_html(tmp_path, small_network):
    output = tmp_path / "out" / "network.html"
    result = FoliumMapRenderer(RenderingConfig()).render(small_network, output)

    assert result == output
    html = output.read_text(encoding="utf-8")
    assert "LongLabel" in html
    assert "I-88" in html


def test_render_uses_configured_colors(tmp_path, small_network):
    output = tmp_path / "network.html"
    config = RenderingConfig(edge_color="#123456", vertex_color="#abcdef")
    FoliumMapRenderer(config).render(small_network, output)

    html = output.read_text(encoding="utf-8")
    assert "#123456" in html
    assert "#abcdef" in html


def test_render_empty_graph_fails(tmp_path):
    graph = parse_graph("TMG 1.0 simple\n0 0\n")
    with pytest.raises(RenderingError) as excinfo:
        FoliumMapRenderer(RenderingConfig()).render(graph, tmp_path / "empty.html")
    assert excinfo.value.renderer_type == "folium"
