from pathlib import Path

import pytest

from highway_graph.cli import main
from highway_graph.config import get_config
from highway_graph.domain.errors import RenderingError
from highway_graph.graph.load_graph import parse_graph
from highway_graph.services import HighwayGraphService


class InMemoryRepository:
    def __init__(self, text):
        self.text = text
        self.loads = 0

    @property
    def source(self):
        return "memory"

    def load(self):
        self.loads += 1
        return parse_graph(self.text, source=self.source)


def test_analyze_small_network(small_network_text):
    service = HighwayGraphService(InMemoryRepository(small_network_text))
    analysis = service.analyze()

    assert analysis.summary.vertex_count == 4
    assert analysis.vertex_extremes.northernmost.label == "C"
    assert analysis.edge_extremes.longest.label == "I-88"
    assert analysis.edge_count.is_consistent


def test_analyze_graph_without_edges():
    service = HighwayGraphService(InMemoryRepository("TMG 1.0 simple\n1 0\nX 40.0 -75.0\n"))
    analysis = service.analyze()

    assert analysis.vertex_extremes.northernmost.label == "X"
    assert analysis.edge_extremes is None
    assert analysis.edge_count.is_consistent


def test_analyze_empty_graph():
    service = HighwayGraphService(InMemoryRepository("TMG 1.0 simple\n0 0\n"))
    analysis = service.analyze()

    assert analysis.vertex_extremes is None
    assert analysis.edge_extremes is None


def test_render_map_without_renderer(tmp_path, small_network_text):
    service = HighwayGraphService(InMemoryRepository(small_network_text))
    with pytest.raises(RenderingError):
        service.render_map(tmp_path / "map.html")


def test_create_default_uses_config(monkeypatch, small_network_path):
    monkeypatch.setenv("HWG_REPORT_LENGTH_DECIMALS", "1")
    service = HighwayGraphService.create_default(path=small_network_path)

    assert service.length_decimals == 1
    assert service.graph_repository.source == str(small_network_path)


class TestCli:
    def test_prints_summary_and_diagnostics(self, capsys, small_network_path):
        assert main([str(small_network_path)]) == 0
        out = capsys.readouterr().out

        assert out.startswith("|V|=4, |E|=4\n")
        assert "Northernmost Vertex: C (43.0,-72.5)" in out
        assert "Longest Edge: I-88 with length" in out
        assert "Count: 4\nEdge Count: 4\n" in out

    def test_missing_argument_exits_with_usage(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code != 0
        assert "usage" in capsys.readouterr().err

    def test_extra_argument_exits_with_usage(self, capsys, small_network_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(small_network_path), "extra.tmg"])
        assert excinfo.value.code != 0

    def test_missing_file_reports_error(self, capsys, tmp_path):
        assert main([str(tmp_path / "nope.tmg")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_malformed_file_reports_error(self, capsys, tmp_path):
        path = tmp_path / "bad.tmg"
        path.write_text("TMG 1.0 simple\n2 1\nX 40.0 -75.0\nY 41.0 -74.0\n0 7 I-80\n")
        assert main([str(path)]) == 1
        assert "vertex 7" in capsys.readouterr().err

    def test_writes_map(self, capsys, tmp_path, small_network_path):
        out_file = tmp_path / "maps" / "network.html"
        assert main([str(small_network_path), "--map", str(out_file)]) == 0
        assert out_file.exists()
        assert f"Map written to {out_file}" in capsys.readouterr().out

    def test_unknown_log_level_reports_error(self, capsys, monkeypatch, small_network_path):
        monkeypatch.setenv("HWG_LOG_LEVEL", "FOO")
        assert main([str(small_network_path)]) == 1
        assert "Unknown log level 'FOO'" in capsys.readouterr().err

    def test_invalid_setting_reports_error(self, capsys, monkeypatch, small_network_path):
        monkeypatch.setenv("HWG_REPORT_LENGTH_DECIMALS", "-1")
        assert main([str(small_network_path)]) == 1
        assert "Error: Invalid configuration" in capsys.readouterr().err


def test_config_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("HWG_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HWG_GRAPH_GRAPH_FILE", "region.tmg")
    monkeypatch.setenv("HWG_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.graph.graph_path == Path(tmp_path) / "region.tmg"
    assert config.observability.level == "DEBUG"
    assert config.report.length_decimals == 3
