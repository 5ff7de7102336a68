"""Tests for the TMG graph repository adapter."""

import pytest

from highway_graph.adapters.graph import TMGGraphRepository
from highway_graph.config import GraphConfig
from highway_graph.domain.errors import ConfigurationError, GraphFormatError, GraphLoadError


class TestTMGGraphRepository:
    """Test suite for TMGGraphRepository."""

    @pytest.fixture
    def config(self, small_network_path):
        return GraphConfig(
            data_dir=small_network_path.parent, graph_file=small_network_path.name
        )

    def test_loads_configured_file(self, config):
        repo = TMGGraphRepository(config)
        graph = repo.load()
        assert graph.vertex_count == 4
        assert repo.source == str(config.graph_path)

    def test_explicit_path_wins_over_config(self, tmp_path, small_network_path):
        config = GraphConfig(data_dir=tmp_path, graph_file="missing.tmg")
        repo = TMGGraphRepository(config, path=small_network_path)
        assert repo.load().vertex_count == 4

    def test_graph_is_cached(self, config):
        repo = TMGGraphRepository(config)
        assert repo.load() is repo.load()

    def test_clear_cache_reloads(self, config):
        repo = TMGGraphRepository(config)
        first = repo.load()
        repo.clear_cache()
        second = repo.load()
        assert first is not second
        assert first == second

    def test_missing_file(self, tmp_path):
        repo = TMGGraphRepository(GraphConfig(data_dir=tmp_path, graph_file="nope.tmg"))
        with pytest.raises(GraphLoadError) as excinfo:
            repo.load()
        assert excinfo.value.file_path == str(tmp_path / "nope.tmg")
        assert isinstance(excinfo.value.cause, FileNotFoundError)

    def test_no_file_configured(self, tmp_path):
        repo = TMGGraphRepository(GraphConfig(data_dir=tmp_path, graph_file=None))
        assert repo.source is None
        with pytest.raises(ConfigurationError):
            repo.load()

    def test_malformed_file_propagates_format_error(self, tmp_path):
        path = tmp_path / "bad.tmg"
        path.write_text("TMG 1.0 simple\n1 0\nX 40.0 -75.0 extra\n", encoding="utf-8")
        repo = TMGGraphRepository(GraphConfig(data_dir=tmp_path, graph_file="bad.tmg"))
        with pytest.raises(GraphFormatError) as excinfo:
            repo.load()
        assert excinfo.value.file_path == str(path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.tmg"
        path.write_bytes(b"TMG 1.0 simple\n1 0\n\xff\xfe 40.0 -75.0\n")
        repo = TMGGraphRepository(GraphConfig(data_dir=tmp_path, graph_file="binary.tmg"))
        with pytest.raises(GraphLoadError) as excinfo:
            repo.load()
        assert isinstance(excinfo.value.cause, UnicodeDecodeError)
