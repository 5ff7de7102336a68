from pathlib import Path

import pytest

from highway_graph.config import reset_config
from highway_graph.graph.load_graph import parse_graph

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def small_network_path():
    return DATA_DIR / "small-network.tmg"


@pytest.fixture
def small_network_text(small_network_path):
    return small_network_path.read_text(encoding="utf-8")


@pytest.fixture
def small_network(small_network_text):
    return parse_graph(small_network_text, source="small-network.tmg")


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()
