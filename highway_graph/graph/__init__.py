"""Graph-related code for the highway network.

This subpackage builds the in-memory graph from TMG text, holds the
graph model itself and runs the read-only queries over it.
"""

from .load_graph import GraphBuilder, load_graph, parse_graph, read_records
from .model import HighwayGraph
from .queries import (
    check_edge_count,
    find_edge_extremes,
    find_vertex_extremes,
    undirected_edges,
)
from .summary import summarize_graph

__all__ = [
    "HighwayGraph",
    "GraphBuilder",
    "load_graph",
    "parse_graph",
    "read_records",
    "find_vertex_extremes",
    "find_edge_extremes",
    "check_edge_count",
    "undirected_edges",
    "summarize_graph",
]
