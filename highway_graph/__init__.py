"""Top-level package for the highway graph project.

This package reads highway networks stored in the TMG text format into
an in-memory undirected graph annotated with great-circle edge lengths,
and answers simple structural and geometric queries over it.
"""

from .domain.models import Edge, GeoPoint, Vertex
from .graph import HighwayGraph, load_graph, parse_graph

__all__ = ["GeoPoint", "Vertex", "Edge", "HighwayGraph", "load_graph", "parse_graph"]
