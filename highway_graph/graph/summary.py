"""Full-graph summary producer.

Turns a HighwayGraph into plain records (labels, points, rounded
lengths) that a presentation layer can print without knowing about
vertex indices or the edge arena.
"""

from __future__ import annotations

from ..domain.models import ConnectionSummary, GraphSummary, VertexSummary
from .model import HighwayGraph


def summarize_graph(graph: HighwayGraph, decimals: int = 3) -> GraphSummary:
    """Summarize every vertex and each of its adjacency entries.

    Args:
        graph: The loaded graph.
        decimals: Number of decimal places kept for edge lengths.

    Returns:
        GraphSummary listing vertices in index order and their connections
        in adjacency order.
    """
    vertices = []
    for index, vertex in enumerate(graph.vertices):
        connections = []
        for edge in graph.edges_from(index):
            destination = graph.vertices[edge.destination]
            connections.append(
                ConnectionSummary(
                    destination_label=destination.label,
                    destination_location=destination.location,
                    edge_label=edge.label,
                    shape_points=edge.shape_points,
                    length=round(edge.length, decimals),
                )
            )
        vertices.append(
            VertexSummary(
                label=vertex.label,
                location=vertex.location,
                connections=tuple(connections),
            )
        )

    return GraphSummary(
        vertex_count=graph.vertex_count,
        edge_count=graph.declared_edge_count,
        vertices=tuple(vertices),
    )
