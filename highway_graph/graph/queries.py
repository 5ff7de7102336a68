"""Read-only queries over a loaded highway graph.

Every query is a single forward scan. Ties always keep the first
candidate met in scan order: a champion is only replaced by a strictly
better value.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional, Tuple, TypeVar

from ..domain.errors import EmptyGraphError
from ..domain.models import Edge, EdgeCountCheck, EdgeExtremes, Vertex, VertexExtremes
from .model import HighwayGraph

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _scan_extreme(
    items: Iterator[T],
    key: Callable[[T], float],
    better: Callable[[float, float], bool],
    query: str,
) -> T:
    champion: Optional[T] = None
    champion_key = 0.0
    for item in items:
        value = key(item)
        if champion is None or better(value, champion_key):
            champion, champion_key = item, value
    if champion is None:
        raise EmptyGraphError(f"{query}: graph has nothing to scan", query=query)
    return champion


def _greater(a: float, b: float) -> bool:
    return a > b


def _less(a: float, b: float) -> bool:
    return a < b


def _vertex_extreme(
    graph: HighwayGraph,
    key: Callable[[Vertex], float],
    better: Callable[[float, float], bool],
    query: str,
) -> Vertex:
    return _scan_extreme(iter(graph.vertices), key, better, query)


def northernmost(graph: HighwayGraph) -> Vertex:
    return _vertex_extreme(graph, lambda v: v.location.latitude, _greater, "northernmost")


def southernmost(graph: HighwayGraph) -> Vertex:
    return _vertex_extreme(graph, lambda v: v.location.latitude, _less, "southernmost")


def easternmost(graph: HighwayGraph) -> Vertex:
    """Vertex with the smallest longitude."""
    return _vertex_extreme(graph, lambda v: v.location.longitude, _less, "easternmost")


def westernmost(graph: HighwayGraph) -> Vertex:
    """Vertex with the largest longitude."""
    return _vertex_extreme(graph, lambda v: v.location.longitude, _greater, "westernmost")


def longest_label(graph: HighwayGraph) -> Vertex:
    return _vertex_extreme(graph, lambda v: len(v.label), _greater, "longest_label")


def shortest_label(graph: HighwayGraph) -> Vertex:
    return _vertex_extreme(graph, lambda v: len(v.label), _less, "shortest_label")


def find_vertex_extremes(graph: HighwayGraph) -> VertexExtremes:
    """Compute all extremal vertices of a graph.

    Raises:
        EmptyGraphError: If the graph has no vertices.
    """
    if not graph.vertices:
        raise EmptyGraphError("graph has no vertices", query="vertex_extremes")

    return VertexExtremes(
        northernmost=northernmost(graph),
        southernmost=southernmost(graph),
        easternmost=easternmost(graph),
        westernmost=westernmost(graph),
        longest_label=longest_label(graph),
        shortest_label=shortest_label(graph),
    )


def undirected_edges(graph: HighwayGraph) -> Iterator[Edge]:
    """Yield each undirected edge once.

    Vertices are scanned by index and only the record whose destination
    index is greater than its source index is kept.
    """
    for index in range(graph.vertex_count):
        for edge in graph.edges_from(index):
            if edge.destination > index:
                yield edge


def _scan_edges(graph: HighwayGraph) -> Tuple[Optional[Edge], Optional[Edge], int]:
    longest: Optional[Edge] = None
    shortest: Optional[Edge] = None
    count = 0
    for edge in undirected_edges(graph):
        count += 1
        if longest is None or edge.length > longest.length:
            longest = edge
        if shortest is None or edge.length < shortest.length:
            shortest = edge
    return longest, shortest, count


def find_edge_extremes(graph: HighwayGraph) -> EdgeExtremes:
    """Find the longest and shortest undirected edges.

    Returns:
        EdgeExtremes with both edges and the number of edges scanned.

    Raises:
        EmptyGraphError: If no undirected edge was found.
    """
    longest, shortest, count = _scan_edges(graph)
    if longest is None or shortest is None:
        raise EmptyGraphError("graph has no edges", query="edge_extremes")
    return EdgeExtremes(longest=longest, shortest=shortest, counted=count)


def longest_edge(graph: HighwayGraph) -> Edge:
    return find_edge_extremes(graph).longest


def shortest_edge(graph: HighwayGraph) -> Edge:
    return find_edge_extremes(graph).shortest


def count_undirected_edges(graph: HighwayGraph) -> int:
    return sum(1 for _ in undirected_edges(graph))


def check_edge_count(graph: HighwayGraph) -> EdgeCountCheck:
    """Compare the scanned undirected edges with the declared edge count.

    A mismatch is logged and reported in the result, never raised.
    """
    check = EdgeCountCheck(
        counted=count_undirected_edges(graph),
        declared=graph.declared_edge_count,
    )
    if not check.is_consistent:
        logger.warning(
            "Edge count mismatch",
            extra={"counted": check.counted, "declared": check.declared},
        )
    return check
