"""In-memory highway graph.

Vertices live in a single indexable tuple; every edge record lives in a
per-graph edge arena and vertices refer to their edges by arena index.
A graph is built once by the loader and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..domain.models import Edge, Vertex


@dataclass(frozen=True, slots=True)
class HighwayGraph:
    """An undirected highway graph annotated with edge lengths.

    Attributes:
        header: First line of the input, kept verbatim
        vertices: Vertices in declaration order; the position is the
            vertex index used by edges
        edges: Edge arena; each undirected edge contributes two records
        declared_edge_count: Number of undirected edges announced by the
            input
    """

    header: str
    vertices: tuple[Vertex, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)
    declared_edge_count: int = 0

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def edge_record_count(self) -> int:
        """Number of directed edge records, twice the undirected count."""
        return len(self.edges)

    def vertex(self, index: int) -> Vertex:
        """Return the vertex at ``index``.

        Raises:
            IndexError: If the index is outside the vertex list.
        """
        if not 0 <= index < len(self.vertices):
            raise IndexError(f"vertex index out of range: {index}")
        return self.vertices[index]

    def edges_from(self, index: int) -> Iterator[Edge]:
        """Iterate the adjacency of a vertex, most recently loaded first."""
        for edge_index in self.vertex(index).adjacency:
            yield self.edges[edge_index]

    def neighbors(self, index: int) -> Iterator[Vertex]:
        for edge in self.edges_from(index):
            yield self.vertices[edge.destination]

    def find_vertex(self, label: str) -> Optional[int]:
        """Index of the first vertex with the given label, or None."""
        for index, vertex in enumerate(self.vertices):
            if vertex.label == label:
                return index
        return None
