"""Immutable domain models for the highway graph.

All models are frozen dataclasses with slots. They have no external
dependencies and describe both the loaded network (points, vertices,
edges) and the plain result records handed to the presentation layer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

# Radius of the Earth in statute miles
EARTH_RADIUS_MILES = 3963.1

# Per-axis tolerance (degrees) under which two points are the same place
COINCIDENCE_TOLERANCE = 0.00001


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees.

    Latitude is expected in [-90, 90] and longitude in [-180, 180];
    callers are responsible for supplying sensible coordinates.
    """

    latitude: float
    longitude: float

    def approx_equals(self, other: GeoPoint) -> bool:
        """Check whether both axes differ by less than the tolerance."""
        return (
            abs(other.latitude - self.latitude) < COINCIDENCE_TOLERANCE
            and abs(other.longitude - self.longitude) < COINCIDENCE_TOLERANCE
        )

    def distance_to(self, other: GeoPoint) -> float:
        """Great-circle distance in miles, by the spherical law of cosines.

        Args:
            other: The point to measure to.

        Returns:
            Distance in statute miles, exactly 0.0 for coincident points.
        """
        if self.approx_equals(other):
            return 0.0

        rlat1 = math.radians(self.latitude)
        rlng1 = math.radians(self.longitude)
        rlat2 = math.radians(other.latitude)
        rlng2 = math.radians(other.longitude)

        # Factors are paired per axis so that swapping the points yields
        # the same float.
        cos_lats = math.cos(rlat1) * math.cos(rlat2)
        cosine = (
            cos_lats * (math.cos(rlng1) * math.cos(rlng2))
            + cos_lats * (math.sin(rlng1) * math.sin(rlng2))
            + math.sin(rlat1) * math.sin(rlat2)
        )
        # Rounding can push nearly coincident points just outside acos' domain
        cosine = max(-1.0, min(1.0, cosine))
        return math.acos(cosine) * EARTH_RADIUS_MILES

    def __str__(self) -> str:
        return f"({self.latitude},{self.longitude})"


def path_length(
    start: GeoPoint, shape_points: Iterable[GeoPoint], end: GeoPoint
) -> float:
    """Sum of great-circle legs from start through each shape point to end."""
    length = 0.0
    previous = start
    for point in shape_points:
        length += previous.distance_to(point)
        previous = point
    length += previous.distance_to(end)
    return length


@dataclass(frozen=True, slots=True)
class Vertex:
    """A labelled waypoint of the highway network.

    Attributes:
        label: Waypoint label (case-sensitive)
        location: Coordinates of the waypoint
        adjacency: Indices into the graph's edge arena, most recently
            loaded edge first
    """

    label: str
    location: GeoPoint
    adjacency: tuple[int, ...] = field(default_factory=tuple)

    @property
    def degree(self) -> int:
        return len(self.adjacency)


@dataclass(frozen=True, slots=True)
class Edge:
    """One direction of an undirected road segment.

    Every segment is stored as two Edge records, one per endpoint. The
    records share the same label and length; the shape points of one are
    the reverse of the other's.

    Attributes:
        label: Route label of the segment
        source: Index of the vertex whose adjacency holds this record
        destination: Index of the vertex at the other end
        shape_points: Intermediate points ordered from source to destination
        length: Length in miles along the shape points
    """

    label: str
    source: int
    destination: int
    shape_points: tuple[GeoPoint, ...]
    length: float


@dataclass(frozen=True, slots=True)
class VertexExtremes:
    """Extremal vertices of a graph.

    Longitude extremes follow the convention used by the reports:
    easternmost is the smallest longitude, westernmost the largest.
    """

    northernmost: Vertex
    southernmost: Vertex
    easternmost: Vertex
    westernmost: Vertex
    longest_label: Vertex
    shortest_label: Vertex


@dataclass(frozen=True, slots=True)
class EdgeExtremes:
    """Longest and shortest undirected edges, and how many were scanned."""

    longest: Edge
    shortest: Edge
    counted: int


@dataclass(frozen=True, slots=True)
class EdgeCountCheck:
    """Comparison of scanned undirected edges with the declared count."""

    counted: int
    declared: int

    @property
    def is_consistent(self) -> bool:
        return self.counted == self.declared

    @property
    def difference(self) -> int:
        return self.counted - self.declared


@dataclass(frozen=True, slots=True)
class ConnectionSummary:
    """One adjacency entry as shown in a graph summary."""

    destination_label: str
    destination_location: GeoPoint
    edge_label: str
    shape_points: tuple[GeoPoint, ...]
    length: float


@dataclass(frozen=True, slots=True)
class VertexSummary:
    """A vertex and its outgoing connections as shown in a graph summary."""

    label: str
    location: GeoPoint
    connections: tuple[ConnectionSummary, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class GraphSummary:
    """Plain-data view of a whole graph for presentation."""

    vertex_count: int
    edge_count: int
    vertices: tuple[VertexSummary, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class GraphAnalysis:
    """Everything the reports print about a loaded graph.

    Attributes:
        summary: Full-graph summary
        vertex_extremes: Extremal vertices, None for a graph without vertices
        edge_extremes: Extremal edges, None when no edge qualified
        edge_count: Scanned vs declared undirected edge count
    """

    summary: GraphSummary
    vertex_extremes: Optional[VertexExtremes]
    edge_extremes: Optional[EdgeExtremes]
    edge_count: EdgeCountCheck
