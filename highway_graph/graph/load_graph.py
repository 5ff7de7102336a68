"""Graph loading from the TMG text format.

The format is line oriented::

    <header line>
    <numVertices> <numEdges>
    <label> <lat> <lng>                              x numVertices
    <v1Index> <v2Index> <edgeLabel> [<lat> <lng> ...]  x numEdges

Loading is staged: the text is first parsed into plain records, the
records are then validated, and only then is the immutable graph
materialized. Any problem aborts the whole load, so callers either get a
complete graph or an exception.
"""

from __future__ import annotations

import io
import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, TextIO, Tuple

from ..domain.errors import GraphFormatError, VertexIndexError
from ..domain.models import Edge, GeoPoint, Vertex, path_length
from .model import HighwayGraph

logger = logging.getLogger(__name__)

Line = Tuple[int, List[str]]


@dataclass(frozen=True, slots=True)
class VertexRecord:
    """A parsed vertex line."""

    label: str
    location: GeoPoint
    line_number: int = 0


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """A parsed edge line, shape points ordered from source to destination."""

    source: int
    destination: int
    label: str
    shape_points: tuple[GeoPoint, ...] = ()
    line_number: int = 0


@dataclass
class GraphBuilder:
    """Collects parsed records and materializes a HighwayGraph.

    Attributes:
        header: First line of the input
        declared_vertex_count: Vertex count announced by the input
        declared_edge_count: Undirected edge count announced by the input
        source: Where the records came from, used in error messages
    """

    header: str
    declared_vertex_count: int
    declared_edge_count: int
    source: Optional[str] = None
    vertices: List[VertexRecord] = field(default_factory=list)
    edges: List[EdgeRecord] = field(default_factory=list)

    def add_vertex(self, record: VertexRecord) -> None:
        self.vertices.append(record)

    def add_edge(self, record: EdgeRecord) -> None:
        self.edges.append(record)

    def validate(self) -> None:
        """Check record counts and that every edge endpoint exists.

        Raises:
            GraphFormatError: If the record counts disagree with the header.
            VertexIndexError: If an edge references a missing vertex.
        """
        if len(self.vertices) != self.declared_vertex_count:
            raise GraphFormatError(
                f"expected {self.declared_vertex_count} vertices, "
                f"got {len(self.vertices)}",
                file_path=self.source,
            )
        if len(self.edges) != self.declared_edge_count:
            raise GraphFormatError(
                f"expected {self.declared_edge_count} edges, got {len(self.edges)}",
                file_path=self.source,
            )

        vertex_count = len(self.vertices)
        for record in self.edges:
            for index in (record.source, record.destination):
                if not 0 <= index < vertex_count:
                    raise VertexIndexError(
                        f"edge {record.label!r} references vertex {index}, "
                        f"valid range is [0, {vertex_count})",
                        file_path=self.source,
                        index=index,
                        vertex_count=vertex_count,
                        line_number=record.line_number,
                    )

        seen: set[str] = set()
        for record in self.vertices:
            if record.label in seen:
                logger.warning(
                    "Duplicate vertex label",
                    extra={"label": record.label, "line_number": record.line_number},
                )
            seen.add(record.label)

    def build(self) -> HighwayGraph:
        """Validate the records and build the immutable graph."""
        self.validate()

        locations = [record.location for record in self.vertices]
        arena: List[Edge] = []
        # Filled in arrival order, reversed below so the newest edge leads
        adjacency: List[List[int]] = [[] for _ in self.vertices]

        for record in self.edges:
            # One length for both directions, summed from source to destination
            length = path_length(
                locations[record.source],
                record.shape_points,
                locations[record.destination],
            )

            adjacency[record.source].append(len(arena))
            arena.append(
                Edge(
                    label=record.label,
                    source=record.source,
                    destination=record.destination,
                    shape_points=record.shape_points,
                    length=length,
                )
            )

            adjacency[record.destination].append(len(arena))
            arena.append(
                Edge(
                    label=record.label,
                    source=record.destination,
                    destination=record.source,
                    shape_points=tuple(reversed(record.shape_points)),
                    length=length,
                )
            )

        vertices = tuple(
            Vertex(
                label=record.label,
                location=record.location,
                adjacency=tuple(reversed(chain)),
            )
            for record, chain in zip(self.vertices, adjacency)
        )

        return HighwayGraph(
            header=self.header,
            vertices=vertices,
            edges=tuple(arena),
            declared_edge_count=self.declared_edge_count,
        )


def _lines(stream: TextIO) -> Iterator[Line]:
    """Yield (line number, tokens) for every non-blank line."""
    for line_number, line in enumerate(stream, start=1):
        tokens = line.split()
        if tokens:
            yield line_number, tokens


def _next_line(lines: Iterator[Line], what: str, source: Optional[str]) -> Line:
    try:
        return next(lines)
    except StopIteration:
        raise GraphFormatError(
            f"unexpected end of input while reading {what}",
            file_path=source,
        ) from None


def _parse_int(token: str, line_number: int, what: str, source: Optional[str]) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise GraphFormatError(
            f"line {line_number}: {what} is not an integer: {token!r}",
            file_path=source,
            line_number=line_number,
            token=token,
            cause=e,
        )


def _parse_float(
    token: str, line_number: int, what: str, source: Optional[str]
) -> float:
    try:
        value = float(token)
    except ValueError as e:
        raise GraphFormatError(
            f"line {line_number}: {what} is not a number: {token!r}",
            file_path=source,
            line_number=line_number,
            token=token,
            cause=e,
        )
    if not math.isfinite(value):
        raise GraphFormatError(
            f"line {line_number}: {what} is not finite: {token!r}",
            file_path=source,
            line_number=line_number,
            token=token,
        )
    return value


def _parse_point(
    lat_token: str, lng_token: str, line_number: int, source: Optional[str]
) -> GeoPoint:
    return GeoPoint(
        latitude=_parse_float(lat_token, line_number, "latitude", source),
        longitude=_parse_float(lng_token, line_number, "longitude", source),
    )


def _parse_counts(
    lines: Iterator[Line], source: Optional[str]
) -> Tuple[int, int]:
    line_number, tokens = _next_line(lines, "vertex and edge counts", source)
    if len(tokens) != 2:
        raise GraphFormatError(
            f"line {line_number}: expected '<numVertices> <numEdges>', "
            f"got {len(tokens)} tokens",
            file_path=source,
            line_number=line_number,
        )
    vertex_count = _parse_int(tokens[0], line_number, "vertex count", source)
    edge_count = _parse_int(tokens[1], line_number, "edge count", source)
    for count, token in ((vertex_count, tokens[0]), (edge_count, tokens[1])):
        if count < 0:
            raise GraphFormatError(
                f"line {line_number}: negative count {count}",
                file_path=source,
                line_number=line_number,
                token=token,
            )
    return vertex_count, edge_count


def _parse_vertex(line: Line, source: Optional[str]) -> VertexRecord:
    line_number, tokens = line
    if len(tokens) != 3:
        raise GraphFormatError(
            f"line {line_number}: expected '<label> <lat> <lng>', "
            f"got {len(tokens)} tokens",
            file_path=source,
            line_number=line_number,
        )
    label, lat_token, lng_token = tokens
    return VertexRecord(
        label=label,
        location=_parse_point(lat_token, lng_token, line_number, source),
        line_number=line_number,
    )


def _parse_edge(line: Line, source: Optional[str]) -> EdgeRecord:
    line_number, tokens = line
    if len(tokens) < 3:
        raise GraphFormatError(
            f"line {line_number}: expected '<v1> <v2> <label> [<lat> <lng> ...]', "
            f"got {len(tokens)} tokens",
            file_path=source,
            line_number=line_number,
        )

    coordinates = tokens[3:]
    if len(coordinates) % 2:
        raise GraphFormatError(
            f"line {line_number}: odd number of shape point coordinates "
            f"({len(coordinates)})",
            file_path=source,
            line_number=line_number,
            token=coordinates[-1],
        )

    return EdgeRecord(
        source=_parse_int(tokens[0], line_number, "first vertex index", source),
        destination=_parse_int(tokens[1], line_number, "second vertex index", source),
        label=tokens[2],
        shape_points=tuple(
            _parse_point(coordinates[i], coordinates[i + 1], line_number, source)
            for i in range(0, len(coordinates), 2)
        ),
        line_number=line_number,
    )


def read_records(stream: TextIO, source: Optional[str] = None) -> GraphBuilder:
    """Parse a TMG stream into a builder holding plain records.

    Args:
        stream: An open text stream positioned at the header line.
        source: Name of the input for error messages (e.g. a file path).

    Returns:
        A GraphBuilder with every vertex and edge record of the input.

    Raises:
        GraphFormatError: If the input does not follow the format.
    """
    header = stream.readline().strip()
    if not header:
        raise GraphFormatError(
            "missing header line", file_path=source, line_number=1
        )

    # Header already consumed, so numbering resumes at line 2
    lines = (
        (line_number + 1, tokens) for line_number, tokens in _lines(stream)
    )

    vertex_count, edge_count = _parse_counts(lines, source)
    builder = GraphBuilder(
        header=header,
        declared_vertex_count=vertex_count,
        declared_edge_count=edge_count,
        source=source,
    )

    for _ in range(vertex_count):
        builder.add_vertex(_parse_vertex(_next_line(lines, "a vertex", source), source))

    for _ in range(edge_count):
        builder.add_edge(_parse_edge(_next_line(lines, "an edge", source), source))

    trailing = next(lines, None)
    if trailing is not None:
        logger.warning(
            "Ignoring content after the last declared edge",
            extra={"line_number": trailing[0], "source": source},
        )

    return builder


def load_graph(stream: TextIO, source: Optional[str] = None) -> HighwayGraph:
    """Build a HighwayGraph from an open TMG text stream.

    Args:
        stream: An open text stream positioned at the header line.
        source: Name of the input for error messages (e.g. a file path).

    Returns:
        The fully built graph.

    Raises:
        GraphFormatError: If the input does not follow the format.
        VertexIndexError: If an edge references a missing vertex.
    """
    logger.debug("Loading graph", extra={"source": source})

    graph = read_records(stream, source).build()

    logger.info(
        "Graph loaded",
        extra={
            "source": source,
            "vertices": graph.vertex_count,
            "edges": graph.declared_edge_count,
        },
    )
    return graph


def parse_graph(text: str, source: Optional[str] = None) -> HighwayGraph:
    """Build a HighwayGraph from TMG text held in memory."""
    return load_graph(io.StringIO(text), source)
