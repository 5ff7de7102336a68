"""Typed domain errors for the highway graph.

All errors inherit from HighwayGraphError and can optionally wrap a
root cause exception for debugging. Load errors abort graph
construction; query errors leave the graph untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class HighwayGraphError(Exception):
    """Base error for the highway graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphLoadError(HighwayGraphError):
    """Graph construction was aborted.

    Attributes:
        file_path: Path to the graph file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class GraphFormatError(GraphLoadError):
    """The input does not follow the graph file format.

    Attributes:
        line_number: 1-based input line where the problem was found
        token: The offending token, if a single one is to blame
    """

    line_number: Optional[int] = None
    token: Optional[str] = None


@dataclass
class VertexIndexError(GraphLoadError):
    """An edge references a vertex index outside the vertex list.

    Attributes:
        index: The offending vertex index
        vertex_count: Number of vertices declared by the input
        line_number: 1-based input line of the edge
    """

    index: int = -1
    vertex_count: int = 0
    line_number: Optional[int] = None


@dataclass
class EmptyGraphError(HighwayGraphError):
    """An extremum was requested but there is nothing to scan.

    Attributes:
        query: Name of the query that was attempted
    """

    query: str = ""


@dataclass
class ConfigurationError(HighwayGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(HighwayGraphError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
