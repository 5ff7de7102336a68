"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EmptyGraphError,
    GraphFormatError,
    GraphLoadError,
    HighwayGraphError,
    RenderingError,
    VertexIndexError,
)
from .models import (
    COINCIDENCE_TOLERANCE,
    EARTH_RADIUS_MILES,
    ConnectionSummary,
    Edge,
    EdgeCountCheck,
    EdgeExtremes,
    GeoPoint,
    GraphAnalysis,
    GraphSummary,
    Vertex,
    VertexExtremes,
    VertexSummary,
    path_length,
)

__all__ = [
    # Models
    "GeoPoint",
    "Vertex",
    "Edge",
    "VertexExtremes",
    "EdgeExtremes",
    "EdgeCountCheck",
    "ConnectionSummary",
    "VertexSummary",
    "GraphSummary",
    "GraphAnalysis",
    "path_length",
    "EARTH_RADIUS_MILES",
    "COINCIDENCE_TOLERANCE",
    # Errors
    "HighwayGraphError",
    "GraphLoadError",
    "GraphFormatError",
    "VertexIndexError",
    "EmptyGraphError",
    "ConfigurationError",
    "RenderingError",
]
