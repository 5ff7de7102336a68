"""Adapters layer - Concrete implementations of the ports.

- graph: loading the highway graph from TMG files
- rendering: drawing the graph on interactive maps
"""

from .graph import TMGGraphRepository
from .rendering import FoliumMapRenderer

__all__ = ["TMGGraphRepository", "FoliumMapRenderer"]
