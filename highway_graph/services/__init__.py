"""Services layer - Application orchestration.

- HighwayGraphService: loads a graph, runs the queries, renders maps
"""

from .highway_graph_service import HighwayGraphService

__all__ = ["HighwayGraphService"]
