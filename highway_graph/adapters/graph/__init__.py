"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TMGGraphRepository: Loads the graph from a TMG file
"""

from .tmg_repository import TMGGraphRepository

__all__ = ["TMGGraphRepository"]
