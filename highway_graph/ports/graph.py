"""Graph ports - Abstractions for graph loading.

These protocols define the contract for obtaining a built highway graph
from persistent storage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..graph.model import HighwayGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/tmg_repository.py

    The repository is responsible for opening the graph source, handing
    the stream to the loader and caching the resulting graph.
    """

    def load(self) -> HighwayGraph:
        """Load the highway graph.

        Returns:
            The fully built graph.
        """
        ...

    @property
    def source(self) -> Optional[str]:
        """Human-readable name of where the graph comes from."""
        ...
