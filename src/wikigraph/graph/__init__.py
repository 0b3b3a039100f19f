"""Link graph construction and reduction."""

from .accumulator import LinkGraph
from .reducer import shortest_paths
from .scheduler import TraversalRun, build_graph

__all__ = ["LinkGraph", "TraversalRun", "build_graph", "shortest_paths"]
