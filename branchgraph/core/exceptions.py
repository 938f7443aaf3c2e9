"""
Error taxonomy for branchgraph.

All errors are raised synchronously by the operation that detects the
violation. The library performs no retries and no auto-repair.
"""

from typing import Any, Optional


class GraphError(Exception):
    """Base class for graph errors."""

    code = "GRAPH_ERROR"

    def __init__(self, message: str, node_id: Optional[Any] = None):
        super().__init__(message)
        self.node_id = node_id


class DuplicateNodeError(GraphError):
    """A node with the same id already exists in the graph."""

    code = "DUPLICATE_NODE"


class NodeNotFoundError(GraphError):
    """A node reference could not be resolved in this graph."""

    code = "NODE_NOT_FOUND"


class SelfLoopError(GraphError):
    """A branch would connect a node to itself."""

    code = "SELF_LOOP"


class CycleDetectedError(GraphError):
    """The graph contains a cycle, so no topological order exists."""

    code = "CYCLE_DETECTED"


class IdGenerationError(GraphError):
    """No unique node id could be synthesized within the retry budget."""

    code = "ID_GENERATION_FAILED"
