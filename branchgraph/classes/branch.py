"""
Branch representation for branchgraph.

A branch is a directed connection between two nodes with an optional
numeric weight.
"""

from typing import Optional, Union

from .node import pynode

Weight = Union[int, float]


class pybranch:
    """
    A directed branch (edge) from pNode_start to pNode_end.

    Branches are owned by the adjacency list of their start node and are
    registered in the owning graph's branch collection.
    """

    def __init__(self, pNode_start: pynode, pNode_end: pynode, dWeight: Optional[Weight] = None):
        """
        Initialize a branch.

        Args:
            pNode_start: Source node
            pNode_end: Destination node
            dWeight: Optional numeric weight
        """
        self.pNode_start = pNode_start
        self.pNode_end = pNode_end
        self.dWeight = dWeight

    def is_weighted(self) -> bool:
        return self.dWeight is not None

    def get_other_node(self, node: pynode) -> pynode:
        """
        Get the endpoint opposite to the given node.

        Raises:
            ValueError: If the node is not an endpoint of this branch
        """
        if node is self.pNode_start:
            return self.pNode_end
        if node is self.pNode_end:
            return self.pNode_start
        raise ValueError(f"Node {node.id!r} is not part of this branch")

    def __repr__(self) -> str:
        if self.dWeight is None:
            return f"pybranch({self.pNode_start.id!r} -> {self.pNode_end.id!r})"
        return f"pybranch({self.pNode_start.id!r} -> {self.pNode_end.id!r}, weight={self.dWeight!r})"
