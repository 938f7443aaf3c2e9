"""
Node representation for branchgraph.

A node is a keyed entity holding a caller-chosen value and the ordered list
of its own outgoing branches. The adjacency list is the single source of
truth for every traversal in the package.
"""

from typing import TYPE_CHECKING, Any, List, Union

if TYPE_CHECKING:
    from .branch import pybranch

NodeId = Union[str, int, float]


class pynode:
    """
    A node (leaf) in a directed graph.

    Nodes are created only through BranchGraph.add_node and compared by
    identity, so two graphs may hold nodes with equal ids and values that are
    still distinct objects.
    """

    def __init__(self, node_id: NodeId, value: Any):
        """
        Initialize a node.

        Args:
            node_id: Identity of the node, unique within its graph
            value: Value stored in the node
        """
        self.id = node_id
        self.value = value
        self.aBranch: List["pybranch"] = []

    def add_branch(self, branch: "pybranch") -> None:
        """Attach an outgoing branch; the branch must start at this node."""
        if branch.pNode_start is not self:
            raise ValueError(f"Branch must originate from node {self.id!r}")
        if branch not in self.aBranch:
            self.aBranch.append(branch)

    def remove_branch(self, branch: "pybranch") -> None:
        """Detach an outgoing branch if present."""
        if branch in self.aBranch:
            self.aBranch.remove(branch)

    def get_connected_nodes(self) -> List["pynode"]:
        """Get destination nodes of the outgoing branches, in adjacency order."""
        return [branch.pNode_end for branch in self.aBranch]

    def has_branch_to(self, node: "pynode") -> bool:
        return any(branch.pNode_end is node for branch in self.aBranch)

    def get_out_degree(self) -> int:
        return len(self.aBranch)

    def __repr__(self) -> str:
        return f"pynode(id={self.id!r}, value={self.value!r})"

