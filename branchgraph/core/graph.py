"""
Core graph data structure for directed graphs.

This module provides the fundamental graph store without high-level algorithms.
"""

import logging
import time
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..classes.node import pynode, NodeId
from ..classes.branch import pybranch, Weight
from .exceptions import DuplicateNodeError, IdGenerationError, NodeNotFoundError, SelfLoopError
from .settings import ID_GENERATION_ATTEMPTS, ID_PREFIX

logger = logging.getLogger(__name__)

NodeRef = Union[pynode, NodeId]


class BranchGraph:
    """
    Core graph store for directed graphs.

    This class owns nodes and branches and enforces referential integrity. It provides:
    - Node id management (explicit, value-as-id, or synthesized)
    - Adjacency list maintenance through each node's outgoing branches
    - An incoming-branch index for predecessor queries
    - Cached node and branch snapshots, rebuilt after each mutation
    """

    def __init__(self, data: Optional[Iterable[Tuple[NodeId, Any]]] = None):
        """
        Initialize the graph.

        Args:
            data: Optional iterable of (node_id, value) pairs to insert
        """
        # Node mappings, insertion ordered
        self.id_to_node: Dict[NodeId, pynode] = {}

        # Branch collection used as an ordered set
        self._branches: Dict[pybranch, None] = {}

        # Incoming branches per destination node
        self._incoming: Dict[pynode, List[pybranch]] = {}

        # Cached read views
        self._aNode_cache: Optional[List[pynode]] = None
        self._aBranch_cache: Optional[List[pybranch]] = None

        if data is not None:
            for node_id, value in data:
                self.add_node(value, node_id)

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_node(self, value: Any, node_id: Optional[NodeId] = None) -> pynode:
        """
        Add a node to the graph.

        When no id is given and the value is a primitive (text or number), the
        value itself becomes the id. Otherwise a unique token is synthesized.

        Args:
            value: Value stored in the node
            node_id: Optional explicit id

        Returns:
            The created node

        Raises:
            DuplicateNodeError: If the id is already taken
            IdGenerationError: If no unique id could be synthesized
        """
        if node_id is None:
            if isinstance(value, (str, int, float)) and not isinstance(value, bool):
                node_id = value
            else:
                node_id = self._generate_id()

        if node_id in self.id_to_node:
            raise DuplicateNodeError(f'Node with id "{node_id}" already exists', node_id)

        node = pynode(node_id, value)
        self.id_to_node[node_id] = node
        self._incoming[node] = []
        self._invalidate()

        logger.debug(f"Added node {node_id!r}")
        return node

    def add_branch(self, source: NodeRef, destination: NodeRef,
                   weight: Optional[Weight] = None) -> pybranch:
        """
        Add a directed branch between two nodes of this graph.

        Args:
            source: Source node handle or id
            destination: Destination node handle or id
            weight: Optional numeric weight

        Returns:
            The created branch

        Raises:
            NodeNotFoundError: If either endpoint is not a node of this graph
            SelfLoopError: If source and destination are the same node
        """
        pNode_start = self.resolve_node(source)
        pNode_end = self.resolve_node(destination)

        if pNode_start is pNode_end:
            raise SelfLoopError(f'Branch cannot connect node "{pNode_start.id}" to itself',
                                pNode_start.id)

        branch = pybranch(pNode_start, pNode_end, weight)
        pNode_start.add_branch(branch)
        self._branches[branch] = None
        self._incoming[pNode_end].append(branch)
        self._invalidate()

        logger.debug(f"Added branch {pNode_start.id!r} -> {pNode_end.id!r} (weight={weight})")
        return branch

    def remove_node(self, node: NodeRef) -> None:
        """
        Remove a node and every branch where it is source or destination.

        Unknown nodes are ignored.
        """
        pNode = self._lookup(node)
        if pNode is None:
            logger.warning(f"Ignoring removal of node not in graph: {node!r}")
            return

        for branch in list(pNode.aBranch) + list(self._incoming[pNode]):
            self.remove_branch(branch)

        del self.id_to_node[pNode.id]
        del self._incoming[pNode]
        self._invalidate()

        logger.debug(f"Removed node {pNode.id!r}")

    def remove_branch(self, branch: pybranch) -> None:
        """Remove a branch from the graph; unknown branches are ignored."""
        if branch not in self._branches:
            logger.warning(f"Ignoring removal of branch not in graph: {branch!r}")
            return

        del self._branches[branch]
        branch.pNode_start.remove_branch(branch)
        self._incoming[branch.pNode_end].remove(branch)
        self._invalidate()

        logger.debug(f"Removed branch {branch.pNode_start.id!r} -> {branch.pNode_end.id!r}")

    def clear(self) -> None:
        """Remove all nodes and branches."""
        for branch in self._branches:
            branch.pNode_start.remove_branch(branch)
        self.id_to_node.clear()
        self._branches.clear()
        self._incoming.clear()
        self._invalidate()

        logger.debug("Cleared graph")

    # ========================================================================
    # READ
    # ========================================================================

    def get_node(self, node_id: NodeId) -> Optional[pynode]:
        """
        Get a node by its id.

        Args:
            node_id: Node id

        Returns:
            The node object, or None if not found
        """
        return self.id_to_node.get(node_id)

    def resolve_node(self, node: NodeRef) -> pynode:
        """
        Resolve a node handle or id to the node stored in this graph.

        A handle is accepted only if it is the very object this graph stores
        under its id, so nodes of another graph are rejected.

        Raises:
            NodeNotFoundError: If the reference does not resolve in this graph
        """
        pNode = self._lookup(node)
        if pNode is None:
            node_id = node.id if isinstance(node, pynode) else node
            raise NodeNotFoundError(f'Node with id "{node_id}" not found in graph', node_id)
        return pNode

    def get_nodes(self) -> List[pynode]:
        """Get all nodes in insertion order."""
        if self._aNode_cache is None:
            self._aNode_cache = list(self.id_to_node.values())
        return self._aNode_cache

    def get_branches(self) -> List[pybranch]:
        """Get all branches in insertion order."""
        if self._aBranch_cache is None:
            self._aBranch_cache = list(self._branches)
        return self._aBranch_cache

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self.id_to_node

    def has_branch(self, source: NodeRef, destination: NodeRef) -> bool:
        """Check whether a branch source -> destination exists."""
        pNode_start = self._lookup(source)
        pNode_end = self._lookup(destination)
        if pNode_start is None or pNode_end is None:
            return False
        return pNode_start.has_branch_to(pNode_end)

    def size(self) -> int:
        """Get the number of nodes."""
        return len(self.id_to_node)

    def branch_count(self) -> int:
        return len(self._branches)

    def is_empty(self) -> bool:
        return not self.id_to_node

    def get_incoming_branches(self, node: NodeRef) -> List[pybranch]:
        """Get the branches ending at a node."""
        return list(self._incoming[self.resolve_node(node)])

    def get_predecessors(self, node: NodeRef) -> List[pynode]:
        """Get the source nodes of the branches ending at a node."""
        return [branch.pNode_start for branch in self._incoming[self.resolve_node(node)]]

    def in_degree(self, node: NodeRef) -> int:
        return len(self._incoming[self.resolve_node(node)])

    def out_degree(self, node: NodeRef) -> int:
        return self.resolve_node(node).get_out_degree()

    def get_sources(self) -> List[pynode]:
        """Get source nodes with no incoming branches."""
        return [pNode for pNode in self.get_nodes() if not self._incoming[pNode]]

    def get_sinks(self) -> List[pynode]:
        """Get sink nodes with no outgoing branches."""
        return [pNode for pNode in self.get_nodes() if not pNode.aBranch]

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, node: object) -> bool:
        if isinstance(node, pynode):
            return self.id_to_node.get(node.id) is node
        try:
            return node in self.id_to_node
        except TypeError:
            return False

    def __iter__(self) -> Iterator[pynode]:
        return iter(self.get_nodes())

    # ========================================================================
    # INTERNALS
    # ========================================================================

    def _lookup(self, node: NodeRef) -> Optional[pynode]:
        if isinstance(node, pynode):
            pNode = self.id_to_node.get(node.id)
            return pNode if pNode is node else None
        try:
            return self.id_to_node.get(node)
        except TypeError:
            return None

    def _invalidate(self) -> None:
        self._aNode_cache = None
        self._aBranch_cache = None

    def _generate_id(self) -> str:
        """Generate a unique node id."""
        stamp = time.time_ns() // 1_000_000
        for counter in range(ID_GENERATION_ATTEMPTS):
            node_id = f"{ID_PREFIX}_{stamp}_{counter}"
            if node_id not in self.id_to_node:
                return node_id

        raise IdGenerationError("Unable to generate unique node id")
