"""
Breadth-first and depth-first traversal.

This module provides eager traversals returning the full visiting order and
lazy iterators that produce one node per step. All traversals follow
outgoing branches only.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set

from ..classes.node import pynode
from ..core.graph import BranchGraph, NodeRef

logger = logging.getLogger(__name__)

NodeVisitor = Callable[[pynode], None]
NodePredicate = Callable[[pynode], bool]


@dataclass
class TraversalResult:
    """Nodes visited by a search and the first node matching its predicate."""
    visited: List[pynode] = field(default_factory=list)
    found: Optional[pynode] = None


class BFSIterator:
    """
    Lazy breadth-first traversal.

    Holds the queue, the read pointer into it and the visited set, and
    advances by exactly one node per call to next().
    """

    def __init__(self, pNode_start: pynode):
        self._queue: List[pynode] = [pNode_start]
        self._index = 0
        self._visited: Set[pynode] = {pNode_start}

    def __iter__(self) -> "BFSIterator":
        return self

    def __next__(self) -> pynode:
        if self._index >= len(self._queue):
            raise StopIteration

        current = self._queue[self._index]
        self._index += 1

        for branch in current.aBranch:
            pNode_next = branch.pNode_end
            if pNode_next not in self._visited:
                self._visited.add(pNode_next)
                self._queue.append(pNode_next)

        return current


class DFSIterator:
    """
    Lazy depth-first pre-order traversal.

    Iterative and stack based. Branches are pushed in reverse adjacency order
    so nodes come out in natural left-to-right order; a node pushed more than
    once is skipped when popped again.
    """

    def __init__(self, pNode_start: pynode):
        self._stack: List[pynode] = [pNode_start]
        self._visited: Set[pynode] = set()

    def __iter__(self) -> "DFSIterator":
        return self

    def __next__(self) -> pynode:
        while self._stack:
            current = self._stack.pop()
            if current in self._visited:
                continue

            self._visited.add(current)
            for branch in reversed(current.aBranch):
                if branch.pNode_end not in self._visited:
                    self._stack.append(branch.pNode_end)
            return current

        raise StopIteration


class GraphTraverser:
    """
    Traversal algorithms over a BranchGraph.

    This class provides methods for:
    - Eager BFS/DFS with an optional per-node callback
    - Predicate searches that stop recording at the first match
    - Lazy BFS/DFS iterators
    """

    def __init__(self, graph: BranchGraph):
        """
        Initialize the traverser.

        Args:
            graph: BranchGraph instance to traverse
        """
        self.graph = graph

    def bfs(self, start: NodeRef, visit: Optional[NodeVisitor] = None) -> List[pynode]:
        """
        Breadth-first traversal from a start node.

        Args:
            start: Start node handle or id
            visit: Optional callback invoked for each visited node

        Returns:
            Nodes in BFS order
        """
        return self._walk(BFSIterator(self.graph.resolve_node(start)), visit)

    def dfs(self, start: NodeRef, visit: Optional[NodeVisitor] = None) -> List[pynode]:
        """
        Depth-first (pre-order) traversal from a start node.

        Args:
            start: Start node handle or id
            visit: Optional callback invoked for each visited node

        Returns:
            Nodes in DFS order
        """
        return self._walk(DFSIterator(self.graph.resolve_node(start)), visit)

    def bfs_search(self, start: NodeRef, predicate: NodePredicate) -> TraversalResult:
        """
        Breadth-first search for the first node matching a predicate.

        Returns:
            TraversalResult whose visited list ends at the match, if any
        """
        return self._search(BFSIterator(self.graph.resolve_node(start)), predicate)

    def dfs_search(self, start: NodeRef, predicate: NodePredicate) -> TraversalResult:
        """Depth-first search for the first node matching a predicate."""
        return self._search(DFSIterator(self.graph.resolve_node(start)), predicate)

    def iter_bfs(self, start: NodeRef) -> BFSIterator:
        return BFSIterator(self.graph.resolve_node(start))

    def iter_dfs(self, start: NodeRef) -> DFSIterator:
        return DFSIterator(self.graph.resolve_node(start))

    @staticmethod
    def _walk(iterator, visit: Optional[NodeVisitor]) -> List[pynode]:
        result = []
        for pNode in iterator:
            if visit is not None:
                visit(pNode)
            result.append(pNode)
        return result

    @staticmethod
    def _search(iterator, predicate: NodePredicate) -> TraversalResult:
        result = TraversalResult()
        for pNode in iterator:
            result.visited.append(pNode)
            if predicate(pNode):
                result.found = pNode
                break

        logger.debug(f"Search visited {len(result.visited)} nodes, found={result.found is not None}")
        return result
