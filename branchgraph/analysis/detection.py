"""
Cycle detection for directed graphs.

This module provides three-state coloring over an iterative DFS.
"""

import logging
from enum import Enum
from typing import Dict, List, Tuple

from ..classes.node import pynode
from ..core.graph import BranchGraph, NodeRef

logger = logging.getLogger(__name__)


class NodeColor(Enum):
    """DFS coloring states."""
    WHITE = 0  # unvisited
    GRAY = 1   # on the active DFS path
    BLACK = 2  # fully explored


class CycleDetector:
    """
    Detects cycles in a directed graph.

    This class provides methods for:
    - Checking whether a cycle is reachable from a node
    - Extracting one such cycle
    - Checking the whole graph
    """

    def __init__(self, graph: BranchGraph):
        """
        Initialize the cycle detector.

        Args:
            graph: BranchGraph instance to analyze
        """
        self.graph = graph

    def detect_cycle(self, start: NodeRef) -> bool:
        """
        Check whether a cycle is reachable from a start node.

        Args:
            start: Start node handle or id

        Returns:
            True at the first back edge found, False otherwise
        """
        return bool(self.find_cycle(start))

    def find_cycle(self, start: NodeRef) -> List[pynode]:
        """
        Find a cycle reachable from a start node.

        Returns:
            The cycle as [v0, v1, ..., v0], or an empty list if none
        """
        color: Dict[pynode, NodeColor] = {}
        return self._find_cycle_from(self.graph.resolve_node(start), color)

    def has_cycle(self) -> bool:
        """Check whether any cycle exists in the graph."""
        color: Dict[pynode, NodeColor] = {}
        for pNode in self.graph.get_nodes():
            if color.get(pNode, NodeColor.WHITE) is NodeColor.WHITE:
                if self._find_cycle_from(pNode, color):
                    return True
        return False

    def _find_cycle_from(self, pNode_start: pynode, color: Dict[pynode, NodeColor]) -> List[pynode]:
        """Iterative colored DFS; stack frames are (node, next branch index)."""
        stack: List[Tuple[pynode, int]] = [(pNode_start, 0)]
        color[pNode_start] = NodeColor.GRAY

        while stack:
            current, index = stack[-1]

            if index >= len(current.aBranch):
                color[current] = NodeColor.BLACK
                stack.pop()
                continue

            stack[-1] = (current, index + 1)
            pNode_next = current.aBranch[index].pNode_end
            state = color.get(pNode_next, NodeColor.WHITE)

            if state is NodeColor.GRAY:
                path = [frame[0] for frame in stack]
                cycle = path[path.index(pNode_next):] + [pNode_next]
                logger.debug(f"Detected cycle: {[pNode.id for pNode in cycle]}")
                return cycle

            if state is NodeColor.WHITE:
                color[pNode_next] = NodeColor.GRAY
                stack.append((pNode_next, 0))

        return []
