"""
Topological ordering for directed graphs.

This module provides Kahn's algorithm and the derived DAG check.
"""

import logging
from collections import deque
from typing import Dict, List

from ..classes.node import pynode
from ..core.exceptions import CycleDetectedError
from ..core.graph import BranchGraph

logger = logging.getLogger(__name__)


class TopologyManager:
    """
    Computes topological order over the entire graph.

    In-degrees are taken over every branch, not just one component.
    """

    def __init__(self, graph: BranchGraph):
        """
        Initialize the topology manager.

        Args:
            graph: BranchGraph instance to order
        """
        self.graph = graph

    def topological_sort(self) -> List[pynode]:
        """
        Sort nodes so that every branch points forward.

        Returns:
            All nodes in topological order

        Raises:
            CycleDetectedError: If the graph contains a cycle
        """
        aNode = self.graph.get_nodes()
        in_degree: Dict[pynode, int] = {pNode: 0 for pNode in aNode}
        for branch in self.graph.get_branches():
            in_degree[branch.pNode_end] += 1

        queue = deque(pNode for pNode in aNode if in_degree[pNode] == 0)
        result: List[pynode] = []

        while queue:
            current = queue.popleft()
            result.append(current)

            for branch in current.aBranch:
                neighbor = branch.pNode_end
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        if len(result) < len(aNode):
            raise CycleDetectedError("Graph contains cycles, topological sort not possible")

        logger.info(f"Topologically sorted {len(result)} nodes")
        return result

    def is_dag(self) -> bool:
        """Check whether the graph is a directed acyclic graph."""
        try:
            self.topological_sort()
        except CycleDetectedError:
            return False
        return True
