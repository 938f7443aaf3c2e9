"""
Connected and strongly connected components.

Adjacency indexes are built once per call so both analyses run in O(V+E).
"""

import logging
from collections import defaultdict
from typing import DefaultDict, List, Set, Tuple

from ..classes.node import pynode
from ..core.graph import BranchGraph

logger = logging.getLogger(__name__)


class ComponentAnalyzer:
    """
    Partitions a graph into components.

    This class provides methods for:
    - Undirected connected components (every branch treated as bidirectional)
    - Strongly connected components (Kosaraju)
    """

    def __init__(self, graph: BranchGraph):
        """
        Initialize the component analyzer.

        Args:
            graph: BranchGraph instance to analyze
        """
        self.graph = graph

    def find_connected_components(self) -> List[List[pynode]]:
        """
        Find connected components, ignoring branch direction.

        Returns:
            List of components; every node is in exactly one
        """
        undirected: DefaultDict[pynode, List[pynode]] = defaultdict(list)
        for branch in self.graph.get_branches():
            undirected[branch.pNode_start].append(branch.pNode_end)
            undirected[branch.pNode_end].append(branch.pNode_start)

        visited: Set[pynode] = set()
        components: List[List[pynode]] = []

        for pNode in self.graph.get_nodes():
            if pNode in visited:
                continue

            component = []
            stack = [pNode]
            visited.add(pNode)
            while stack:
                current = stack.pop()
                component.append(current)
                for neighbor in undirected[current]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)

            components.append(component)

        logger.info(f"Found {len(components)} connected components")
        return components

    def count_connected_components(self) -> int:
        return len(self.find_connected_components())

    def is_connected(self) -> bool:
        """Check whether the graph is one connected component (empty graphs are not)."""
        return self.count_connected_components() == 1

    def find_strongly_connected_components(self) -> List[List[pynode]]:
        """
        Find strongly connected components using Kosaraju's algorithm.

        Returns:
            List of components; nodes in one component are mutually reachable
        """
        aNode = self.graph.get_nodes()

        # Finish order from an iterative DFS over outgoing branches
        visited: Set[pynode] = set()
        finished: List[pynode] = []
        for pNode in aNode:
            if pNode in visited:
                continue
            visited.add(pNode)
            stack: List[Tuple[pynode, int]] = [(pNode, 0)]
            while stack:
                current, index = stack[-1]
                if index < len(current.aBranch):
                    stack[-1] = (current, index + 1)
                    neighbor = current.aBranch[index].pNode_end
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append((neighbor, 0))
                else:
                    stack.pop()
                    finished.append(current)

        transposed: DefaultDict[pynode, List[pynode]] = defaultdict(list)
        for branch in self.graph.get_branches():
            transposed[branch.pNode_end].append(branch.pNode_start)

        # Collect components on the transposed graph in reverse finish order
        visited.clear()
        components: List[List[pynode]] = []
        for pNode in reversed(finished):
            if pNode in visited:
                continue
            component = []
            visited.add(pNode)
            stack_nodes = [pNode]
            while stack_nodes:
                current = stack_nodes.pop()
                component.append(current)
                for neighbor in transposed[current]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack_nodes.append(neighbor)
            components.append(component)

        logger.info(f"Found {len(components)} strongly connected components")
        return components

    def is_strongly_connected(self) -> bool:
        return len(self.find_strongly_connected_components()) == 1
