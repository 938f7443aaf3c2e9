"""
Single-pair shortest path for directed graphs.

Unweighted graphs are searched with BFS, weighted graphs with label-setting
relaxation (Dijkstra) using a linear scan of the frontier.
"""

import logging
import math
from collections import defaultdict
from typing import DefaultDict, Dict, List, Optional, Sequence, Set

import numpy as np

from ..classes.node import pynode
from ..classes.branch import pybranch
from ..core.graph import BranchGraph, NodeRef
from ..core.settings import WEIGHT_SAMPLE_SIZE

logger = logging.getLogger(__name__)


class ShortestPathFinder:
    """
    Shortest path search over a BranchGraph.

    The algorithm is chosen by sampling the leading branches of the branch
    list: if any of them carries a weight, the weighted search runs.
    """

    def __init__(self, graph: BranchGraph, weight_sample_size: Optional[int] = WEIGHT_SAMPLE_SIZE):
        """
        Initialize the path finder.

        Args:
            graph: BranchGraph instance to search
            weight_sample_size: Number of leading branches inspected to detect
                weights; None inspects every branch
        """
        self.graph = graph
        self.weight_sample_size = weight_sample_size

    def shortest_path(self, start: NodeRef, end: NodeRef,
                      branches: Optional[Sequence[pybranch]] = None) -> List[pynode]:
        """
        Find the shortest path between two nodes.

        Args:
            start: Start node handle or id
            end: Target node handle or id
            branches: Branch list used for weight detection and weighted
                relaxation; defaults to every branch in the graph

        Returns:
            Nodes from start to end, [start] if they coincide, or an empty
            list if end is unreachable
        """
        pNode_start = self.graph.resolve_node(start)
        pNode_end = self.graph.resolve_node(end)

        if pNode_start is pNode_end:
            return [pNode_start]

        if branches is None:
            branches = self.graph.get_branches()

        if self.is_weighted(branches):
            return self._dijkstra(pNode_start, pNode_end, branches)
        return self._bfs_shortest_path(pNode_start, pNode_end)

    def shortest_path_weight(self, start: NodeRef, end: NodeRef,
                             branches: Optional[Sequence[pybranch]] = None) -> Optional[float]:
        """
        Total weight of the shortest path, counting unweighted branches as 1.

        Returns:
            The path weight, or None if end is unreachable
        """
        path = self.shortest_path(start, end, branches)
        if not path:
            return None

        dWeight_total = 0.0
        for pNode_from, pNode_to in zip(path, path[1:]):
            candidates = [b.dWeight if b.dWeight is not None else 1
                          for b in pNode_from.aBranch if b.pNode_end is pNode_to]
            dWeight_total += min(candidates)
        return dWeight_total

    def is_weighted(self, branches: Sequence[pybranch]) -> bool:
        """Check whether the sampled prefix of a branch list carries weights."""
        sample = branches if self.weight_sample_size is None else branches[:self.weight_sample_size]
        return any(branch.is_weighted() for branch in sample)

    def _bfs_shortest_path(self, pNode_start: pynode, pNode_end: pynode) -> List[pynode]:
        """BFS with parent pointers for unweighted graphs."""
        visited: Set[pynode] = {pNode_start}
        queue: List[pynode] = [pNode_start]
        parent: Dict[pynode, pynode] = {}
        index = 0

        while index < len(queue):
            current = queue[index]
            index += 1

            if current is pNode_end:
                return self._reconstruct_path(parent, pNode_start, pNode_end)

            for branch in current.aBranch:
                pNode_next = branch.pNode_end
                if pNode_next not in visited:
                    visited.add(pNode_next)
                    parent[pNode_next] = current
                    queue.append(pNode_next)

        logger.debug(f"No path from {pNode_start.id!r} to {pNode_end.id!r}")
        return []

    def _dijkstra(self, pNode_start: pynode, pNode_end: pynode,
                  branches: Sequence[pybranch]) -> List[pynode]:
        """Label-setting search for weighted graphs."""
        adjacency: DefaultDict[pynode, List[pybranch]] = defaultdict(list)
        for branch in branches:
            adjacency[branch.pNode_start].append(branch)

        distances: Dict[pynode, float] = {pNode_start: 0.0}
        parent: Dict[pynode, pynode] = {}
        settled: Set[pynode] = set()
        frontier: List[pynode] = [pNode_start]

        while frontier:
            # First minimum wins ties, so scan order breaks them
            aDistance = np.array([distances.get(pNode, math.inf) for pNode in frontier])
            current = frontier.pop(int(np.argmin(aDistance)))
            settled.add(current)

            if current is pNode_end:
                return self._reconstruct_path(parent, pNode_start, pNode_end)

            for branch in adjacency[current]:
                neighbor = branch.pNode_end
                if neighbor in settled:
                    continue

                dWeight = branch.dWeight if branch.dWeight is not None else 1
                new_distance = distances[current] + dWeight

                if new_distance < distances.get(neighbor, math.inf):
                    distances[neighbor] = new_distance
                    parent[neighbor] = current
                    if neighbor not in frontier:
                        frontier.append(neighbor)

        logger.debug(f"No weighted path from {pNode_start.id!r} to {pNode_end.id!r}")
        return []

    @staticmethod
    def _reconstruct_path(parent: Dict[pynode, pynode], pNode_start: pynode,
                          pNode_end: pynode) -> List[pynode]:
        path = [pNode_end]
        current = pNode_end
        while current is not pNode_start:
            current = parent[current]
            path.append(current)
        path.reverse()
        return path
