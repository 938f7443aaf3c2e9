"""
Constrained simple-path enumeration.

This module provides depth-first backtracking over simple paths between two
nodes, bounded by length, weight, node and branch predicates and a result
count. Every eager operation is backed by the lazy PathIterator, so eager
and lazy variants apply identical pruning.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, List, Optional, Set

from ..classes.node import pynode
from ..classes.branch import pybranch, Weight
from ..core.graph import BranchGraph, NodeRef
from ..core.settings import DEFAULT_CANDIDATE_CAP

logger = logging.getLogger(__name__)


@dataclass
class PathConstraints:
    """
    Bounds for path enumeration.

    Attributes:
        max_length: Maximum number of branches in a path
        max_weight: Maximum cumulative weight (inclusive); unweighted branches add 0
        node_filter: Nodes rejected by this predicate never appear in a path
        branch_filter: Branches rejected by this predicate are never followed
        max_paths: Maximum number of paths produced
    """
    max_length: Optional[int] = None
    max_weight: Optional[Weight] = None
    node_filter: Optional[Callable[[pynode], bool]] = None
    branch_filter: Optional[Callable[[pybranch], bool]] = None
    max_paths: Optional[int] = None


class PathIterator:
    """
    Lazy enumeration of simple paths from a start node to a target node.

    The resumable state is the active path, the membership set of the active
    path, the cumulative weight at each depth and a branch cursor per depth.
    Each call to next() resumes the backtracking search and suspends right
    after one path is found.
    """

    def __init__(self, pNode_start: pynode, pNode_end: pynode,
                 constraints: Optional[PathConstraints] = None):
        self.constraints = constraints or PathConstraints()
        self.last_weight: Optional[float] = None

        self._target = pNode_end
        self._count = 0
        self._path: List[pynode] = []
        self._on_path: Set[pynode] = set()
        self._weights: List[float] = []
        self._cursor: List[int] = []
        self._trivial: Optional[pynode] = None

        node_filter = self.constraints.node_filter
        if node_filter is not None and not node_filter(pNode_start):
            return

        if pNode_start is pNode_end:
            self._trivial = pNode_start
        elif self._can_descend(0, 0):
            self._push(pNode_start, 0)

    def __iter__(self) -> "PathIterator":
        return self

    def __next__(self) -> List[pynode]:
        c = self.constraints

        if c.max_paths is not None and self._count >= c.max_paths:
            self._release()
            raise StopIteration

        if self._trivial is not None:
            pNode = self._trivial
            self._trivial = None
            return self._emit([pNode], 0)

        while self._path:
            current = self._path[-1]
            index = self._cursor[-1]

            if index >= len(current.aBranch):
                self._pop()
                continue

            self._cursor[-1] = index + 1
            branch = current.aBranch[index]
            pNode_next = branch.pNode_end

            if pNode_next in self._on_path:
                continue
            if c.branch_filter is not None and not c.branch_filter(branch):
                continue
            if c.node_filter is not None and not c.node_filter(pNode_next):
                continue

            dWeight = self._weights[-1] + (branch.dWeight or 0)
            if c.max_weight is not None and dWeight > c.max_weight:
                continue

            if pNode_next is self._target:
                return self._emit(self._path + [pNode_next], dWeight)

            if self._can_descend(len(self._path), dWeight):
                self._push(pNode_next, dWeight)

        raise StopIteration

    def _can_descend(self, nBranch: int, dWeight: float) -> bool:
        c = self.constraints
        if c.max_length is not None and nBranch >= c.max_length:
            return False
        if c.max_weight is not None and dWeight >= c.max_weight:
            return False
        return True

    def _push(self, pNode: pynode, dWeight: float) -> None:
        self._path.append(pNode)
        self._on_path.add(pNode)
        self._weights.append(dWeight)
        self._cursor.append(0)

    def _pop(self) -> None:
        pNode = self._path.pop()
        self._on_path.discard(pNode)
        self._weights.pop()
        self._cursor.pop()

    def _release(self) -> None:
        self._path.clear()
        self._on_path.clear()
        self._weights.clear()
        self._cursor.clear()
        self._trivial = None

    def _emit(self, path: List[pynode], dWeight: float) -> List[pynode]:
        self._count += 1
        self.last_weight = dWeight
        return path


class PathFinder:
    """
    Path enumeration over a BranchGraph.

    This class provides methods for:
    - Finding all simple paths, with or without constraints
    - Picking the lightest path among constrained candidates
    - Finding paths that avoid or pass through given nodes
    """

    def __init__(self, graph: BranchGraph, candidate_cap: int = DEFAULT_CANDIDATE_CAP):
        """
        Initialize the path finder.

        Args:
            graph: BranchGraph instance to search
            candidate_cap: Candidate paths compared by find_shortest_path
        """
        self.graph = graph
        self.candidate_cap = candidate_cap

    def iter_paths(self, start: NodeRef, end: NodeRef,
                   constraints: Optional[PathConstraints] = None) -> PathIterator:
        """Lazily enumerate simple paths honoring the constraints."""
        return PathIterator(self.graph.resolve_node(start), self.graph.resolve_node(end), constraints)

    def find_paths(self, start: NodeRef, end: NodeRef,
                   constraints: Optional[PathConstraints] = None) -> List[List[pynode]]:
        """
        Find all simple paths honoring the constraints.

        Args:
            start: Start node handle or id
            end: Target node handle or id
            constraints: Optional bounds and filters

        Returns:
            List of paths, where each path is a list of nodes
        """
        paths = list(self.iter_paths(start, end, constraints))
        logger.debug(f"Found {len(paths)} paths")
        return paths

    def iter_all_paths(self, start: NodeRef, end: NodeRef) -> PathIterator:
        return self.iter_paths(start, end)

    def all_paths(self, start: NodeRef, end: NodeRef) -> List[List[pynode]]:
        """Find every simple path between two nodes."""
        return self.find_paths(start, end)

    def find_shortest_path(self, start: NodeRef, end: NodeRef,
                           constraints: Optional[PathConstraints] = None) -> List[pynode]:
        """
        Find the lightest path among a capped set of constrained candidates.

        At most candidate_cap candidates are collected (fewer if the caller's
        max_paths is lower), so the result is not guaranteed optimal when more
        paths exist.

        Returns:
            The minimum-weight candidate, or an empty list if none exists
        """
        constraints = constraints or PathConstraints()
        cap = self.candidate_cap
        if constraints.max_paths is not None:
            cap = min(cap, constraints.max_paths)

        iterator = self.iter_paths(start, end, replace(constraints, max_paths=cap))
        shortest: List[pynode] = []
        dWeight_min = None
        for path in iterator:
            if dWeight_min is None or iterator.last_weight < dWeight_min:
                shortest = path
                dWeight_min = iterator.last_weight

        return shortest

    def iter_paths_avoiding(self, start: NodeRef, end: NodeRef,
                            avoid: Iterable[NodeRef]) -> PathIterator:
        aAvoid = {self.graph.resolve_node(node) for node in avoid}
        return self.iter_paths(start, end, PathConstraints(node_filter=lambda pNode: pNode not in aAvoid))

    def find_paths_avoiding(self, start: NodeRef, end: NodeRef,
                            avoid: Iterable[NodeRef]) -> List[List[pynode]]:
        """Find all simple paths that contain none of the given nodes."""
        return list(self.iter_paths_avoiding(start, end, avoid))

    def iter_paths_through(self, start: NodeRef, end: NodeRef,
                           required: Iterable[NodeRef]) -> Iterator[List[pynode]]:
        aRequired = {self.graph.resolve_node(node) for node in required}
        return (path for path in self.iter_paths(start, end) if aRequired.issubset(path))

    def find_paths_through(self, start: NodeRef, end: NodeRef,
                           required: Iterable[NodeRef]) -> List[List[pynode]]:
        """
        Find all simple paths that contain every given node.

        Every unconstrained simple path is generated and then filtered, which
        can be expensive on dense graphs.
        """
        return list(self.iter_paths_through(start, end, required))

    @staticmethod
    def path_weight(path: List[pynode], default_weight: Weight = 0) -> float:
        """
        Sum the weights along a path of nodes.

        The first branch between each consecutive pair is used; unweighted
        branches count as default_weight.

        Raises:
            ValueError: If two consecutive nodes are not connected
        """
        dWeight_total = 0.0
        for pNode_from, pNode_to in zip(path, path[1:]):
            branch = next((b for b in pNode_from.aBranch if b.pNode_end is pNode_to), None)
            if branch is None:
                raise ValueError(f"No branch from {pNode_from.id!r} to {pNode_to.id!r}")
            dWeight_total += branch.dWeight if branch.dWeight is not None else default_weight
        return dWeight_total
