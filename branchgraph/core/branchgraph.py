"""
Main facade class for directed graph analysis.

This module provides the pybranchgraph class that exposes the graph store and
every analysis engine through one object, delegating to specialized modules.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..classes.node import pynode, NodeId
from ..classes.branch import pybranch, Weight
from .graph import BranchGraph, NodeRef
from .settings import DEFAULT_CANDIDATE_CAP, WEIGHT_SAMPLE_SIZE
from ..analysis.traversal import GraphTraverser, TraversalResult, BFSIterator, DFSIterator
from ..analysis.shortest_path import ShortestPathFinder
from ..analysis.detection import CycleDetector
from ..analysis.topology import TopologyManager
from ..analysis.components import ComponentAnalyzer
from ..analysis.pathfinding import PathConstraints, PathFinder, PathIterator
from ..analysis.query import GraphQuery
from ..analysis.statistics import GraphStatistics, compute_statistics

logger = logging.getLogger(__name__)


class pybranchgraph:
    """
    Main facade class for directed graph analysis.

    Owns one BranchGraph and one instance of each analysis engine, and
    forwards the mutation surface, the read surface and every algorithm.
    """

    def __init__(self, data: Optional[Iterable[Tuple[NodeId, Any]]] = None,
                 weight_sample_size: Optional[int] = WEIGHT_SAMPLE_SIZE,
                 candidate_cap: int = DEFAULT_CANDIDATE_CAP):
        """
        Initialize the graph and its analysis components.

        Args:
            data: Optional iterable of (node_id, value) pairs to insert
            weight_sample_size: Leading branches inspected by shortest_path to
                detect weights; None inspects every branch
            candidate_cap: Candidate paths compared by find_shortest_path
        """
        self._graph = BranchGraph(data)

        # Initialize analysis components
        self._traverser = GraphTraverser(self._graph)
        self._shortest = ShortestPathFinder(self._graph, weight_sample_size)
        self._detector = CycleDetector(self._graph)
        self._topology = TopologyManager(self._graph)
        self._components = ComponentAnalyzer(self._graph)
        self._pathfinder = PathFinder(self._graph, candidate_cap)
        self._query = GraphQuery(self._graph)

        logger.debug("Initialized pybranchgraph")

    @property
    def graph(self) -> BranchGraph:
        """The underlying graph store."""
        return self._graph

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_node(self, value: Any, node_id: Optional[NodeId] = None) -> pynode:
        """Add a node; see BranchGraph.add_node."""
        return self._graph.add_node(value, node_id)

    def add_branch(self, source: NodeRef, destination: NodeRef,
                   weight: Optional[Weight] = None) -> pybranch:
        """Add a branch; see BranchGraph.add_branch."""
        return self._graph.add_branch(source, destination, weight)

    def remove_node(self, node: NodeRef) -> None:
        self._graph.remove_node(node)

    def remove_branch(self, branch: pybranch) -> None:
        self._graph.remove_branch(branch)

    def clear(self) -> None:
        self._graph.clear()

    # ========================================================================
    # READ
    # ========================================================================

    def get_node(self, node_id: NodeId) -> Optional[pynode]:
        return self._graph.get_node(node_id)

    def get_nodes(self) -> List[pynode]:
        return self._graph.get_nodes()

    def get_branches(self) -> List[pybranch]:
        return self._graph.get_branches()

    def has_node(self, node_id: NodeId) -> bool:
        return self._graph.has_node(node_id)

    def has_branch(self, source: NodeRef, destination: NodeRef) -> bool:
        return self._graph.has_branch(source, destination)

    def size(self) -> int:
        return self._graph.size()

    def branch_count(self) -> int:
        return self._graph.branch_count()

    def is_empty(self) -> bool:
        return self._graph.is_empty()

    def get_incoming_branches(self, node: NodeRef) -> List[pybranch]:
        return self._graph.get_incoming_branches(node)

    def get_predecessors(self, node: NodeRef) -> List[pynode]:
        """Get the source nodes of the branches ending at a node."""
        return self._graph.get_predecessors(node)

    def in_degree(self, node: NodeRef) -> int:
        return self._graph.in_degree(node)

    def out_degree(self, node: NodeRef) -> int:
        return self._graph.out_degree(node)

    def get_sources(self) -> List[pynode]:
        """Get source nodes with no incoming branches."""
        return self._graph.get_sources()

    def get_sinks(self) -> List[pynode]:
        """Get sink nodes with no outgoing branches."""
        return self._graph.get_sinks()

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __iter__(self) -> Iterator[pynode]:
        return iter(self._graph)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def bfs(self, start: NodeRef, visit=None) -> List[pynode]:
        """Breadth-first traversal from a start node."""
        return self._traverser.bfs(start, visit)

    def dfs(self, start: NodeRef, visit=None) -> List[pynode]:
        """Depth-first traversal from a start node."""
        return self._traverser.dfs(start, visit)

    def bfs_search(self, start: NodeRef, predicate) -> TraversalResult:
        return self._traverser.bfs_search(start, predicate)

    def dfs_search(self, start: NodeRef, predicate) -> TraversalResult:
        return self._traverser.dfs_search(start, predicate)

    def iter_bfs(self, start: NodeRef) -> BFSIterator:
        return self._traverser.iter_bfs(start)

    def iter_dfs(self, start: NodeRef) -> DFSIterator:
        return self._traverser.iter_dfs(start)

    # ========================================================================
    # SHORTEST PATH
    # ========================================================================

    def shortest_path(self, start: NodeRef, end: NodeRef,
                      branches: Optional[Sequence[pybranch]] = None) -> List[pynode]:
        """Find the shortest path, weighted or unweighted."""
        return self._shortest.shortest_path(start, end, branches)

    def shortest_path_weight(self, start: NodeRef, end: NodeRef,
                             branches: Optional[Sequence[pybranch]] = None) -> Optional[float]:
        return self._shortest.shortest_path_weight(start, end, branches)

    # ========================================================================
    # CYCLES & TOPOLOGY
    # ========================================================================

    def detect_cycle(self, start: NodeRef) -> bool:
        """Check whether a cycle is reachable from a start node."""
        return self._detector.detect_cycle(start)

    def find_cycle(self, start: NodeRef) -> List[pynode]:
        return self._detector.find_cycle(start)

    def has_cycle(self) -> bool:
        return self._detector.has_cycle()

    def topological_sort(self) -> List[pynode]:
        """Sort all nodes topologically; raises CycleDetectedError on cycles."""
        return self._topology.topological_sort()

    def is_dag(self) -> bool:
        return self._topology.is_dag()

    # ========================================================================
    # COMPONENTS
    # ========================================================================

    def find_connected_components(self) -> List[List[pynode]]:
        return self._components.find_connected_components()

    def count_connected_components(self) -> int:
        return self._components.count_connected_components()

    def is_connected(self) -> bool:
        return self._components.is_connected()

    def find_strongly_connected_components(self) -> List[List[pynode]]:
        return self._components.find_strongly_connected_components()

    def is_strongly_connected(self) -> bool:
        return self._components.is_strongly_connected()

    # ========================================================================
    # PATH ENUMERATION
    # ========================================================================

    def find_paths(self, start: NodeRef, end: NodeRef,
                   constraints: Optional[PathConstraints] = None) -> List[List[pynode]]:
        """Find all simple paths honoring the constraints."""
        return self._pathfinder.find_paths(start, end, constraints)

    def iter_paths(self, start: NodeRef, end: NodeRef,
                   constraints: Optional[PathConstraints] = None) -> PathIterator:
        return self._pathfinder.iter_paths(start, end, constraints)

    def all_paths(self, start: NodeRef, end: NodeRef) -> List[List[pynode]]:
        return self._pathfinder.all_paths(start, end)

    def iter_all_paths(self, start: NodeRef, end: NodeRef) -> PathIterator:
        return self._pathfinder.iter_all_paths(start, end)

    def find_shortest_path(self, start: NodeRef, end: NodeRef,
                           constraints: Optional[PathConstraints] = None) -> List[pynode]:
        """Find the lightest path among capped constrained candidates."""
        return self._pathfinder.find_shortest_path(start, end, constraints)

    def find_paths_avoiding(self, start: NodeRef, end: NodeRef,
                            avoid: Iterable[NodeRef]) -> List[List[pynode]]:
        return self._pathfinder.find_paths_avoiding(start, end, avoid)

    def iter_paths_avoiding(self, start: NodeRef, end: NodeRef,
                            avoid: Iterable[NodeRef]) -> PathIterator:
        return self._pathfinder.iter_paths_avoiding(start, end, avoid)

    def find_paths_through(self, start: NodeRef, end: NodeRef,
                           required: Iterable[NodeRef]) -> List[List[pynode]]:
        return self._pathfinder.find_paths_through(start, end, required)

    def iter_paths_through(self, start: NodeRef, end: NodeRef,
                           required: Iterable[NodeRef]) -> Iterator[List[pynode]]:
        return self._pathfinder.iter_paths_through(start, end, required)

    def path_weight(self, path: List[pynode], default_weight: Weight = 0) -> float:
        """Sum the weights along a path; see PathFinder.path_weight."""
        return PathFinder.path_weight(path, default_weight)

    # ========================================================================
    # QUERY & STATISTICS
    # ========================================================================

    def find_nodes(self, predicate, limit: Optional[int] = None, offset: int = 0) -> List[pynode]:
        return self._query.find_nodes(predicate, limit, offset)

    def find_node(self, predicate) -> Optional[pynode]:
        return self._query.find_node(predicate)

    def iter_nodes(self, predicate, limit: Optional[int] = None) -> Iterator[pynode]:
        return self._query.iter_nodes(predicate, limit)

    def find_branches(self, predicate, limit: Optional[int] = None, offset: int = 0) -> List[pybranch]:
        return self._query.find_branches(predicate, limit, offset)

    def filter_nodes_by_value(self, name: str, value: Any) -> List[pynode]:
        """Find nodes whose value has a property equal to the given value."""
        return self._query.filter_nodes_by_value(name, value)

    def filter_branches_by_weight(self, min_weight: Weight, max_weight: Weight) -> List[pybranch]:
        return self._query.filter_branches_by_weight(min_weight, max_weight)

    def get_statistics(self, directed: bool = True) -> GraphStatistics:
        """Calculate summary statistics of the graph."""
        return compute_statistics(self._graph, directed)
