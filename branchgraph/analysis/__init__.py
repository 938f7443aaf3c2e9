"""
Graph analysis modules for traversal, path finding and structure detection.

This module contains classes for traversal, shortest paths, cycle detection,
topological ordering, components, path enumeration, queries and statistics.
"""

from .traversal import GraphTraverser, TraversalResult, BFSIterator, DFSIterator
from .shortest_path import ShortestPathFinder
from .detection import CycleDetector, NodeColor
from .topology import TopologyManager
from .components import ComponentAnalyzer
from .pathfinding import PathConstraints, PathFinder, PathIterator
from .query import GraphQuery
from .statistics import GraphStatistics, compute_statistics

__all__ = [
    'GraphTraverser',
    'TraversalResult',
    'BFSIterator',
    'DFSIterator',
    'ShortestPathFinder',
    'CycleDetector',
    'NodeColor',
    'TopologyManager',
    'ComponentAnalyzer',
    'PathConstraints',
    'PathFinder',
    'PathIterator',
    'GraphQuery',
    'GraphStatistics',
    'compute_statistics',
]
