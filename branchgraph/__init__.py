"""
BranchGraph - Directed Graph Container and Algorithms

A Python library for modeling relationships as directed graphs of nodes and
branches, and querying their structure: traversal, shortest paths, cycles,
topological order, components and constrained path enumeration.

Main Classes:
    pybranchgraph: Main class for graph analysis (facade)
    BranchGraph: Graph store enforcing referential integrity
    pynode: Node representation in the graph
    pybranch: Directed branch between two nodes

Example:
    >>> from branchgraph import pybranchgraph
    >>> graph = pybranchgraph()
    >>> graph.add_node('A')
    >>> graph.add_node('B')
    >>> graph.add_branch('A', 'B', 2)
    >>> graph.shortest_path('A', 'B')
"""

__version__ = "0.1.0"

from branchgraph.classes.node import pynode
from branchgraph.classes.branch import pybranch
from branchgraph.core.exceptions import (
    GraphError,
    DuplicateNodeError,
    NodeNotFoundError,
    SelfLoopError,
    CycleDetectedError,
    IdGenerationError,
)
from branchgraph.core.graph import BranchGraph
from branchgraph.core.branchgraph import pybranchgraph
from branchgraph.analysis.pathfinding import PathConstraints

__all__ = [
    'pybranchgraph',
    'BranchGraph',
    'pynode',
    'pybranch',
    'PathConstraints',
    'GraphError',
    'DuplicateNodeError',
    'NodeNotFoundError',
    'SelfLoopError',
    'CycleDetectedError',
    'IdGenerationError',
]
