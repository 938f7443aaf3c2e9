"""
Summary statistics for directed graphs.

Degree and weight summaries are computed with numpy arrays.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.graph import BranchGraph

logger = logging.getLogger(__name__)


@dataclass
class GraphStatistics:
    """Counts, density, degree and weight summary of a graph."""
    node_count: int = 0
    branch_count: int = 0
    density: float = 0.0
    average_degree: float = 0.0
    max_degree: int = 0
    min_degree: int = 0
    isolated_nodes: int = 0
    is_empty: bool = True
    has_branches: bool = False
    total_weight: Optional[float] = None
    average_weight: Optional[float] = None


def compute_statistics(graph: BranchGraph, directed: bool = True) -> GraphStatistics:
    """
    Calculate graph statistics.

    Degrees count both incoming and outgoing branches. The average degree is
    branches per node. Density is branches over n*(n-1) for directed graphs
    and over n*(n-1)/2 otherwise.

    Args:
        graph: BranchGraph instance to analyze
        directed: Whether the density treats the graph as directed

    Returns:
        GraphStatistics for the graph
    """
    aNode = graph.get_nodes()
    aBranch = graph.get_branches()
    nNode = len(aNode)
    nBranch = len(aBranch)

    stats = GraphStatistics(node_count=nNode, branch_count=nBranch,
                            is_empty=nNode == 0, has_branches=nBranch > 0)

    if nNode > 0:
        aDegree = np.array([graph.in_degree(pNode) + pNode.get_out_degree() for pNode in aNode])
        stats.max_degree = int(aDegree.max())
        stats.min_degree = int(aDegree.min())
        stats.isolated_nodes = int(np.count_nonzero(aDegree == 0))
        stats.average_degree = nBranch / nNode

    if nNode > 1:
        nPossible = nNode * (nNode - 1)
        if not directed:
            nPossible = nPossible / 2
        stats.density = nBranch / nPossible

    aWeight = np.array([branch.dWeight for branch in aBranch if branch.is_weighted()], dtype=float)
    if aWeight.size > 0:
        stats.total_weight = float(aWeight.sum())
        stats.average_weight = float(aWeight.mean())

    logger.debug(f"Computed statistics for {nNode} nodes and {nBranch} branches")
    return stats
