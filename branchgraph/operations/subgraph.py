"""
Subgraph extraction.
"""

import logging
from typing import Iterable, List, Optional, Set, Tuple

from ..classes.node import pynode, NodeId
from ..core.graph import BranchGraph

logger = logging.getLogger(__name__)


def extract_subgraph(graph: BranchGraph, node_ids: Iterable[NodeId],
                     include_branches: bool = True) -> BranchGraph:
    """
    Extract the nodes with the given ids into a new graph.

    Args:
        graph: Source graph
        node_ids: Ids to keep; ids unknown to the graph are skipped
        include_branches: Whether to copy branches between kept nodes

    Returns:
        New graph with the kept nodes
    """
    subgraph = BranchGraph()
    for node_id in node_ids:
        pNode = graph.get_node(node_id)
        if pNode is not None and not subgraph.has_node(node_id):
            subgraph.add_node(pNode.value, node_id)

    if include_branches:
        for branch in graph.get_branches():
            if subgraph.has_node(branch.pNode_start.id) and subgraph.has_node(branch.pNode_end.id):
                subgraph.add_branch(branch.pNode_start.id, branch.pNode_end.id, branch.dWeight)

    logger.debug(f"Extracted subgraph with {subgraph.size()} nodes and {subgraph.branch_count()} branches")
    return subgraph


def extract_reachable_subgraph(graph: BranchGraph, start_id: NodeId,
                               max_depth: Optional[int] = None,
                               include_branches: bool = True) -> BranchGraph:
    """
    Extract the nodes reachable from a start node.

    Args:
        graph: Source graph
        start_id: Id of the start node
        max_depth: Maximum number of branches from the start; None is unbounded
        include_branches: Whether to copy branches between kept nodes

    Returns:
        New graph with the reachable nodes, empty if the start is unknown
    """
    pNode_start = graph.get_node(start_id)
    if pNode_start is None:
        return BranchGraph()

    visited: Set[pynode] = {pNode_start}
    queue: List[Tuple[pynode, int]] = [(pNode_start, 0)]
    index = 0

    while index < len(queue):
        current, depth = queue[index]
        index += 1

        if max_depth is not None and depth >= max_depth:
            continue

        for branch in current.aBranch:
            if branch.pNode_end not in visited:
                visited.add(branch.pNode_end)
                queue.append((branch.pNode_end, depth + 1))

    return extract_subgraph(graph, [pNode.id for pNode, _ in queue], include_branches)
