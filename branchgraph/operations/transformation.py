"""
Graph transformations producing new graphs.

Every transformation copies node ids, values and branch weights into a fresh
BranchGraph and leaves the input untouched.
"""

import logging
from typing import Callable, Set, Tuple

from ..classes.node import pynode, NodeId
from ..classes.branch import pybranch
from ..core.graph import BranchGraph

logger = logging.getLogger(__name__)


def _copy_nodes(graph: BranchGraph) -> BranchGraph:
    copy = BranchGraph()
    for pNode in graph.get_nodes():
        copy.add_node(pNode.value, pNode.id)
    return copy


def reverse_graph(graph: BranchGraph) -> BranchGraph:
    """
    Reverse the direction of every branch.

    Args:
        graph: Graph to reverse

    Returns:
        New graph with every branch a -> b replaced by b -> a
    """
    reversed_graph = _copy_nodes(graph)
    for branch in graph.get_branches():
        reversed_graph.add_branch(branch.pNode_end.id, branch.pNode_start.id, branch.dWeight)

    logger.debug(f"Reversed {reversed_graph.branch_count()} branches")
    return reversed_graph


def transpose(graph: BranchGraph) -> BranchGraph:
    """Same as reverse_graph."""
    return reverse_graph(graph)


def to_undirected(graph: BranchGraph) -> BranchGraph:
    """
    Make every connection bidirectional.

    Each connected pair gets exactly one branch in each direction; the weight
    of the first branch seen for a pair is used for the missing direction.
    """
    undirected = _copy_nodes(graph)
    added: Set[Tuple[NodeId, NodeId]] = set()

    for branch in graph.get_branches():
        key_forward = (branch.pNode_start.id, branch.pNode_end.id)
        key_backward = (branch.pNode_end.id, branch.pNode_start.id)

        if key_forward not in added:
            undirected.add_branch(key_forward[0], key_forward[1], branch.dWeight)
            added.add(key_forward)
        if key_backward not in added:
            undirected.add_branch(key_backward[0], key_backward[1], branch.dWeight)
            added.add(key_backward)

    return undirected


def filter_branches(graph: BranchGraph, branch_filter: Callable[[pybranch], bool]) -> BranchGraph:
    """
    Keep only branches accepted by a predicate.

    Returns:
        New graph holding the accepted branches and their endpoints
    """
    filtered = BranchGraph()
    aBranch = [branch for branch in graph.get_branches() if branch_filter(branch)]

    for branch in aBranch:
        for pNode in (branch.pNode_start, branch.pNode_end):
            if not filtered.has_node(pNode.id):
                filtered.add_node(pNode.value, pNode.id)
        filtered.add_branch(branch.pNode_start.id, branch.pNode_end.id, branch.dWeight)

    return filtered


def filter_nodes(graph: BranchGraph, node_filter: Callable[[pynode], bool]) -> BranchGraph:
    """
    Keep only nodes accepted by a predicate.

    Returns:
        New graph holding the accepted nodes and the branches between them
    """
    filtered = BranchGraph()
    for pNode in graph.get_nodes():
        if node_filter(pNode):
            filtered.add_node(pNode.value, pNode.id)

    for branch in graph.get_branches():
        if filtered.has_node(branch.pNode_start.id) and filtered.has_node(branch.pNode_end.id):
            filtered.add_branch(branch.pNode_start.id, branch.pNode_end.id, branch.dWeight)

    return filtered
