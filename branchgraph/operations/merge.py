"""
Merging one graph into another.
"""

import logging
from enum import Enum
from typing import Dict

from ..classes.node import pynode
from ..core.exceptions import DuplicateNodeError
from ..core.graph import BranchGraph

logger = logging.getLogger(__name__)


class MergeConflictPolicy(Enum):
    """What to do when a source node id already exists in the target."""
    SKIP = "skip"
    OVERWRITE = "overwrite"
    RAISE = "raise"


def merge_graph(target: BranchGraph, source: BranchGraph,
                on_conflict: MergeConflictPolicy = MergeConflictPolicy.SKIP,
                merge_branches: bool = True) -> BranchGraph:
    """
    Merge the nodes and branches of source into target.

    Args:
        target: Graph receiving the merge; modified in place
        source: Graph to merge from; left untouched
        on_conflict: SKIP keeps the target value, OVERWRITE replaces it with
            the source value, RAISE fails with DuplicateNodeError
        merge_branches: Whether to copy branches; a branch is not added if
            the target already has one between the same endpoints

    Returns:
        The target graph

    Raises:
        DuplicateNodeError: On an id conflict under the RAISE policy
    """
    mapping: Dict[pynode, pynode] = {}

    for pNode in source.get_nodes():
        existing = target.get_node(pNode.id)
        if existing is None:
            mapping[pNode] = target.add_node(pNode.value, pNode.id)
            continue

        if on_conflict is MergeConflictPolicy.RAISE:
            raise DuplicateNodeError(f'Node with id "{pNode.id}" already exists', pNode.id)
        if on_conflict is MergeConflictPolicy.OVERWRITE:
            existing.value = pNode.value
        mapping[pNode] = existing

    nBranch_added = 0
    if merge_branches:
        for branch in source.get_branches():
            pNode_start = mapping[branch.pNode_start]
            pNode_end = mapping[branch.pNode_end]
            if not target.has_branch(pNode_start, pNode_end):
                target.add_branch(pNode_start, pNode_end, branch.dWeight)
                nBranch_added += 1

    logger.debug(f"Merged {len(mapping)} nodes and {nBranch_added} branches")
    return target
