"""
Predicate queries over nodes and branches.
"""

import logging
from collections.abc import Mapping
from itertools import islice
from typing import Any, Callable, Iterator, List, Optional

from ..classes.node import pynode
from ..classes.branch import pybranch, Weight
from ..core.graph import BranchGraph

logger = logging.getLogger(__name__)

NodePredicate = Callable[[pynode], bool]
BranchPredicate = Callable[[pybranch], bool]


class GraphQuery:
    """Searches the nodes and branches of a BranchGraph by predicate."""

    def __init__(self, graph: BranchGraph):
        """
        Initialize the query helper.

        Args:
            graph: BranchGraph instance to query
        """
        self.graph = graph

    def find_nodes(self, predicate: NodePredicate, limit: Optional[int] = None,
                   offset: int = 0) -> List[pynode]:
        """
        Find nodes matching a predicate, in insertion order.

        Args:
            predicate: Returns True for matching nodes
            limit: Maximum number of results
            offset: Number of leading matches to skip

        Returns:
            Matching nodes
        """
        matching = (pNode for pNode in self.graph.get_nodes() if predicate(pNode))
        stop = None if limit is None else offset + limit
        return list(islice(matching, offset, stop))

    def find_node(self, predicate: NodePredicate) -> Optional[pynode]:
        return next((pNode for pNode in self.graph.get_nodes() if predicate(pNode)), None)

    def iter_nodes(self, predicate: NodePredicate, limit: Optional[int] = None) -> Iterator[pynode]:
        """Lazily yield nodes matching a predicate, at most limit of them."""
        matching = (pNode for pNode in self.graph.get_nodes() if predicate(pNode))
        return islice(matching, limit)

    def find_branches(self, predicate: BranchPredicate, limit: Optional[int] = None,
                      offset: int = 0) -> List[pybranch]:
        """Find branches matching a predicate, in insertion order."""
        matching = (branch for branch in self.graph.get_branches() if predicate(branch))
        stop = None if limit is None else offset + limit
        return list(islice(matching, offset, stop))

    def find_branch(self, predicate: BranchPredicate) -> Optional[pybranch]:
        return next((branch for branch in self.graph.get_branches() if predicate(branch)), None)

    def filter_nodes_by_value(self, name: str, value: Any) -> List[pynode]:
        """
        Find nodes whose value has a property equal to the given value.

        Mapping values are looked up by key, other values by attribute.
        """
        missing = object()

        def matches(pNode: pynode) -> bool:
            if isinstance(pNode.value, Mapping):
                found = pNode.value.get(name, missing)
            else:
                found = getattr(pNode.value, name, missing)
            return found is not missing and found == value

        return self.find_nodes(matches)

    def filter_branches_by_weight(self, min_weight: Weight, max_weight: Weight) -> List[pybranch]:
        """Find branches whose weight lies in [min_weight, max_weight]; unweighted counts as 0."""
        def in_range(branch: pybranch) -> bool:
            dWeight = branch.dWeight if branch.dWeight is not None else 0
            return min_weight <= dWeight <= max_weight

        return self.find_branches(in_range)
