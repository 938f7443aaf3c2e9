"""
Graph operation modules producing or modifying graphs.

This module contains transformations, subgraph extraction and merging.
"""

from .transformation import reverse_graph, transpose, to_undirected, filter_branches, filter_nodes
from .subgraph import extract_subgraph, extract_reachable_subgraph
from .merge import MergeConflictPolicy, merge_graph

__all__ = [
    'reverse_graph',
    'transpose',
    'to_undirected',
    'filter_branches',
    'filter_nodes',
    'extract_subgraph',
    'extract_reachable_subgraph',
    'MergeConflictPolicy',
    'merge_graph',
]
