"""
Core data classes for graph representation.

This module contains the fundamental data structures used throughout
the branchgraph library.
"""

from .node import pynode, NodeId
from .branch import pybranch, Weight

__all__ = [
    'pynode',
    'pybranch',
    'NodeId',
    'Weight',
]
