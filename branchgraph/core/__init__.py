"""
Core graph data structures and management.

This module contains the fundamental graph store, the error taxonomy and
the facade class without the analysis algorithms themselves.
"""

from .exceptions import (
    GraphError,
    DuplicateNodeError,
    NodeNotFoundError,
    SelfLoopError,
    CycleDetectedError,
    IdGenerationError,
)
from .graph import BranchGraph, NodeRef

__all__ = [
    'BranchGraph',
    'NodeRef',
    'GraphError',
    'DuplicateNodeError',
    'NodeNotFoundError',
    'SelfLoopError',
    'CycleDetectedError',
    'IdGenerationError',
]
