"""Shared test fixtures for branchgraph."""

import pytest

from branchgraph import BranchGraph, pybranchgraph


@pytest.fixture
def graph():
    """Create an empty graph store."""
    return BranchGraph()


@pytest.fixture
def weighted_graph():
    """A->B(2), B->C(1), A->D(3), D->C(1)."""
    g = BranchGraph()
    for name in "ABCD":
        g.add_node(name)
    g.add_branch("A", "B", 2)
    g.add_branch("B", "C", 1)
    g.add_branch("A", "D", 3)
    g.add_branch("D", "C", 1)
    return g


@pytest.fixture
def cyclic_graph():
    """A->B->C->A."""
    g = BranchGraph()
    for name in "ABC":
        g.add_node(name)
    g.add_branch("A", "B")
    g.add_branch("B", "C")
    g.add_branch("C", "A")
    return g


@pytest.fixture
def diamond_graph():
    """A->B, A->C, B->D, C->D."""
    g = BranchGraph()
    for name in "ABCD":
        g.add_node(name)
    g.add_branch("A", "B")
    g.add_branch("A", "C")
    g.add_branch("B", "D")
    g.add_branch("C", "D")
    return g


@pytest.fixture
def tree_graph():
    """A->B, A->C, B->D, B->E, C->F."""
    g = BranchGraph()
    for name in "ABCDEF":
        g.add_node(name)
    g.add_branch("A", "B")
    g.add_branch("A", "C")
    g.add_branch("B", "D")
    g.add_branch("B", "E")
    g.add_branch("C", "F")
    return g


@pytest.fixture
def facade():
    """Facade over the weighted scenario graph."""
    g = pybranchgraph()
    for name in "ABCD":
        g.add_node(name)
    g.add_branch("A", "B", 2)
    g.add_branch("B", "C", 1)
    g.add_branch("A", "D", 3)
    g.add_branch("D", "C", 1)
    return g
