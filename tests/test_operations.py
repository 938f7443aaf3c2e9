"""Tests for graph transformations, subgraphs and merging."""

import pytest

from branchgraph import BranchGraph, DuplicateNodeError
from branchgraph.operations import (
    MergeConflictPolicy,
    extract_reachable_subgraph,
    extract_subgraph,
    filter_branches,
    filter_nodes,
    merge_graph,
    reverse_graph,
    to_undirected,
    transpose,
)


def pairs(graph):
    return [(b.pNode_start.id, b.pNode_end.id, b.dWeight) for b in graph.get_branches()]


class TestTransformations:
    """Tests for graph transformations."""

    def test_reverse(self, weighted_graph):
        """Test that every branch is flipped with its weight."""
        reversed_graph = reverse_graph(weighted_graph)

        assert pairs(reversed_graph) == [("B", "A", 2), ("C", "B", 1), ("D", "A", 3), ("C", "D", 1)]
        assert reversed_graph.size() == weighted_graph.size()
        assert pairs(weighted_graph)[0] == ("A", "B", 2)

    def test_transpose_matches_reverse(self, diamond_graph):
        """Test that transpose is reverse_graph."""
        assert pairs(transpose(diamond_graph)) == pairs(reverse_graph(diamond_graph))

    def test_values_preserved(self, graph):
        """Test that node values are carried over."""
        graph.add_node({"k": 1}, "x")

        assert reverse_graph(graph).get_node("x").value == {"k": 1}

    def test_to_undirected(self, graph):
        """Test that each connected pair gets one branch per direction."""
        for name in "ABC":
            graph.add_node(name)
        graph.add_branch("A", "B", 4)
        graph.add_branch("B", "A", 9)
        graph.add_branch("B", "C")

        undirected = to_undirected(graph)

        assert pairs(undirected) == [("A", "B", 4), ("B", "A", 4), ("B", "C", None), ("C", "B", None)]

    def test_filter_branches(self, weighted_graph):
        """Test keeping heavy branches and their endpoints only."""
        filtered = filter_branches(weighted_graph, lambda branch: branch.dWeight > 1)

        assert pairs(filtered) == [("A", "B", 2), ("A", "D", 3)]
        assert [n.id for n in filtered.get_nodes()] == ["A", "B", "D"]

    def test_filter_nodes(self, diamond_graph):
        """Test dropping a node and its branches."""
        filtered = filter_nodes(diamond_graph, lambda node: node.id != "B")

        assert [n.id for n in filtered.get_nodes()] == ["A", "C", "D"]
        assert pairs(filtered) == [("A", "C", None), ("C", "D", None)]


class TestSubgraph:
    """Tests for subgraph extraction."""

    def test_extract(self, diamond_graph):
        """Test extracting nodes with the branches between them."""
        sub = extract_subgraph(diamond_graph, ["A", "B", "D", "Z"])

        assert [n.id for n in sub.get_nodes()] == ["A", "B", "D"]
        assert pairs(sub) == [("A", "B", None), ("B", "D", None)]

    def test_extract_without_branches(self, diamond_graph):
        """Test extracting bare nodes."""
        sub = extract_subgraph(diamond_graph, ["A", "B"], include_branches=False)

        assert sub.branch_count() == 0

    def test_reachable(self, tree_graph):
        """Test extracting everything reachable from a node."""
        sub = extract_reachable_subgraph(tree_graph, "B")

        assert [n.id for n in sub.get_nodes()] == ["B", "D", "E"]
        assert sub.branch_count() == 2

    def test_reachable_depth(self, tree_graph):
        """Test bounding the extraction depth."""
        sub = extract_reachable_subgraph(tree_graph, "A", max_depth=1)

        assert [n.id for n in sub.get_nodes()] == ["A", "B", "C"]

    def test_reachable_unknown_start(self, tree_graph):
        """Test that an unknown start yields an empty graph."""
        assert extract_reachable_subgraph(tree_graph, "Z").is_empty()


class TestMerge:
    """Tests for merging graphs."""

    @pytest.fixture
    def other(self):
        g = BranchGraph()
        g.add_node("new B", "B")
        g.add_node("E")
        g.add_branch("B", "E", 7)
        g.add_branch("E", "B")
        return g

    def test_skip(self, diamond_graph, other):
        """Test that conflicts keep the target value."""
        merged = merge_graph(diamond_graph, other)

        assert merged is diamond_graph
        assert merged.get_node("B").value == "B"
        assert merged.has_branch("B", "E")
        assert merged.has_branch("E", "B")
        assert merged.size() == 5
        assert other.size() == 2

    def test_overwrite(self, diamond_graph, other):
        """Test that conflicts take the source value."""
        merge_graph(diamond_graph, other, MergeConflictPolicy.OVERWRITE)

        assert diamond_graph.get_node("B").value == "new B"

    def test_raise(self, diamond_graph, other):
        """Test that conflicts fail under the RAISE policy."""
        with pytest.raises(DuplicateNodeError):
            merge_graph(diamond_graph, other, MergeConflictPolicy.RAISE)

    def test_existing_branches_not_duplicated(self, diamond_graph):
        """Test that a branch between the same endpoints is not repeated."""
        merge_graph(diamond_graph, extract_subgraph(diamond_graph, ["A", "B"]))

        assert diamond_graph.branch_count() == 4

    def test_nodes_only(self, diamond_graph, other):
        """Test merging without branches."""
        merge_graph(diamond_graph, other, merge_branches=False)

        assert diamond_graph.has_node("E")
        assert diamond_graph.branch_count() == 4
