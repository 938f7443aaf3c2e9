"""Tests for breadth-first and depth-first traversal."""

import pytest

from branchgraph import BranchGraph, NodeNotFoundError
from branchgraph.analysis import GraphTraverser


def ids(nodes):
    return [node.id for node in nodes]


class TestBFS:
    """Tests for eager breadth-first traversal."""

    def test_level_order(self, tree_graph):
        """Test that BFS visits nodes level by level in adjacency order."""
        traverser = GraphTraverser(tree_graph)

        assert ids(traverser.bfs("A")) == ["A", "B", "C", "D", "E", "F"]

    def test_visit_callback(self, tree_graph):
        """Test that the callback sees every node in order."""
        seen = []
        GraphTraverser(tree_graph).bfs("A", visit=lambda node: seen.append(node.id))

        assert seen == ["A", "B", "C", "D", "E", "F"]

    def test_directed_semantics(self, tree_graph):
        """Test that BFS follows outgoing branches only."""
        assert ids(GraphTraverser(tree_graph).bfs("B")) == ["B", "D", "E"]

    def test_cycle_visits_each_node_once(self, cyclic_graph):
        """Test that cycles do not cause repeated visits."""
        assert ids(GraphTraverser(cyclic_graph).bfs("A")) == ["A", "B", "C"]

    def test_unknown_start(self, tree_graph):
        """Test that an unknown start node raises NodeNotFoundError."""
        with pytest.raises(NodeNotFoundError):
            GraphTraverser(tree_graph).bfs("Z")

    def test_search_stops_at_first_match(self, tree_graph):
        """Test that the predicate search records nodes up to the match."""
        result = GraphTraverser(tree_graph).bfs_search("A", lambda node: node.id == "D")

        assert result.found.id == "D"
        assert ids(result.visited) == ["A", "B", "C", "D"]

    def test_search_without_match(self, tree_graph):
        """Test a search that finds nothing."""
        result = GraphTraverser(tree_graph).bfs_search("A", lambda node: node.id == "Z")

        assert result.found is None
        assert len(result.visited) == 6


class TestDFS:
    """Tests for eager depth-first traversal."""

    def test_pre_order(self, tree_graph):
        """Test that DFS matches recursive left-to-right pre-order."""
        assert ids(GraphTraverser(tree_graph).dfs("A")) == ["A", "B", "D", "E", "C", "F"]

    def test_node_reached_twice(self, diamond_graph):
        """Test that a node pushed through two paths is visited once."""
        assert ids(GraphTraverser(diamond_graph).dfs("A")) == ["A", "B", "D", "C"]

    def test_deep_chain_does_not_recurse(self):
        """Test DFS on a chain deeper than the recursion limit."""
        g = BranchGraph()
        depth = 5000
        for i in range(depth):
            g.add_node(i)
        for i in range(depth - 1):
            g.add_branch(i, i + 1)

        assert len(GraphTraverser(g).dfs(0)) == depth

    def test_search(self, tree_graph):
        """Test the depth-first predicate search."""
        result = GraphTraverser(tree_graph).dfs_search("A", lambda node: node.id == "E")

        assert result.found.id == "E"
        assert ids(result.visited) == ["A", "B", "D", "E"]


class TestReachability:
    """Tests for reachability properties shared by both traversals."""

    def test_unreachable_nodes_never_visited(self, tree_graph):
        """Test that isolated nodes are not visited."""
        tree_graph.add_node("X")
        traverser = GraphTraverser(tree_graph)

        for order in (traverser.bfs("A"), traverser.dfs("A")):
            assert "X" not in ids(order)
            assert len(order) == len(set(order)) == 6

    def test_deterministic(self, diamond_graph):
        """Test that repeated traversals produce identical orders."""
        traverser = GraphTraverser(diamond_graph)

        assert ids(traverser.bfs("A")) == ids(traverser.bfs("A"))
        assert ids(traverser.dfs("A")) == ids(traverser.dfs("A"))


class TestLazyTraversal:
    """Tests for lazy traversal iterators."""

    def test_lazy_matches_eager(self, tree_graph):
        """Test that lazy iterators produce the eager order."""
        traverser = GraphTraverser(tree_graph)

        assert list(traverser.iter_bfs("A")) == traverser.bfs("A")
        assert list(traverser.iter_dfs("A")) == traverser.dfs("A")

    def test_one_node_per_step(self, tree_graph):
        """Test that each next() produces exactly one node."""
        iterator = GraphTraverser(tree_graph).iter_bfs("A")

        assert next(iterator).id == "A"
        assert next(iterator).id == "B"
        assert next(iterator).id == "C"

    def test_exhaustion(self, cyclic_graph):
        """Test that an exhausted iterator keeps raising StopIteration."""
        iterator = GraphTraverser(cyclic_graph).iter_dfs("A")

        assert len(list(iterator)) == 3
        with pytest.raises(StopIteration):
            next(iterator)
