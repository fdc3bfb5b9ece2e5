"""
Tests for the conflict graph built from group history.
"""

from league_matcher.models.conflict_graph import ConflictGraph


class TestFromHistory:
    """Every pair within a historical group becomes a symmetric conflict."""

    def test_all_pairs_in_group_conflict(self):
        graph = ConflictGraph.from_history([["A", "B", "C"]])
        assert graph.conflicts("A", "B")
        assert graph.conflicts("B", "C")
        assert graph.conflicts("C", "A")

    def test_symmetric(self):
        graph = ConflictGraph.from_history([["A", "B"]])
        assert graph.conflicts("A", "B")
        assert graph.conflicts("B", "A")

    def test_no_self_conflict(self):
        graph = ConflictGraph.from_history([["A", "B"]])
        assert not graph.conflicts("A", "A")
        assert "A" not in graph.neighbors("A")

    def test_blank_names_ignored(self):
        graph = ConflictGraph.from_history([["A", "", "  ", "B"]])
        assert graph.pairs() == [("A", "B")]

    def test_names_are_stripped(self):
        graph = ConflictGraph.from_history([[" A ", "B "]])
        assert graph.conflicts("A", "B")

    def test_separate_groups_do_not_link(self):
        graph = ConflictGraph.from_history([["A", "B"], ["C", "D"]])
        assert not graph.conflicts("A", "C")
        assert not graph.conflicts("B", "D")

    def test_repeated_pair_counted_once(self):
        graph = ConflictGraph.from_history([["A", "B"], ["B", "A"]])
        assert graph.pairs() == [("A", "B")]
        assert len(graph) == 1

    def test_single_team_line_has_no_conflicts(self):
        graph = ConflictGraph.from_history([["A"]])
        assert len(graph) == 0
        assert "A" not in graph


class TestAdjacencyConstructor:
    def test_one_sided_input_is_made_symmetric(self):
        graph = ConflictGraph({"A": {"B"}})
        assert graph.conflicts("B", "A")

    def test_self_loop_dropped(self):
        graph = ConflictGraph({"A": {"A", "B"}})
        assert graph.neighbors("A") == frozenset({"B"})

    def test_empty_graph(self):
        graph = ConflictGraph()
        assert len(graph) == 0
        assert graph.neighbors("Z") == frozenset()


class TestQueries:
    def test_count_conflicts(self):
        graph = ConflictGraph.from_history([["A", "B"], ["A", "C"]])
        assert graph.count_conflicts("A", ["B", "C", "D"]) == 2
        assert graph.count_conflicts("D", ["A", "B", "C"]) == 0

    def test_conflicts_with_any(self):
        graph = ConflictGraph.from_history([["A", "B"]])
        assert graph.conflicts_with_any("A", ["C", "B"])
        assert not graph.conflicts_with_any("A", ["C", "D"])
        assert not graph.conflicts_with_any("A", [])

    def test_unknown_team_has_no_neighbors(self):
        graph = ConflictGraph.from_history([["A", "B"]])
        assert not graph.conflicts("Z", "A")
        assert graph.count_conflicts("Z", ["A", "B"]) == 0
