"""
Tests for forced placement of a single leftover team.
"""

import pytest

from league_matcher.config import MatchmakingConfig
from league_matcher.models.conflict_graph import ConflictGraph
from league_matcher.models.match_group import MatchGroup
from league_matcher.models.team import Team
from league_matcher.services.leftover_placer import LeftoverPlacer
from league_matcher.services.ranked_pool import RankedPool


def _group(*members):
    group = MatchGroup(members=[Team(name, points) for name, points in members])
    group.recompute_average()
    return group


class TestBestFit:
    def test_closest_average_wins(self):
        schedule = [_group(("A", 10), ("B", 9), ("C", 8)), _group(("D", 7), ("E", 6), ("F", 5))]
        placer = LeftoverPlacer(ConflictGraph())
        assert placer.best_fit(Team("G", 4), schedule) == 1
        assert placer.best_fit(Team("G", 10), schedule) == 0

    def test_tie_goes_to_most_recent_group(self):
        schedule = [_group(("A", 11), ("B", 10), ("C", 9)), _group(("D", 7), ("E", 6), ("F", 5))]
        placer = LeftoverPlacer(ConflictGraph())
        # both averages are 2 away from 8
        assert placer.best_fit(Team("G", 8), schedule) == 1

    def test_group_with_too_many_conflicts_skipped(self):
        schedule = [_group(("A", 10), ("B", 9), ("C", 8)), _group(("D", 7), ("E", 6), ("F", 5))]
        graph = ConflictGraph.from_history([["G", "D"], ["G", "E"]])
        assert LeftoverPlacer(graph).best_fit(Team("G", 4), schedule) == 0

    def test_one_conflict_in_three_is_allowed(self):
        schedule = [_group(("A", 10), ("B", 9), ("C", 8)), _group(("D", 7), ("E", 6), ("F", 5))]
        graph = ConflictGraph.from_history([["G", "D"]])
        assert LeftoverPlacer(graph).best_fit(Team("G", 4), schedule) == 1

    def test_pair_with_a_conflict_skipped(self):
        schedule = [_group(("A", 10), ("B", 9), ("C", 8)), _group(("D", 5), ("E", 4))]
        graph = ConflictGraph.from_history([["G", "D"]])
        assert LeftoverPlacer(graph).best_fit(Team("G", 4), schedule) == 0

    def test_full_group_skipped(self):
        schedule = [_group(("A", 10), ("B", 9), ("C", 8)), _group(("D", 5), ("E", 4), ("F", 3), ("H", 2))]
        assert LeftoverPlacer(ConflictGraph()).best_fit(Team("G", 3), schedule) == 0

    def test_no_candidate(self):
        schedule = [_group(("A", 10), ("B", 9))]
        graph = ConflictGraph.from_history([["G", "A"]])
        assert LeftoverPlacer(graph).best_fit(Team("G", 4), schedule) is None

    def test_empty_schedule(self):
        assert LeftoverPlacer(ConflictGraph()).best_fit(Team("G", 4), []) is None


class TestInsertion:
    def test_no_conflict_appends(self):
        schedule = [_group(("D", 7), ("E", 6), ("F", 5))]
        pool = RankedPool([Team("G", 4)])
        group = LeftoverPlacer(ConflictGraph()).place(pool, schedule)

        assert group is schedule[0]
        assert group.names == ["D", "E", "F", "G"]
        assert len(pool) == 0

    def test_inserted_between_non_conflicting_neighbours(self):
        schedule = [_group(("P", 7), ("Q", 6), ("R", 5))]
        graph = ConflictGraph.from_history([["L", "P"]])
        LeftoverPlacer(graph).place(RankedPool([Team("L", 4)]), schedule)
        assert schedule[0].names == ["P", "Q", "L", "R"]

    def test_wraparound_boundary_inserts_at_front(self):
        schedule = [_group(("P", 7), ("Q", 6), ("R", 5))]
        graph = ConflictGraph.from_history([["L", "Q"]])
        LeftoverPlacer(graph).place(RankedPool([Team("L", 4)]), schedule)
        assert schedule[0].names == ["L", "P", "Q", "R"]

    def test_no_conflicting_neighbours_after_insert(self):
        schedule = [_group(("P", 7), ("Q", 6), ("R", 5))]
        graph = ConflictGraph.from_history([["L", "R"]])
        LeftoverPlacer(graph).place(RankedPool([Team("L", 4)]), schedule)

        names = schedule[0].names
        i = names.index("L")
        before = names[i - 1]
        after = names[(i + 1) % len(names)]
        assert not graph.conflicts("L", before)
        assert not graph.conflicts("L", after)


class TestAverage:
    def test_average_recomputed_by_default(self):
        schedule = [_group(("D", 7), ("E", 6), ("F", 5))]
        LeftoverPlacer(ConflictGraph()).place(RankedPool([Team("G", 4)]), schedule)
        assert schedule[0].average_points == 5.5

    def test_stale_average_when_disabled(self):
        schedule = [_group(("D", 7), ("E", 6), ("F", 5))]
        config = MatchmakingConfig(recompute_average_on_placement=False)
        LeftoverPlacer(ConflictGraph(), config).place(RankedPool([Team("G", 4)]), schedule)
        assert schedule[0].size == 4
        assert schedule[0].average_points == 6


class TestPlacementFailures:
    def test_unplaceable_team_stays_in_pool(self):
        schedule = [_group(("A", 10), ("B", 9))]
        graph = ConflictGraph.from_history([["G", "A", "B"]])
        pool = RankedPool([Team("G", 4)])

        assert LeftoverPlacer(graph).place(pool, schedule) is None
        assert pool.peek().name == "G"
        assert schedule[0].names == ["A", "B"]

    def test_requires_exactly_one_team(self):
        with pytest.raises(ValueError):
            LeftoverPlacer(ConflictGraph()).place(RankedPool([Team("A", 1), Team("B", 2)]), [])
        with pytest.raises(ValueError):
            LeftoverPlacer(ConflictGraph()).place(RankedPool(), [])
