"""
Leftover Placer - force a single straggler into an existing group

Only used when exactly one team is left after every retry. Never creates a
group; the straggler joins the group whose average is closest to its points
among groups where it still has at least two non-conflicting members and
a free slot.
"""

import logging
from typing import List, Optional

from league_matcher.config import MatchmakingConfig
from league_matcher.models.conflict_graph import ConflictGraph
from league_matcher.models.match_group import MatchGroup
from league_matcher.models.team import Team
from league_matcher.services.ranked_pool import RankedPool

logger = logging.getLogger(__name__)


class LeftoverPlacer:
    def __init__(self, conflicts: ConflictGraph, config: Optional[MatchmakingConfig] = None):
        self.conflicts = conflicts
        self.config = config or MatchmakingConfig()

    def place(self, pool: RankedPool, schedule: List[MatchGroup]) -> Optional[MatchGroup]:
        """Move the sole team in `pool` into the best-fitting group.

        Returns the group it joined, or None if no group can take it, in
        which case the team stays in the pool.
        """
        if len(pool) != 1:
            raise ValueError(f"Forced placement needs exactly one leftover team, pool has {len(pool)}")

        team = pool.peek()
        index = self.best_fit(team, schedule)
        if index is None:
            logger.warning("No group can take leftover team %s", team.name)
            return None

        pool.pop_best()
        group = schedule[index]
        self._insert(team, group)
        if self.config.recompute_average_on_placement:
            group.recompute_average()

        logger.info("Placed leftover team %s into group %d (now %d teams)", team.name, index + 1, group.size)
        return group

    def best_fit(self, team: Team, schedule: List[MatchGroup]) -> Optional[int]:
        """Index of the group to receive `team`, scanning newest first.

        Only strict improvements replace the current choice, so among equally
        close groups the most recently created one wins.
        """
        best_index = None
        best_distance = None
        for i in range(len(schedule) - 1, -1, -1):
            group = schedule[i]
            if group.size >= self.config.max_group_size:
                continue
            conflict_count = self.conflicts.count_conflicts(team.name, group.names)
            if conflict_count >= group.size - 1:
                continue
            distance = abs(group.average_points - team.points)
            if best_distance is None or distance < best_distance:
                best_index = i
                best_distance = distance
        return best_index

    def _insert(self, team: Team, group: MatchGroup) -> None:
        if not self.conflicts.conflicts_with_any(team.name, group.names):
            group.add(team)
            return

        # First boundary (wrapping around) whose neighbours both haven't met the team
        n = group.size
        for i in range(n):
            after = (i + 1) % n
            if not self.conflicts.conflicts(team.name, group.members[i].name) and not self.conflicts.conflicts(
                team.name, group.members[after].name
            ):
                group.insert(after, team)
                return

        group.add(team)
