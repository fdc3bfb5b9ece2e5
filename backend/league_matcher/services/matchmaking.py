"""
Matchmaking run - one pool of teams to a finished schedule

Builds the ranked pool, drives the retry controller, and hands a single
straggler to the leftover placer. Two or more teams left after the final
attempt are reported as unplaced; that is a normal outcome, not an error.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from league_matcher.config import MatchmakingConfig
from league_matcher.models.conflict_graph import ConflictGraph
from league_matcher.models.match_group import MatchGroup
from league_matcher.models.team import Team
from league_matcher.services.group_builder import GroupBuilder
from league_matcher.services.leftover_placer import LeftoverPlacer
from league_matcher.services.ranked_pool import RankedPool
from league_matcher.services.retry_controller import RetryController

logger = logging.getLogger(__name__)


@dataclass
class MatchmakingResult:
    schedule: List[MatchGroup] = field(default_factory=list)
    unplaced: List[Team] = field(default_factory=list)
    attempts: int = 0
    forced_placement: Optional[str] = None  # name of the force-placed team

    @property
    def unplaced_count(self) -> int:
        return len(self.unplaced)

    @property
    def placed_count(self) -> int:
        return sum(g.size for g in self.schedule)


def run_matchmaking(
    teams: Iterable[Team],
    conflicts: Optional[ConflictGraph] = None,
    config: Optional[MatchmakingConfig] = None,
) -> MatchmakingResult:
    """Group `teams` while avoiding pairs recorded in `conflicts`."""
    config = config or MatchmakingConfig()
    if conflicts is None:
        conflicts = ConflictGraph()
    teams = list(teams)

    names = [t.name for t in teams]
    if len(set(names)) != len(names):
        duplicates = sorted({n for n in names if names.count(n) > 1})
        raise ValueError(f"Duplicate team names: {', '.join(duplicates)}")

    pool = RankedPool(teams)
    schedule: List[MatchGroup] = []

    builder = GroupBuilder(conflicts, config)
    outcome = RetryController(builder, config).run(pool, schedule)

    result = MatchmakingResult(schedule=schedule, attempts=outcome.attempts)

    if len(pool) == 1:
        straggler = pool.peek()
        placed_into = LeftoverPlacer(conflicts, config).place(pool, schedule)
        if placed_into is not None:
            result.forced_placement = straggler.name

    result.unplaced = pool.drain()
    if result.unplaced:
        logger.warning("%d teams left over: %s", len(result.unplaced), ", ".join(t.name for t in result.unplaced))

    logger.info("%d matches, %d teams left over", len(schedule), len(result.unplaced))
    return result
