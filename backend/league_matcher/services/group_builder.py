"""
Group Builder - greedy construction of league groups

One pass drains the ranked pool into groups of the target size:

1. The first member comes from the interleave queue head if it has one,
   otherwise the best team left in the pool.
2. Candidates are drawn the same way until the group is full or both
   sources run dry.
3. A candidate that already played any current member is deferred for this
   group only. Deferring the very last available team makes the group
   invalid.
4. Deferred teams go back into the pool once the group is settled.
5. A valid group gets its average and joins the schedule. An invalid group
   hands its members back to the pool and ends the pass.
6. When the pool thins below the minimum group size the interleave queue is
   flushed into it.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional, Tuple

from league_matcher.config import MatchmakingConfig
from league_matcher.models.conflict_graph import ConflictGraph
from league_matcher.models.match_group import MatchGroup
from league_matcher.models.team import Team
from league_matcher.services.ranked_pool import RankedPool

logger = logging.getLogger(__name__)


class PassStatus(str, Enum):
    COMPLETE = "complete"
    STRANDED = "stranded"


@dataclass
class PassResult:
    """Outcome of one builder pass.

    STRANDED means an invalid group ended the pass early; `stranded` holds
    the members that group had accepted before it was abandoned (they are
    back in the pool).
    """

    status: PassStatus
    groups: List[MatchGroup] = field(default_factory=list)
    stranded: List[Team] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return self.status == PassStatus.COMPLETE


class GroupBuilder:
    def __init__(self, conflicts: ConflictGraph, config: Optional[MatchmakingConfig] = None):
        self.conflicts = conflicts
        self.config = config or MatchmakingConfig()

    def run_pass(
        self,
        pool: RankedPool,
        schedule: List[MatchGroup],
        interleave: Optional[Deque[Team]] = None,
    ) -> PassResult:
        """Form groups from `pool` and `interleave`, appending them to `schedule`.

        Both `pool` and `interleave` are consumed in place. Any interleave
        teams still queued when the pass ends are returned to the pool.
        """
        queue: Deque[Team] = interleave if interleave is not None else deque()
        result = PassResult(status=PassStatus.COMPLETE)

        while len(pool) + len(queue) >= self.config.min_group_size:
            group, deferred, valid = self._build_group(pool, queue)

            pool.extend(deferred)

            if not valid:
                result.status = PassStatus.STRANDED
                result.stranded = list(group.members)
                pool.extend(group.members)
                logger.debug(
                    "Group starting with %s stranded (%d deferred), ending pass",
                    group.members[0].name,
                    len(deferred),
                )
                break

            group.recompute_average()
            schedule.append(group)
            result.groups.append(group)

            if len(pool) < self.config.min_group_size and queue:
                # Pool too thin to keep giving leftovers priority
                pool.extend(queue)
                queue.clear()

        if queue:
            pool.extend(queue)
            queue.clear()

        logger.info(
            "Pass %s: %d groups formed, %d teams in pool",
            result.status.value,
            len(result.groups),
            len(pool),
        )
        return result

    def _build_group(self, pool: RankedPool, queue: Deque[Team]) -> Tuple[MatchGroup, List[Team], bool]:
        group = MatchGroup(members=[self._next_team(pool, queue)])
        deferred: List[Team] = []
        valid = True

        while (pool or queue) and group.size < self.config.target_group_size and valid:
            candidate = self._next_team(pool, queue)

            if self.conflicts.conflicts_with_any(candidate.name, group.names):
                deferred.append(candidate)
                if not pool and not queue:
                    valid = False
                continue

            group.add(candidate)

        if valid and group.size < self.config.min_group_size:
            valid = False

        return group, deferred, valid

    @staticmethod
    def _next_team(pool: RankedPool, queue: Deque[Team]) -> Team:
        if queue:
            return queue.popleft()
        return pool.pop_best()
