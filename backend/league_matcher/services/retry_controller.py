"""
Retry Controller - disband and rebuild until everyone is grouped

A greedy pass can strand teams whose remaining candidates all conflict with
them. Each retry:

1. Drains the pool into a leftover list.
2. Disbands the k most recent groups (k = retry number), putting their
   members back into the pool.
3. Runs the builder again with the leftovers as the interleave queue so
   they are placed first.

Retries stop once the pool holds a single team or none, or the attempt
bound is reached. Conflict history is never touched by disbanding.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional

from league_matcher.config import MatchmakingConfig
from league_matcher.models.match_group import MatchGroup
from league_matcher.services.group_builder import GroupBuilder, PassResult
from league_matcher.services.ranked_pool import RankedPool

logger = logging.getLogger(__name__)


def disband_match(group: MatchGroup, pool: RankedPool) -> None:
    """Return every member of `group` to `pool`."""
    pool.extend(group.members)


@dataclass
class RetryOutcome:
    attempts: int
    passes: List[PassResult] = field(default_factory=list)
    disbanded: int = 0


class RetryController:
    def __init__(self, builder: GroupBuilder, config: Optional[MatchmakingConfig] = None):
        self.builder = builder
        self.config = config or builder.config

    def run(self, pool: RankedPool, schedule: List[MatchGroup]) -> RetryOutcome:
        """Run the first pass plus bounded retries, extending `schedule` in place."""
        outcome = RetryOutcome(attempts=1)
        outcome.passes.append(self.builder.run_pass(pool, schedule))

        attempt = 1
        while len(pool) > 1 and attempt < self.config.max_attempts:
            leftovers = pool.drain()

            disbanded = 0
            for _ in range(attempt):
                if not schedule:
                    break
                disband_match(schedule.pop(), pool)
                disbanded += 1
            outcome.disbanded += disbanded

            logger.info("%d leftover, %d pool", len(leftovers), len(pool))

            outcome.passes.append(self.builder.run_pass(pool, schedule, deque(leftovers)))
            attempt += 1
            outcome.attempts = attempt

        if len(pool) > 1:
            logger.warning(
                "Attempts ran out after %d tries with %d teams still ungrouped",
                outcome.attempts,
                len(pool),
            )
        return outcome
