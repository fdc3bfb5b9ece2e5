"""
Ranked Pool - unplaced teams ordered by points

Extraction order is a total order: highest points first, then earlier
position in the rank sheet, then name. Equal-point teams therefore come out
the same way on every run.
"""

import heapq
from typing import Iterable, List, Tuple

from league_matcher.models.team import Team


class RankedPool:
    """Priority collection of teams not yet placed in a group."""

    def __init__(self, teams: Iterable[Team] = ()):
        self._heap: List[Tuple[Tuple[float, int, str], Team]] = [(t.rank_key(), t) for t in teams]
        heapq.heapify(self._heap)

    def push(self, team: Team) -> None:
        heapq.heappush(self._heap, (team.rank_key(), team))

    def extend(self, teams: Iterable[Team]) -> None:
        for team in teams:
            self.push(team)

    def pop_best(self) -> Team:
        """Remove and return the highest-ranked team.

        Raises IndexError when the pool is empty.
        """
        return heapq.heappop(self._heap)[1]

    def drain(self) -> List[Team]:
        """Remove every team, best first."""
        teams = []
        while self._heap:
            teams.append(self.pop_best())
        return teams

    def peek(self) -> Team:
        return self._heap[0][1]

    def snapshot(self) -> List[Team]:
        """Teams in extraction order, without removing them."""
        return [entry[1] for entry in sorted(self._heap)]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
