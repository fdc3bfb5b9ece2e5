from dataclasses import dataclass, field
from typing import List

from league_matcher.models.team import Team


@dataclass
class MatchGroup:
    """One scheduled group of teams.

    Member order is significant: forced placement inserts between two
    neighbours, and the renderers list members in this order.
    """

    members: List[Team] = field(default_factory=list)
    average_points: float = 0.0

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def names(self) -> List[str]:
        return [t.name for t in self.members]

    def add(self, team: Team) -> None:
        self.members.append(team)

    def insert(self, index: int, team: Team) -> None:
        """Open slot `index` by shifting later members right."""
        self.members.insert(index, team)

    def recompute_average(self) -> float:
        if self.members:
            self.average_points = sum(t.points for t in self.members) / len(self.members)
        else:
            self.average_points = 0.0
        return self.average_points

    def __contains__(self, name: str) -> bool:
        return any(t.name == name for t in self.members)
