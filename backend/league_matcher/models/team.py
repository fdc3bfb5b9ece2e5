import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Team:
    """A league team as loaded from the rank sheet.

    input_order is the team's position in the rank sheet and only serves as
    the tie-break between equal points.
    """

    name: str
    points: float
    input_order: int = 0

    def rank_key(self) -> Tuple[float, int, str]:
        """Sort key: highest points first, then earlier input, then name."""
        return (-self.points, self.input_order, self.name)


def make_teams(rows) -> list:
    """Build Teams from (name, points) pairs, keeping their order.

    Raises ValueError on duplicate or empty names and on NaN or infinite points.
    """
    teams = []
    seen = set()
    for order, (name, points) in enumerate(rows):
        name = (name or "").strip()
        if not name:
            raise ValueError(f"Team at position {order + 1} has no name")
        if name in seen:
            raise ValueError(f"Duplicate team name '{name}'")
        points = float(points)
        if not math.isfinite(points):
            raise ValueError(f"Team '{name}' has non-finite points {points}")
        seen.add(name)
        teams.append(Team(name=name, points=points, input_order=order))
    return teams
