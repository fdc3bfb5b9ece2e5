from league_matcher.models.conflict_graph import ConflictGraph
from league_matcher.models.match_group import MatchGroup
from league_matcher.models.team import Team, make_teams

__all__ = [
    "ConflictGraph",
    "MatchGroup",
    "Team",
    "make_teams",
]
