"""
Conflict Graph - who has already played whom

Symmetric relation built once from the group history sheet. Every pair of
teams that shared a group in the history is a conflict. The graph is never
edited while matching runs, so disbanding a group leaves it untouched.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple


class ConflictGraph:
    """Read-only adjacency of teams that have already been grouped together."""

    def __init__(self, adjacency: Optional[Dict[str, Set[str]]] = None):
        links: Dict[str, Set[str]] = {}
        for name, others in (adjacency or {}).items():
            for other in others:
                if other == name:
                    continue
                links.setdefault(name, set()).add(other)
                links.setdefault(other, set()).add(name)
        self._adjacency: Dict[str, FrozenSet[str]] = {name: frozenset(others) for name, others in links.items()}

    @classmethod
    def from_history(cls, groups: Iterable[Iterable[str]]) -> "ConflictGraph":
        """Derive all pairwise conflicts within each historical group.

        Empty names are ignored, matching blank cells in the history sheet.
        """
        adjacency: Dict[str, Set[str]] = {}
        for group in groups:
            names = [n.strip() for n in group if n and n.strip()]
            for name in names:
                others = adjacency.setdefault(name, set())
                others.update(n for n in names if n != name)
        return cls(adjacency)

    def conflicts(self, a: str, b: str) -> bool:
        return b in self._adjacency.get(a, ())

    def neighbors(self, name: str) -> FrozenSet[str]:
        return self._adjacency.get(name, frozenset())

    def count_conflicts(self, name: str, others: Iterable[str]) -> int:
        """Number of names in `others` already grouped with `name`."""
        played = self.neighbors(name)
        return sum(1 for other in others if other in played)

    def conflicts_with_any(self, name: str, others: Iterable[str]) -> bool:
        played = self.neighbors(name)
        return any(other in played for other in others)

    def pairs(self) -> List[Tuple[str, str]]:
        """Each conflict once, as a sorted (a, b) pair, in sorted order."""
        result = set()
        for name, others in self._adjacency.items():
            for other in others:
                result.add(tuple(sorted((name, other))))
        return sorted(result)

    def __len__(self) -> int:
        return len(self.pairs())

    def __contains__(self, name: str) -> bool:
        return name in self._adjacency
