"""Rank sheet and group history import.

Rank sheet (CSV with a header row):
  name,points
  Rocket Rollers,1520
  ...

The name column may also be called `team` or `team_name`; the points column
`rank` or `score`. Header matching is case-insensitive.

Group history (CSV, no header): one previous group per line, e.g.
  Rocket Rollers,Boost Bros,Aerial Aces
Every pair of teams on a line has already played each other.
"""

import csv
import io
import logging
import math
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel

from league_matcher.models.conflict_graph import ConflictGraph
from league_matcher.models.team import Team

logger = logging.getLogger(__name__)

NAME_COLUMNS = ("name", "team", "team_name")
POINTS_COLUMNS = ("points", "rank", "score")


class RankImportError(ValueError):
    """Raised for unreadable rank or history input."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class ParsedRankRow(BaseModel):
    """Internal: a single parsed row from the rank sheet."""

    line_number: int
    name: str
    points: float


def _find_column(header: List[str], candidates) -> Optional[int]:
    normalized = [h.strip().lower() for h in header]
    for candidate in candidates:
        if candidate in normalized:
            return normalized.index(candidate)
    return None


def parse_rank_rows(raw_text: str) -> List[ParsedRankRow]:
    """Parse rank sheet text into rows, in file order."""
    reader = csv.reader(io.StringIO(raw_text))

    header = None
    header_line = 0
    for row in reader:
        if any(cell.strip() for cell in row):
            header = row
            header_line = reader.line_num
            break
    if header is None:
        raise RankImportError("Rank sheet is empty")

    name_col = _find_column(header, NAME_COLUMNS)
    points_col = _find_column(header, POINTS_COLUMNS)
    if name_col is None:
        raise RankImportError(f"No name column (expected one of {', '.join(NAME_COLUMNS)})", header_line)
    if points_col is None:
        raise RankImportError(f"No points column (expected one of {', '.join(POINTS_COLUMNS)})", header_line)

    rows: List[ParsedRankRow] = []
    seen = set()
    for row in reader:
        line_number = reader.line_num
        if not any(cell.strip() for cell in row):
            continue
        if len(row) <= max(name_col, points_col):
            raise RankImportError(f"Expected at least {max(name_col, points_col) + 1} fields", line_number)

        name = row[name_col].strip()
        if not name:
            raise RankImportError("Team name is empty", line_number)
        if name in seen:
            raise RankImportError(f"Duplicate team name '{name}'", line_number)

        raw_points = row[points_col].strip()
        try:
            points = float(raw_points)
        except ValueError:
            raise RankImportError(f"Points '{raw_points}' for team '{name}' is not a number", line_number)
        if not math.isfinite(points):
            raise RankImportError(f"Points '{raw_points}' for team '{name}' is not a finite number", line_number)

        seen.add(name)
        rows.append(ParsedRankRow(line_number=line_number, name=name, points=points))

    return rows


def parse_ranks(raw_text: str) -> List[Team]:
    """Parse rank sheet text into Teams; input order is file order."""
    rows = parse_rank_rows(raw_text)
    logger.info("Loaded %d teams from rank sheet", len(rows))
    return [Team(name=r.name, points=r.points, input_order=i) for i, r in enumerate(rows)]


def parse_history(raw_text: str) -> List[List[str]]:
    """Parse group history text into lists of names (blank cells dropped)."""
    groups: List[List[str]] = []
    for row in csv.reader(io.StringIO(raw_text)):
        names = [cell.strip() for cell in row if cell.strip()]
        if names:
            groups.append(names)
    return groups


def parse_conflicts(raw_text: str) -> ConflictGraph:
    groups = parse_history(raw_text)
    graph = ConflictGraph.from_history(groups)
    logger.info("Loaded %d previous groups (%d conflicting pairs)", len(groups), len(graph))
    return graph


def _read_text(path: Union[str, Path]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except OSError as e:
        raise RankImportError(f"Cannot read {path}: {e.strerror or e}")


def load_ranks(path: Union[str, Path]) -> List[Team]:
    return parse_ranks(_read_text(path))


def load_conflicts(path: Union[str, Path]) -> ConflictGraph:
    return parse_conflicts(_read_text(path))
