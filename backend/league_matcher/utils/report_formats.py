"""
Schedule renderings for posting a week's groups.

Three layouts:
- reddit: markdown post with a bold header and one bulleted block per group
- orsa:   one sheet line per group, prefixed with a week/platform/format code
- flat:   one line per group, team names joined with commas
"""

from typing import List

from league_matcher.models.match_group import MatchGroup

PLATFORMS = ("pcps4", "xbox")
FORMATS = ("3v3", "2v2", "1v1")

REDDIT_HEADER = "**Groups for Week {week} of the {format} {platform} league are as follows:**"


def render_reddit(groups: List[MatchGroup], week: int, platform: str, league_format: str) -> str:
    lines = [REDDIT_HEADER.format(week=week, format=league_format, platform=platform.upper()), ""]
    for number, group in enumerate(groups, start=1):
        lines.append(f"**Group {number}**")
        lines.append("")
        for name in group.names:
            lines.append(f"* {name}")
        lines.append("")
    return "\n".join(lines)


def orsa_group_code(number: int, week: int, platform: str, league_format: str) -> str:
    return f"W{week}-{platform.upper()}-{league_format}-G{number}"


def render_orsa(groups: List[MatchGroup], week: int, platform: str, league_format: str) -> str:
    lines = []
    for number, group in enumerate(groups, start=1):
        lines.append(",".join([orsa_group_code(number, week, platform, league_format)] + group.names))
    return "\n".join(lines)


def render_flat(groups: List[MatchGroup]) -> str:
    return "\n".join(",".join(group.names) for group in groups)


def render_summary(match_count: int, leftover_count: int) -> str:
    return f"{match_count} matches, {leftover_count} teams left over"
