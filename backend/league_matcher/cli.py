"""
League Matcher - command line

  league-matcher --ranks ranks.csv --groups history.csv --week 3 --platform xbox --format 2v2

Prints the week's groups in the Reddit, ORSA and flat layouts followed by a
summary. With --team1/--team2 it only prints the markup for a single group
of those two teams.
"""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from league_matcher.config import LOG_LEVEL, MatchmakingConfig, configure_logging
from league_matcher.models.match_group import MatchGroup
from league_matcher.models.team import Team
from league_matcher.services.matchmaking import run_matchmaking
from league_matcher.utils.rank_import import load_conflicts, load_ranks
from league_matcher.utils.report_formats import (
    FORMATS,
    PLATFORMS,
    render_flat,
    render_orsa,
    render_reddit,
    render_summary,
)

SHORTFALL_MESSAGE = "Attempts ran out, and we weren't able to group everyone :("


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be 1 or more, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="league-matcher", description="Weekly league matchmaking")
    ap.add_argument("--ranks", help="REQUIRED IF TEAM1 and TEAM2 are empty: CSV file with team ranks")
    ap.add_argument("--groups", help="REQUIRED IF TEAM1 and TEAM2 are empty: CSV file with previous team groups")
    ap.add_argument("--platform", choices=PLATFORMS, default="pcps4", help="Either pcps4 or xbox")
    ap.add_argument("--format", choices=FORMATS, default="3v3", help="One of 3v3/2v2/1v1")
    ap.add_argument("--week", type=_positive_int, default=1, help="The number of the week")
    ap.add_argument("--team1", default="", help="Team 1 name")
    ap.add_argument("--team2", default="", help="Team 2 name")
    ap.add_argument("--max-attempts", type=_positive_int, help="total grouping attempts, first pass included")
    ap.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    return ap


def _flags_ok(args: argparse.Namespace) -> bool:
    return bool(args.team1 and args.team2) or bool(args.ranks and args.groups)


def print_schedule(groups: List[MatchGroup], args: argparse.Namespace) -> None:
    print("<----------REDDIT FORMAT---------->\n")
    print(render_reddit(groups, args.week, args.platform, args.format))
    print("<----------ORSA FORMAT---------->\n")
    print(render_orsa(groups, args.week, args.platform, args.format))
    print("\n\n<----------PLAIN GROUPS FORMAT---------->\n")
    print(render_flat(groups))


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    if not _flags_ok(args):
        print("One or more required flags were missing...")
        ap.print_help()
        return 2

    if args.team1 and args.team2:
        pair = MatchGroup(members=[Team(name=args.team1, points=0), Team(name=args.team2, points=0)])
        print_schedule([pair], args)
        return 0

    try:
        config = MatchmakingConfig.from_env()
        if args.max_attempts is not None:
            config = replace(config, max_attempts=args.max_attempts)
        teams = load_ranks(args.ranks)
        conflicts = load_conflicts(args.groups)
        result = run_matchmaking(teams, conflicts, config)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    if result.unplaced_count > 1:
        print(SHORTFALL_MESSAGE)

    print_schedule(result.schedule, args)
    print("\n\n<----------RESULTS---------->\n")
    print(render_summary(len(result.schedule), result.unplaced_count))
    return 0


if __name__ == "__main__":
    sys.exit(main())
