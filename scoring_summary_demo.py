#!/usr/bin/env python3
"""
Scoring Summary Demonstration

Narrates a short scripted game through the play-by-play logger, ships the
box score through JSON, and prints the condensed scoring summary.
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from game_management import BoxScoreDocument, PlayByPlayLogger, PlayType, Team
from game_management.scoring_summary_reporter import format_scoring_summary
from logging_config import setup_development_logging, setup_narration_logging


def narrate_game(pbp: PlayByPlayLogger) -> None:
    """Scripted plays: a TD + XP, a field goal, a converted and a failed two-point try"""
    pbp.log_event(PlayType.QUARTER, clock=15, quarter=1)
    pbp.log_event(PlayType.KICKOFF, side=1, clock=15, names=["Mason Crosby"], yds=0, touchback=True)
    pbp.log_event(PlayType.HANDOFF, side=0, clock=14.5, names=["Jared Goff", "David Montgomery"])
    pbp.log_event(PlayType.RUN, side=0, clock=14.25, names=["David Montgomery"], yds=5, td=False)
    pbp.log_event(PlayType.DROPBACK, side=0, clock=12.1, names=["Jared Goff"])
    pbp.log_event(PlayType.PASS_COMPLETE, side=0, clock=11.75,
                  names=["Jared Goff", "Amon-Ra St. Brown"], yds=15, td=True)
    pbp.log_event(PlayType.EXTRA_POINT, side=0, clock=11.75, names=["Jake Bates"], made=True)

    pbp.log_event(PlayType.QUARTER, clock=15, quarter=2)
    pbp.log_event(PlayType.FIELD_GOAL, side=1, clock=6.4, names=["Mason Crosby"], yds=42, made=True)

    pbp.log_event(PlayType.QUARTER, clock=15, quarter=4)
    pbp.log_event(PlayType.RUN, side=1, clock=3.5, names=["Josh Jacobs"], yds=12, td=True)
    pbp.log_event(PlayType.HANDOFF, side=1, clock=3.5, names=["Jordan Love", "Josh Jacobs"],
                  two_point_conversion_team=1)
    pbp.log_event(PlayType.RUN, side=1, clock=3.5, names=["Josh Jacobs"], yds=2, td=True,
                  two_point_conversion_team=1)
    pbp.log_event(PlayType.KICKOFF, side=1, clock=3.5, names=["Mason Crosby"], yds=0, touchback=True)

    pbp.log_event(PlayType.OVERTIME, clock=10)
    pbp.log_event(PlayType.PASS_COMPLETE, side=0, clock=4.2,
                  names=["Jared Goff", "Sam LaPorta"], yds=30, td=True)
    pbp.log_event(PlayType.DROPBACK, side=0, clock=4.2, names=["Jared Goff"],
                  two_point_conversion_team=0)
    pbp.log_event(PlayType.PASS_INCOMPLETE, side=0, clock=4.2, names=["Jared Goff", "Sam LaPorta"],
                  two_point_conversion_team=0)
    pbp.log_event(PlayType.KICKOFF, side=0, clock=4.2, names=["Jake Bates"], yds=0, touchback=True)


def main():
    setup_development_logging(log_dir="demo_logs")
    setup_narration_logging("DEBUG")

    teams = [
        Team("DET", "Lions", "Detroit"),
        Team("GB", "Packers", "Green Bay"),
    ]

    pbp = PlayByPlayLogger(active=True)
    narrate_game(pbp)

    document = BoxScoreDocument.from_logger(gid=1, teams=teams, pbp_logger=pbp)
    received = BoxScoreDocument.from_json(document.to_json())

    print("=" * 60)
    print("PLAY BY PLAY")
    print("=" * 60)
    for entry in received.play_by_play[1:]:
        if entry["type"] == "text":
            print(f"{entry['quarter']:<3} {entry['time']:>5}  {entry['text']}")

    print()
    print("=" * 60)
    print("SCORING SUMMARY")
    print("=" * 60)
    print(format_scoring_summary(received))


if __name__ == "__main__":
    main()
