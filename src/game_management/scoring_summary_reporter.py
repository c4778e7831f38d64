"""
Scoring Summary Reporter

Plain-text rendering of a box score's scoring summary for end-of-game
reports and console demos.
"""

from typing import Callable, List

from .box_score_document import BoxScoreDocument
from .period_names import get_period_name
from .scoring_summary import CondensedRow, QuarterHeader, group_by_quarter, process_events


def format_score(row: CondensedRow) -> str:
    """Running score with the scoring side's total in brackets"""
    home, away = row.score
    if row.side == 0:
        return f"[{home}]-{away}"
    return f"{home}-[{away}]"


def format_scoring_summary(
    document: BoxScoreDocument,
    period_name: Callable[[int], str] = get_period_name
) -> str:
    """
    Generate the scoring summary section of a game report

    Returns "None" when the game has no visible scoring entries.
    """
    rows = process_events(document.scoring_summary)
    if not rows:
        return "None"

    lines: List[str] = []
    for item in group_by_quarter(rows, document.num_periods, period_name):
        if isinstance(item, QuarterHeader):
            lines.append(item.text)
            continue

        abbrev = document.teams[item.side].abbrev
        lines.append(
            f"  {abbrev:<4} {item.score_type_label:<2} {format_score(item):<9} "
            f"{item.time:>5}  {item.text}"
        )

    return "\n".join(lines)
