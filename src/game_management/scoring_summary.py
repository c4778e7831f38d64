"""
Scoring Summary

Condenses a box score's scoring summary into display rows:
- A touchdown and its extra point or two-point try become one row
- Every row carries the running [home, away] score after it
- Rows are grouped under quarter headers for display
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from .period_names import get_period_name, ordinal
from .scoreboard import RunningScore, ScoringType
from .scoring_mapper import ScoringTypeMapper


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringSummaryEvent:
    """One entry of a serialized scoring summary"""
    side: int
    text: str
    quarter: str = "Q1"
    time: str = ""
    hidden: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ScoringSummaryEvent':
        """
        Build from the box-score wire format.

        Raises:
            KeyError: If side or text is missing
        """
        return cls(
            side=data["side"],
            text=data["text"],
            quarter=data.get("quarter", "Q1"),
            time=data.get("time", ""),
            hidden=data.get("hidden", False),
        )

    @classmethod
    def coerce(cls, event) -> 'ScoringSummaryEvent':
        """Accept a wire dict or any object with side/text/quarter/time"""
        if isinstance(event, cls):
            return event
        if isinstance(event, Mapping):
            return cls.from_dict(event)
        return cls(
            side=event.side,
            text=event.text,
            quarter=event.quarter,
            time=event.time,
            hidden=getattr(event, "hidden", False),
        )


@dataclass
class CondensedRow:
    """One display row of the scoring summary"""
    side: int
    score: List[int]
    score_type: Optional[ScoringType]
    text: str
    quarter: str
    time: str

    @property
    def score_type_label(self) -> str:
        return self.score_type.value if self.score_type else ""


@dataclass(frozen=True)
class QuarterHeader:
    """Header emitted before the first row of each quarter"""
    quarter: str
    text: str


def _is_visible(event) -> bool:
    if isinstance(event, Mapping):
        return not event.get("hidden", False)
    return not getattr(event, "hidden", False)


def get_count(events: Sequence) -> int:
    """Number of non-hidden events"""
    return sum(1 for event in events if _is_visible(event))


def process_events(events: Sequence) -> List[CondensedRow]:
    """
    Condense a scoring summary into display rows.

    Extra points are merged into the previous row whichever side kicked.
    Two-point tries are merged into the previous row when the same side
    scored it; a defensive two-point return starts its own row.

    Args:
        events: Time-ordered ScoringSummaryEvents, wire dicts, or narrated
            events. Hidden entries are skipped, as are entries with no
            recognized scoring phrase unless they describe a safety, which
            gets a row with no score type and no points.

    Returns:
        Condensed rows in order; empty when nothing is visible
    """
    rows: List[CondensedRow] = []
    score = RunningScore()

    for raw in events:
        if not _is_visible(raw):
            continue
        event = ScoringSummaryEvent.coerce(raw)

        score_type, points = ScoringTypeMapper.from_text(event.text)
        if score_type is None and not ScoringTypeMapper.is_safety(event.text):
            continue
        if points:
            score.add_points(event.side, points)

        previous = rows[-1] if rows else None
        merge = previous is not None and (
            score_type == ScoringType.EXTRA_POINT
            or (score_type == ScoringType.TWO_POINT_CONVERSION and event.side == previous.side)
        )

        if merge:
            previous.score = score.snapshot()
            previous.text += f" ({event.text})"
        else:
            rows.append(CondensedRow(
                side=event.side,
                score=score.snapshot(),
                score_type=score_type,
                text=event.text,
                quarter=event.quarter,
                time=event.time,
            ))

    return rows


def quarter_header_text(
    quarter: str,
    num_periods: int = 4,
    period_name: Callable[[int], str] = get_period_name
) -> str:
    """
    Header label for a quarter.

    Example:
        >>> quarter_header_text("Q2"), quarter_header_text("OT")
        ('2nd quarter', 'Overtime')
    """
    if quarter == "OT":
        return "Overtime"
    try:
        number = int(quarter.replace("Q", ""))
    except ValueError:
        return "???"
    return f"{ordinal(number)} {period_name(num_periods)}"


def group_by_quarter(
    rows: Sequence[CondensedRow],
    num_periods: int = 4,
    period_name: Callable[[int], str] = get_period_name
) -> List[Union[QuarterHeader, CondensedRow]]:
    """
    Interleave quarter headers with condensed rows.

    A header is emitted before the first row and whenever the quarter label
    changes from the previous row's.
    """
    grouped: List[Union[QuarterHeader, CondensedRow]] = []
    previous_quarter = None

    for row in rows:
        if row.quarter != previous_quarter:
            previous_quarter = row.quarter
            grouped.append(QuarterHeader(
                quarter=row.quarter,
                text=quarter_header_text(row.quarter, num_periods, period_name),
            ))
        grouped.append(row)

    return grouped


@dataclass
class ScoringSummaryCache:
    """
    Memoizes process_events for re-rendering.

    Keyed by the count of visible events: scoring summaries are append-only,
    so a changed summary always has a different count.
    """
    _count: Optional[int] = None
    _rows: List[CondensedRow] = field(default_factory=list)

    def get_rows(self, events: Sequence) -> List[CondensedRow]:
        count = get_count(events)
        if count != self._count:
            logger.debug("Recomputing scoring summary rows (%s -> %s events)", self._count, count)
            self._rows = process_events(events)
            self._count = count
        return self._rows

    def invalidate(self) -> None:
        self._count = None
        self._rows = []
