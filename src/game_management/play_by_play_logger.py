"""
PlayByPlayLogger - Narrated play-by-play and scoring summary logging.

Single source of truth for game narration:
- Human-readable text for every play sub-action reported by the simulator
- Stat events for live box-score updates
- A scoring-only summary that is kept even when narration is disabled

Two-point conversions span several sub-actions (a pass, then a fumble, then
a return...), so a failed attempt can only be detected once the next
non-conversion play arrives. NarrationContext tracks that per game.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from config.narration_settings import NarrationSettings

from .narration_exceptions import UnknownPlayTypeError
from .period_names import ordinal
from .play_types import PlayEvent, PlayType


logger = logging.getLogger(__name__)

TWO_POINT_FAILED_TEXT = "Two point conversion failed"

# Plays whose touchdown completes a pending two-point attempt
CONVERSION_SCORING_TYPES = frozenset({
    PlayType.FUMBLE_RECOVERY,
    PlayType.INTERCEPTION,
    PlayType.PASS_COMPLETE,
    PlayType.RUN,
})


class EventKind(Enum):
    """Kinds of narrated events"""
    TEXT = "text"
    STAT = "stat"


class ConversionState(Enum):
    """Progress of a two-point conversion attempt"""
    IDLE = "idle"
    ATTEMPTING = "attempting"
    RESOLVED = "resolved"


@dataclass
class NarratedEvent:
    """
    One rendered entry in the play-by-play log.

    Text events carry the narration; stat events carry a single stat
    increment for live box-score display.
    """
    kind: EventKind
    side: Optional[int]
    quarter: str
    text: str = ""
    time: str = ""

    # Stat-event fields
    pid: Optional[int] = None
    stat: Optional[str] = None
    amount: Optional[float] = None

    hidden: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Wire format used by box-score documents"""
        if self.kind == EventKind.STAT:
            return {
                "type": self.kind.value,
                "side": self.side,
                "quarter": self.quarter,
                "pid": self.pid,
                "stat": self.stat,
                "amount": self.amount,
            }
        return {
            "type": self.kind.value,
            "side": self.side,
            "quarter": self.quarter,
            "time": self.time,
            "text": self.text,
            "hidden": self.hidden,
        }


@dataclass
class NarrationContext:
    """Per-game narration state owned by a single logger"""
    quarter: str = "Q1"
    conversion_state: ConversionState = ConversionState.IDLE
    conversion_team: Optional[int] = None
    last_event: Optional[NarratedEvent] = None

    def start_conversion(self, team: int) -> None:
        self.conversion_state = ConversionState.ATTEMPTING
        self.conversion_team = team

    def clear_conversion(self) -> None:
        self.conversion_state = ConversionState.IDLE
        self.conversion_team = None


def format_clock(clock: float) -> str:
    """Format a fractional-minute clock as M:SS"""
    minutes = math.floor(clock)
    seconds = math.floor((clock % 1) * 60)
    return f"{minutes}:{seconds:02d}"


def _yards_and_touchdown(yds, td: bool, touchdown_text: str, show_yds_on_td: bool) -> str:
    if td and show_yds_on_td:
        return f"{yds} yards and {touchdown_text}!"
    if td:
        return f"{touchdown_text}!"
    return f"{yds} yards"


class PlayByPlayLogger:
    """
    Narrates one game.

    Usage:
        pbp = PlayByPlayLogger(active=True)
        pbp.log_event(PlayType.QUARTER, clock=15, quarter=1)
        pbp.log_event(PlayType.RUN, side=0, clock=14.5, names=["Smith"], yds=5, td=False)
        ...
        pbp.scoring_summary          # always available
        pbp.get_play_by_play(meta)   # None unless active
    """

    def __init__(self, active: Optional[bool] = None):
        if active is None:
            active = NarrationSettings.PLAY_BY_PLAY_ENABLED
        self.active = active
        self.context = NarrationContext()
        self._play_by_play: List[NarratedEvent] = []
        self._scoring_summary: List[NarratedEvent] = []

    @property
    def quarter(self) -> str:
        """Current quarter label ("Q1".."Qn" or "OT")"""
        return self.context.quarter

    @property
    def events(self) -> List[NarratedEvent]:
        """Access the narration log"""
        return self._play_by_play

    @property
    def scoring_summary(self) -> List[NarratedEvent]:
        """Access the scoring-only log"""
        return self._scoring_summary

    def log_event(self, play_type, **fields) -> None:
        """
        Narrate one play sub-action.

        Args:
            play_type: PlayType or its string value
            **fields: PlayEvent fields (side, clock, names, yds, td, made,
                lost, safety, touchback, quarter, two_point_conversion_team)

        Raises:
            UnknownPlayTypeError: If there is no phrasing rule for play_type
            MissingPlayFieldError: If a field required by play_type is absent
        """
        play = PlayEvent(play_type=PlayType.coerce(play_type), **fields)
        play.validate()

        self._update_conversion_state(play)

        text = self._describe(play)
        if self._completes_conversion(play):
            self._resolve_conversion()

        event = NarratedEvent(
            kind=EventKind.TEXT,
            side=play.side,
            quarter=self.context.quarter,
            text=text,
            time=format_clock(play.clock),
        )
        self._append(event, scoring=play.is_scoring)

    def log_stat(self, side: int, pid: int, stat: str, amount: float) -> None:
        """Record a stat increment for live box-score display"""
        if not self.active:
            return

        self._play_by_play.append(NarratedEvent(
            kind=EventKind.STAT,
            side=side,
            quarter=self.context.quarter,
            pid=pid,
            stat=stat,
            amount=amount,
        ))

    def get_play_by_play(self, box_score_meta: Any) -> Optional[List[Dict[str, Any]]]:
        """
        Export the narration log.

        Returns:
            None when narration is not active; otherwise an "init" element
            carrying box_score_meta followed by every narrated event
        """
        if not self.active:
            return None

        return [{"type": "init", "boxScore": box_score_meta}] + [
            e.to_dict() for e in self._play_by_play
        ]

    # ========== TWO-POINT CONVERSIONS ==========

    def _update_conversion_state(self, play: PlayEvent) -> None:
        ctx = self.context

        if not play.is_conversion_attempt:
            if ctx.conversion_state == ConversionState.ATTEMPTING:
                if play.td:
                    logger.debug("Two point attempt by side %s closed by scoring play",
                                 ctx.conversion_team)
                else:
                    self._log_conversion_failed()
            ctx.clear_conversion()
            return

        if ctx.conversion_state == ConversionState.RESOLVED:
            return

        if ctx.conversion_state == ConversionState.ATTEMPTING:
            if ctx.conversion_team != play.two_point_conversion_team:
                logger.debug("Overlapping two point attempt: side %s replaces side %s",
                             play.two_point_conversion_team, ctx.conversion_team)
        else:
            logger.debug("Two point attempt started by side %s", play.two_point_conversion_team)
        ctx.start_conversion(play.two_point_conversion_team)

    @staticmethod
    def _completes_conversion(play: PlayEvent) -> bool:
        """Touchdowns in the endzone-recovery and safety branches never convert"""
        if not play.td or play.play_type not in CONVERSION_SCORING_TYPES:
            return False
        return not (play.safety or (play.play_type == PlayType.FUMBLE_RECOVERY and play.touchback))

    def _resolve_conversion(self) -> None:
        if self.context.conversion_state == ConversionState.ATTEMPTING:
            logger.debug("Two point attempt by side %s converted", self.context.conversion_team)
            self.context.conversion_state = ConversionState.RESOLVED

    def _log_conversion_failed(self) -> None:
        previous = self.context.last_event
        if previous is None:
            return

        logger.debug("Two point attempt by side %s failed", self.context.conversion_team)
        event = NarratedEvent(
            kind=EventKind.TEXT,
            side=self.context.conversion_team,
            quarter=previous.quarter,
            text=TWO_POINT_FAILED_TEXT,
            time=previous.time,
        )
        self._append(event, scoring=True)

    def _append(self, event: NarratedEvent, scoring: bool) -> None:
        self.context.last_event = event
        if self.active:
            self._play_by_play.append(event)
        if scoring:
            self._scoring_summary.append(event)

    # ========== TEXT ==========

    def _touchdown_phrasing(self, play: PlayEvent):
        """(touchdown text, whether to show yards on a touchdown)"""
        if not play.is_conversion_attempt:
            return "a touchdown", True
        if play.two_point_conversion_team == play.side:
            return "a two point conversion", False
        return "two points", True

    def _describe(self, play: PlayEvent) -> str:
        """Render the narration text for a play"""
        pt = play.play_type
        names = play.names
        yds = play.yds
        td_text, show_yds_on_td = self._touchdown_phrasing(play)

        if pt == PlayType.INJURY:
            return f"{names[0]} was injured!"

        if pt == PlayType.QUARTER:
            self.context.quarter = f"Q{play.quarter}"
            logger.debug("Quarter label set to %s", self.context.quarter)
            return f"Start of {ordinal(play.quarter)} quarter"

        if pt == PlayType.OVERTIME:
            self.context.quarter = "OT"
            logger.debug("Quarter label set to OT")
            return "Start of overtime"

        if pt == PlayType.KICKOFF:
            if play.touchback:
                where = " for a touchback"
            elif yds < 0:
                where = " into the end zone"
            else:
                where = f" to the {yds} yard line"
            return f"{names[0]} kicked off{where}"

        if pt in (PlayType.KICKOFF_RETURN, PlayType.PUNT_RETURN):
            kick = "kickoff" if pt == PlayType.KICKOFF_RETURN else "punt"
            suffix = " for a touchdown!" if play.td else ""
            return f"{names[0]} returned the {kick} {yds} yards{suffix}"

        if pt == PlayType.PUNT:
            if play.touchback:
                where = "for a touchback"
            elif yds < 0:
                where = "into the end zone"
            else:
                where = f"to the {yds} yard line"
            return f"{names[0]} punted {where}"

        if pt == PlayType.EXTRA_POINT:
            return f"{names[0]} {'made' if play.made else 'missed'} the extra point"

        if pt == PlayType.FIELD_GOAL:
            return f"{names[0]} {'made' if play.made else 'missed'} a {yds} yard field goal"

        if pt == PlayType.FUMBLE:
            return f"{names[0]} fumbled the ball!"

        if pt == PlayType.FUMBLE_RECOVERY:
            if play.safety or play.touchback:
                result = "safety!" if play.safety else "touchback"
                return f"{names[0]} recovered the fumble in the endzone, resulting in a {result}"
            if play.lost:
                if play.td and yds < 1:
                    rest = f"in the endzone for {td_text}!"
                else:
                    rest = f"and returned it {yds} yards"
                    if play.td:
                        rest += f" for {td_text}!"
                return f"{names[0]} recovered the fumble for the defense {rest}"
            rest = f" and carried it into the endzone for {td_text}!" if play.td else ""
            return f"{names[0]} recovered the fumble for the offense{rest}"

        if pt == PlayType.INTERCEPTION:
            suffix = f" for {td_text}!" if play.td else ""
            return f"{names[0]} intercepted the pass and returned it {yds} yards{suffix}"

        if pt == PlayType.SACK:
            result = "safety!" if play.safety else f"{yds} yard loss"
            return f"{names[0]} was sacked by {names[1]} for a {result}"

        if pt == PlayType.DROPBACK:
            return f"{names[0]} drops back to pass"

        if pt == PlayType.PASS_COMPLETE:
            if play.safety:
                return (f"{names[0]} completed a pass to {names[1]} "
                        f"but he was tackled in the endzone for a safety!")
            result = _yards_and_touchdown(yds, play.td, td_text, show_yds_on_td)
            return f"{names[0]} completed a pass to {names[1]} for {result}"

        if pt == PlayType.PASS_INCOMPLETE:
            return f"Incomplete pass to {names[1]}"

        if pt == PlayType.HANDOFF:
            return f"{names[0]} hands the ball off to {names[1]}"

        if pt == PlayType.RUN:
            if play.safety:
                return f"{names[0]} was tackled in the endzone for a safety!"
            result = _yards_and_touchdown(yds, play.td, td_text, show_yds_on_td)
            return f"{names[0]} rushed for {result}"

        raise UnknownPlayTypeError(pt.value)
