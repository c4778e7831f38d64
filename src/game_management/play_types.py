"""
Play Types

Tagged input record reported by the game simulator for every discrete play
sub-action, plus the per-type field contract the play-by-play logger
enforces before rendering any text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .narration_exceptions import MissingPlayFieldError, UnknownPlayTypeError


class PlayType(Enum):
    """Types of play sub-actions the simulator reports"""
    QUARTER = "quarter"
    OVERTIME = "overtime"
    KICKOFF = "kickoff"
    KICKOFF_RETURN = "kickoff_return"
    PUNT = "punt"
    PUNT_RETURN = "punt_return"
    EXTRA_POINT = "extra_point"
    FIELD_GOAL = "field_goal"
    FUMBLE = "fumble"
    FUMBLE_RECOVERY = "fumble_recovery"
    INTERCEPTION = "interception"
    SACK = "sack"
    DROPBACK = "dropback"
    PASS_COMPLETE = "pass_complete"
    PASS_INCOMPLETE = "pass_incomplete"
    HANDOFF = "handoff"
    RUN = "run"
    INJURY = "injury"

    @classmethod
    def coerce(cls, value) -> 'PlayType':
        """Accept a PlayType or its string value"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownPlayTypeError(value) from None


# (required scalar fields, minimum number of names)
REQUIRED_FIELDS: Dict[PlayType, Tuple[Tuple[str, ...], int]] = {
    PlayType.QUARTER: (("clock", "quarter"), 0),
    PlayType.OVERTIME: (("clock",), 0),
    PlayType.INJURY: (("clock",), 1),
    PlayType.KICKOFF: (("clock", "yds"), 1),
    PlayType.KICKOFF_RETURN: (("clock", "yds"), 1),
    PlayType.PUNT: (("clock", "yds"), 1),
    PlayType.PUNT_RETURN: (("clock", "yds"), 1),
    PlayType.EXTRA_POINT: (("clock",), 1),
    PlayType.FIELD_GOAL: (("clock", "yds"), 1),
    PlayType.FUMBLE: (("clock",), 1),
    PlayType.FUMBLE_RECOVERY: (("clock", "td", "yds"), 1),
    PlayType.INTERCEPTION: (("clock", "td", "yds"), 1),
    PlayType.SACK: (("clock", "yds"), 2),
    PlayType.DROPBACK: (("clock",), 1),
    PlayType.PASS_COMPLETE: (("clock", "td"), 2),
    PlayType.PASS_INCOMPLETE: (("clock",), 2),
    PlayType.HANDOFF: (("clock",), 2),
    PlayType.RUN: (("clock", "td"), 1),
}


@dataclass
class PlayEvent:
    """
    One play sub-action as reported by the simulator.

    Fields are used selectively per play type; see REQUIRED_FIELDS.
    """
    play_type: PlayType
    clock: Optional[float] = None   # Minutes remaining; fraction * 60 = seconds
    side: Optional[int] = None      # 0 = home, 1 = away
    names: Optional[List[str]] = None
    yds: Optional[int] = None
    quarter: Optional[int] = None   # Quarter-start events only

    # Outcome flags
    td: Optional[bool] = None
    made: bool = False
    lost: bool = False
    safety: bool = False
    touchback: bool = False

    # Set on every sub-action of a two-point conversion attempt
    two_point_conversion_team: Optional[int] = None

    def validate(self) -> None:
        """
        Check the field contract for this play type.

        Raises:
            MissingPlayFieldError: If a required field is absent
        """
        required, min_names = REQUIRED_FIELDS[self.play_type]
        type_name = self.play_type.value

        if min_names:
            if self.names is None:
                raise MissingPlayFieldError(type_name, "names")
            if len(self.names) < min_names:
                raise MissingPlayFieldError(
                    type_name, "names",
                    f"expected {min_names}, got {len(self.names)}"
                )

        for field_name in required:
            if getattr(self, field_name) is None:
                raise MissingPlayFieldError(type_name, field_name)

        # Scoring entries are credited to a side downstream
        if self.is_scoring and self.side is None:
            raise MissingPlayFieldError(type_name, "side", "scoring play")

    @property
    def is_conversion_attempt(self) -> bool:
        return self.two_point_conversion_team is not None

    @property
    def is_scoring(self) -> bool:
        """Whether this play belongs in the scoring summary"""
        return bool(
            self.safety
            or self.td
            or self.play_type == PlayType.EXTRA_POINT
            or (self.made and self.play_type == PlayType.FIELD_GOAL)
        )
