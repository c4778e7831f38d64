"""
Box Score Document

Serializable box score handed from the game simulation to persistence and
display. Carries the scoring summary always and the play-by-play only when
narration was requested for the game.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from config.narration_settings import NarrationSettings

from .play_by_play_logger import PlayByPlayLogger


logger = logging.getLogger(__name__)


@dataclass
class Team:
    """Team identity as shown in a box score"""
    abbrev: str
    name: str = ""
    region: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"abbrev": self.abbrev, "name": self.name, "region": self.region}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Team':
        return cls(
            abbrev=data["abbrev"],
            name=data.get("name", ""),
            region=data.get("region", ""),
        )


@dataclass
class BoxScoreDocument:
    """
    Box score for one game.

    teams is ordered [home, away] to match scoring summary sides.
    """
    gid: int
    teams: List[Team]
    num_periods: int = NarrationSettings.DEFAULT_NUM_PERIODS
    scoring_summary: List[Dict[str, Any]] = field(default_factory=list)
    play_by_play: Optional[List[Dict[str, Any]]] = None

    def __post_init__(self):
        if len(self.teams) != 2:
            raise ValueError(f"A box score needs exactly 2 teams, got {len(self.teams)}")

    @classmethod
    def from_logger(
        cls,
        gid: int,
        teams: List[Team],
        pbp_logger: PlayByPlayLogger,
        num_periods: Optional[int] = None
    ) -> 'BoxScoreDocument':
        """
        Build the document at the end of a simulated game.

        Args:
            gid: Game id
            teams: [home, away]
            pbp_logger: The game's play-by-play logger
            num_periods: Regulation periods (defaults to NarrationSettings)
        """
        if num_periods is None:
            num_periods = NarrationSettings.DEFAULT_NUM_PERIODS

        document = cls(
            gid=gid,
            teams=list(teams),
            num_periods=num_periods,
            scoring_summary=[e.to_dict() for e in pbp_logger.scoring_summary],
        )
        document.play_by_play = pbp_logger.get_play_by_play(document.meta())

        logger.debug("Box score %s built: %d scoring entries, play-by-play %s",
                     gid, len(document.scoring_summary),
                     "included" if document.play_by_play is not None else "omitted")
        return document

    def meta(self) -> Dict[str, Any]:
        """Header fields carried by the play-by-play init element"""
        return {
            "gid": self.gid,
            "teams": [t.to_dict() for t in self.teams],
            "numPeriods": self.num_periods,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = self.meta()
        data["scoringSummary"] = list(self.scoring_summary)
        if self.play_by_play is not None:
            data["playByPlay"] = list(self.play_by_play)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BoxScoreDocument':
        return cls(
            gid=data["gid"],
            teams=[Team.from_dict(t) for t in data["teams"]],
            num_periods=data.get("numPeriods", NarrationSettings.DEFAULT_NUM_PERIODS),
            scoring_summary=list(data.get("scoringSummary", [])),
            play_by_play=data.get("playByPlay"),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, payload: str) -> 'BoxScoreDocument':
        return cls.from_dict(json.loads(payload))
