"""
Game Management Module

Play-by-play narration for simulated games and the scoring summary built
from it: the logger that turns simulator play reports into text, and the
condensing/grouping used by box-score displays.
"""

from .box_score_document import BoxScoreDocument, Team
from .narration_exceptions import (
    MissingPlayFieldError,
    NarrationContractError,
    UnknownPlayTypeError,
)
from .play_by_play_logger import (
    ConversionState,
    EventKind,
    NarratedEvent,
    NarrationContext,
    PlayByPlayLogger,
)
from .play_types import PlayEvent, PlayType
from .scoreboard import RunningScore, ScoringType
from .scoring_mapper import ScoringTypeMapper
from .scoring_summary import (
    CondensedRow,
    QuarterHeader,
    ScoringSummaryCache,
    ScoringSummaryEvent,
    get_count,
    group_by_quarter,
    process_events,
)

__all__ = [
    'BoxScoreDocument',
    'Team',
    'NarrationContractError',
    'MissingPlayFieldError',
    'UnknownPlayTypeError',
    'PlayByPlayLogger',
    'NarratedEvent',
    'NarrationContext',
    'ConversionState',
    'EventKind',
    'PlayEvent',
    'PlayType',
    'RunningScore',
    'ScoringType',
    'ScoringTypeMapper',
    'CondensedRow',
    'QuarterHeader',
    'ScoringSummaryCache',
    'ScoringSummaryEvent',
    'get_count',
    'group_by_quarter',
    'process_events',
]
