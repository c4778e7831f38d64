"""
Scoring Type Mapper

Derives the scoring type and points of a scoring summary entry from its
rendered text. Box scores are stored as text, so the score must be
re-derived on the reading side without the logger's internal flags.
"""

from typing import Optional, Tuple

from .scoreboard import POINTS, ScoringType


class ScoringTypeMapper:
    """
    Maps scoring summary text to ScoringType enums and points

    Phrases are checked in order and the first match wins. Only the
    two-point phrase is matched case-insensitively, since the logger writes
    both "a two point conversion" and "Two point conversion failed".
    """

    # (phrase, scoring type, phrase that must also appear to award points)
    PHRASE_RULES = [
        ("extra point", ScoringType.EXTRA_POINT, "made"),
        ("field goal", ScoringType.FIELD_GOAL, "made"),
        ("touchdown", ScoringType.TOUCHDOWN, None),
    ]

    TWO_POINT_PHRASE = "two point"
    TWO_POINT_FAILED_PHRASE = "failed"

    # Shown in the summary without a score type or points
    SAFETY_PHRASE = "safety"

    @classmethod
    def from_text(cls, text: str) -> Tuple[Optional[ScoringType], int]:
        """
        Classify a scoring summary entry

        Args:
            text: Rendered narration text

        Returns:
            (scoring type or None, points awarded)

        Example:
            >>> ScoringTypeMapper.from_text("Smith made the extra point")
            (<ScoringType.EXTRA_POINT: 'XP'>, 1)

            >>> ScoringTypeMapper.from_text("Two point conversion failed")
            (<ScoringType.TWO_POINT_CONVERSION: '2P'>, 0)
        """
        for phrase, scoring_type, required in cls.PHRASE_RULES:
            if phrase in text:
                if required is None or required in text:
                    return scoring_type, POINTS[scoring_type]
                return scoring_type, 0

        if cls.TWO_POINT_PHRASE in text.lower():
            scoring_type = ScoringType.TWO_POINT_CONVERSION
            if cls.TWO_POINT_FAILED_PHRASE in text:
                return scoring_type, 0
            return scoring_type, POINTS[scoring_type]

        return None, 0

    @classmethod
    def is_safety(cls, text: str) -> bool:
        return cls.SAFETY_PHRASE in text

    @classmethod
    def get_points(cls, text: str) -> int:
        """Points awarded by a scoring summary entry"""
        return cls.from_text(text)[1]
