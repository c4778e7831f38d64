"""
Narration Exception Classes

Errors raised by the play-by-play logger when the simulator reports a play
that breaks the field contract for its type. These signal a defect in the
upstream simulation and are never recovered from inside the narration code.
"""

from typing import Optional


class NarrationContractError(Exception):
    """
    Base exception for play-by-play contract violations.

    Provides error code support and structured error messages.
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Initialize narration contract error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with optional error code."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class MissingPlayFieldError(NarrationContractError):
    """
    Raised when a play is logged without a field its type requires.

    Example: a kickoff without yards, or a completed pass with only the
    passer's name.
    """

    def __init__(self, play_type: str, field_name: str, detail: str = ""):
        self.play_type = play_type
        self.field_name = field_name

        message = f"Missing {field_name} for \"{play_type}\""
        if detail:
            message += f" ({detail})"

        super().__init__(message, "MISSING_FIELD")


class UnknownPlayTypeError(NarrationContractError):
    """Raised when no phrasing rule exists for the reported play type."""

    def __init__(self, play_type: object):
        self.play_type = play_type
        super().__init__(f"No text for \"{play_type}\"", "UNKNOWN_PLAY_TYPE")
