"""
Reusable widgets for box-score display.
"""

from .scoring_summary_widget import ScoringSummaryWidget

__all__ = ["ScoringSummaryWidget"]
