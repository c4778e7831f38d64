"""
Box Score UI Package

PySide6 widgets that display box-score data produced by src/game_management.
"""

from box_score_ui.widgets.scoring_summary_widget import ScoringSummaryWidget

__all__ = ["ScoringSummaryWidget"]
