"""
Scoring Summary Widget - Condensed scoring plays grouped by quarter.

Shows one row per score (touchdown and its try merged), with the running
score after it and the scoring side's total in bold. Quarter header rows
span the full table width.
"""

from typing import List, Optional, Sequence, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QFont
from PySide6.QtWidgets import (
    QHeaderView, QLabel, QTableWidget, QTableWidgetItem, QVBoxLayout, QWidget
)

from box_score_ui.theme import (
    ESPN_THEME, FontSizes, QUARTER_HEADER_BG, TABLE_ROW_HEIGHT, TABLE_STYLE, TextColors
)
from game_management.box_score_document import BoxScoreDocument, Team
from game_management.scoring_summary import (
    CondensedRow, QuarterHeader, ScoringSummaryCache, get_count, group_by_quarter
)
from game_management.scoring_summary_reporter import format_score


COLUMNS = ["Team", "Type", "Score", "Time", "Play"]

HEADER_ROLE = Qt.ItemDataRole.UserRole


class ScoringSummaryWidget(QWidget):
    """
    Scoring summary table for one box score.

    Re-renders when the game changes, or within one game when the number
    of visible scoring entries changes; scoring summaries are append-only
    so the count identifies the content.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._cache = ScoringSummaryCache()
        self._rendered_count: Optional[int] = None
        self._game_key: Optional[Tuple] = None
        self._teams: List[Team] = []
        self.render_count = 0
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.empty_label = QLabel("None")
        self.empty_label.setStyleSheet(
            f"color: {TextColors.ON_DARK_MUTED}; font-size: {FontSizes.BODY};"
        )
        layout.addWidget(self.empty_label)

        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionMode(QTableWidget.NoSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.verticalHeader().setDefaultSectionSize(TABLE_ROW_HEIGHT)
        self.table.setStyleSheet(TABLE_STYLE)

        header = self.table.horizontalHeader()
        for col in range(len(COLUMNS) - 1):
            header.setSectionResizeMode(col, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(len(COLUMNS) - 1, QHeaderView.Stretch)
        layout.addWidget(self.table)

        self.table.setVisible(False)

    def set_box_score(self, document: BoxScoreDocument):
        """Show the scoring summary of a box score"""
        self.set_events(document.scoring_summary, document.teams, document.num_periods,
                        game_id=document.gid)

    def set_events(self, events: Sequence, teams: List[Team], num_periods: int = 4,
                   game_id: Optional[int] = None):
        """
        Show a scoring summary.

        Args:
            events: Scoring summary entries (wire dicts or events)
            teams: [home, away]
            num_periods: Regulation periods, for quarter header names
            game_id: Game the entries belong to; a different game or
                different teams always re-render
        """
        count = get_count(events)
        game_key = (game_id, tuple(teams))
        if game_key != self._game_key:
            self._cache.invalidate()
        elif count == self._rendered_count:
            return

        self._game_key = game_key
        self._teams = list(teams)
        self._rendered_count = count
        rows = self._cache.get_rows(events)
        self._populate(group_by_quarter(rows, num_periods))

    def _populate(self, items):
        self.render_count += 1
        self.table.clearSpans()
        self.table.setRowCount(len(items))

        has_rows = bool(items)
        self.empty_label.setVisible(not has_rows)
        self.table.setVisible(has_rows)

        for row, item in enumerate(items):
            if isinstance(item, QuarterHeader):
                self._populate_header(row, item)
            else:
                self._populate_row(row, item)

    def _populate_header(self, row: int, header: QuarterHeader):
        cell = QTableWidgetItem(header.text)
        cell.setData(HEADER_ROLE, header.quarter)
        cell.setForeground(QColor(ESPN_THEME["text_secondary"]))
        cell.setBackground(QColor(QUARTER_HEADER_BG))
        self.table.setItem(row, 0, cell)
        self.table.setSpan(row, 0, 1, len(COLUMNS))

    def _populate_row(self, row: int, event: CondensedRow):
        abbrev = self._teams[event.side].abbrev
        self.table.setItem(row, 0, QTableWidgetItem(abbrev))
        self.table.setItem(row, 1, self._centered_item(event.score_type_label))

        # Scoring side's total in brackets, e.g. "[7]-3"
        score_item = self._centered_item(format_score(event))
        font = QFont()
        font.setBold(True)
        score_item.setFont(font)
        self.table.setItem(row, 2, score_item)

        self.table.setItem(row, 3, self._centered_item(event.time))

        play_item = QTableWidgetItem(event.text)
        play_item.setToolTip(event.text)
        self.table.setItem(row, 4, play_item)

    def _centered_item(self, text: str) -> QTableWidgetItem:
        item = QTableWidgetItem(text)
        item.setTextAlignment(Qt.AlignCenter)
        return item

    def is_header_row(self, row: int) -> bool:
        item = self.table.item(row, 0)
        return item is not None and item.data(HEADER_ROLE) is not None
