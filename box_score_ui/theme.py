"""
UI Theme - Shared colors and stylesheets for box_score_ui widgets.

Usage:
    from box_score_ui.theme import ESPN_THEME, TABLE_STYLE, TextColors
    table.setStyleSheet(TABLE_STYLE)
"""


class TextColors:
    """
    Text colors organized by background context.

    Usage:
        label.setStyleSheet(f"color: {TextColors.ON_DARK};")
    """
    # FOR DARK BACKGROUNDS (ESPN theme: #1a1a1a, #2a2a2a, #333333)
    ON_DARK = "#FFFFFF"           # Primary text on dark bg
    ON_DARK_SECONDARY = "#CCCCCC" # Secondary text on dark bg
    ON_DARK_MUTED = "#888888"     # Tertiary/muted text on dark bg


class FontSizes:
    """Font sizes as strings for CSS stylesheets."""
    H6 = "12px"
    BODY = "12px"
    CAPTION = "11px"


ESPN_THEME = {
    "red": "#cc0000",
    "dark_bg": "#0d0d0d",
    "card_bg": "#1a1a1a",
    "text_primary": "#FFFFFF",
    "text_secondary": "#888888",
    "border": "#333333",
}

# Table body styling (ESPN dark theme)
TABLE_STYLE = """
    QTableWidget {
        background-color: #1a1a1a;
        gridline-color: #333333;
        color: white;
        border: none;
    }
    QTableWidget::item {
        padding: 4px;
        border-bottom: 1px solid #333333;
    }
    QTableWidget::item:selected {
        background-color: #2a4a6a;
    }
"""

TABLE_ROW_HEIGHT = 28  # Compact rows; scoring summaries rarely exceed 15 lines

# Quarter header rows inside the scoring summary table
QUARTER_HEADER_BG = "#252525"
