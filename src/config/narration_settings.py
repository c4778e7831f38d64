"""
Centralized Narration Settings

Defaults for play-by-play narration and box-score scoring summaries.
"""


class NarrationSettings:
    """
    Narration controls.

    Loggers and box-score documents read these as defaults when the caller
    does not pass an explicit value.
    """

    PLAY_BY_PLAY_ENABLED = False
    # True:  Keep the full play-by-play narration log (large box scores)
    # False: Keep only the scoring summary (aggregate scoring still tracked)

    DEFAULT_NUM_PERIODS = 4
    # Periods in a regulation game; drives "1st quarter" vs "1st half" headers

    LOG_LEVEL = "INFO"
    # Level for the game_management loggers (see logging_config.setup_narration_logging)
