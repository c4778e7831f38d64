"""
Pytest configuration for test discovery and imports.

Provides fixtures for narration testing including:
- Active and inactive play-by-play loggers
- A scripted scoring drive
- Box-score teams
"""

import sys
from pathlib import Path

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
tests_path = project_root / "tests"


def pytest_configure(config):
    """Configure pytest - runs very early in startup.

    Project root and src/ MUST come before tests/ so that tests/box_score_ui
    never shadows the box_score_ui package.
    """
    seen = set()
    new_path = []
    for p in sys.path:
        if p not in seen and p != str(tests_path):
            seen.add(p)
            new_path.append(p)

    for path in [str(src_path), str(project_root)]:
        if path in new_path:
            new_path.remove(path)

    new_path.insert(0, str(src_path))
    new_path.insert(0, str(project_root))

    sys.path[:] = new_path


# ============================================================================
# LOGGER FIXTURES
# ============================================================================

@pytest.fixture
def pbp():
    """Play-by-play logger with narration active"""
    from game_management.play_by_play_logger import PlayByPlayLogger
    return PlayByPlayLogger(active=True)


@pytest.fixture
def silent_pbp():
    """Play-by-play logger with narration disabled (scoring summary only)"""
    from game_management.play_by_play_logger import PlayByPlayLogger
    return PlayByPlayLogger(active=False)


@pytest.fixture
def touchdown_drive():
    """
    Home touchdown drive ending in a made extra point.

    Returns a function that logs the drive on a given logger.
    """
    from game_management.play_types import PlayType

    def _log(logger, extra_point_made=True):
        logger.log_event(PlayType.QUARTER, clock=15, quarter=1)
        logger.log_event(PlayType.RUN, side=0, clock=14.5, names=["Montgomery"], yds=5, td=False)
        logger.log_event(PlayType.RUN, side=0, clock=13.25, names=["Montgomery"], yds=2, td=True)
        logger.log_event(PlayType.EXTRA_POINT, side=0, clock=13.25, names=["Bates"],
                         made=extra_point_made)

    return _log


# ============================================================================
# BOX SCORE FIXTURES
# ============================================================================

@pytest.fixture
def teams():
    """[home, away] box-score teams"""
    from game_management.box_score_document import Team
    return [
        Team("DET", "Lions", "Detroit"),
        Team("GB", "Packers", "Green Bay"),
    ]
