"""Shared pytest fixtures for ClipTrim tests."""

import pytest

from cliptrim.models import TrimConfig
from cliptrim.playhead import PlayheadController
from cliptrim.trim_session import TrimSession
from cliptrim.trim_state import TrimState


# ── Reference geometry ──────────────────────────────────────────────
# 10s asset at 60 ticks/s on a strip with 560px of handle travel:
# 560 + 2 * 20 (handle caps) + 3 (indicator) = 603px track.

TOTAL_TICKS = 600
USABLE_PX = 560.0
TRACK_PX = 603.0
MIN_TRIM_TICKS = 60


@pytest.fixture
def example_config() -> TrimConfig:
    """20px handles, 3px indicator, 1s minimum at 60 ticks/s."""
    return TrimConfig(
        handle_width=20.0,
        indicator_width=3.0,
        min_trim_seconds=1.0,
        timescale=60,
    )


@pytest.fixture
def trim_state() -> TrimState:
    return TrimState(USABLE_PX, TOTAL_TICKS, MIN_TRIM_TICKS)


@pytest.fixture
def playhead() -> PlayheadController:
    return PlayheadController(USABLE_PX, TOTAL_TICKS)


@pytest.fixture
def empty_session(example_config: TrimConfig) -> TrimSession:
    return TrimSession(example_config, track_width=TRACK_PX)


@pytest.fixture
def session(empty_session: TrimSession) -> TrimSession:
    """Session with the reference 600-tick asset loaded."""
    empty_session.load_asset(TOTAL_TICKS)
    return empty_session
