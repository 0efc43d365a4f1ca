"""
Shared fixtures for Trash Pong tests
"""

import pytest

from trash_pong.core.entities import MatchState, new_match_state
from trash_pong.core.entities import Side


class FixedRng:
    """Random source stub that always rolls the same value"""

    def __init__(self, value: int = 1):
        self.value = value
        self.calls: list[int] = []

    def integers(self, high: int) -> int:
        self.calls.append(high)
        return self.value


class RecordingPresentation:
    """Presentation stub that records every notification"""

    def __init__(self) -> None:
        self.taunts: list[tuple[Side, str]] = []
        self.game_over_calls = 0
        self.playing_calls = 0

    def show_taunt(self, side: Side, message: str) -> None:
        self.taunts.append((side, message))

    def show_game_over(self) -> None:
        self.game_over_calls += 1

    def show_playing(self) -> None:
        self.playing_calls += 1


@pytest.fixture
def state() -> MatchState:
    """Opening state with the default configuration"""
    return new_match_state()


@pytest.fixture
def tracking_rng() -> FixedRng:
    """Random source on which the opponent always tracks the ball"""
    return FixedRng(1)


@pytest.fixture
def freezing_rng() -> FixedRng:
    """Random source on which the opponent always freezes"""
    return FixedRng(0)


@pytest.fixture
def presentation() -> RecordingPresentation:
    return RecordingPresentation()


@pytest.fixture
def make_rng():
    """Factory for random source stubs rolling a given value"""
    return FixedRng
