"""
Tests for the taunt catalogues
"""

import pytest

from trash_pong.core.entities import Side
from trash_pong.gui.taunts import LOSING_SIDE_TAUNTS, WINNING_SIDE_TAUNTS, pick_taunt, taunts_for


@pytest.mark.parametrize("catalogue", [LOSING_SIDE_TAUNTS, WINNING_SIDE_TAUNTS])
def test_ten_distinct_taunts(catalogue):
    assert len(catalogue) == 10
    assert len(set(catalogue)) == 10


def test_catalogue_per_side():
    assert taunts_for(Side.RIGHT) is LOSING_SIDE_TAUNTS
    assert taunts_for(Side.LEFT) is WINNING_SIDE_TAUNTS


def test_pick_uses_random_source(make_rng):
    rng = make_rng(3)
    assert pick_taunt(Side.RIGHT, rng) == "Your mom is cheering for me"
    assert pick_taunt(Side.LEFT, rng) == "You're a professional"
    assert rng.calls == [10, 10]
