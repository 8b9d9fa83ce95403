from decimal import Decimal
from fractions import Fraction

import pytest

from tenpin import BowlingGame, InvalidRoll, OutOfRange, Player


def _fill(player, *rolls):
    for i, r in enumerate(rolls):
        player.record_frame(i, *r)


def test_player_starts_with_ten_zeroed_frames():
    player = Player("TestPlayer")
    assert player.name == "TestPlayer"
    assert len(player.frames) == 10
    assert all(f.rolls() == [0, 0, 0] for f in player.frames)
    assert player.calculate_score() == 0


def test_record_frame_derives_kind():
    player = Player("p")
    strike = player.record_frame(0, 10, 0)
    spare = player.record_frame(1, 4, 6)
    open_ = player.record_frame(2, 3, 4)
    assert strike.is_strike and not strike.is_spare
    assert spare.is_spare and not spare.is_strike
    assert open_.is_open
    assert player.get_frame(1).total_pins() == 10


def test_record_frame_overwrites():
    player = Player("p")
    player.record_frame(4, 10, 0)
    player.record_frame(4, 1, 2)
    frame = player.get_frame(4)
    assert frame.rolls() == [1, 2, 0]
    assert not frame.is_strike


def test_frames_cannot_be_changed_from_outside():
    player = Player("p")
    player.record_frame(0, 3, 4)
    frame = player.get_frame(0)
    frame.first_roll = 10
    player.frames[0].second_roll = 9
    assert player.get_frame(0).rolls() == [3, 4, 0]


@pytest.mark.parametrize(
    "rolls, expected",
    [
        ([(3, 4)] * 10, 70),
        ([(4, 6), (3, 5)] + [(0, 0)] * 8, 21),
        ([(10, 0), (3, 5)] + [(0, 0)] * 8, 26),
        ([(0, 0)] * 9 + [(10, 10, 10)], 30),
        ([(0, 0)] * 9 + [(4, 6, 7)], 17),
        ([(10, 0)] * 9 + [(10, 10, 10)], 300),
    ],
    ids=["open", "spare", "strike", "final-strike", "final-spare", "perfect"],
)
def test_calculate_score(rolls, expected):
    player = Player("p")
    _fill(player, *rolls)
    assert player.calculate_score() == expected


def test_calculate_score_is_repeatable():
    player = Player("p")
    _fill(player, (10, 0), (7, 3), (4, 2))
    first = player.calculate_score()
    assert player.calculate_score() == first == 20 + 14 + 6


def test_score_frame():
    player = Player("p")
    _fill(player, (10, 0), (3, 5))
    assert player.score_frame(0) == 18
    assert player.score_frame(1) == 8
    with pytest.raises(OutOfRange):
        player.score_frame(10)


def test_record_frame_rejects_bad_input():
    player = Player("p")
    with pytest.raises(OutOfRange):
        player.record_frame(10, 1, 1)
    with pytest.raises(InvalidRoll):
        player.record_frame(0, 11, 0)
    with pytest.raises(InvalidRoll):
        player.record_frame(0, 6, 6)
    with pytest.raises(OutOfRange):
        player.get_frame(-1)


def test_rejected_frame_leaves_previous_values():
    player = Player("p")
    player.record_frame(0, 2, 3)
    with pytest.raises(InvalidRoll):
        player.record_frame(0, 6, 6)
    assert player.get_frame(0).rolls() == [2, 3, 0]


def test_strict_tenth_frame_from_environment(monkeypatch):
    monkeypatch.setenv("TENPIN_STRICT_TENTH_FRAME", "1")
    player = Player("p")
    assert player.strict_tenth_frame is True
    with pytest.raises(InvalidRoll):
        player.record_frame(9, 5, 8)


def test_explicit_strict_flag_wins_over_environment(monkeypatch):
    monkeypatch.setenv("TENPIN_STRICT_TENTH_FRAME", "1")
    player = Player("p", strict_tenth_frame=False)
    player.record_frame(9, 5, 8)
    assert player.calculate_score() == 13


def test_summary():
    player = Player("SparePlayer")
    _fill(player, (4, 6), (3, 5))
    summary = player.summary()
    assert summary.player == "SparePlayer"
    assert summary.total == 21
    assert summary.frames[0].kind == "spare"
    assert summary.frames[0].score == 13
    assert summary.frames[1].running_total == 21
    assert summary.frames[9].rolls == [0, 0, 0]


def test_bowling_game_wraps_one_player():
    game = BowlingGame("FinalFramePlayer")
    assert game.player.name == "FinalFramePlayer"
    game.player.record_frame(9, 10, 10, 10)
    assert game.player.calculate_score() == 30


@pytest.mark.parametrize(
    "value",
    [float("inf"), float("-inf"), Fraction(11, 2), Decimal("10.9")],
    ids=["infinity", "negative-infinity", "fraction", "decimal"],
)
def test_record_frame_rejects_non_integer_numbers(value):
    player = Player("p")
    with pytest.raises(InvalidRoll):
        player.record_frame(0, value, 0)
    assert player.get_frame(0).rolls() == [0, 0, 0]
