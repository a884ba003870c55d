"""Tests for snakes_sim.stats."""

from snakes_sim.stats import Histograms


def test_streaks_are_clamped_to_cap():
    hist = Histograms()
    hist.record_reroll_streak(3, cap=10)
    hist.record_reroll_streak(15, cap=10)
    hist.record_overshoot_streak(25, cap=20)
    assert hist.reroll_streaks == {3: 1, 10: 1}
    assert hist.overshoot_streaks == {20: 1}


def test_record_counts():
    hist = Histograms()
    hist.record_ladder(68)
    hist.record_ladder(68)
    hist.record_snake(98)
    hist.record_face(4)
    assert hist.ladder_hits == {68: 2}
    assert hist.snake_hits == {98: 1}
    assert hist.faces == {4: 1}


def test_merge_sums_every_field():
    a = Histograms(ladder_hits={2: 1}, faces={3: 2}, turns=10, dice_rolls=12)
    b = Histograms(ladder_hits={2: 4, 8: 1}, snake_hits={16: 1}, overshoot_streaks={1: 1}, turns=5, dice_rolls=6)
    merged = a.merge(b)
    assert merged.ladder_hits == {2: 5, 8: 1}
    assert merged.snake_hits == {16: 1}
    assert merged.faces == {3: 2}
    assert merged.overshoot_streaks == {1: 1}
    assert merged.turns == 15
    assert merged.dice_rolls == 18


def test_merge_leaves_inputs_untouched():
    a = Histograms(faces={1: 1})
    b = Histograms(faces={1: 2})
    a.merge(b)
    assert a.faces == {1: 1}
    assert b.faces == {1: 2}
