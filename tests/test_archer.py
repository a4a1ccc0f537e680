from __future__ import annotations
import random
from collections import Counter

import pytest

from models.archer import Archer, NO_BONUS_YET, STAMINA_PER_SHOT
from models.shot import DEFAULT_PRECISION, Gender, Shot
from scripted_rng import ScriptedRng


def test_initial_state_ranges():
    rng = random.Random(2024)
    for i in range(500):
        a = Archer(i, rng)
        assert 25 <= a.stamina_baseline <= 45
        assert a.stamina_budget == a.stamina_baseline
        assert a.experience == 10
        assert 1.0 <= a.luck_value < 3.0
        assert a.gender in (Gender.MALE, Gender.FEMALE)
        assert a.round_score == a.total_score == a.rounds_won == 0
        assert a.luck_counter == 0
        assert a.bonus_shots_won == 0
        assert a.last_bonus_round == NO_BONUS_YET


def test_both_genders_are_drawn():
    rng = random.Random(5)
    genders = {Archer(i, rng).gender for i in range(100)}
    assert genders == {Gender.MALE, Gender.FEMALE}


def test_luck_rerolled_every_round_and_stays_in_range():
    rng = random.Random(77)
    a = Archer(1, rng)
    seen = {a.luck_value}
    for _ in range(10):
        a.execute_round()
        assert 1.0 <= a.luck_value < 3.0
        seen.add(a.luck_value)
    assert len(seen) > 1


def test_luck_upper_bound_is_exclusive():
    a = Archer(1, ScriptedRng(floats=[0.9999999999999999]))
    assert a.luck_value < 3.0


def test_shoot_returns_only_target_scores():
    rng = random.Random(3)
    a = Archer(1, rng)
    assert {a.shoot() for _ in range(2000)} <= {0, 8, 9, 10}


def test_shoot_does_not_change_state():
    a = Archer(1, random.Random(9))
    before = (a.stamina_budget, a.round_score, a.total_score, a.experience, a.luck_value)
    a.shoot()
    assert (a.stamina_budget, a.round_score, a.total_score, a.experience, a.luck_value) == before


def test_execute_round_shoots_until_stamina_exhausted():
    # 26 -> 21 -> 16 -> 11 -> 6 -> 1 -> -4: sześć strzałów
    rng = ScriptedRng(floats=[0.5], ints=[26, 2], default_float=0.0)
    a = Archer(1, rng)
    assert a.luck_value == pytest.approx(2.0)
    shots = a.execute_round()
    assert shots == 6
    assert a.round_score == 60
    assert a.total_score == 60
    # regeneracja: baseline 26 - zmęczenie 2
    assert a.stamina_baseline == 24
    assert a.stamina_budget == 24
    assert a.luck_value == pytest.approx(1.0)


def test_no_shot_after_budget_drops_to_zero():
    rng = ScriptedRng(floats=[0.5], ints=[25, 1], default_float=0.0)
    a = Archer(1, rng)
    shots = a.execute_round()
    # 25 -> 20 -> 15 -> 10 -> 5 -> 0: pięć strzałów, przy 0 już nie strzela
    assert shots == 25 // STAMINA_PER_SHOT
    assert a.round_score == 50


def test_exhausted_archer_takes_zero_shots():
    rng = ScriptedRng(floats=[0.5], ints=[25] + [2] * 40, default_float=0.0)
    a = Archer(1, rng)
    while a.stamina_baseline > 0:
        a.execute_round()
        a.reset_round_score()
    total = a.total_score
    assert a.execute_round() == 0
    assert a.round_score == 0
    assert a.total_score == total


def test_bonus_streak_progression():
    a = Archer(1, random.Random(1))
    a.record_bonus_shot_win(4)
    assert (a.bonus_shots_won, a.last_bonus_round) == (1, 4)
    a.record_bonus_shot_win(5)
    a.record_bonus_shot_win(6)
    assert (a.bonus_shots_won, a.last_bonus_round) == (3, 6)
    # przerwa w serii
    a.record_bonus_shot_win(8)
    assert (a.bonus_shots_won, a.last_bonus_round) == (1, 8)


def test_first_bonus_win_in_round_one():
    a = Archer(1, random.Random(1))
    a.record_bonus_shot_win(1)
    a.record_bonus_shot_win(2)
    assert a.bonus_shots_won == 2


def test_counters_and_experience():
    a = Archer(1, ScriptedRng(ints=[30]))
    a.gain_experience()
    a.gain_experience()
    a.increment_luck_counter()
    a.win_round()
    a.drain_stamina_by_experience()
    assert a.experience == 16
    assert a.luck_counter == 1
    assert a.rounds_won == 1
    assert a.stamina_budget == 29


def test_state_is_read_only():
    a = Archer(1, random.Random(1))
    with pytest.raises(AttributeError):
        a.round_score = 100
    with pytest.raises(AttributeError):
        a.luck_counter = 7


@pytest.mark.parametrize("gender", [Gender.MALE, Gender.FEMALE])
def test_shot_frequencies_match_precision_table(gender):
    rng = random.Random(1234)
    a = Archer(1, rng)
    while a.gender is not gender:
        a = Archer(1, rng)
    draws = 100_000
    counts = Counter(a.shoot() for _ in range(draws))
    expected = dict(zip(Shot, DEFAULT_PRECISION[gender].as_tuple()))
    for shot in Shot:
        assert counts[shot.score] / draws == pytest.approx(expected[shot], abs=0.01)
