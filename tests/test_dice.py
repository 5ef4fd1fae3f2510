import random

from dicepot.dice import Die, FACES, fresh_dice, roll_die, score_dice

from tests.conftest import ScriptedRandom, dice_of


def test_fresh_dice_are_five_unheld_ones():
    dice = fresh_dice()
    assert len(dice) == 5
    assert all(d == Die(1, False) for d in dice)
    # each die is its own object
    dice[0].held = True
    assert not dice[1].held


def test_score_counts_threes_as_zero():
    assert score_dice(dice_of(3, 3, 3, 6, 6)) == 12
    assert score_dice(dice_of(1, 1, 1, 1, 1)) == 5
    assert score_dice(dice_of(3, 3, 3, 3, 3)) == 0
    assert score_dice(dice_of(6, 5, 4, 2, 1)) == 18


def test_score_matches_sum_without_threes():
    rng = random.Random(7)
    for _ in range(200):
        dice = [Die(rng.randint(1, 6)) for _ in range(5)]
        assert score_dice(dice) == sum(d.value for d in dice if d.value != 3)


def test_roll_die_skips_held_die():
    die = Die(4, held=True)
    roll_die(die, ScriptedRandom([]))
    assert die.value == 4


def test_roll_die_uses_rng():
    die = Die(1)
    roll_die(die, ScriptedRandom([6]))
    assert die.value == 6


def test_roll_die_stays_in_range():
    rng = random.Random(1)
    die = Die()
    seen = set()
    for _ in range(500):
        roll_die(die, rng)
        seen.add(die.value)
    assert seen == set(range(1, FACES + 1))
