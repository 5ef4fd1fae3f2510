"""
Dice and scoring for Dice Pot.

A die is a six-sided value plus a held flag. Scoring is the sum of the
face values, except that a die showing 3 counts for nothing. Lower is better.
"""

import random
from typing import Iterable, List, Optional


DICE_PER_PLAYER = 5
MAX_ROLLS = 5
FACES = 6
FREE_FACE = 3  # a 3 scores zero


class Die:
    def __init__(self, value: int = 1, held: bool = False):
        self.value = value
        self.held = held

    def to_dict(self):
        return {'value': self.value, 'held': self.held}

    def __eq__(self, other):
        if not isinstance(other, Die):
            return NotImplemented
        return self.value == other.value and self.held == other.held

    def __repr__(self):
        return f"Die({self.value}{', held' if self.held else ''})"


def fresh_dice() -> List[Die]:
    """Five unheld dice showing 1, as at the start of every round."""
    return [Die() for _ in range(DICE_PER_PLAYER)]


def roll_die(die: Die, rng: Optional[random.Random] = None) -> Die:
    """Re-roll a die in place unless it is held."""
    if die.held:
        return die
    die.value = (rng or random).randint(1, FACES)
    return die


def die_score(value: int) -> int:
    return 0 if value == FREE_FACE else value


def score_dice(dice: Iterable[Die]) -> int:
    return sum(die_score(d.value) for d in dice)
