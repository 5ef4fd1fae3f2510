"""
Player model for Dice Pot.

A Player owns five dice, a money balance and the per-round progress
fields (rolls used, finished, winner). The two player actions, rolling
and toggling a hold, are guarded here: an action whose precondition
fails is rejected and leaves the player untouched.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from dicepot.dice import Die, MAX_ROLLS, fresh_dice, roll_die, score_dice


DEFAULT_COLORS = [
    "#EF4444",  # red
    "#FFA500",  # orange
    "#FFFF00",  # yellow
    "#22C55E",  # green
    "#3B82F6",  # blue
    "#A855F7",  # purple
]


class Player:
    def __init__(self, player_id: int, name: str, color: str = DEFAULT_COLORS[0], money: int = 1000):
        self.id = player_id
        self.name = name
        self.color = color
        self.money = money
        self.is_active: bool = True
        self.dice: List[Die] = fresh_dice()
        self.rolls_used: int = 0
        self.has_finished: bool = False
        self.is_winner: bool = False

    @property
    def status(self) -> str:
        """One of inactive, not_started, in_progress, finished."""
        if not self.is_active:
            return 'inactive'
        if self.has_finished:
            return 'finished'
        if self.rolls_used == 0:
            return 'not_started'
        return 'in_progress'

    @property
    def score(self) -> int:
        return score_dice(self.dice)

    def held_count(self) -> int:
        return sum(1 for d in self.dice if d.held)

    def can_afford(self, ante: int) -> bool:
        return self.money >= ante

    def can_roll(self) -> bool:
        if not self.is_active or self.has_finished or self.rolls_used >= MAX_ROLLS:
            return False
        # after the first roll something must stay on the table
        if self.rolls_used > 0 and self.held_count() == 0:
            return False
        return True

    def roll(self, rng: Optional[random.Random] = None) -> bool:
        """Re-roll every unheld die. Returns False if the roll was rejected."""
        if not self.can_roll():
            logging.debug(f"Rejected roll for {self.name}: status={self.status}, "
                          f"rolls_used={self.rolls_used}, held={self.held_count()}")
            return False

        for die in self.dice:
            roll_die(die, rng)
        self.rolls_used += 1
        self.has_finished = self.rolls_used >= MAX_ROLLS
        logging.debug(f"{self.name} rolled {[d.value for d in self.dice]} "
                      f"({self.rolls_used}/{MAX_ROLLS})")
        return True

    def toggle_hold(self, die_index: int) -> bool:
        """Flip the held flag of one die.

        Holding is only possible once the player has rolled and while they
        still have rolls left. The last held die can never be released.
        """
        if not self.is_active or self.rolls_used == 0 or self.has_finished:
            logging.debug(f"Rejected hold for {self.name}: status={self.status}")
            return False
        if not 0 <= die_index < len(self.dice):
            logging.debug(f"Rejected hold for {self.name}: no die at index {die_index}")
            return False

        die = self.dice[die_index]
        if die.held and self.held_count() == 1:
            logging.debug(f"Rejected hold for {self.name}: die {die_index} is the only held die")
            return False

        die.held = not die.held
        return True

    def reset_for_round(self, is_active: bool):
        self.is_active = is_active
        self.dice = fresh_dice()
        self.rolls_used = 0
        self.has_finished = False
        self.is_winner = False

    def release_holds(self):
        for die in self.dice:
            die.held = False

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'color': self.color,
            'money': self.money,
            'is_active': self.is_active,
            'dice': [d.to_dict() for d in self.dice],
            'rolls_used': self.rolls_used,
            'has_finished': self.has_finished,
            'is_winner': self.is_winner,
            'score': self.score,
            'status': self.status,
            'can_roll': self.can_roll(),
        }

    def __repr__(self):
        return f"Player(id={self.id}, name={self.name!r}, money={self.money})"
