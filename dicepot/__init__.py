"""
Dice Pot: a hot-seat dice wagering game where the lowest score takes the pot.
"""

from dicepot.game import GameController, GameOverResult
from dicepot.round_engine import RoundController, RoundOutcome, resolve_round
from dicepot.dice import Die, score_dice
from dicepot.player import Player
from dicepot.settings import GameSettings, load_settings
from dicepot.version import VERSION

__all__ = [
    'GameController',
    'GameOverResult',
    'RoundController',
    'RoundOutcome',
    'resolve_round',
    'Die',
    'score_dice',
    'Player',
    'GameSettings',
    'load_settings',
    'VERSION',
]
