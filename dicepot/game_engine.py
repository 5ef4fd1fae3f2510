"""
Game session state for Dice Pot.

GameSession is the single value holding everything a game needs: the
roster, the ante, the pot and which phase the table is in. It is owned by
GameController and handed to RoundController for each round operation.
"""

from typing import List, Dict, Any, Optional

from dicepot.player import Player


MIN_PLAYERS = 2
MAX_PLAYERS = 6

PHASE_SETUP = 'setup'
PHASE_IN_ROUND = 'in_round'
PHASE_ROUND_OVER = 'round_over'


class GameSession:
    """Roster, pot and lifecycle phase of one game."""

    def __init__(self, ante: int = 50):
        self.default_ante = ante
        self.reset()

    def reset(self):
        """Return to the pre-game configuration."""
        self.players: List[Player] = []
        self.ante = self.default_ante
        self.pot = 0
        self.phase = PHASE_SETUP
        self.round_number = 0
        self.next_player_id = 0
        self.last_outcome = None

    @property
    def game_started(self) -> bool:
        return self.phase != PHASE_SETUP

    @property
    def is_full(self) -> bool:
        return len(self.players) >= MAX_PLAYERS

    def get_player(self, player_id: int) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def add_player(self, name: str, color: str, money: int) -> Player:
        player = Player(self.next_player_id, name, color=color, money=money)
        self.next_player_id += 1
        self.players.append(player)
        return player

    def anyone_can_afford_ante(self) -> bool:
        return any(p.can_afford(self.ante) for p in self.players)

    def get_public_state(self) -> Dict[str, Any]:
        """Snapshot of the session for the presentation layer."""
        outcome = self.last_outcome
        return {
            'phase': self.phase,
            'game_started': self.game_started,
            'round_number': self.round_number,
            'ante': self.ante,
            'pot': self.pot,
            'players': [p.to_dict() for p in self.players],
            'last_outcome': outcome.to_dict() if outcome is not None else None,
        }
