"""
Game coordinator for Dice Pot.

GameController is the command surface the presentation layer talks to.
It owns the GameSession, delegates round rules to RoundController and
tells listeners when a round or the whole game is over. Every command
returns the public state; commands whose preconditions fail are ignored.
"""

from __future__ import annotations

import asyncio
import logging
import random
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from dicepot.game_engine import (
    GameSession, MIN_PLAYERS, PHASE_IN_ROUND, PHASE_ROUND_OVER, PHASE_SETUP,
)
from dicepot.player import DEFAULT_COLORS
from dicepot.round_engine import RoundController, RoundOutcome
from dicepot.settings import GameSettings


LEADING_INT = re.compile(r'\s*[+-]?\d+')


@dataclass
class GameOverResult:
    """Announced when nobody can pay the ante any more."""

    winner_id: int
    winner_name: str
    final_money: int
    rounds_played: int

    def describe(self) -> str:
        return f"{self.winner_name} wins with ${self.final_money}!"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'winner_id': self.winner_id,
            'winner_name': self.winner_name,
            'final_money': self.final_money,
            'rounds_played': self.rounds_played,
        }


def parse_leading_int(value: Any) -> int:
    """Leading whole number of a value ('12.5' -> 12, '40 coins' -> 40), or 0."""
    if isinstance(value, int):
        return value
    match = LEADING_INT.match(str(value)) if value is not None else None
    return int(match.group(0)) if match else 0


class GameController:
    """Main game coordinator tying the session and round rules together."""

    def __init__(self, settings: Optional[GameSettings] = None, rng: Optional[random.Random] = None):
        self.settings = settings or GameSettings()
        self.session = GameSession(ante=self.settings.ante)
        self.rounds = RoundController(
            rng=rng,
            include_inactive=self.settings.include_inactive_in_scoring,
            award_remainder=self.settings.award_remainder,
        )
        self.listeners: List[Callable[[Any], None]] = []
        self._pending_check: Optional[asyncio.TimerHandle] = None

    # -- notifications -------------------------------------------------

    def add_listener(self, callback: Callable[[Any], None]):
        """Register a callable receiving RoundOutcome and GameOverResult events."""
        self.listeners.append(callback)

    def remove_listener(self, callback: Callable[[Any], None]):
        if callback in self.listeners:
            self.listeners.remove(callback)

    def _notify(self, event):
        for callback in list(self.listeners):
            try:
                callback(event)
            except Exception:
                logging.exception(f"Listener {callback!r} failed handling {type(event).__name__}")

    # -- setup ---------------------------------------------------------

    @property
    def players(self):
        return self.session.players

    @property
    def pot(self) -> int:
        return self.session.pot

    def get_public_state(self) -> Dict[str, Any]:
        state = self.session.get_public_state()
        state['awaiting_game_end_check'] = self._pending_check is not None
        return state

    def next_color(self) -> str:
        return DEFAULT_COLORS[len(self.session.players) % len(DEFAULT_COLORS)]

    def add_player(self, name: str, color: Optional[str] = None, starting_money: Any = None) -> Dict[str, Any]:
        if self.session.game_started:
            logging.debug(f"Rejected add_player({name!r}): game already started")
            return self.get_public_state()
        if self.session.is_full:
            logging.debug(f"Rejected add_player({name!r}): table is full")
            return self.get_public_state()

        name = (name or "").strip()[:self.settings.max_name_length]
        if not name:
            logging.debug("Rejected add_player: empty name")
            return self.get_public_state()

        money = parse_leading_int(starting_money)
        if not money:
            money = self.settings.starting_money

        player = self.session.add_player(name, color or self.next_color(), money)
        logging.info(f"Player {player.name} joined as #{player.id} with ${player.money}")
        return self.get_public_state()

    def set_ante(self, amount: Any) -> Dict[str, Any]:
        if self.session.game_started:
            logging.debug("Rejected set_ante: game already started")
            return self.get_public_state()
        try:
            ante = int(amount)
        except (TypeError, ValueError):
            logging.debug(f"Rejected set_ante({amount!r}): not a number")
            return self.get_public_state()
        if ante <= 0:
            logging.debug(f"Rejected set_ante({ante}): must be positive")
            return self.get_public_state()

        self.session.ante = ante
        return self.get_public_state()

    def start_game(self) -> Dict[str, Any]:
        if self.session.game_started:
            logging.debug("Rejected start_game: already started")
            return self.get_public_state()
        if len(self.session.players) < MIN_PLAYERS:
            logging.debug(f"Rejected start_game: need at least {MIN_PLAYERS} players")
            return self.get_public_state()
        if not self.session.anyone_can_afford_ante():
            logging.debug(f"Rejected start_game: nobody can cover the ${self.session.ante} ante")
            return self.get_public_state()

        logging.info(f"Game started with {len(self.session.players)} players, ante ${self.session.ante}")
        self.rounds.collect_ante(self.session)
        return self.get_public_state()

    # -- round actions ---------------------------------------------------

    def roll_dice(self, player_id: int) -> Dict[str, Any]:
        if self.rounds.roll(self.session, player_id) and self.rounds.is_round_over(self.session):
            self._finish_round()
        return self.get_public_state()

    def toggle_hold(self, player_id: int, die_index: int) -> Dict[str, Any]:
        self.rounds.toggle_hold(self.session, player_id, die_index)
        return self.get_public_state()

    def end_round_manually(self) -> Dict[str, Any]:
        if not self.rounds.can_end_manually(self.session):
            logging.debug("Rejected end_round_manually: nobody has rolled yet")
            return self.get_public_state()
        self._finish_round()
        return self.get_public_state()

    def _finish_round(self) -> RoundOutcome:
        outcome = self.rounds.end_round(self.session)
        self._notify(outcome)
        self._schedule_game_end_check()
        return outcome

    def _schedule_game_end_check(self):
        """Give the round result a moment on screen before judging the game over."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None or self.settings.result_delay <= 0:
            self.check_game_end()
            return

        self._cancel_pending_check()
        self._pending_check = loop.call_later(self.settings.result_delay, self._run_pending_check)

    def _run_pending_check(self):
        self._pending_check = None
        self.check_game_end()

    def _cancel_pending_check(self):
        if self._pending_check is not None:
            self._pending_check.cancel()
            self._pending_check = None

    # -- between rounds ---------------------------------------------------

    def start_new_round(self) -> Dict[str, Any]:
        if self.session.phase != PHASE_ROUND_OVER:
            logging.debug(f"Rejected start_new_round: phase is {self.session.phase}")
            return self.get_public_state()

        self._cancel_pending_check()
        if not self.session.anyone_can_afford_ante():
            self.check_game_end()
            return self.get_public_state()

        self.rounds.collect_ante(self.session)
        return self.get_public_state()

    def check_game_end(self) -> Optional[GameOverResult]:
        """End the game if nobody can pay the ante; the richest player wins."""
        if self.session.phase == PHASE_SETUP or not self.session.players:
            return None
        if self.session.anyone_can_afford_ante():
            return None

        # max() keeps the first seat on ties
        winner = max(self.session.players, key=lambda p: p.money)
        result = GameOverResult(
            winner_id=winner.id,
            winner_name=winner.name,
            final_money=winner.money,
            rounds_played=self.session.round_number,
        )
        logging.info(f"Game over: {result.describe()}")
        self._notify(result)
        self._reset()
        return result

    def end_game(self) -> Dict[str, Any]:
        if self.session.game_started:
            logging.info("Game ended early")
        self._reset()
        return self.get_public_state()

    def _reset(self):
        self._cancel_pending_check()
        self.session.reset()

    @property
    def round_in_progress(self) -> bool:
        return self.session.phase == PHASE_IN_ROUND


__all__ = [
    'GameController',
    'GameOverResult',
    'RoundOutcome',
]
