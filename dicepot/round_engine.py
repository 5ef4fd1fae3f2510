"""
Round logic for Dice Pot.

RoundController runs one round against a GameSession: it collects the
ante, applies roll and hold actions, detects when the round is over and
pays out the pot. Winner determination lives in the pure resolve_round()
so it can be checked without touching any state.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from dicepot.dice import MAX_ROLLS
from dicepot.game_engine import GameSession, PHASE_IN_ROUND, PHASE_ROUND_OVER
from dicepot.player import Player


@dataclass
class RoundOutcome:
    """Result of a finished round, as announced to the players."""

    round_number: int
    pot: int
    winning_score: Optional[int]
    winner_ids: List[int]
    winner_names: List[str]
    prize: int  # paid to each winner
    remainder: int  # part of the pot nobody received
    scores: Dict[int, int] = field(default_factory=dict)
    payouts: Dict[int, int] = field(default_factory=dict)

    @property
    def is_tie(self) -> bool:
        return len(self.winner_ids) > 1

    def describe(self) -> str:
        if not self.winner_ids:
            return "Nobody wins this round."
        verb = "tie" if self.is_tie else "wins"
        return f"{', '.join(self.winner_names)} {verb} with {self.winning_score} points!"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'round_number': self.round_number,
            'pot': self.pot,
            'winning_score': self.winning_score,
            'winner_ids': list(self.winner_ids),
            'winner_names': list(self.winner_names),
            'prize': self.prize,
            'remainder': self.remainder,
            'scores': dict(self.scores),
            'payouts': dict(self.payouts),
        }


def resolve_round(players: List[Player], pot: int, round_number: int = 0,
                  include_inactive: bool = False, award_remainder: bool = False) -> RoundOutcome:
    """Work out who takes the pot. Does not modify the players.

    Every player is scored. Only active players contend for the pot unless
    include_inactive is set; if nobody is active, everybody contends. All
    contenders tied on the lowest score split the pot evenly, and whatever
    does not divide evenly stays with the house unless award_remainder is set,
    in which case it is handed out one unit at a time in seat order.
    """
    scores = {p.id: p.score for p in players}

    contenders = players if include_inactive else [p for p in players if p.is_active]
    if not contenders:
        contenders = players

    if not contenders:
        return RoundOutcome(round_number=round_number, pot=pot, winning_score=None,
                            winner_ids=[], winner_names=[], prize=0, remainder=pot,
                            scores=scores)

    best = min(scores[p.id] for p in contenders)
    winners = [p for p in contenders if scores[p.id] == best]

    prize = pot // len(winners)
    remainder = pot % len(winners)
    payouts = {p.id: prize for p in winners}
    if award_remainder:
        for p in winners[:remainder]:
            payouts[p.id] += 1
        remainder = 0

    return RoundOutcome(
        round_number=round_number,
        pot=pot,
        winning_score=best,
        winner_ids=[p.id for p in winners],
        winner_names=[p.name for p in winners],
        prize=prize,
        remainder=remainder,
        scores=scores,
        payouts=payouts,
    )


class RoundController:
    """Applies round rules to a GameSession."""

    def __init__(self, rng: Optional[random.Random] = None,
                 include_inactive: bool = False, award_remainder: bool = False):
        self.rng = rng or random.Random()
        self.include_inactive = include_inactive
        self.award_remainder = award_remainder

    def collect_ante(self, session: GameSession) -> int:
        """Take the ante from everybody and start a fresh round.

        Affordability is judged on the balance before the ante is taken.
        Players who cannot afford it sit the round out, but the ante is still
        deducted and the pot is counted for the whole table.
        """
        ante = session.ante
        for p in session.players:
            p.reset_for_round(is_active=p.can_afford(ante))
            p.money -= ante
            if not p.is_active:
                logging.info(f"{p.name} cannot cover the ${ante} ante and sits this round out")

        session.pot = len(session.players) * ante
        session.phase = PHASE_IN_ROUND
        session.round_number += 1
        session.last_outcome = None
        logging.debug(f"Round {session.round_number} started: ante=${ante}, pot=${session.pot}")
        return session.pot

    def roll(self, session: GameSession, player_id: int) -> bool:
        if session.phase != PHASE_IN_ROUND:
            logging.debug(f"Rejected roll for player {player_id}: no round in progress")
            return False
        player = session.get_player(player_id)
        if player is None:
            logging.debug(f"Rejected roll: unknown player {player_id}")
            return False
        return player.roll(self.rng)

    def toggle_hold(self, session: GameSession, player_id: int, die_index: int) -> bool:
        if session.phase != PHASE_IN_ROUND:
            logging.debug(f"Rejected hold for player {player_id}: no round in progress")
            return False
        player = session.get_player(player_id)
        if player is None:
            logging.debug(f"Rejected hold: unknown player {player_id}")
            return False
        return player.toggle_hold(die_index)

    def is_round_over(self, session: GameSession) -> bool:
        return all(not p.is_active or p.has_finished or p.rolls_used >= MAX_ROLLS
                   for p in session.players)

    def can_end_manually(self, session: GameSession) -> bool:
        return session.phase == PHASE_IN_ROUND and any(p.rolls_used > 0 for p in session.players)

    def end_round(self, session: GameSession) -> RoundOutcome:
        """Pay out the pot and close the round."""
        outcome = resolve_round(
            session.players, session.pot, round_number=session.round_number,
            include_inactive=self.include_inactive, award_remainder=self.award_remainder,
        )

        for p in session.players:
            p.money += outcome.payouts.get(p.id, 0)
            p.is_winner = p.id in outcome.payouts
            p.release_holds()
            p.rolls_used = 0
            p.has_finished = False

        session.pot = 0
        session.phase = PHASE_ROUND_OVER
        session.last_outcome = outcome
        logging.info(f"Round {outcome.round_number} complete: {outcome.describe()} "
                     f"(prize ${outcome.prize}, house keeps ${outcome.remainder})")
        return outcome
