from collections import deque
from typing import Callable, Iterable, List, Optional

import pytest

from dicepot.dice import Die
from dicepot.game import GameController
from dicepot.player import Player
from dicepot.settings import GameSettings


class ScriptedRandom:
    """Stand-in for random.Random whose randint returns predetermined faces."""

    def __init__(self, values: Iterable[int] = ()):
        self._queue = deque(values)

    def push(self, *values: int):
        self._queue.extend(values)

    def randint(self, a, b):
        if not self._queue:
            raise RuntimeError("No more scripted die faces available")
        value = self._queue.popleft()
        assert a <= value <= b
        return value


def dice_of(*values: int, held: Optional[List[int]] = None) -> List[Die]:
    held = held or []
    return [Die(v, held=i in held) for i, v in enumerate(values)]


@pytest.fixture
def make_player() -> Callable[..., Player]:
    """Factory for creating Player objects with chosen dice."""
    counter = {'next': 0}

    def _factory(name: str, money: int = 1000, dice: Optional[Iterable[int]] = None,
                 *, rolls_used: int = 0, is_active: bool = True) -> Player:
        player = Player(counter['next'], name, money=money)
        counter['next'] += 1
        if dice is not None:
            player.dice = dice_of(*dice)
        player.rolls_used = rolls_used
        player.has_finished = rolls_used >= 5
        player.is_active = is_active
        return player

    return _factory


@pytest.fixture
def scripted_rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def controller(scripted_rng) -> GameController:
    """Controller with no result delay and a scripted die."""
    return GameController(GameSettings(result_delay=0), rng=scripted_rng)


@pytest.fixture
def started_game(controller) -> GameController:
    """Two players, alice (#0) and bob (#1), with the first ante taken."""
    controller.add_player("alice", starting_money=1000)
    controller.add_player("bob", starting_money=1000)
    controller.start_game()
    return controller
