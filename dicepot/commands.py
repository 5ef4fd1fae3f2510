"""
Command handlers for the Dice Pot console.

Turns lines typed at the shared terminal into GameController calls and
writes the rendered result back.
"""

import asyncio
import logging
import threading
from typing import Callable, List, Optional

from dicepot.game import GameController, GameOverResult
from dicepot.round_engine import RoundOutcome
from dicepot.terminal_ui import Colors, TerminalUI


async def read_line(prompt: str = "❯ ", reader: Callable[[str], str] = input) -> str:
    """Read one line without blocking the event loop.

    The blocking read happens on a daemon thread so an interrupted program
    can exit while a read is still waiting for Enter.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def _deliver(result, error):
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)

    def _read():
        try:
            result, error = reader(prompt), None
        except Exception as e:
            result, error = None, e
        if not loop.is_closed():
            loop.call_soon_threadsafe(_deliver, result, error)

    threading.Thread(target=_read, name="dicepot-input", daemon=True).start()
    return await future


HELP_TEXT = f"""{Colors.BOLD}{Colors.CYAN}Dice Pot commands{Colors.RESET}
  ante <amount>                 set the ante before the game starts
  add <name> [money] [color]    add a player (2-6 players, color as #RRGGBB)
  start                         start the game and collect the first ante
  roll <player#>                roll that player's unheld dice
  hold <player#> <die#...>      toggle hold on one or more dice (1-5)
  end                           end the round now
  next                          play another round
  quit-game                     end the game
  state                         redraw the table
  quit                          leave
{Colors.DIM}Lowest score wins the pot. A 3 counts as zero.{Colors.RESET}"""


class CommandHandler:
    """Handles command processing for the shared console."""

    def __init__(self, controller: GameController, write: Callable[[str], None],
                 ui: Optional[TerminalUI] = None):
        self.controller = controller
        self.write = write
        self.ui = ui or TerminalUI()
        self.running = True
        self.controller.add_listener(self.on_event)

    def on_event(self, event):
        if isinstance(event, GameOverResult):
            self.write(self.ui.render_game_over(event.to_dict()))
        elif isinstance(event, RoundOutcome):
            logging.debug(f"Round {event.round_number} announced to console")

    def error(self, message: str):
        self.write(f"{Colors.RED}❌ {message}{Colors.RESET}")

    def show_state(self):
        self.write(self.ui.render(self.controller.get_public_state()))

    async def process_command(self, cmd: str) -> bool:
        """Process one line. Returns False once the user asked to leave."""
        cmd = (cmd or "").strip()
        logging.debug(f"Console command: '{cmd}'")
        if not cmd:
            return self.running

        parts = cmd.split()
        verb, args = parts[0].lower(), parts[1:]

        if verb in ("quit", "exit"):
            self.running = False
            self.write("Goodbye!")
            return self.running

        handler = getattr(self, f"cmd_{verb.replace('-', '_')}", None)
        if handler is None:
            self.error(f"Unknown command '{verb}'. Type 'help' for a list of commands.")
            return self.running

        handler(args)
        return self.running

    def cmd_help(self, args: List[str]):
        self.write(HELP_TEXT)

    def cmd_state(self, args: List[str]):
        self.show_state()

    def cmd_ante(self, args: List[str]):
        if len(args) != 1:
            self.error("Usage: ante <amount>")
            return
        if self.controller.session.game_started:
            self.error("The ante can only be changed before the game starts.")
            return
        if not args[0].isdigit() or int(args[0]) <= 0:
            self.error("Ante must be a positive whole number.")
            return
        self.controller.set_ante(args[0])
        self.show_state()

    def cmd_add(self, args: List[str]):
        if not args:
            self.error("Usage: add <name> [money] [color]")
            return
        name, money, color = args[0], None, None
        for extra in args[1:]:
            if extra.startswith('#'):
                color = extra
            else:
                money = extra
        count = len(self.controller.players)
        self.controller.add_player(name, color=color, starting_money=money)
        if len(self.controller.players) == count:
            self.error("Could not add player (game started, table full, or empty name).")
            return
        self.show_state()

    def cmd_start(self, args: List[str]):
        self.controller.start_game()
        if not self.controller.session.game_started:
            self.error("Need at least 2 players to start, and someone must be able to pay the ante.")
            return
        self.show_state()

    def _player_id(self, args: List[str]) -> Optional[int]:
        try:
            return int(args[0].lstrip('#'))
        except (IndexError, ValueError):
            return None

    def cmd_roll(self, args: List[str]):
        player_id = self._player_id(args)
        if player_id is None:
            self.error("Usage: roll <player#>")
            return
        player = self.controller.session.get_player(player_id)
        if player is None:
            self.error(f"No player #{player_id}.")
            return
        if not self.controller.round_in_progress:
            self.error("No round in progress.")
            return
        if not player.can_roll():
            self.error(f"{player.name} cannot roll now (hold at least one die after the first roll).")
            return
        self.controller.roll_dice(player_id)
        self.show_state()

    def cmd_hold(self, args: List[str]):
        player_id = self._player_id(args)
        if player_id is None or len(args) < 2:
            self.error("Usage: hold <player#> <die#...>")
            return
        player = self.controller.session.get_player(player_id)
        if player is None:
            self.error(f"No player #{player_id}.")
            return
        problems = []
        requested = []
        for raw in args[1:]:
            try:
                requested.append((raw, int(raw) - 1))
            except ValueError:
                problems.append(f"'{raw}' is not a die number")

        # new holds before releases
        def releases_last(item):
            index = item[1]
            return 0 <= index < len(player.dice) and player.dice[index].held

        for raw, index in sorted(requested, key=releases_last):
            before = player.dice[index].held if 0 <= index < len(player.dice) else None
            self.controller.toggle_hold(player_id, index)
            if before is None or player.dice[index].held == before:
                problems.append(f"Cannot toggle die {raw}.")
        # redraw first so the messages stay visible
        self.show_state()
        for problem in problems:
            self.error(problem)

    def cmd_end(self, args: List[str]):
        if not self.controller.rounds.can_end_manually(self.controller.session):
            self.error("The round can only be ended once someone has rolled.")
            return
        self.controller.end_round_manually()
        self.show_state()

    def cmd_next(self, args: List[str]):
        self.controller.start_new_round()
        self.show_state()

    def cmd_quit_game(self, args: List[str]):
        self.controller.end_game()
        self.show_state()
