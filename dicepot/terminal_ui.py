"""
Terminal UI renderer for Dice Pot with colours and dice.

This keeps presentation logic out of the engine: the console loop calls
`TerminalUI.render(state)` with a GameController snapshot and prints the
returned string.
"""

from .ui.colors import Colors, hex_to_ansi
from .ui.dice import dice_horizontal
from .dice import MAX_ROLLS


STATUS_ICONS = {
    'inactive': f"{Colors.RED}✖ sitting out{Colors.RESET}",
    'not_started': f"{Colors.GREY}⏳ waiting{Colors.RESET}",
    'in_progress': f"{Colors.CYAN}🎲 rolling{Colors.RESET}",
    'finished': f"{Colors.GREEN}✅ finished{Colors.RESET}",
}


class TerminalUI:
    def __init__(self, clear_screen: bool = True):
        self.clear_screen = clear_screen

    def render(self, state: dict) -> str:
        """Render the current game state as a colorized string."""
        if not state.get('game_started'):
            return self.render_setup(state)

        out = []
        if self.clear_screen:
            out.append(Colors.CLEAR_SCREEN)
        out.append(f"{Colors.BOLD}{Colors.YELLOW}🎲 DICE POT 🎲{Colors.RESET}   "
                   f"{Colors.DIM}Round {state.get('round_number', 0)} · ante ${state.get('ante', 0)}{Colors.RESET}")
        out.append("")
        out.append(f"{Colors.BOLD}{Colors.GREEN}💰 POT: ${state.get('pot', 0)}{Colors.RESET}")
        out.append("")

        round_over = state.get('phase') == 'round_over'
        for player in state.get('players', []):
            out.extend(self.render_player(player, round_over))
            out.append("")

        if round_over and state.get('last_outcome'):
            out.append(self.render_round_outcome(state['last_outcome']))
            out.append("")
            out.append(f"{Colors.BOLD}Type {Colors.GREEN}next{Colors.RESET}{Colors.BOLD} for another round "
                       f"or {Colors.RED}quit-game{Colors.RESET}{Colors.BOLD} to end the game.{Colors.RESET}")
        else:
            out.append(f"{Colors.DIM}Commands: roll <player#>, hold <player#> <die#...>, end, help{Colors.RESET}")

        return "\n".join(out)

    def render_setup(self, state: dict) -> str:
        out = []
        if self.clear_screen:
            out.append(Colors.CLEAR_SCREEN)
        out.append(f"{Colors.BOLD}{Colors.YELLOW}🎲 DICE POT 🎲{Colors.RESET}")
        out.append("")
        out.append(f"Ante: ${state.get('ante', 0)}")
        players = state.get('players', [])
        if players:
            out.append(f"{Colors.BOLD}{Colors.CYAN}👥 Players:{Colors.RESET}")
            for p in players:
                out.append(f"  {hex_to_ansi(p['color'])}{p['name']}{Colors.RESET}: ${p['money']}")
        else:
            out.append(f"{Colors.DIM}No players yet.{Colors.RESET}")
        out.append("")
        out.append(f"{Colors.DIM}Commands: ante <amount>, add <name> [money] [color], start, help{Colors.RESET}")
        return "\n".join(out)

    def render_player(self, player: dict, round_over: bool = False) -> list:
        color = hex_to_ansi(player['color'])
        trophy = " 🏆" if round_over and player.get('is_winner') else ""
        status = STATUS_ICONS.get(player.get('status'), '')
        lines = [
            f"{Colors.BOLD}{color}#{player['id']} {player['name']}{Colors.RESET}{trophy}  "
            f"${player['money']}  {status}",
            dice_horizontal(player['dice'], color),
            f"{Colors.DIM}Score: {player['score']}   Rolls used: {player['rolls_used']}/{MAX_ROLLS}{Colors.RESET}",
        ]
        return lines

    def render_round_outcome(self, outcome: dict) -> str:
        """Round result in the same wording as the results dialog."""
        out = [f"{Colors.BOLD}{Colors.YELLOW}🏆 Round Complete!{Colors.RESET}"]
        names = outcome.get('winner_names', [])
        if not names:
            out.append("Nobody wins this round.")
        elif len(names) == 1:
            out.append(f"{Colors.BOLD}{names[0]}{Colors.RESET} wins with a score of {outcome['winning_score']}!")
            out.append(f"Prize money: ${outcome['prize']}")
        else:
            out.append("It's a tie between:")
            for name in names:
                out.append(f"  • {Colors.BOLD}{name}{Colors.RESET}")
            out.append(f"Each winner receives: ${outcome['prize']}")
        return "\n".join(out)

    def render_game_over(self, result: dict) -> str:
        return (f"{Colors.BOLD}{Colors.MAGENTA}🎉 Game Over!{Colors.RESET} "
                f"{result['winner_name']} wins with ${result['final_money']}!")
