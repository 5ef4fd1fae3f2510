"""
Entry point for Dice Pot.
Runs the shared-terminal game loop.
"""

import argparse
import asyncio
import logging
from dataclasses import replace

from dicepot.commands import CommandHandler, read_line
from dicepot.game import GameController
from dicepot.settings import load_settings
from dicepot.terminal_ui import TerminalUI
from dicepot.version import VERSION


async def main(settings, clear_screen: bool = True):
    print(f"🎲 Dice Pot {VERSION}")
    print("=" * 40)

    controller = GameController(settings)
    handler = CommandHandler(controller, write=print, ui=TerminalUI(clear_screen=clear_screen))
    handler.show_state()

    while handler.running:
        try:
            line = await read_line("❯ ")
        except EOFError:
            break
        await handler.process_command(line)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play Dice Pot at a shared terminal")
    parser.add_argument("--ante", type=int, help="Ante per round (default from DICEPOT_ANTE or 50)")
    parser.add_argument("--money", type=int, help="Default starting money (default 1000)")
    parser.add_argument("--delay", type=float, help="Seconds to show a round result before checking for game over")
    parser.add_argument("--env-file", default=".env", help="Path to a .env file with DICEPOT_* settings")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        settings = load_settings(args.env_file)
        overrides = {}
        if args.ante is not None:
            overrides['ante'] = args.ante
        if args.money is not None:
            overrides['starting_money'] = args.money
        if args.delay is not None:
            overrides['result_delay'] = args.delay
        settings = replace(settings, **overrides)
    except ValueError as e:
        parser.error(str(e))

    try:
        asyncio.run(main(settings, clear_screen=not args.no_clear))
    except KeyboardInterrupt:
        print("\n👋 Bye!")
