import threading

import pytest

from dicepot.commands import CommandHandler, read_line
from dicepot.terminal_ui import TerminalUI


@pytest.fixture
def console(controller):
    output = []
    handler = CommandHandler(controller, write=output.append, ui=TerminalUI(clear_screen=False))
    return handler, output


async def run(handler, *lines):
    for line in lines:
        await handler.process_command(line)


@pytest.mark.asyncio
async def test_setup_commands(console, controller):
    handler, output = console
    await run(handler, "ante 20", "add alice 500", "add bob #22C55E", "start")

    assert controller.session.ante == 20
    assert [p.name for p in controller.players] == ["alice", "bob"]
    assert controller.players[0].money == 480
    assert controller.players[1].color == "#22C55E"
    assert controller.pot == 40


@pytest.mark.asyncio
async def test_bad_ante_reports_error(console, controller):
    handler, output = console
    await run(handler, "ante zero")
    assert controller.session.ante == 50
    assert "positive whole number" in output[-1]


@pytest.mark.asyncio
async def test_start_with_one_player_is_refused(console, controller):
    handler, output = console
    await run(handler, "add alice", "start")
    assert controller.session.game_started is False
    assert "at least 2 players" in output[-1]


@pytest.mark.asyncio
async def test_roll_hold_and_end(console, controller, scripted_rng):
    handler, output = console
    await run(handler, "add alice", "add bob", "start")

    scripted_rng.push(6, 5, 4, 3, 2)
    await run(handler, "roll 0")
    assert controller.players[0].rolls_used == 1

    await run(handler, "roll 0")
    assert "cannot roll now" in output[-1]

    await run(handler, "hold 0 4 5")
    assert [d.held for d in controller.players[0].dice] == [False, False, False, True, True]

    await run(handler, "hold 0 9")
    assert "Cannot toggle die 9." in output[-1]

    await run(handler, "end")
    assert controller.session.phase == 'round_over'
    # bob never rolled and still shows five 1s
    assert controller.session.last_outcome.winner_names == ["bob"]

    await run(handler, "next")
    assert controller.session.round_number == 2


@pytest.mark.asyncio
async def test_end_before_anyone_rolled(console, controller):
    handler, output = console
    await run(handler, "add alice", "add bob", "start", "end")
    assert controller.session.phase == 'in_round'
    assert "once someone has rolled" in output[-1]


@pytest.mark.asyncio
async def test_roll_unknown_player(console, controller):
    handler, output = console
    await run(handler, "add alice", "add bob", "start", "roll 7")
    assert "No player #7" in output[-1]


@pytest.mark.asyncio
async def test_quit_game_and_quit(console, controller):
    handler, output = console
    await run(handler, "add alice", "add bob", "start", "quit-game")
    assert controller.players == []

    assert await handler.process_command("quit") is False
    assert output[-1] == "Goodbye!"


@pytest.mark.asyncio
async def test_unknown_and_empty_commands(console):
    handler, output = console
    assert await handler.process_command("") is True
    assert output == []
    await handler.process_command("dance")
    assert "Unknown command 'dance'" in output[-1]
    await handler.process_command("help")
    assert "Lowest score wins the pot" in output[-1]


@pytest.mark.asyncio
async def test_game_over_is_announced(console, controller, scripted_rng):
    handler, output = console
    await run(handler, "ante 100", "add alice 100", "add bob 100", "start")
    controller.session.pot = 50

    scripted_rng.push(6, 6, 6, 6, 6)
    await run(handler, "roll 0", "end")

    assert any("Game Over!" in line for line in output)
    assert controller.players == []


@pytest.mark.asyncio
async def test_hold_can_swap_the_only_held_die(console, controller, scripted_rng):
    handler, output = console
    await run(handler, "add alice", "add bob", "start")
    scripted_rng.push(6, 5, 4, 3, 2)
    await run(handler, "roll 0", "hold 0 1")
    assert [d.held for d in controller.players[0].dice] == [True, False, False, False, False]

    await run(handler, "hold 0 1 2")

    assert [d.held for d in controller.players[0].dice] == [False, True, False, False, False]
    assert not any("Cannot toggle" in line for line in output)


@pytest.mark.asyncio
async def test_start_refused_when_nobody_can_pay(console, controller):
    handler, output = console
    await run(handler, "ante 50", "add alice 10", "add bob 20", "start")
    assert controller.session.game_started is False
    assert "pay the ante" in output[-1]


@pytest.mark.asyncio
async def test_read_line_uses_daemon_thread():
    seen = {}

    def reader(prompt):
        seen['prompt'] = prompt
        seen['daemon'] = threading.current_thread().daemon
        return "roll 0"

    assert await read_line("> ", reader=reader) == "roll 0"
    assert seen == {'prompt': "> ", 'daemon': True}


@pytest.mark.asyncio
async def test_read_line_passes_on_end_of_input():
    def reader(prompt):
        raise EOFError

    with pytest.raises(EOFError):
        await read_line(reader=reader)
