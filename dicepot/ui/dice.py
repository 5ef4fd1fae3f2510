"""
Die rendering utilities for the Dice Pot terminal UI.
Draws dice as small boxes; held dice take the player's colour.
"""

from .colors import Colors


PIPS = {
    1: ["     ", "  ●  ", "     "],
    2: ["●    ", "     ", "    ●"],
    3: ["●    ", "  ●  ", "    ●"],
    4: ["●   ●", "     ", "●   ●"],
    5: ["●   ●", "  ●  ", "●   ●"],
    6: ["●   ●", "●   ●", "●   ●"],
}


def die_str(die, color=Colors.WHITE):
    """Format a single die dict ({'value', 'held'}) as five lines."""
    value = die['value']
    tint = f"{Colors.BOLD}{color}" if die['held'] else Colors.GREY
    rows = PIPS.get(value, ["  ?  "] * 3)

    top = f"{tint}╭─────╮{Colors.RESET}"
    mids = [f"{tint}│{row}│{Colors.RESET}" for row in rows]
    bot = f"{tint}╰─────╯{Colors.RESET}"
    return [top, *mids, bot]


def dice_horizontal(dice, color=Colors.WHITE, numbered=True):
    """Render dice side-by-side, optionally with 1-based numbers underneath."""
    if not dice:
        return ""

    die_lines = [die_str(d, color) for d in dice]
    result_lines = []
    for line_idx in range(5):
        result_lines.append(" ".join(lines[line_idx] for lines in die_lines))
    if numbered:
        labels = []
        for i, d in enumerate(dice, start=1):
            mark = "H" if d['held'] else " "
            labels.append(f"  {i}{mark}   ")
        result_lines.append(f"{Colors.DIM}{' '.join(labels)}{Colors.RESET}")
    return "\n".join(result_lines)
