"""
ANSI color codes for terminal output in Dice Pot.
Provides consistent color theming across the application.
"""


class Colors:
    """ANSI color codes for terminal formatting."""
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    GREY = '\033[90m'
    RESET = '\033[0m'
    CLEAR_SCREEN = '\033[2J\033[H'


def hex_to_ansi(hex_color: str) -> str:
    """Turn a '#RRGGBB' player colour into a 24-bit foreground escape."""
    value = (hex_color or '').lstrip('#')
    if len(value) != 6:
        return Colors.WHITE
    try:
        r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return Colors.WHITE
    return f'\033[38;2;{r};{g};{b}m'
