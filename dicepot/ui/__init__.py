"""
Terminal UI components for Dice Pot.
"""

from .colors import Colors, hex_to_ansi
from .dice import die_str, dice_horizontal, PIPS

__all__ = ['Colors', 'hex_to_ansi', 'die_str', 'dice_horizontal', 'PIPS']
