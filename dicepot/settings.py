"""
Configuration for Dice Pot.

Values come from DICEPOT_* environment variables, optionally loaded from
a .env file, with defaults matching the classic table rules.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class GameSettings:
    ante: int = 50
    starting_money: int = 1000
    result_delay: float = 0.5  # seconds between round result and game-end check
    include_inactive_in_scoring: bool = False
    award_remainder: bool = False
    max_name_length: int = 12

    def __post_init__(self):
        if self.ante <= 0:
            raise ValueError(f"ante must be positive, got {self.ante}")
        if self.starting_money <= 0:
            raise ValueError(f"starting_money must be positive, got {self.starting_money}")
        if self.result_delay < 0:
            raise ValueError(f"result_delay cannot be negative, got {self.result_delay}")
        if self.max_name_length <= 0:
            raise ValueError(f"max_name_length must be positive, got {self.max_name_length}")


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def load_settings(env_file: Optional[str] = ".env") -> GameSettings:
    """Build settings from the environment, reading env_file first if it exists."""
    if env_file:
        load_dotenv(env_file)

    defaults = GameSettings()
    try:
        return GameSettings(
            ante=int(os.getenv('DICEPOT_ANTE', defaults.ante)),
            starting_money=int(os.getenv('DICEPOT_STARTING_MONEY', defaults.starting_money)),
            result_delay=float(os.getenv('DICEPOT_RESULT_DELAY', defaults.result_delay)),
            include_inactive_in_scoring=_env_bool(
                os.getenv('DICEPOT_INCLUDE_INACTIVE', str(defaults.include_inactive_in_scoring))),
            award_remainder=_env_bool(
                os.getenv('DICEPOT_AWARD_REMAINDER', str(defaults.award_remainder))),
            max_name_length=int(os.getenv('DICEPOT_MAX_NAME_LENGTH', defaults.max_name_length)),
        )
    except ValueError as e:
        raise ValueError(f"Invalid Dice Pot configuration: {e}") from e
