"""
Game configuration loaded from the environment.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from .exceptions import ConfigError
from .piece import Side
from .strategy import Difficulty


class GameMode(Enum):
    """Who plays the two sides."""

    SINGLE = "single"  # human (FIRST by default) against the AI
    TWO = "two"  # two humans at one board


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_seed(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}")
        return None


@dataclass
class GameConfig:
    """Configuration for a game session with proper type safety."""

    mode: GameMode = GameMode.SINGLE
    difficulty: Difficulty = Difficulty.MEDIUM
    ai_side: Side = Side.SECOND
    enable_suggestions: bool = False
    show_paths: bool = False
    seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Create config from environment variables (and a ``.env`` file if present)."""
        load_dotenv()

        raw_mode = os.getenv("DAMA_MODE", "single").strip().lower()
        try:
            mode = GameMode(raw_mode)
        except ValueError as exc:
            raise ConfigError(f"Unknown game mode '{raw_mode}'") from exc

        raw_side = os.getenv("DAMA_AI_SIDE", "second").strip().lower()
        try:
            ai_side = Side(raw_side)
        except ValueError:
            logger.warning(f"Unknown AI side '{raw_side}', using second")
            ai_side = Side.SECOND

        return cls(
            mode=mode,
            difficulty=Difficulty.parse(os.getenv("DAMA_DIFFICULTY", "medium")),
            ai_side=ai_side,
            enable_suggestions=_env_flag("DAMA_SUGGESTIONS"),
            show_paths=_env_flag("DAMA_SHOW_PATHS"),
            seed=_env_seed("DAMA_SEED"),
        )
