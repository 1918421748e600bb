"""
Runtime settings, read from the environment (and a local .env file).

Variables:
    SNAKE_GRID_SIZE     board width/height in cells (default 20)
    SNAKE_SPEED_MS      milliseconds per tick (default 200)
    SNAKE_SPEED_PRESET  slow / medium / fast, overrides SNAKE_SPEED_MS
    SNAKE_PLAYER        player variant driving the snake (default greedy)
    SNAKE_MAX_ROUNDS    tick limit for a CLI session (default 1000)
    LOG_LEVEL           logging level name (default INFO)
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from domain.constants import DEFAULT_SPEED_MS, GRID_SIZE, SPEED_PRESETS

load_dotenv()

DEFAULT_PLAYER = "greedy"
DEFAULT_MAX_ROUNDS = 1000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class Settings:
    grid_size: int = GRID_SIZE
    speed_ms: int = DEFAULT_SPEED_MS
    player: str = DEFAULT_PLAYER
    max_rounds: int = DEFAULT_MAX_ROUNDS
    log_level: str = DEFAULT_LOG_LEVEL


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def get_settings() -> Settings:
    """
    Build Settings from the current environment.

    Raises:
        ValueError: if a variable holds a value that cannot be used.
    """
    speed_ms = _int_from_env("SNAKE_SPEED_MS", DEFAULT_SPEED_MS)

    preset = (os.getenv("SNAKE_SPEED_PRESET") or "").strip().lower()
    if preset:
        if preset not in SPEED_PRESETS:
            available = ", ".join(SPEED_PRESETS)
            raise ValueError(f"Unknown SNAKE_SPEED_PRESET '{preset}'. Available presets: {available}")
        speed_ms = SPEED_PRESETS[preset]

    return Settings(
        grid_size=_int_from_env("SNAKE_GRID_SIZE", GRID_SIZE),
        speed_ms=speed_ms,
        player=(os.getenv("SNAKE_PLAYER") or DEFAULT_PLAYER).strip(),
        max_rounds=_int_from_env("SNAKE_MAX_ROUNDS", DEFAULT_MAX_ROUNDS),
        log_level=(os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
    )
