"""
Domain entities for the grid Snake game engine.

This module contains the core game entities that are independent of
presentation concerns (ticking, input handling, rendering).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DIRECTION_DELTAS, OPPOSITE_DIRECTIONS,
    RUNNING, OVER,
    GRID_SIZE, FOOD_REWARD, DEFAULT_SPEED_MS, SPEED_PRESETS,
)
from .snake import Snake
from .game_state import GameState
from .engine import SnakeEngine

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DIRECTION_DELTAS', 'OPPOSITE_DIRECTIONS',
    'RUNNING', 'OVER',
    'GRID_SIZE', 'FOOD_REWARD', 'DEFAULT_SPEED_MS', 'SPEED_PRESETS',
    'Snake',
    'GameState',
    'SnakeEngine',
]
