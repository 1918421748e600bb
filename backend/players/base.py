"""
Base player interface for the game engine.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_DELTAS, OPPOSITE_DIRECTIONS, UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState

# Fixed order keeps seeded choices reproducible
MOVE_ORDER = [UP, DOWN, LEFT, RIGHT]


class Player:
    """
    Base class/interface for input logic.

    A player looks at a snapshot and returns the direction it wants the snake
    to take next. The session runner hands that direction to
    SnakeEngine.set_direction(); players never advance the game themselves.
    """

    def __init__(self, name: Optional[str] = None, rng: Optional[random.Random] = None):
        self.name = name or self.__class__.__name__
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError


def safe_moves(game_state: GameState) -> List[str]:
    """
    Directions that keep the snake alive for one more tick.

    Filters out moves that:
    1. Hit walls
    2. Hit the body (except the tail, which will move)
    3. Reverse the current heading (the engine would ignore them)
    """
    head_x, head_y = game_state.snake[0]
    body = game_state.snake[:-1]
    reverse = OPPOSITE_DIRECTIONS[game_state.direction] if len(game_state.snake) > 1 else None

    moves: List[str] = []
    for move in MOVE_ORDER:
        if move == reverse:
            continue
        dx, dy = DIRECTION_DELTAS[move]
        new_x, new_y = head_x + dx, head_y + dy

        if (new_x < 0 or new_x >= game_state.grid_size or
                new_y < 0 or new_y >= game_state.grid_size):
            continue

        if (new_x, new_y) in body:
            continue

        moves.append(move)
    return moves
