"""
Greedy player implementation - heads for the food along safe moves.
"""

from domain.constants import DIRECTION_DELTAS
from domain.game_state import GameState
from .base import Player, safe_moves


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest to the food
    (Manhattan distance). Ties keep the current heading when possible.
    """

    def get_move(self, game_state: GameState) -> str:
        valid_moves = safe_moves(game_state)
        if not valid_moves:
            return game_state.direction

        if game_state.food is None:
            return valid_moves[0]

        head_x, head_y = game_state.snake[0]
        food_x, food_y = game_state.food

        def distance(move: str) -> int:
            dx, dy = DIRECTION_DELTAS[move]
            return abs(head_x + dx - food_x) + abs(head_y + dy - food_y)

        best = min(distance(move) for move in valid_moves)
        if game_state.direction in valid_moves and distance(game_state.direction) == best:
            return game_state.direction
        return next(move for move in valid_moves if distance(move) == best)
