"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple

from .constants import OVER, RUNNING


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        round_number: how many ticks have been applied since the last reset
        snake: list of (x, y) from head to tail
        food: (x, y) of the food cell, or None once the board is full
        score: points collected so far
        status: RUNNING or OVER
        direction: the heading the snake is committed to
        grid_size: board is grid_size x grid_size
        speed_ms: configured tick interval in milliseconds
        death_reason: 'wall', 'self', 'board_full' or None while running
    """

    def __init__(
        self,
        round_number: int,
        snake: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        status: str,
        direction: str,
        grid_size: int,
        speed_ms: int,
        death_reason: Optional[str] = None
    ):
        self.round_number = round_number
        self.snake = snake
        self.food = food
        self.score = score
        self.status = status
        self.direction = direction
        self.grid_size = grid_size
        self.speed_ms = speed_ms
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    @property
    def is_running(self) -> bool:
        return self.status == RUNNING

    @property
    def is_over(self) -> bool:
        return self.status == OVER

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        T = snake body
        H = snake head
        Row 0 is printed first, matching the screen orientation of the grid.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # x-axis labels use the last digit so wide boards stay aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "round_number": self.round_number,
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "status": self.status,
            "direction": self.direction,
            "grid_size": self.grid_size,
            "speed_ms": self.speed_ms,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, status={self.status}, "
            f"score={self.score}, length={len(self.snake)}, food={self.food}>"
        )
