"""
Simulation engine for single-player grid Snake.

The engine owns the authoritative game state. It is driven from outside:
an input source latches directions with set_direction() and a fixed-interval
ticker calls tick(). Collision ends the game by flipping the status to OVER;
it is never raised as an exception.
"""

import logging
import random
import threading
import uuid
from typing import List, Optional, Tuple

from .constants import (
    DEATH_BOARD_FULL,
    DEATH_SELF,
    DEATH_WALL,
    DEFAULT_SPEED_MS,
    DIRECTION_DELTAS,
    FOOD_REWARD,
    GRID_SIZE,
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
    MIN_GRID_SIZE,
    OPPOSITE_DIRECTIONS,
    OVER,
    RUNNING,
    VALID_MOVES,
)
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)


def validate_grid_size(grid_size) -> int:
    if isinstance(grid_size, bool) or not isinstance(grid_size, int):
        raise ValueError(f"Grid size must be an integer, got {grid_size!r}.")
    if grid_size < MIN_GRID_SIZE:
        raise ValueError(
            f"Grid size must be at least {MIN_GRID_SIZE} to fit the starting snake, got {grid_size}."
        )
    return grid_size


def validate_speed_ms(speed_ms) -> int:
    if isinstance(speed_ms, bool) or not isinstance(speed_ms, (int, float)):
        raise ValueError(f"Tick interval must be a number of milliseconds, got {speed_ms!r}.")
    if speed_ms <= 0:
        raise ValueError(f"Tick interval must be positive, got {speed_ms}.")
    return speed_ms


class SnakeEngine:
    """
    Manages:
      - Board (grid_size x grid_size)
      - The snake and its committed heading
      - The pending direction latched by the input source
      - Food
      - Score and status
      - Snapshot history for replay (when record_history is set)

    Every public method takes the engine lock, so a tick running on a ticker
    thread is applied all-or-nothing with respect to input and readers.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        speed_ms: int = DEFAULT_SPEED_MS,
        rng: Optional[random.Random] = None,
        record_history: bool = False,
        game_id: Optional[str] = None
    ):
        self.grid_size = validate_grid_size(grid_size)
        self.speed_ms = validate_speed_ms(speed_ms)
        self.rng = rng or random.Random()
        self.record_history = record_history
        self.game_id = game_id or str(uuid.uuid4())
        self._lock = threading.RLock()

        self.snake: Snake = Snake(INITIAL_SNAKE)
        self.direction: str = INITIAL_DIRECTION
        self.pending_direction: str = INITIAL_DIRECTION
        self.food: Optional[Tuple[int, int]] = None
        self.score = 0
        self.status = RUNNING
        self.round_number = 0
        self.history: List[GameState] = []

        self.reset()

    @property
    def is_over(self) -> bool:
        return self.status == OVER

    def reset(self, grid_size: Optional[int] = None, speed_ms: Optional[int] = None) -> GameState:
        """
        Start a new game. Omitted arguments keep the current board size and speed.

        Raises:
            ValueError: if grid_size or speed_ms is not a valid configuration.
        """
        if grid_size is not None:
            grid_size = validate_grid_size(grid_size)
        if speed_ms is not None:
            speed_ms = validate_speed_ms(speed_ms)

        with self._lock:
            if grid_size is not None:
                self.grid_size = grid_size
            if speed_ms is not None:
                self.speed_ms = speed_ms

            self.snake = Snake(INITIAL_SNAKE)
            self.direction = INITIAL_DIRECTION
            self.pending_direction = INITIAL_DIRECTION
            self.score = 0
            self.status = RUNNING
            self.round_number = 0
            self.food = None
            self.food = self._random_free_cell()
            self.history = []
            self._record_history()

            logger.info(
                f"Game {self.game_id} reset on a {self.grid_size}x{self.grid_size} board, "
                f"food at {self.food}"
            )
            return self.get_current_state()

    def set_direction(self, requested: str) -> bool:
        """
        Latch the direction to apply on the next tick.

        A request for the exact reverse of the current heading is ignored, as
        is any request once the game is over. Only the latest accepted request
        before a tick takes effect.

        Returns:
            True if the request was latched, False if it was ignored.

        Raises:
            ValueError: if requested is not one of UP, DOWN, LEFT, RIGHT.
        """
        if requested not in VALID_MOVES:
            raise ValueError(f"Unknown direction {requested!r}. Expected one of {sorted(VALID_MOVES)}.")

        with self._lock:
            if self.status == OVER:
                logger.debug(f"Ignoring direction {requested}: game is over")
                return False
            if len(self.snake) > 1 and requested == OPPOSITE_DIRECTIONS[self.direction]:
                logger.debug(f"Ignoring direction {requested}: reverses heading {self.direction}")
                return False
            self.pending_direction = requested
            return True

    def tick(self) -> GameState:
        """
        Advance the game by one cell.

        Calling tick() after the game is over is a no-op that returns the
        current snapshot without touching any state.
        """
        with self._lock:
            if self.status == OVER:
                logger.debug(f"Tick ignored for game {self.game_id}: game is over")
                return self.get_current_state()

            # 1) Commit the latched direction
            self.direction = self.pending_direction

            # 2) Compute the new head
            dx, dy = DIRECTION_DELTAS[self.direction]
            hx, hy = self.snake.head
            new_head = (hx + dx, hy + dy)

            # 3) Wall collision
            if not self._in_bounds(new_head):
                self._end_game(DEATH_WALL)
                return self.get_current_state()

            # 4) Self collision against the body as it stands after the tail moves
            eats_food = new_head == self.food
            if new_head in self.snake.body_after_move(grows=eats_food):
                self._end_game(DEATH_SELF)
                return self.get_current_state()

            # 5-6) Move, growing by one segment when food is eaten
            self.snake.advance(new_head, grows=eats_food)
            self.round_number += 1

            if eats_food:
                self.score += FOOD_REWARD
                logger.debug(f"Food eaten at {new_head}, score is now {self.score}")
                if len(self.snake) >= self.grid_size * self.grid_size:
                    self.food = None
                    self._end_game(DEATH_BOARD_FULL)
                    return self.get_current_state()
                self.food = self._random_free_cell()

            self._record_history()
            return self.get_current_state()

    def place_food(self, cell: Tuple[int, int]) -> None:
        """
        Put the food on a specific cell.

        Raises:
            ValueError: if the cell is off the board or under the snake.
        """
        cell = tuple(cell)
        if len(cell) != 2 or not self._in_bounds(cell):
            raise ValueError(f"Food out of bounds at {cell}.")
        with self._lock:
            if cell in self.snake:
                raise ValueError(f"Food cannot be placed on the snake at {cell}.")
            self.food = cell

    def set_speed(self, speed_ms: int) -> None:
        """Change the tick interval without resetting the game."""
        speed_ms = validate_speed_ms(speed_ms)
        with self._lock:
            self.speed_ms = speed_ms

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        with self._lock:
            return GameState(
                round_number=self.round_number,
                snake=list(self.snake.positions),
                food=self.food,
                score=self.score,
                status=self.status,
                direction=self.direction,
                grid_size=self.grid_size,
                speed_ms=self.speed_ms,
                death_reason=self.snake.death_reason
            )

    def _in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def _random_free_cell(self) -> Tuple[int, int]:
        """
        Return a random cell (x, y) not occupied by the snake.

        Rejection sampling: callers make sure at least one free cell exists.
        """
        while True:
            x = self.rng.randint(0, self.grid_size - 1)
            y = self.rng.randint(0, self.grid_size - 1)
            if (x, y) not in self.snake:
                return (x, y)

    def _end_game(self, reason: str) -> None:
        self.snake.kill(reason, self.round_number)
        self.status = OVER
        self._record_history()
        logger.info(
            f"Game {self.game_id} over ({reason}) after {self.round_number} rounds, score {self.score}"
        )

    def _record_history(self) -> None:
        if self.record_history:
            self.history.append(self.get_current_state())
