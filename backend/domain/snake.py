"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Tuple, Optional

Cell = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: e.g., 'wall', 'self', 'board_full'
        death_round: The round number when the snake died
    """

    def __init__(self, positions: Iterable[Cell]):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def body_after_move(self, grows: bool) -> List[Cell]:
        """
        The cells the current segments will occupy once the head has moved.

        When the snake does not grow its tail is vacated this tick, so the
        tail cell is not part of the obstacle set.
        """
        if grows:
            return list(self.positions)
        return list(self.positions)[:-1]

    def advance(self, new_head: Cell, grows: bool) -> None:
        """Prepend new_head and drop the tail unless the snake grows."""
        self.positions.appendleft(new_head)
        if not grows:
            self.positions.pop()

    def kill(self, reason: str, round_number: int) -> None:
        self.alive = False
        self.death_reason = reason
        self.death_round = round_number
