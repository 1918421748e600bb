"""
Pure translation of a GameState into drawable primitives.

render() is recomputed from the snapshot after every tick; nothing derived
from the state is cached between calls. Any front end (Pillow frames, a
canvas, a terminal) can consume the primitive list.
"""

from dataclasses import dataclass
from typing import List, Optional

from domain.game_state import GameState

TILE_SIZE = 20  # Pixels per grid cell
SEGMENT_CORNER_RADIUS = 3
FOOD_RADIUS_RATIO = 1 / 2.5
GRID_LINE_WIDTH = 1

# Primitive kinds
RECT = "rect"
ROUNDED_RECT = "rounded_rect"
CIRCLE = "circle"
LINE = "line"
TEXT = "text"


class ColorScheme:
    """Board colors"""

    BACKGROUND = "#000000"
    GRID_LINE = "#808080"
    SNAKE_HEAD = "#008000"  # Darker green for the head
    SNAKE_BODY = "#00FF00"
    FOOD = "#FF0000"

    # UI
    SCORE_TEXT = "#FFFFFF"
    GAME_OVER_OVERLAY = "#00000080"  # Half-transparent black
    GAME_OVER_TEXT = "#FF0000"
    FINAL_SCORE_TEXT = "#FFFFFF"
    RESTART_TEXT = "#D3D3D3"


@dataclass(frozen=True)
class Primitive:
    """
    One drawing instruction in canvas pixels.

    rect / rounded_rect: (x, y) top-left corner, width and height.
    circle: (x, y) center and radius.
    line: from (x, y) to (x + width, y + height).
    text: (x, y) anchor; align is 'left' or 'center'.
    """
    kind: str
    x: float
    y: float
    color: str
    width: float = 0
    height: float = 0
    radius: float = 0
    text: Optional[str] = None
    size: int = 0
    align: str = "left"


def canvas_size(grid_size: int, tile_size: int = TILE_SIZE) -> int:
    return grid_size * tile_size


def render(state: GameState, tile_size: int = TILE_SIZE) -> List[Primitive]:
    """
    Build the primitives for one frame, back to front:
    background, grid, food, snake, score, then the game-over overlay.
    """
    size = canvas_size(state.grid_size, tile_size)
    primitives: List[Primitive] = [
        Primitive(RECT, 0, 0, ColorScheme.BACKGROUND, width=size, height=size)
    ]

    for i in range(state.grid_size + 1):
        offset = i * tile_size
        primitives.append(Primitive(LINE, offset, 0, ColorScheme.GRID_LINE, width=0, height=size))
        primitives.append(Primitive(LINE, 0, offset, ColorScheme.GRID_LINE, width=size, height=0))

    if state.food is not None:
        fx, fy = state.food
        primitives.append(Primitive(
            CIRCLE,
            fx * tile_size + tile_size / 2,
            fy * tile_size + tile_size / 2,
            ColorScheme.FOOD,
            radius=tile_size * FOOD_RADIUS_RATIO
        ))

    for index, (x, y) in enumerate(state.snake):
        primitives.append(Primitive(
            ROUNDED_RECT,
            x * tile_size,
            y * tile_size,
            ColorScheme.SNAKE_HEAD if index == 0 else ColorScheme.SNAKE_BODY,
            width=tile_size,
            height=tile_size,
            radius=SEGMENT_CORNER_RADIUS
        ))

    primitives.append(Primitive(
        TEXT, 10, 10, ColorScheme.SCORE_TEXT, text=f"Score: {state.score}", size=tile_size
    ))

    if state.is_over:
        primitives.extend(_game_over_overlay(state, size, tile_size))

    return primitives


def _game_over_overlay(state: GameState, size: int, tile_size: int) -> List[Primitive]:
    center = size / 2
    return [
        Primitive(RECT, 0, 0, ColorScheme.GAME_OVER_OVERLAY, width=size, height=size),
        Primitive(
            TEXT, center, center - 2 * tile_size, ColorScheme.GAME_OVER_TEXT,
            text="Game Over", size=2 * tile_size, align="center"
        ),
        Primitive(
            TEXT, center, center, ColorScheme.FINAL_SCORE_TEXT,
            text=f"Final Score: {state.score}", size=tile_size, align="center"
        ),
        Primitive(
            TEXT, center, center + 2 * tile_size, ColorScheme.RESTART_TEXT,
            text="Tap to Restart", size=tile_size, align="center"
        ),
    ]
