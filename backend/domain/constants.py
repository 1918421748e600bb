"""
Game constants for the grid Snake engine.

Coordinates are screen-style: (0, 0) is the top-left cell and y grows
downward, so UP decreases y.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Game status
RUNNING = "RUNNING"
OVER = "OVER"

# Death reasons recorded on the snake
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_BOARD_FULL = "board_full"

# Board settings
GRID_SIZE = 20
INITIAL_SNAKE = [(5, 5), (4, 5), (3, 5)]
INITIAL_DIRECTION = RIGHT
MIN_GRID_SIZE = 6  # smallest board that holds INITIAL_SNAKE with a free cell ahead

# Scoring
FOOD_REWARD = 10

# Tick cadence (milliseconds per move)
DEFAULT_SPEED_MS = 200
MIN_SPEED_MS = 50
SPEED_STEP_MS = 50
SPEED_PRESETS = {
    "slow": 300,
    "medium": 200,
    "fast": 100,
}
