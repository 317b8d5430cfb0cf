"""
Game constants for the search snake.
"""

# Movement directions (Battlesnake API tokens)
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"

# Fixed iteration order; ties in the search go to the earliest entry.
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
VALID_MOVES = set(DIRECTIONS)

# Unit vectors, (0,0) is bottom left
DIRECTION_DELTAS = {
    UP: (0, 1),
    DOWN: (0, -1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Search settings
DEFAULT_SEARCH_DEPTH = 4
FOOD_SCORE = 100
MIN_SCORE = -99999
FALLBACK_MOVE = UP
