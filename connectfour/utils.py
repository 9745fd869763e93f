"""
utils.py - Constants, enumerations and grid helpers for Connect Four

This module holds the board defaults, the Player and Direction enumerations,
and the stateless scans used by the Board class. Every helper takes the grid
as a 2D numpy array of Player values and never modifies it.
"""

from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

from connectfour.debug import debug, DebugLevel

# Board defaults
DEFAULT_ROWS = 6
DEFAULT_COLUMNS = 7
MIN_SIZE = 4  # smallest allowed size in either axis
CONNECT_N = 4  # Number of pieces in a row to win

Position = Tuple[int, int]


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player, used when a drop names no valid player
    TWO = 2    # Second player

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


PLAYERS = (Player.ONE, Player.TWO)


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    DIAGONAL_UP = auto()  # bottom-left to top-right (north-east)
    HORIZONTAL = auto()  # east
    DIAGONAL_DOWN = auto()  # top-left to bottom-right (south-east)
    VERTICAL = auto()  # south


# Direction vectors (row, col); rows grow downwards
DIRECTION_VECTORS = {
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.HORIZONTAL: (0, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.VERTICAL: (1, 0),
}


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def as_player(value) -> Optional[Player]:
    """
    Map a player argument to Player.ONE or Player.TWO.

    Args:
        value: A Player member or its code 1 or 2

    Returns:
        The matching player, or None for anything else (including EMPTY)
    """
    if value in PLAYERS:
        return value
    if _is_integer(value):
        for player in PLAYERS:
            if player.value == value:
                return player
    return None


def is_valid_column(column, columns: int) -> bool:
    """Check that a column is an integer index within the board."""
    return _is_integer(column) and 0 <= column < columns


def get_column_height(grid: np.ndarray, column: int) -> int:
    """
    Get the current height of a column (number of pieces).

    Pieces are contiguous from the bottom, so the first empty cell found
    scanning upwards marks the height.
    """
    rows = grid.shape[0]
    for height, row in enumerate(range(rows - 1, -1, -1)):
        if grid[row, column] == Player.EMPTY.value:
            return height
    return rows


def _start_range(step: int, size: int) -> range:
    # A run of CONNECT_N cells starting at index i ends at i + step * (CONNECT_N - 1)
    reach = CONNECT_N - 1
    if step > 0:
        return range(0, size - reach)
    if step < 0:
        return range(reach, size)
    return range(0, size)


def iter_lines(rows: int, columns: int, direction: Direction) -> Iterator[List[Position]]:
    """
    Yield every run of CONNECT_N positions that fits the grid in a direction.

    Starting cells are visited row by row, left to right. For DIAGONAL_UP the
    first row scanned is CONNECT_N - 1, since the run climbs from there.

    Raises:
        ValueError: If direction is not a Direction member
    """
    try:
        dr, dc = DIRECTION_VECTORS[direction]
    except KeyError:
        raise ValueError(f"Unknown direction: {direction!r}") from None

    for row in _start_range(dr, rows):
        for col in _start_range(dc, columns):
            yield [(row + k * dr, col + k * dc) for k in range(CONNECT_N)]


def find_line(grid: np.ndarray, player: Player, direction: Direction) -> Optional[List[Position]]:
    """
    Find the first run of CONNECT_N cells owned by a player in one direction.

    Args:
        grid: The game board
        player: Player.ONE or Player.TWO
        direction: The orientation to scan

    Returns:
        The positions of the first matching run, or None
    """
    if player not in PLAYERS:
        return None

    rows, columns = grid.shape
    value = player.value
    for line in iter_lines(rows, columns, direction):
        if all(grid[r, c] == value for r, c in line):
            return line
    return None


def check_direction(grid: np.ndarray, player: Player, direction: Direction) -> bool:
    """Check whether a player has CONNECT_N in a row in one direction."""
    return find_line(grid, player, direction) is not None


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as rows of numeric cell codes.

    Each row prints its cells as ``| <code> `` and ends with ``|``. The row is
    followed by a separator of one dash per column.

    Args:
        grid: The game board

    Returns:
        Text representation of the board, ending with a newline
    """
    rows, columns = grid.shape
    separator = "  " + "-   " * columns + "\n"

    result = []
    for row in range(rows):
        line = "".join(f"| {int(grid[row, col])} " for col in range(columns))
        result.append(line + "|\n")
        result.append(separator)

    return "".join(result)


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG)

    test_board = np.zeros((DEFAULT_ROWS, DEFAULT_COLUMNS), dtype=int)
    for col in range(CONNECT_N):
        test_board[DEFAULT_ROWS - 1, col] = Player.ONE.value
    test_board[DEFAULT_ROWS - 2, 0] = Player.TWO.value

    print(render_board_ascii(test_board))
    for direction in Direction:
        print(f"{direction.name}: {find_line(test_board, Player.ONE, direction)}")
