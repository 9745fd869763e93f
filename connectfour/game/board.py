"""
board.py - Board representation and win detection for Connect Four

This module implements the Board class, which holds a fixed-size grid of
cell states, drops tokens into columns under gravity and scans the whole
grid for four in a row.

Invalid input is absorbed rather than rejected: undersized dimensions are
raised to the minimum, an unknown player becomes Player.ONE and an
out-of-range column becomes column 0. Dropping into a full column places
nothing and returns False.

The board does no turn tracking and no locking. Callers that share a board
between threads must guard it themselves.
"""

from typing import List, Optional, Tuple

import numpy as np

from connectfour.debug import debug, DebugLevel
from connectfour.utils import (DEFAULT_ROWS, DEFAULT_COLUMNS, MIN_SIZE, PLAYERS,
                               Player, Direction, Position, as_player,
                               check_direction, find_line, get_column_height,
                               is_valid_column, render_board_ascii)


def _clamp_size(value, name: str) -> int:
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value >= MIN_SIZE:
        return int(value)
    debug.debug(f"{name}={value!r} raised to {MIN_SIZE}", "board")
    return MIN_SIZE


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top of the grid; tokens fall towards row ``rows - 1``.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS):
        """
        Create an empty board.

        Args:
            rows: Number of rows, at least MIN_SIZE
            columns: Number of columns, at least MIN_SIZE
        """
        self._rows = _clamp_size(rows, "rows")
        self._columns = _clamp_size(columns, "columns")
        debug.debug(f"Initializing {self._rows}x{self._columns} Board", "board")
        self._grid = np.zeros((self._rows, self._columns), dtype=int)

    @property
    def rows(self) -> int:
        """Number of rows, fixed at construction."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns, fixed at construction."""
        return self._columns

    def clear(self) -> None:
        """Reset every cell to empty, reusing the same grid."""
        debug.debug("Clearing board", "board")
        self._grid.fill(Player.EMPTY.value)

    def _resolve_player(self, player) -> Player:
        resolved = as_player(player)
        if resolved is None:
            debug.debug(f"Unknown player {player!r}, using {Player.ONE.name}", "board")
            return Player.ONE
        return resolved

    def _resolve_column(self, column) -> int:
        if is_valid_column(column, self._columns):
            return int(column)
        debug.debug(f"Column {column!r} out of range, using column 0", "board")
        return 0

    def drop(self, player: Player, column: int) -> bool:
        """
        Drop a token for a player into a column.

        The token lands in the lowest empty cell of the column. An unknown
        player is replaced by Player.ONE and an invalid column by column 0.

        Args:
            player: Player.ONE or Player.TWO (1 and 2 are accepted too)
            column: The column to drop into (0-indexed)

        Returns:
            True if the token was placed, False if the column was full
        """
        player = self._resolve_player(player)
        column = self._resolve_column(column)

        height = get_column_height(self._grid, column)
        if height == self._rows:
            debug.debug(f"Column {column} is full, nothing placed", "board")
            return False

        row = self._rows - 1 - height
        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self._grid[row, column] = player.value
        return True

    def is_column_full(self, column: int) -> bool:
        """Check whether a column has no room left; False for invalid columns."""
        if not is_valid_column(column, self._columns):
            return False
        return self._grid[0, column] != Player.EMPTY.value

    def get_column_height(self, column: int) -> int:
        """Number of tokens currently in a column; 0 for invalid columns."""
        if not is_valid_column(column, self._columns):
            return 0
        return get_column_height(self._grid, column)

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that still have room for a token.

        Returns:
            List of column indices, empty when the board is full
        """
        return [col for col in range(self._columns) if not self.is_column_full(col)]

    def snapshot(self) -> Tuple[Tuple[Player, ...], ...]:
        """
        Get an immutable copy of the grid for renderers.

        Returns:
            One tuple of Player values per row, top row first
        """
        return tuple(tuple(Player(int(cell)) for cell in row) for row in self._grid)

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the raw grid.

        Returns:
            2D numpy array of Player values
        """
        return self._grid.copy()

    def check_direction(self, player: Player, direction: Direction) -> bool:
        """
        Check whether a player has four in a row in one orientation.

        Accepts the same players as drop(): Player.ONE, Player.TWO or their
        codes 1 and 2. Any other player never has a line.
        """
        resolved = as_player(player)
        if resolved is None:
            return False
        return check_direction(self._grid, resolved, direction)

    def _find_winner(self) -> Tuple[Optional[Player], List[Position]]:
        # Player.ONE is scanned first so it wins any tie
        for player in PLAYERS:
            for direction in Direction:
                line = find_line(self._grid, player, direction)
                if line is not None:
                    return player, line
        return None, []

    def check_win(self) -> Optional[Player]:
        """
        Scan the whole grid for four in a row.

        Player.ONE is checked in every orientation before Player.TWO, so a
        grid where both players have a line reports Player.ONE.

        Returns:
            The winning player, or None if neither has a line
        """
        debug.start_timer("win_check")
        winner, _ = self._find_winner()
        debug.end_timer("win_check", "board")

        if winner is not None:
            debug.debug(f"Player {winner.name} has four in a row", "board")
        return winner

    def get_winning_line(self) -> List[Position]:
        """
        Get the positions of the line check_win() would report.

        Returns:
            List of (row, col) positions, or empty list if no win
        """
        return self._find_winner()[1]

    def render(self) -> str:
        """Render the grid as numeric cell codes, one line per row."""
        return render_board_ascii(self._grid)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(rows={self._rows}, columns={self._columns})"


if __name__ == "__main__":
    debug.configure(level=DebugLevel.TRACE)

    board = Board()
    print("Initial board:")
    print(board)

    for player, col in [(Player.ONE, 3), (Player.TWO, 2), (Player.ONE, 4),
                        (Player.TWO, 2), (Player.ONE, 5), (Player.TWO, 2),
                        (Player.ONE, 6)]:
        board.drop(player, col)

    print(board)
    print(f"Winner: {board.check_win()}")
    print(f"Winning line: {board.get_winning_line()}")

    print("\nFilling column 0:")
    while board.drop(Player.TWO, 0):
        pass
    print(board)

    board.clear()
    print(f"After clear, winner: {board.check_win()}")
