"""
Tests for the grid helpers in connectfour.utils.
"""

import numpy as np
import pytest

from connectfour.utils import (CONNECT_N, Player, Direction, iter_lines, find_line,
                               check_direction, get_column_height, as_player,
                               is_valid_column, render_board_ascii)


def empty_grid(rows=6, columns=7):
    return np.zeros((rows, columns), dtype=int)


class TestPlayer:

    def test_str(self):
        assert [str(p) for p in Player] == [" ", "X", "O"]

    def test_as_player_accepts_members_and_codes(self):
        assert as_player(Player.ONE) is Player.ONE
        assert as_player(Player.TWO) is Player.TWO
        assert as_player(1) is Player.ONE
        assert as_player(np.int64(2)) is Player.TWO

    @pytest.mark.parametrize("value", [Player.EMPTY, 0, 3, True, "1", None])
    def test_as_player_rejects_everything_else(self, value):
        assert as_player(value) is None


class TestIsValidColumn:

    @pytest.mark.parametrize("column", [0, 3, 6, np.int32(4)])
    def test_in_range(self, column):
        assert is_valid_column(column, 7)

    @pytest.mark.parametrize("column", [-1, 7, 2.0, "2", None, False])
    def test_out_of_range_or_not_integer(self, column):
        assert not is_valid_column(column, 7)


class TestIterLines:

    @pytest.mark.parametrize("direction,count", [
        (Direction.HORIZONTAL, 6 * 4),
        (Direction.VERTICAL, 3 * 7),
        (Direction.DIAGONAL_DOWN, 3 * 4),
        (Direction.DIAGONAL_UP, 3 * 4),
    ])
    def test_line_counts_on_standard_board(self, direction, count):
        assert len(list(iter_lines(6, 7, direction))) == count

    def test_lines_stay_on_the_grid(self):
        for direction in Direction:
            for line in iter_lines(5, 6, direction):
                assert len(line) == CONNECT_N
                assert all(0 <= r < 5 and 0 <= c < 6 for r, c in line)

    def test_diagonal_up_starts_low_and_climbs(self):
        lines = list(iter_lines(4, 4, Direction.DIAGONAL_UP))
        assert lines == [[(3, 0), (2, 1), (1, 2), (0, 3)]]

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            list(iter_lines(6, 7, "sideways"))


class TestScans:

    def test_find_line_returns_first_match(self):
        grid = empty_grid()
        grid[5, 1:6] = Player.TWO.value
        assert find_line(grid, Player.TWO, Direction.HORIZONTAL) == [(5, 1), (5, 2), (5, 3), (5, 4)]
        assert find_line(grid, Player.ONE, Direction.HORIZONTAL) is None

    def test_empty_player_never_matches(self):
        grid = empty_grid()
        for direction in Direction:
            assert not check_direction(grid, Player.EMPTY, direction)

    def test_check_direction_does_not_modify_grid(self):
        grid = empty_grid()
        grid[2:6, 4] = Player.ONE.value
        before = grid.copy()
        assert check_direction(grid, Player.ONE, Direction.VERTICAL)
        np.testing.assert_array_equal(grid, before)

    def test_column_height(self):
        grid = empty_grid()
        assert get_column_height(grid, 0) == 0
        grid[3:6, 0] = Player.ONE.value
        assert get_column_height(grid, 0) == 3
        grid[:, 1] = Player.TWO.value
        assert get_column_height(grid, 1) == 6


class TestRenderBoardAscii:

    def test_empty_four_by_five(self):
        text = render_board_ascii(empty_grid(4, 5))
        lines = text.split("\n")
        assert text.endswith("\n")
        assert lines[0] == "| 0 | 0 | 0 | 0 | 0 |"
        assert lines[1] == "  -   -   -   -   -   "
        assert len(lines) == 4 * 2 + 1

    def test_numeric_codes(self):
        grid = empty_grid(4, 4)
        grid[3, 0] = Player.ONE.value
        grid[3, 1] = Player.TWO.value
        assert render_board_ascii(grid).split("\n")[6] == "| 1 | 2 | 0 | 0 |"
