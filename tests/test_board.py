"""Unit tests for the board model: sampling, the cross toggle and the win check."""

import numpy as np
import pytest

from lightsout.board import (
    BoardState,
    cross_cells,
    has_won,
    initialize,
    scramble,
    toggle_around,
)
from lightsout.config import InvalidConfiguration


def lit_cells(grid):
    return {(int(y), int(x)) for y, x in np.argwhere(grid)}


class TestInitialize:
    """Random board creation."""

    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 7), (4, 1), (5, 5), (3, 8)])
    def test_shape(self, rows, cols):
        grid = initialize(rows, cols, 0.5, rng=np.random.default_rng(0))
        assert grid.shape == (rows, cols)
        assert grid.dtype == bool

    def test_probability_zero_is_dark(self):
        grid = initialize(6, 4, 0.0, rng=np.random.default_rng(1))
        assert not grid.any()

    def test_probability_one_is_all_lit(self):
        grid = initialize(6, 4, 1.0, rng=np.random.default_rng(1))
        assert grid.all()

    def test_density_tracks_probability(self):
        grid = initialize(100, 100, 0.3, rng=np.random.default_rng(2))
        assert abs(grid.mean() - 0.3) < 0.03

    def test_same_seed_same_board(self):
        a = initialize(5, 5, 0.5, rng=np.random.default_rng(42))
        b = initialize(5, 5, 0.5, rng=np.random.default_rng(42))
        assert np.array_equal(a, b)

    @pytest.mark.parametrize(
        "rows,cols,p",
        [(0, 5, 0.5), (5, 0, 0.5), (-1, 5, 0.5), (5, 5, -0.1), (5, 5, 1.5), (5, 5, float("nan"))],
    )
    def test_rejects_bad_parameters(self, rows, cols, p):
        with pytest.raises(InvalidConfiguration):
            initialize(rows, cols, p)


class TestScramble:
    """Boards built from random presses."""

    def test_zero_presses_is_dark(self):
        assert not scramble(4, 4, 0, rng=np.random.default_rng(0)).any()

    def test_single_press_is_a_cross(self):
        grid = scramble(5, 5, 1, rng=np.random.default_rng(3))
        assert 3 <= grid.sum() <= 5

    def test_negative_presses_rejected(self):
        with pytest.raises(InvalidConfiguration):
            scramble(3, 3, -1)

    @pytest.mark.parametrize("presses", ["3", True, 2.0])
    def test_non_integer_presses_rejected(self, presses):
        with pytest.raises(InvalidConfiguration):
            scramble(3, 3, presses)


class TestToggleAround:
    """The cross-shaped press."""

    def test_interior_flips_five(self):
        g = np.zeros((5, 5), dtype=bool)
        out = toggle_around(g, 2, 2)
        assert lit_cells(out) == {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}

    def test_corner_flips_three(self):
        g = np.zeros((5, 5), dtype=bool)
        out = toggle_around(g, 0, 0)
        assert lit_cells(out) == {(0, 0), (1, 0), (0, 1)}

    def test_opposite_corner_does_not_wrap(self):
        g = np.zeros((5, 5), dtype=bool)
        out = toggle_around(g, 4, 4)
        assert lit_cells(out) == {(4, 4), (3, 4), (4, 3)}

    def test_edge_flips_four(self):
        g = np.zeros((5, 5), dtype=bool)
        out = toggle_around(g, 0, 2)
        assert lit_cells(out) == {(0, 2), (0, 1), (0, 3), (1, 2)}

    def test_rectangular_board(self):
        g = np.zeros((2, 6), dtype=bool)
        out = toggle_around(g, 1, 5)
        assert lit_cells(out) == {(1, 5), (0, 5), (1, 4)}

    def test_lit_cells_turn_off(self):
        g = np.ones((3, 3), dtype=bool)
        out = toggle_around(g, 1, 1)
        assert lit_cells(out) == {(0, 0), (0, 2), (2, 0), (2, 2)}

    def test_self_inverse(self):
        g = initialize(5, 5, 0.5, rng=np.random.default_rng(9))
        for y, x in [(0, 0), (2, 3), (4, 0), (4, 4)]:
            assert np.array_equal(toggle_around(toggle_around(g, y, x), y, x), g)

    def test_input_not_mutated(self):
        g = initialize(5, 5, 0.5, rng=np.random.default_rng(11))
        before = g.copy()
        toggle_around(g, 2, 2)
        assert np.array_equal(g, before)

    def test_nested_lists_not_mutated(self):
        g = [[False, False], [False, False]]
        out = toggle_around(g, 0, 0)
        assert g == [[False, False], [False, False]]
        assert out.tolist() == [[True, True], [True, False]]

    def test_out_of_bounds_center_flips_neighbors_only(self):
        g = np.zeros((3, 3), dtype=bool)
        assert lit_cells(toggle_around(g, -1, 1)) == {(0, 1)}
        assert lit_cells(toggle_around(g, 10, 10)) == set()

    def test_cross_cells_counts(self):
        assert len(cross_cells(5, 5, 2, 2)) == 5
        assert len(cross_cells(5, 5, 0, 3)) == 4
        assert len(cross_cells(5, 5, 4, 0)) == 3
        assert cross_cells(1, 1, 0, 0) == [(0, 0)]


class TestHasWon:
    """Win condition."""

    def test_dark_board_wins(self):
        assert has_won([[False, False], [False, False]]) is True

    def test_single_light_does_not_win(self):
        assert has_won([[False, True], [False, False]]) is False

    def test_empty_board_wins(self):
        assert has_won([]) is True

    def test_fresh_dark_board_wins_without_moves(self):
        assert has_won(initialize(5, 5, 0.0))


class TestBoardState:
    """BoardState wrapper."""

    def test_default_is_dark(self):
        s = BoardState(3, 4)
        assert s.state.shape == (3, 4)
        assert s.count_on() == 0
        assert s.has_won()

    def test_toggled_returns_new_state(self):
        s = BoardState(3, 3)
        t = s.toggled(1, 1)
        assert s.count_on() == 0
        assert t.count_on() == 5
        assert t.is_lit(0, 1) and not t.is_lit(0, 0)

    def test_flat_round_trip(self):
        s = BoardState.from_grid(toggle_around(np.zeros((2, 3), dtype=bool), 0, 0))
        assert BoardState.from_flat(2, 3, s.to_flat()) == s

    def test_copy_is_independent(self):
        s = BoardState(2, 2)
        c = s.copy()
        c.state[0, 0] = True
        assert s.count_on() == 0

    def test_str(self):
        s = BoardState(2, 3).toggled(0, 0)
        assert str(s) == "110\n100"
        assert repr(s) == "BoardState(rows=2, cols=3, on=3)"
