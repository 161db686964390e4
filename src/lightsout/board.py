from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import BoardConfig


def cross_cells(rows: int, cols: int, y: int, x: int) -> list[tuple[int, int]]:
    """Return the in-bounds cells of the cross centered at (y, x)."""
    cells = []
    for yy, xx in ((y, x), (y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)):
        if 0 <= yy < rows and 0 <= xx < cols:
            cells.append((yy, xx))
    return cells


def as_grid(grid: ArrayLike) -> NDArray[np.bool_]:
    arr = np.asarray(grid, dtype=bool)
    if arr.ndim != 2:
        if arr.size:
            raise ValueError(f"grid must be 2-dimensional, got shape {arr.shape}")
        # an empty list has no second axis
        arr = arr.reshape(0, 0)
    return arr


def initialize(
    rows: int,
    cols: int,
    lit_probability: float,
    rng: np.random.Generator | None = None,
) -> NDArray[np.bool_]:
    """Create a rows x cols board, each cell lit with lit_probability.

    Raises InvalidConfiguration for non-positive dimensions or a
    probability outside [0, 1].
    """
    BoardConfig(rows=rows, cols=cols, lit_probability=lit_probability)
    rng = rng or np.random.default_rng()
    # random() is in [0, 1): p=0 never lights a cell, p=1 always does
    return rng.random((rows, cols)) < lit_probability


def scramble(
    rows: int,
    cols: int,
    presses: int,
    rng: np.random.Generator | None = None,
) -> NDArray[np.bool_]:
    """Create a solvable board by pressing random cells of a dark board."""
    BoardConfig(rows=rows, cols=cols, scramble_presses=presses)
    rng = rng or np.random.default_rng()
    grid = np.zeros((rows, cols), dtype=bool)
    for cell in rng.integers(rows * cols, size=presses):
        y, x = divmod(int(cell), cols)
        for yy, xx in cross_cells(rows, cols, y, x):
            grid[yy, xx] ^= True
    return grid


def toggle_around(grid: ArrayLike, y: int, x: int) -> NDArray[np.bool_]:
    """Return a copy of grid with (y, x) and its orthogonal neighbors flipped.

    Cells of the cross that fall outside the board are skipped, so a press
    on an edge flips 4 cells and a press in a corner flips 3. The input is
    left untouched.
    """
    flipped = as_grid(grid).copy()
    rows, cols = flipped.shape
    for yy, xx in cross_cells(rows, cols, int(y), int(x)):
        flipped[yy, xx] = not flipped[yy, xx]
    return flipped


def has_won(grid: ArrayLike) -> bool:
    """True iff no cell is lit (an empty board counts as won)."""
    return not as_grid(grid).any()


class BoardState:
    def __init__(self, rows: int, cols: int, state: ArrayLike | None = None):
        self.rows = rows
        self.cols = cols
        if state is None:
            self.state = np.zeros((rows, cols), dtype=bool)
        else:
            state = np.asarray(state)
            assert state.shape == (rows, cols)
            self.state = state.astype(bool, copy=True)

    @classmethod
    def from_grid(cls, grid: ArrayLike) -> "BoardState":
        arr = as_grid(grid)
        return cls(arr.shape[0], arr.shape[1], arr)

    @classmethod
    def random(
        cls, config: BoardConfig, rng: np.random.Generator | None = None
    ) -> "BoardState":
        if config.scramble_presses is not None:
            grid = scramble(
                config.rows, config.cols, config.scramble_presses, rng
            )
        else:
            grid = initialize(
                config.rows, config.cols, config.lit_probability, rng
            )
        return cls(config.rows, config.cols, grid)

    def copy(self) -> "BoardState":
        return BoardState(self.rows, self.cols, self.state.copy())

    def to_flat(self) -> np.ndarray:
        return self.state.reshape(-1)

    @staticmethod
    def from_flat(rows: int, cols: int, flat: np.ndarray) -> "BoardState":
        return BoardState(rows, cols, np.asarray(flat).reshape(rows, cols))

    def count_on(self) -> int:
        return int(self.state.sum())

    def is_lit(self, y: int, x: int) -> bool:
        return bool(self.state[y, x])

    def toggled(self, y: int, x: int) -> "BoardState":
        return BoardState(self.rows, self.cols, toggle_around(self.state, y, x))

    def has_won(self) -> bool:
        return has_won(self.state)

    def __eq__(self, other):
        if not isinstance(other, BoardState):
            return NotImplemented
        return np.array_equal(self.state, other.state)

    __hash__ = None

    def __repr__(self):
        return f"BoardState(rows={self.rows}, cols={self.cols}, on={self.count_on()})"

    def __str__(self) -> str:
        return "\n".join(
            "".join("1" if cell else "0" for cell in row) for row in self.state
        )
