from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .algebra import build_toggle_matrix, gf2_min_weight_solution, gf2_solve
from .board import as_grid

logger = logging.getLogger(__name__)


@lru_cache(maxsize=16)
def _toggle_matrix(rows: int, cols: int) -> np.ndarray:
    A = build_toggle_matrix(rows, cols)
    A.setflags(write=False)
    return A


def solve(grid: ArrayLike) -> Optional[NDArray[np.bool_]]:
    """Return the minimum set of presses that darkens grid, as a bool mask.

    Returns None when no combination of presses turns every light off.
    """
    arr = as_grid(grid)
    rows, cols = arr.shape
    if arr.size == 0:
        return np.zeros((rows, cols), dtype=bool)
    target = arr.reshape(-1).astype(np.uint8)
    solution, ok = gf2_min_weight_solution(_toggle_matrix(rows, cols), target)
    if not ok or solution is None:
        logger.debug("No solution for %dx%d board", rows, cols)
        return None
    return solution.astype(bool).reshape(rows, cols)


def is_solvable(grid: ArrayLike) -> bool:
    arr = as_grid(grid)
    if arr.size == 0:
        return True
    rows, cols = arr.shape
    _, _, ok = gf2_solve(
        _toggle_matrix(rows, cols), arr.reshape(-1).astype(np.uint8)
    )
    return ok


def hint(grid: ArrayLike) -> Optional[Tuple[int, int]]:
    """Suggest the next press (row-major first cell of the lightest solution)."""
    presses = solve(grid)
    if presses is None or not presses.any():
        return None
    y, x = np.argwhere(presses)[0]
    return int(y), int(x)
