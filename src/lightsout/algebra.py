from __future__ import annotations

import itertools
from typing import List, Optional, Tuple

import numpy as np

from .board import cross_cells


def build_toggle_matrix(rows: int, cols: int) -> np.ndarray:
    """Return the N x N toggle matrix over GF(2), N = rows * cols.

    Column j marks the cells flipped when cell j (row-major) is pressed.
    The matrix is symmetric since the cross pattern is.
    """
    N = rows * cols
    A = np.zeros((N, N), dtype=np.uint8)
    for j in range(N):
        y, x = divmod(j, cols)
        for yy, xx in cross_cells(rows, cols, y, x):
            A[yy * cols + xx, j] = 1
    return A


def gf2_rref(A: np.ndarray, b: np.ndarray) -> Tuple[np.ndarray, list[int]]:
    """Reduce [A|b] to row echelon form over GF(2).

    Returns the reduced augmented matrix and its pivot columns.
    """
    M = np.concatenate(
        [(A % 2).astype(np.uint8), (b % 2).astype(np.uint8).reshape(-1, 1)],
        axis=1,
    )
    m, n = A.shape
    pivcols: list[int] = []
    row = 0
    for col in range(n):
        if row == m:
            break
        hits = np.flatnonzero(M[row:, col])
        if len(hits) == 0:
            continue
        pivot = row + int(hits[0])
        if pivot != row:
            M[[row, pivot]] = M[[pivot, row]]
        others = np.flatnonzero(M[:, col])
        others = others[others != row]
        M[others] ^= M[row]
        pivcols.append(col)
        row += 1
    return M, pivcols


def gf2_solve(
    A: np.ndarray, b: np.ndarray
) -> Tuple[Optional[np.ndarray], List[np.ndarray], bool]:
    """Solve A x = b over GF(2).

    Returns:
        x0: a particular solution (uint8 vector) or None if inconsistent
        basis: nullspace basis vectors v with A v = 0
        solvable: bool
    """
    n = A.shape[1]
    R, pivcols = gf2_rref(A, b)
    R_A, R_b = R[:, :n], R[:, n]

    # a zero row with a 1 on the right is 0 = 1
    if np.any(~R_A.any(axis=1) & (R_b == 1)):
        return None, [], False

    # fully reduced: each pivot variable depends only on free variables,
    # so with all free variables at 0 it equals the right-hand side
    x0 = np.zeros(n, dtype=np.uint8)
    for ri, pc in enumerate(pivcols):
        x0[pc] = R_b[ri]

    pivset = set(pivcols)
    basis: list[np.ndarray] = []
    for f in range(n):
        if f in pivset:
            continue
        v = np.zeros(n, dtype=np.uint8)
        v[f] = 1
        for ri, pc in enumerate(pivcols):
            v[pc] = R_A[ri, f]
        basis.append(v)

    return x0, basis, True


def gf2_min_weight_solution(
    A: np.ndarray, b: np.ndarray
) -> Tuple[Optional[np.ndarray], bool]:
    """Return the lightest solution of A x = b, trying every nullspace coset."""
    x0, basis, ok = gf2_solve(A, b)
    if not ok or x0 is None:
        return None, False
    best = x0
    best_w = int(x0.sum())
    for r in range(1, len(basis) + 1):
        for combo in itertools.combinations(basis, r):
            cand = x0.copy()
            for v in combo:
                cand ^= v
            w = int(cand.sum())
            if w < best_w:
                best, best_w = cand, w
    return best, True
