import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap
from matplotlib.patches import Rectangle

from .board import as_grid, cross_cells, has_won
from .game import WIN_MESSAGE

_BOARD_CMAP = ListedColormap(["#1b1b2f", "#ffe066"])  # unlit, lit


def show_board(
    grid,
    ax=None,
    last_press=None,
    pressed_color="red",
    title=None,
):
    """
    Draw a board as a two-color grid.

    Parameters
    ----------
    grid : array-like of bool, shape (rows, cols)
        Current lit/unlit state.
    ax : matplotlib Axes, optional
        Axes to draw on; a new figure is created when omitted.
    last_press : (y, x), optional
        Outline the cross pattern of this press.
    title : str, optional
        Defaults to the win message on a dark board, else the lit count.
    """
    data = as_grid(grid)
    rows, cols = data.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(0.6 * cols + 1, 0.6 * rows + 1))

    ax.imshow(data, cmap=_BOARD_CMAP, vmin=0, vmax=1)

    if last_press is not None:
        y, x = last_press
        for r, c in cross_cells(rows, cols, y, x):
            ax.add_patch(
                Rectangle(
                    (c - 0.5, r - 0.5),
                    1,
                    1,
                    edgecolor=pressed_color,
                    facecolor="none",
                    linewidth=2 if (r, c) == (y, x) else 1,
                )
            )

    ax.set_xticks(range(cols))
    ax.set_yticks(range(rows))
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if title is None:
        title = WIN_MESSAGE if has_won(data) else f"{int(np.sum(data))} lit"
    ax.set_title(title)
    return ax
