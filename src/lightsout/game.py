from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from . import solver
from .board import BoardState
from .config import BoardConfig, InvalidConfiguration

logger = logging.getLogger(__name__)

WIN_MESSAGE = "You've won! Hurrah!"


class Phase(str, Enum):
    PLAYING = "playing"
    WON = "won"


class Game:
    """One Lights Out session.

    Owns the current board and replaces it on every accepted press. The win
    flag is computed from the board on each read. Once won, presses are
    ignored until restart().
    """

    def __init__(
        self,
        config: BoardConfig | None = None,
        rng: np.random.Generator | None = None,
        grid: ArrayLike | None = None,
    ):
        self.rng = rng or np.random.default_rng()
        if grid is not None:
            self.board = BoardState.from_grid(grid)
            self.config = config or BoardConfig(
                rows=self.board.rows, cols=self.board.cols
            )
            if (self.config.rows, self.config.cols) != self.board.state.shape:
                raise InvalidConfiguration(
                    f"grid shape {self.board.state.shape} does not match "
                    f"configured {self.config.rows}x{self.config.cols} board"
                )
        else:
            self.config = config or BoardConfig()
            self.board = BoardState.random(self.config, self.rng)
        self.moves = 0
        logger.info(
            "New %dx%d game, %d lit", self.board.rows, self.board.cols,
            self.board.count_on(),
        )

    @property
    def grid(self) -> NDArray[np.bool_]:
        return self.board.state.copy()

    @property
    def won(self) -> bool:
        return self.board.has_won()

    @property
    def phase(self) -> Phase:
        return Phase.WON if self.won else Phase.PLAYING

    def on_cell_activated(self, y: int, x: int) -> Tuple[NDArray[np.bool_], bool]:
        if self.won:
            logger.debug("Ignoring press at (%d, %d): game is won", y, x)
            return self.grid, True

        self.board = self.board.toggled(y, x)
        self.moves += 1
        won = self.won
        logger.debug(
            "Press (%d, %d) -> %d lit after %d moves",
            y, x, self.board.count_on(), self.moves,
        )
        if won:
            logger.info("Board cleared in %d moves", self.moves)
        return self.grid, won

    def restart(self) -> None:
        self.board = BoardState.random(self.config, self.rng)
        self.moves = 0
        logger.info("Restarted, %d lit", self.board.count_on())

    def hint(self) -> Optional[Tuple[int, int]]:
        return solver.hint(self.board.state)

    def is_solvable(self) -> bool:
        return solver.is_solvable(self.board.state)

    def __repr__(self):
        return f"Game({self.board!r}, moves={self.moves}, phase={self.phase.value})"
