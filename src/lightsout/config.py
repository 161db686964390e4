from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace as dc_replace
from pathlib import Path
from typing import Optional

import numpy as np
import yaml

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when board parameters are out of range."""


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(
        value, (bool, np.bool_)
    )


@dataclass(frozen=True)
class BoardConfig:
    """Construction parameters of a Lights Out board.

    rows, cols: board dimensions, both >= 1.
    lit_probability: chance any cell is lit at start of game, in [0, 1].
    scramble_presses: if set, start from a dark board and apply this many
        random presses instead of sampling each cell.
    """

    rows: int = 5
    cols: int = 5
    lit_probability: float = 0.5
    scramble_presses: Optional[int] = None

    def __post_init__(self):
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if not _is_int(value) or value < 1:
                raise InvalidConfiguration(
                    f"{name} must be a positive integer, got {value!r}"
                )
        p = self.lit_probability
        if isinstance(p, (bool, np.bool_)) or not isinstance(
            p, (int, float, np.integer, np.floating)
        ):
            raise InvalidConfiguration(
                f"lit_probability must be a number, got {p!r}"
            )
        if math.isnan(p) or not 0.0 <= p <= 1.0:
            raise InvalidConfiguration(
                f"lit_probability must be in [0, 1], got {p!r}"
            )
        s = self.scramble_presses
        if s is not None and (not _is_int(s) or s < 0):
            raise InvalidConfiguration(
                f"scramble_presses must be a non-negative integer, got {s!r}"
            )

    def replace(self, **overrides) -> "BoardConfig":
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dc_replace(self, **changes)


def load_config(path: str | Path) -> BoardConfig:
    """Read a BoardConfig from the ``game.board`` section of a YAML file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise InvalidConfiguration(f"{path}: cannot read config: {e}") from e

    game = raw.get("game") if isinstance(raw, dict) else None
    board = game.get("board") if isinstance(game, dict) else None
    if not isinstance(board, dict):
        raise InvalidConfiguration(f"{path}: missing 'game.board' mapping")

    known = {f.name for f in fields(BoardConfig)}
    unknown = sorted(set(board) - known, key=str)
    if unknown:
        raise InvalidConfiguration(
            f"{path}: unknown board option(s): {', '.join(map(str, unknown))}"
        )

    cfg = BoardConfig(**board)
    logger.debug("Loaded %s from %s", cfg, path)
    return cfg
