import argparse
import logging
import re
import sys

import numpy as np

from .config import BoardConfig, InvalidConfiguration, load_config
from .game import WIN_MESSAGE, Game

_COORD_RE = re.compile(r"^\s*(-?\d+)\s*(?:-|,|\s)\s*(-?\d+)\s*$")

PROMPT = "move (y-x), hint, restart or quit> "


def parse_coord(text: str) -> tuple[int, int]:
    """Decode a cell key such as "2-3", "2 3" or "2,3" into (y, x)."""
    m = _COORD_RE.match(text)
    if m is None:
        raise ValueError(f"Not a coordinate: {text.strip()!r}")
    return int(m.group(1)), int(m.group(2))


def format_coord(y: int, x: int) -> str:
    return f"{y}-{x}"


def render_text(grid) -> str:
    """Rows of 'O' (lit) and '.' (unlit) with column and row labels."""
    grid = np.asarray(grid, dtype=bool)
    cols = grid.shape[1] if grid.ndim == 2 else 0
    width = len(str(max(grid.shape[0] - 1, 0)))
    header = " " * (width + 1) + " ".join(str(x % 10) for x in range(cols))
    lines = [header]
    for y, row in enumerate(grid):
        cells = " ".join("O" if lit else "." for lit in row)
        lines.append(f"{y:>{width}} {cells}")
    return "\n".join(lines)


def build_config(args) -> BoardConfig:
    cfg = load_config(args.config) if args.config else BoardConfig()
    return cfg.replace(
        rows=args.rows,
        cols=args.cols,
        lit_probability=args.chance,
        scramble_presses=args.scramble,
    )


def play(game: Game, stdin=None, stdout=None) -> int:
    """Run the read-press-render loop until the board is dark or input ends."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def say(*parts):
        print(*parts, file=stdout, flush=True)

    say(render_text(game.grid))
    if game.won:
        say(WIN_MESSAGE)
        return 0

    while True:
        print(PROMPT, end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            say()
            return 1
        cmd = line.strip().lower()
        if not cmd:
            continue
        if cmd in ("q", "quit", "exit"):
            return 1
        if cmd == "restart":
            game.restart()
            say(render_text(game.grid))
            if game.won:
                say(WIN_MESSAGE)
                return 0
            continue
        if cmd == "hint":
            h = game.hint()
            if h is None:
                say("No solution from this position. Try 'restart'.")
            else:
                say(f"Try {format_coord(*h)}")
            continue

        try:
            y, x = parse_coord(cmd)
        except ValueError as e:
            say(f"[error] {e}")
            continue

        grid, won = game.on_cell_activated(y, x)
        say(render_text(grid))
        if won:
            say(WIN_MESSAGE)
            say(f"Solved in {game.moves} move{'' if game.moves == 1 else 's'}.")
            return 0


def main(argv=None, stdin=None, stdout=None) -> int:
    ap = argparse.ArgumentParser(
        prog="lightsout", description="Play Lights Out in the terminal."
    )
    ap.add_argument("--config", default=None, help="YAML config file")
    ap.add_argument("--rows", type=int, default=None, help="Board height")
    ap.add_argument("--cols", type=int, default=None, help="Board width")
    ap.add_argument(
        "--chance",
        type=float,
        default=None,
        help="Chance any cell is lit at start of game",
    )
    ap.add_argument(
        "--scramble",
        type=int,
        default=None,
        help="Start from random presses on a dark board (always solvable)",
    )
    ap.add_argument("--seed", type=int, default=None, help="Random seed")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = build_config(args)
    except InvalidConfiguration as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    game = Game(cfg, rng=np.random.default_rng(args.seed))
    return play(game, stdin=stdin, stdout=stdout)


if __name__ == "__main__":
    sys.exit(main())
