"""Plain-text rendering of boards and answer paths."""

from typing import Dict, List, Optional, Tuple

from ..game.board import Board
from ..game.models import BOARD_SIZE, WILDCARD, Path


def render_board(board: Board, path: Optional[Path] = None) -> str:
    """
    Render the board as a 4x4 grid of upper-case letters.

    When `path` is given, tiles on it are bracketed and tagged with their
    1-based step number, e.g. "[C1]". Wildcards on the path show the letter
    they stand for.
    """
    steps: Dict[Tuple[int, int], int] = {}
    letters: Dict[Tuple[int, int], str] = {}
    if path is not None:
        for i, tile in enumerate(path.tiles, start=1):
            steps[(tile.row, tile.col)] = i
            if tile.is_wildcard:
                letters[(tile.row, tile.col)] = path.tile_constraints.get(tile.id, WILDCARD)

    width = len(str(len(steps))) + 3 if steps else 1

    lines: List[str] = []
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            tile = board.get_tile(r, c)
            letter = letters.get((r, c)) or (WILDCARD if tile.is_wildcard else tile.letter)
            if (r, c) in steps:
                cell = f"[{letter.upper()}{steps[(r, c)]}]"
            else:
                cell = letter.upper()
            cells.append(cell.center(width))
        lines.append(" ".join(cells).rstrip())

    return "\n".join(lines)


def render_path(path: Path) -> str:
    """Positions along a path, e.g. "(0,0)->(0,1)->(0,2)"."""
    return "->".join(f"({tile.row},{tile.col})" for tile in path.tiles)
