"""
4x4 board model and path search.

Path search is a depth-first backtracking walk: every cell is tried as a
start (row-major), neighbours are explored in the fixed `DIRECTIONS` order,
and a cell is never reused within one path. The first path in an answer is
therefore deterministic for a given board and word.
"""

from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from pydantic import BaseModel, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from .constraints import TileConstraints, WildcardRequirement
from .errors import CorruptBoardData, UnsatisfiableConstraint
from .models import (
    BOARD_SIZE,
    PLACEHOLDER,
    WILDCARD,
    Answer,
    Path,
    Position,
    Row,
    Tile,
)
from .scoring import points_for_letter


# up, down, right, left, up-left, up-right, down-left, down-right
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, 1),
    (0, -1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)


def _default_rows() -> List[Row]:
    return [
        Row(tiles=[Tile(letter=PLACEHOLDER, row=r, col=c) for c in range(BOARD_SIZE)])
        for r in range(BOARD_SIZE)
    ]


class Board(BaseModel):
    """
    A 4x4 grid of tiles, row-major.

    The serialized form is {"rows": [{"tiles": [tile, ...]}, ...]} with each
    tile exposing letter, points, is_wildcard, row and col.
    """
    rows: List[Row] = Field(default_factory=_default_rows)

    @model_validator(mode="after")
    def _check_shape(self) -> "Board":
        if len(self.rows) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} rows, got {len(self.rows)}")
        for r, row in enumerate(self.rows):
            if len(row.tiles) != BOARD_SIZE:
                raise ValueError(f"Row {r} must have {BOARD_SIZE} tiles, got {len(row.tiles)}")
            for c, tile in enumerate(row.tiles):
                if (tile.row, tile.col) != (r, c):
                    raise ValueError(
                        f"Tile at ({r},{c}) claims position ({tile.row},{tile.col})"
                    )
        return self

    # ---------- Construction ----------

    @classmethod
    def new(cls) -> "Board":
        """Empty board: placeholder tiles, no wildcards."""
        return cls()

    @classmethod
    def from_letters(cls, letters: str) -> "Board":
        """
        Build a board from 16 row-major characters, '*' marking wildcards.

        Letter points come from the letter value table; wildcards score 0.

        Raises:
            ValueError: If `letters` is not exactly 16 characters
        """
        if len(letters) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(
                f"Expected {BOARD_SIZE * BOARD_SIZE} letters, got {len(letters)}"
            )
        board = cls()
        for i, ch in enumerate(letters):
            row, col = divmod(i, BOARD_SIZE)
            if ch == WILDCARD:
                board.set_tile(row, col, WILDCARD, 0, True)
            else:
                board.set_tile(row, col, ch, points_for_letter(ch), False)
        return board

    def set_tile(self, row: int, col: int, letter: str, points: int, is_wildcard: bool) -> None:
        """Replace one tile. Out-of-range coordinates are ignored."""
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            self.rows[row].tiles[col] = Tile(
                letter=letter,
                points=points,
                is_wildcard=is_wildcard,
                row=row,
                col=col,
            )

    # ---------- Access ----------

    def get_tile(self, row: int, col: int) -> Tile:
        return self.rows[row].tiles[col]

    def tiles(self) -> Iterator[Tile]:
        for row in self.rows:
            yield from row.tiles

    @property
    def wildcards(self) -> List[Tile]:
        return [tile for tile in self.tiles() if tile.is_wildcard]

    @staticmethod
    def neighbors(row: int, col: int) -> Iterator[Position]:
        """Adjacent cells in `DIRECTIONS` order, without wraparound."""
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            if 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
                yield Position(r, c)

    # ---------- Path search ----------

    def paths_for(self, word: str) -> Answer:
        """Every path spelling `word`, in discovery order."""
        paths: List[Path] = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                for tiles in self._trace(word, row, col, set()):
                    path = _build_path(word, tiles)
                    if path is not None:
                        paths.append(path)
        return Answer(word=word, paths=paths)

    def resolve(self, word: str) -> Answer:
        """Search paths for `word` and aggregate them into an Answer."""
        return self.paths_for(word)

    def contains(self, answer: Answer) -> bool:
        return len(answer.paths) > 0

    def _trace(
        self,
        word: str,
        row: int,
        col: int,
        visited: Set[Tuple[int, int]],
    ) -> Iterator[List[Tile]]:
        if not word or (row, col) in visited:
            return

        tile = self.get_tile(row, col)
        if not tile.matches(word[0]):
            return

        if len(word) == 1:
            yield [tile]
            return

        visited.add((row, col))
        for next_row, next_col in self.neighbors(row, col):
            for rest in self._trace(word[1:], next_row, next_col, visited):
                yield [tile] + rest
        visited.discard((row, col))

    # ---------- Serialization ----------

    def to_data(self) -> Dict[str, Any]:
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_data(cls, data: Any) -> "Board":
        """
        Parse the external board shape.

        Raises:
            CorruptBoardData: If the data is not a valid 4x4 board
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise CorruptBoardData(f"Invalid board data: {e}") from e

    @classmethod
    def from_json(cls, data: str | bytes) -> "Board":
        """
        Parse a JSON board.

        Raises:
            CorruptBoardData: If the JSON is malformed or not a valid 4x4 board
        """
        try:
            return cls.model_validate_json(data)
        except PydanticValidationError as e:
            raise CorruptBoardData(f"Invalid board data: {e}") from e

    def __str__(self) -> str:
        lines = []
        for row in self.rows:
            lines.append("".join(
                f" {WILDCARD} " if tile.is_wildcard else f" {tile.letter.upper()} "
                for tile in row.tiles
            ))
        return "\n".join(lines) + "\n"


def _build_path(word: str, tiles: List[Tile]) -> Optional[Path]:
    """
    Attach wildcard requirements to a traced tile sequence.

    Returns None when two wildcards of the same class would need different
    letters, since the class rule cannot express that path.
    """
    requirement = WildcardRequirement.unconstrained()
    tile_constraints: TileConstraints = {}
    for ch, tile in zip(word, tiles):
        if not tile.is_wildcard:
            continue
        tile_constraints[tile.id] = ch
        if tile.wildcard_class == "A":
            decided = WildcardRequirement.a_decided(ch)
        else:
            decided = WildcardRequirement.b_decided(ch)
        try:
            requirement = requirement.merge(decided)
        except UnsatisfiableConstraint:
            return None
    return Path(tiles=tiles, requirement=requirement, tile_constraints=tile_constraints)
