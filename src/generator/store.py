"""
Persistence for generated games.

Games are write-once records keyed by date. `BoardStore` is the interface
the generator needs; `JsonBoardStore` keeps one JSON file per date.
"""

import json
from pathlib import Path
from typing import Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from ..game.errors import CorruptBoardData
from .models import StoredGame


class BoardStore(Protocol):
    def game_exists_for_date(self, date: str) -> bool: ...

    def get_game_by_date(self, date: str) -> Optional[StoredGame]: ...

    def get_next_sequence_number(self) -> int: ...

    def save_game(self, game: StoredGame) -> StoredGame: ...


class JsonBoardStore:
    """Stores each game as <directory>/<date>.json."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path_for(self, date: str) -> Path:
        return self.directory / f"{date}.json"

    def game_exists_for_date(self, date: str) -> bool:
        return self._path_for(date).exists()

    def get_game_by_date(self, date: str) -> Optional[StoredGame]:
        """
        Load the game for a date.

        Raises:
            CorruptBoardData: If the stored file does not parse
        """
        path = self._path_for(date)
        if not path.exists():
            return None
        return self.load(path)

    def load(self, path: str | Path) -> StoredGame:
        try:
            return StoredGame.model_validate_json(Path(path).read_bytes())
        except PydanticValidationError as e:
            raise CorruptBoardData(f"Corrupt game file {path}: {e}") from e

    def get_next_sequence_number(self) -> int:
        """
        One more than the highest sequence number stored, starting at 1.

        Raises:
            CorruptBoardData: If any stored file does not parse
        """
        highest = 0
        if self.directory.exists():
            for path in self.directory.glob("*.json"):
                highest = max(highest, self.load(path).sequence_number)
        return highest + 1

    def save_game(self, game: StoredGame) -> StoredGame:
        """
        Persist a new game.

        Raises:
            FileExistsError: If a game is already stored for the date
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path_for(game.date)

        with open(path, "x") as f:
            json.dump(game.model_dump(mode="json"), f, indent=2)

        return game
