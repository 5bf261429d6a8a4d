from .board_generator import BoardGenerator, WILDCARD_POSITIONS
from .config import AppConfig, GeneratorConfig, load_config
from .game_generator import GameGenerator, create_seed, rng_for, top_scores_sum
from .models import GameAnswer, GenerationResult, StoredGame
from .store import BoardStore, JsonBoardStore

__all__ = [
    # Generation
    "BoardGenerator",
    "GameGenerator",
    "WILDCARD_POSITIONS",
    "create_seed",
    "rng_for",
    "top_scores_sum",
    # Config
    "AppConfig",
    "GeneratorConfig",
    "load_config",
    # Models
    "GameAnswer",
    "GenerationResult",
    "StoredGame",
    # Storage
    "BoardStore",
    "JsonBoardStore",
]
