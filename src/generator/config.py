"""Configuration for board generation and the command line."""

from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """Quality bar and retry policy for daily board generation."""
    threshold_score: int = Field(40, ge=0)
    generation_attempts: int = Field(5, ge=1)
    max_threshold_reductions: int = Field(1, ge=0)
    reduction_factor: float = Field(0.75, gt=0, le=1)
    top_n: int = Field(5, ge=1)
    min_word_length: int = Field(3, ge=1)
    max_word_length: int = Field(16, ge=1, le=16)
    wildcard_positions: List[Tuple[int, int]] = Field(default_factory=lambda: [(1, 1), (2, 2)])

    @property
    def total_attempts(self) -> int:
        return (self.max_threshold_reductions + 1) * self.generation_attempts


class AppConfig(BaseModel):
    """Top-level configuration."""
    wordlist_path: str = "wordlist"
    store_dir: str = "games"
    log_level: str = "INFO"
    days_ahead: int = Field(3, ge=0)
    days_back: int = Field(7, ge=0)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from a YAML file, or defaults when no path is given."""
    if config_path is None:
        return AppConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return AppConfig(**data)
