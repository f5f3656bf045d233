"""Configuration loading for hsk-vocab."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration.

    Values come from ``HSK_``-prefixed environment variables or a ``.env``
    file, e.g. ``HSK_ROOT_DIR=/data/hsk`` or ``HSK_SCHEMES='{"new": 9}'``.
    """

    root_dir: Path = Field(default_factory=Path.cwd)
    complete_file: str = "complete.json"
    wordlist_dir: str = "wordlists"
    # Level scheme -> highest level
    schemes: dict[str, int] = Field(default_factory=lambda: {"old": 6, "new": 7})
    json_indent: int = 2
    log_level: str = "WARNING"

    model_config = {
        "env_prefix": "HSK_",
        "env_file": ".env",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    @property
    def complete_path(self) -> Path:
        return self.root_dir / self.complete_file

    @property
    def wordlist_path(self) -> Path:
        return self.root_dir / self.wordlist_dir


def load_config(**overrides) -> Config:
    """Load configuration from environment, applying explicit overrides."""
    return Config(**{key: value for key, value in overrides.items() if value is not None})
