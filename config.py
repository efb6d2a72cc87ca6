"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    num_decks: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DECKS", "6"))
    )
    seed: int | None = field(default_factory=_parse_seed)
    dealer_stands_on: int = 17
    dealer_hits_soft_17: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_H17", "false").lower() == "true"
    )

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if self.num_decks < 1:
            raise ValueError("num_decks must be at least 1")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

