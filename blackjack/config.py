"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or empty means OS entropy."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class RulesConfig:
    """Fixed game constants."""

    bust_limit: int = 21
    ace_high: int = 11
    ace_low: int = 1
    initial_hand_size: int = 2

    @property
    def ace_demotion(self) -> int:
        """Points removed when an ace is recounted from high to low."""
        return self.ace_high - self.ace_low


@dataclass(frozen=True)
class TableConfig:
    """Table defaults."""

    default_bankroll: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_BANKROLL", "1000"))
    )
    shuffle_seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        if self.default_bankroll < 0:
            raise ValueError("default_bankroll must not be negative")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("BLACKJACK_DEBUG"))
    log_events: bool = field(default_factory=lambda: _env_flag("BLACKJACK_LOG_EVENTS"))

    rules: RulesConfig = field(default_factory=RulesConfig)
    table: TableConfig = field(default_factory=TableConfig)


# Global configuration instance
config = AppConfig()
