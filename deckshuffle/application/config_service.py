"""
ConfigService - shuffle and logging configuration.

Configs are dataclasses grouped into named profiles. Two environment variables
seed the defaults:

    DECKSHUFFLE_LOG_LEVEL   default logging level (INFO)
    DECKSHUFFLE_SEED        integer seed for the default shuffle profile
"""

import logging
import os
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..core.deck import Deck, FisherYatesShuffleStrategy
from ..core.exceptions import DeckConfigError, InvalidArgumentError, OutOfRangeError
from .types import QueryResult, ResultStatus


def _env_seed() -> Optional[int]:
    raw = os.getenv("DECKSHUFFLE_SEED")
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise DeckConfigError(f"DECKSHUFFLE_SEED must be an integer, got {raw!r}") from None


def _env_log_level() -> str:
    return os.getenv("DECKSHUFFLE_LOG_LEVEL", "INFO").upper()


class ConfigType(Enum):
    """Configuration groups."""
    SHUFFLE = "shuffle"
    LOGGING = "logging"


@dataclass
class ShuffleConfig:
    """
    Settings for the default shuffle strategy.

    Attributes:
        passes: Fisher-Yates passes per shuffle
        seed: seed for a private random generator; None uses the shared one
    """
    passes: int = 1
    seed: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.passes, bool) or not isinstance(self.passes, int):
            raise InvalidArgumentError(f"passes must be an int, got {type(self.passes).__name__}")
        if self.passes < 1:
            raise OutOfRangeError(f"passes must be >= 1, got {self.passes}")

    def create_strategy(self) -> FisherYatesShuffleStrategy:
        """Build a strategy from these settings."""
        rng = random.Random(self.seed) if self.seed is not None else None
        return FisherYatesShuffleStrategy(self.passes, rng)


@dataclass
class LoggingConfig:
    """Logging settings."""
    log_level: str = field(default_factory=_env_log_level)
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%H:%M:%S'

    def apply(self) -> None:
        """Configure the root logger. Call once at program start."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format=self.log_format,
            datefmt=self.date_format,
        )


class ConfigService:
    """Serves named shuffle and logging profiles."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, object]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        self._configs[ConfigType.SHUFFLE] = {
            'default': ShuffleConfig(seed=_env_seed()),
            'deterministic': ShuffleConfig(seed=0),
            'thorough': ShuffleConfig(passes=3),
        }
        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING'),
        }
        self.logger.debug("Default configuration profiles loaded")

    def _lookup(self, config_type: ConfigType, profile: str):
        profiles = self._configs[config_type]
        if profile not in profiles:
            self.logger.warning("Unknown %s profile '%s', falling back to default",
                                config_type.value, profile)
            profile = 'default'
        return profiles[profile]

    def get_shuffle_config(self, profile: str = "default") -> QueryResult[ShuffleConfig]:
        """
        Look up a shuffle profile.

        Args:
            profile: profile name (default, deterministic, thorough or a registered one)

        Returns:
            QueryResult holding the ShuffleConfig
        """
        return QueryResult.success_result(self._lookup(ConfigType.SHUFFLE, profile))

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        Look up a logging profile.

        Args:
            profile: profile name (default, debug, quiet)

        Returns:
            QueryResult holding the LoggingConfig
        """
        return QueryResult.success_result(self._lookup(ConfigType.LOGGING, profile))

    def register_shuffle_profile(self, name: str, config: ShuffleConfig) -> QueryResult[bool]:
        """Add or replace a shuffle profile."""
        if not isinstance(config, ShuffleConfig):
            return QueryResult.failure_result(
                f"expected ShuffleConfig, got {type(config).__name__}",
                error_code="INVALID_SHUFFLE_CONFIG",
                status=ResultStatus.VALIDATION_ERROR,
            )
        self._configs[ConfigType.SHUFFLE][name] = config
        self.logger.info("Shuffle profile '%s' registered", name)
        return QueryResult.success_result(True)

    def list_available_profiles(self, config_type: ConfigType) -> QueryResult[List[str]]:
        """List profile names for a config group."""
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"unknown config type {config_type}",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )
        return QueryResult.success_result(sorted(self._configs[config_type]))

    def create_deck(self, profile: str = "default") -> Deck:
        """Build a new deck shuffled with the given profile's strategy."""
        config = self.get_shuffle_config(profile).data
        deck = Deck.new_deck()
        deck.shuffle_with(config.create_strategy())
        return deck
