"""Tests for configuration classes."""

import os
import pytest
from unittest.mock import patch

from config import AppConfig, GameConfig, LoggingConfig


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_game_config_defaults(self):
        """Test default game configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = GameConfig()

            assert config.num_decks == 6
            assert config.seed is None
            assert config.dealer_stands_on == 17
            assert config.dealer_hits_soft_17 is False

    def test_game_config_from_env(self):
        """Test game configuration from environment."""
        with patch.dict(
            os.environ,
            {"BLACKJACK_DECKS": "2", "BLACKJACK_SEED": "1234", "BLACKJACK_H17": "TRUE"},
        ):
            config = GameConfig()

            assert config.num_decks == 2
            assert config.seed == 1234
            assert config.dealer_hits_soft_17 is True

    def test_blank_seed_is_none(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "  "}):
            assert GameConfig().seed is None

    def test_zero_decks_refused(self):
        """Test the game refuses to start without a deck."""
        with pytest.raises(ValueError):
            GameConfig(num_decks=0)

        with patch.dict(os.environ, {"BLACKJACK_DECKS": "0"}):
            with pytest.raises(ValueError):
                GameConfig()

    def test_game_config_frozen(self):
        """Test that GameConfig is frozen (immutable)."""
        config = GameConfig()

        with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
            config.num_decks = 8


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            assert LoggingConfig().level == "WARNING"

    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert LoggingConfig().level == "DEBUG"


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_app_config_has_nested_configs(self):
        """Test that AppConfig has nested configuration objects."""
        config = AppConfig()

        assert isinstance(config.game, GameConfig)
        assert isinstance(config.logging, LoggingConfig)
