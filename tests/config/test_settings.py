"""
Five-Card Draw - Settings and Logging Tests
"""

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from src.config.logging_setup import setup_logging
from src.config.settings import _SECRET_KEYS, Settings, get_settings
from src.engine.base import Phase
from src.engine.round import RoundController


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test away from any local .env and without table overrides."""
    monkeypatch.chdir(tmp_path)
    for key in _SECRET_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettingsDefaults:
    """Defaults match the classic table."""

    def test_defaults(self):
        settings = Settings()
        assert settings.starting_chips == 1000
        assert settings.ante == 5
        assert settings.dealer_delay_seconds == 1.5
        assert settings.rng_seed is None
        assert settings.debug is False
        assert settings.log_level == "INFO"


class TestSettingsOverrides:
    """Environment variables and .env files override defaults."""

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("STARTING_CHIPS", "500")
        monkeypatch.setenv("ANTE", "25")
        monkeypatch.setenv("RNG_SEED", "42")
        settings = Settings()
        assert settings.starting_chips == 500
        assert settings.ante == 25
        assert settings.rng_seed == 42

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("DEALER_DELAY_SECONDS=0.25\nDEBUG=true\n", encoding="utf-8")
        settings = Settings()
        assert settings.dealer_delay_seconds == 0.25
        assert settings.debug is True

    def test_log_level_is_normalised(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"


class TestSettingsValidation:
    """Bad values fail at load time."""

    @pytest.mark.parametrize("field, value", [
        ("ante", 0),
        ("starting_chips", -10),
        ("dealer_delay_seconds", -0.5),
        ("log_level", "LOUD"),
    ])
    def test_rejected(self, field, value):
        with pytest.raises(ValidationError):
            Settings(**{field: value})


class TestGetSettings:
    """get_settings() caches one instance."""

    @patch("src.config.settings._load_streamlit_secrets")
    def test_cached(self, mock_secrets):
        assert get_settings() is get_settings()
        mock_secrets.assert_called_once()

    @patch("src.config.settings._load_streamlit_secrets")
    def test_cache_clear_reloads(self, mock_secrets, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("ANTE", "10")
        get_settings.cache_clear()
        assert get_settings() is not first
        assert get_settings().ante == 10


class TestControllerFromSettings:
    """RoundController.from_settings() wires settings into the table."""

    def test_builds_controller(self, scheduler):
        settings = Settings(rng_seed=7, dealer_delay_seconds=0.25, starting_chips=200, ante=10)
        controller = RoundController.from_settings(settings, scheduler=scheduler)

        assert controller.starting_chips == 200
        assert controller.ante == 10
        assert controller.dealer_delay == 0.25
        assert controller.phase is Phase.PRE_DEAL

        controller.start_round()
        controller.confirm_draw()
        assert scheduler.last.delay == 0.25
        assert controller.pot == 20

    def test_seed_makes_deals_repeatable(self, scheduler):
        settings = Settings(rng_seed=7)
        first = RoundController.from_settings(settings, scheduler=scheduler)
        second = RoundController.from_settings(settings, scheduler=scheduler)
        first.start_round()
        second.start_round()
        assert first.player_hand == second.player_hand


class TestSetupLogging:
    """setup_logging() sets the root level."""

    @pytest.fixture(autouse=True)
    def restore_root_level(self):
        root = logging.getLogger()
        level = root.level
        yield
        root.setLevel(level)

    def test_level_name(self):
        setup_logging("warning")
        assert logging.getLogger().level == logging.WARNING

    def test_debug_flag_wins(self):
        setup_logging("ERROR", debug=True)
        assert logging.getLogger().level == logging.DEBUG
