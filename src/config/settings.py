"""
Five-Card Draw - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})

_SECRET_KEYS = (
    "STARTING_CHIPS",
    "ANTE",
    "DEALER_DELAY_SECONDS",
    "RNG_SEED",
    "DEBUG",
    "LOG_LEVEL",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        logger.debug("No Streamlit secrets available")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Table
    starting_chips: int = Field(default=1000, gt=0)
    ante: int = Field(default=5, gt=0)

    # Dealer turn delay shown as "Dealer is drawing..."
    dealer_delay_seconds: float = Field(default=1.5, ge=0)

    # Fixed seed for reproducible shuffles (None = system randomness)
    rng_seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()
