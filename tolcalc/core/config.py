"""Runtime settings for the tolerance calculator.

Values come from ``TOLCALC_*`` environment variables or an optional ``.env``.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Grade selected when the caller does not pass one (f|m|c|v)
    DEFAULT_GRADE: str = "m"
    # Digits kept when formatting tolerance and limits for display
    DISPLAY_DECIMALS: int = Field(default=3, ge=0)

    model_config = {
        "env_prefix": "TOLCALC_",
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


_settings_cache: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = Settings()
    return _settings_cache


def reset_settings() -> None:
    global _settings_cache
    _settings_cache = None
