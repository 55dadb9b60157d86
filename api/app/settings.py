"""API settings read from environment variables."""

import os
from dataclasses import dataclass

API_VERSION = "0.1.0"


@dataclass(frozen=True)
class Settings:
    """Runtime settings; defaults suit local runs and the test client."""

    api_title: str = "FX Parity API"
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build Settings from FXPARITY_* environment variables."""
    return Settings(
        api_title=os.environ.get("FXPARITY_API_TITLE", Settings.api_title),
        log_level=os.environ.get("FXPARITY_LOG_LEVEL", Settings.log_level).upper(),
    )
