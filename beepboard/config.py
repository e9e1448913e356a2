"""Process configuration, read once from the environment at startup."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

ENV_FILE = Path(__file__).resolve().parent.parent / ".env"


class ConfigurationError(Exception):
    pass


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    secret: str = Field(min_length=1, repr=False)
    max_text_length: int | None = Field(default=None, gt=0)
    host: str = "0.0.0.0"
    port: int = 7331
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        The secret is taken verbatim. Raises ConfigurationError if it is
        missing or empty, or if any other value is invalid.
        """
        env = os.environ if environ is None else environ

        secret = env.get("BEEPBOARD_SECRET")
        if not secret:
            raise ConfigurationError("BEEPBOARD_SECRET must be set to a non-empty value")

        max_length = env.get("BEEPBOARD_MAX_TEXT_LENGTH") or None
        try:
            return cls(
                secret=secret,
                max_text_length=int(max_length) if max_length is not None else None,
                host=env.get("BEEPBOARD_HOST", "0.0.0.0"),
                port=int(env.get("BEEPBOARD_PORT", "7331")),
                log_level=env.get("BEEPBOARD_LOG_LEVEL", "INFO").upper(),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_settings() -> Settings:
    """Load .env (secrets stay out of the shell profile), then read the environment."""
    load_dotenv(ENV_FILE)
    return Settings.from_env()


def get_settings() -> Settings:
    """Dependency placeholder — overridden at startup."""
    raise RuntimeError("Settings not loaded")
