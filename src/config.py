# ABOUTME: Runtime settings for the weather metrics service, read from env vars and .env.
# ABOUTME: Holds the bind address, the static location tag for response metadata, and log level.

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from src.engine import DEFAULT_LOCATION


class Settings(BaseModel):
    """Service configuration injected into the web app."""

    model_config = ConfigDict(frozen=True)

    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)
    location: str = DEFAULT_LOCATION
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from the environment, loading a .env file first if present.

    Unset variables fall back to the model defaults. Invalid values (e.g. a
    non-numeric PORT) raise pydantic.ValidationError.
    """
    load_dotenv()
    env = {
        "host": os.environ.get("HOST"),
        "port": os.environ.get("PORT"),
        "location": os.environ.get("WEATHER_LOCATION"),
        "log_level": os.environ.get("LOG_LEVEL"),
    }
    return Settings(**{key: value for key, value in env.items() if value})
