"""
src/config.py

Defaults plus the Settings object built once at startup and handed to the
model gateway and the tool handlers.
"""


import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


# Defaults
DEFAULT_MODEL: str = "gpt-3.5-turbo"
MAX_TRANSCRIPT_LENGTH: int = 13             # Transcript entries, not tool rounds
MIN_INQUIRY_LENGTH: int = 2
MAX_ANSWER_WORDS: int = 50
HTTP_TIMEOUT: float = 30.0                  # Seconds, per remote call
DEFAULT_LOG_LEVEL: str = "WARNING"

GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
WEATHER_URL: str = "https://api.openweathermap.org/data/2.5/weather"


class Settings(BaseModel):
    """Process-wide configuration. Credentials are not validated here."""

    openai_api_key: Optional[str] = Field(default=None, description="Bearer key for the model backend")
    openweathermap_api_key: Optional[str] = Field(default=None, description="Key for the weather service")
    model: str = Field(default=DEFAULT_MODEL, description="Chat completion model identifier")
    http_timeout: float = Field(default=HTTP_TIMEOUT, gt=0, description="Timeout for every remote call (seconds)")
    geocoding_url: str = Field(default=GEOCODING_URL, description="Geocoding search endpoint")
    weather_url: str = Field(default=WEATHER_URL, description="Current weather endpoint")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Root logging level")


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """
    Build Settings from the process environment, after loading `env_file` if it exists.

    Values already present in the environment win over the file.
    """

    if env_file:
        load_dotenv(env_file)

    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        openweathermap_api_key=os.getenv("OPENWEATHERMAP_API_KEY"),
        model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
        http_timeout=float(os.getenv("HTTP_TIMEOUT") or HTTP_TIMEOUT),
        log_level=(os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )

# EOF
