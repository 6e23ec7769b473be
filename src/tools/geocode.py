"""
src/tools/geocode.py — place name to coordinates

Uses the Open-Meteo geocoding search (no API key). The JSON body is handed
back to the model as-is; it reads latitude/longitude of the first candidate
itself.
"""


import httpx
from pydantic import BaseModel, ConfigDict, Field

from config import Settings
from tools.fetch import get_text


NAME = "geocode"
DESCRIPTION = "Get the latitude and longitude of a location"


class GeocodeArgs(BaseModel):

    model_config = ConfigDict(strict=True)

    location: str = Field(..., description="The city, e.g. New York")


def geocode(args: GeocodeArgs, *, http: httpx.Client, settings: Settings) -> str:
    """Best single match for `args.location`, as the service's JSON text."""

    return get_text(
        http,
        settings.geocoding_url,
        {"name": args.location, "count": 1, "format": "json"},
    )
