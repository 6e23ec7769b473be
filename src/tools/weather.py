"""
src/tools/weather.py — current conditions for a coordinate pair

OpenWeatherMap current weather, metric units. Coordinates are numbers, the
same type the advertised schema asks the model for; strings are rejected by
the dispatcher before we get here.
"""


import httpx
from pydantic import BaseModel, ConfigDict, Field

from config import Settings
from tools.fetch import get_text


NAME = "weather"
DESCRIPTION = "Get the current weather in a given location"


class WeatherArgs(BaseModel):

    model_config = ConfigDict(strict=True)

    latitude: float = Field(..., description="The latitude")
    longitude: float = Field(..., description="The longitude")


def weather(args: WeatherArgs, *, http: httpx.Client, settings: Settings) -> str:

    # A missing key is not checked here; the service answers 401 and that surfaces as ToolIOError.
    return get_text(
        http,
        settings.weather_url,
        {
            "units": "metric",
            "lat": args.latitude,
            "lon": args.longitude,
            "appid": settings.openweathermap_api_key or "",
        },
    )
