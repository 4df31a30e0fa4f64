"""Configuration for the backend web service."""

import os
from pathlib import Path

PROJECT_DIR = Path(__file__).parent.parent


class Config:
    """Base configuration"""

    # OpenWeatherMap key; the forecast endpoint answers 500 without it
    OPENWEATHER_API_KEY = os.environ.get("OPENWEATHER_API_KEY")
    OPENWEATHER_FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"
    OPENWEATHER_LANG = os.environ.get("OPENWEATHER_LANG", "en")
    WEATHER_TIMEOUT = 10

    # Tips and featured vehicles; must exist at startup
    GARAGE_LOOKUP_FILE = os.environ.get("GARAGE_LOOKUP_FILE") or str(PROJECT_DIR / "data" / "lookup.yaml")

    PORT = int(os.environ.get("PORT", 3001))
