"""Flask backend for the virtual garage: weather proxy and lookup lists."""

import logging
import sys

import requests
from flask import Flask, current_app, jsonify
from flask_cors import CORS

from web.config import Config
from web.lookup import LookupDataError, LookupStore

logger = logging.getLogger(__name__)


def create_app(**overrides) -> Flask:
    """
    Build the application.

    Loads the lookup data eagerly; a missing or invalid file raises
    LookupDataError so the server never starts half-configured.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.update(overrides)

    app.extensions["lookup"] = LookupStore.from_yaml(app.config["GARAGE_LOOKUP_FILE"])
    if not app.config.get("OPENWEATHER_API_KEY"):
        logger.warning("OPENWEATHER_API_KEY is not set; weather forecasts are disabled")

    CORS(app, send_wildcard=True)

    @app.route("/weather/forecast/<city>")
    def weather_forecast(city: str):
        """Proxy the 5-day forecast for a city."""
        api_key = current_app.config.get("OPENWEATHER_API_KEY")
        if not api_key:
            return jsonify(error="Weather API key is not configured on the server."), 500

        params = {
            "q": city,
            "appid": api_key,
            "units": "metric",
            "lang": current_app.config["OPENWEATHER_LANG"],
        }
        try:
            upstream = requests.get(
                current_app.config["OPENWEATHER_FORECAST_URL"],
                params=params,
                timeout=current_app.config["WEATHER_TIMEOUT"],
            )
            upstream.raise_for_status()
            return jsonify(upstream.json())
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else 500
            logger.error("Forecast for %s failed with %s", city, status)
            return jsonify(error="Failed to fetch the weather forecast."), status
        except (requests.RequestException, ValueError) as e:
            logger.error("Forecast for %s failed: %s", city, e)
            return jsonify(error="Failed to fetch the weather forecast."), 500

    @app.route("/tips")
    def general_tips():
        """General maintenance tips."""
        return jsonify(app.extensions["lookup"].tips())

    @app.route("/tips/<vehicle_type>")
    def vehicle_tips(vehicle_type: str):
        """Maintenance tips for one vehicle type."""
        tips = app.extensions["lookup"].tips(vehicle_type)
        if not tips:
            return jsonify(error=f"No tips found for type: {vehicle_type}"), 404
        return jsonify(tips)

    @app.route("/garage/featured")
    def featured_vehicles():
        return jsonify(app.extensions["lookup"].featured())

    return app


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        app = create_app()
    except LookupDataError as e:
        logger.error("Cannot start backend: %s", e)
        return 1
    app.run(host="0.0.0.0", port=app.config["PORT"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
