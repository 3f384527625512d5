"""Flask HTTP surface over the weather gateway."""
import logging
import re
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from weather_provider import DEFAULT_ERROR_MESSAGE, WeatherProviderError
from weather_service import DEFAULT_FORECAST_DAYS, WeatherGateway

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_days(raw: Optional[str]) -> int:
    """Parse the ``days`` query value; absent, non-numeric or zero means default.

    Only the leading integer is used ("5days" -> 5). Negative values are kept
    and left for the provider to reject.
    """
    match = _LEADING_INT.match(raw or "")
    days = int(match.group(1)) if match else 0
    return days or DEFAULT_FORECAST_DAYS


def create_app(gateway: WeatherGateway) -> Flask:
    """Build the Flask app serving the given gateway."""
    app = Flask(__name__)

    # ── Routes ────────────────────────────────────────────────────────

    @app.route("/api/weather/current/<location>")
    def current_weather(location):
        return jsonify(gateway.get_current_weather(location).to_dict())

    @app.route("/api/weather/forecast/<location>")
    def forecast(location):
        days = parse_days(request.args.get("days"))
        return jsonify(gateway.get_forecast(location, days).to_dict())

    @app.route("/api/weather/search/<query>")
    def search(query):
        return jsonify([loc.to_dict() for loc in gateway.search_locations(query)])

    # ── Errors ────────────────────────────────────────────────────────

    @app.errorhandler(WeatherProviderError)
    def handle_provider_error(err):
        logging.error(
            "Weather provider error on %s: status=%s message=%s",
            request.path,
            err.status_code,
            err.message,
            exc_info=err,
        )
        return jsonify({"error": err.message or DEFAULT_ERROR_MESSAGE}), err.status_code or 500

    @app.errorhandler(Exception)
    def handle_unexpected_error(err):
        if isinstance(err, HTTPException):
            return err
        logging.exception("Unhandled error on %s", request.path)
        return jsonify({"error": "Internal server error"}), 500

    return app
