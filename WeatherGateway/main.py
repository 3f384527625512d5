"""Weather gateway HTTP server."""
import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional

from api import create_app
from config import Settings, load_config
from weather_service import WeatherGateway
from weatherapi_provider import WeatherApiProvider


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser("Caching weather API gateway")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=None, help="Overrides PORT")
    parser.add_argument("--cache-ttl", type=float, default=None, help="Seconds; overrides WEATHER_CACHE_TTL")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args()


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def build_gateway(settings: Settings) -> WeatherGateway:
    provider = WeatherApiProvider(
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout=settings.timeout,
    )
    gateway = WeatherGateway(provider=provider, cache_ttl_seconds=settings.cache_ttl_seconds)
    logging.info("Weather gateway ready (cache ttl=%ss)", settings.cache_ttl_seconds)
    return gateway


def main() -> None:
    args = parse_args()
    setup_logging(args.log_file, args.verbose)
    settings = load_config()

    port = args.port if args.port is not None else settings.port
    overrides = {}
    if args.cache_ttl is not None:
        overrides["cache_ttl_seconds"] = args.cache_ttl
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if overrides:
        settings = replace(settings, **overrides)

    app = create_app(build_gateway(settings))

    logging.info("Weather API running on port %s", port)
    app.run(host=args.host, port=port, debug=False, threaded=True)


if __name__ == "__main__":
    main()
