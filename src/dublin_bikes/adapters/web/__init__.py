"""Web adapters for serving the station catalogue over HTTP."""

from dublin_bikes.adapters.web.app import STATIONS_PREFIX, create_app

__all__ = ["STATIONS_PREFIX", "create_app"]
