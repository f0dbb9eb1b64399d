"""Configuration adapters."""

from dublin_bikes.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
