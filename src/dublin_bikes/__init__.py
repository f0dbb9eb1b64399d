"""Dublin Bikes station catalogue with live availability updates."""

__version__ = "0.1.0"
