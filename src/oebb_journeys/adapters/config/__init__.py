"""Configuration adapters."""

from oebb_journeys.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
