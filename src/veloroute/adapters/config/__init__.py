"""Configuration adapters."""

from veloroute.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
