"""Configuration adapters."""

from visitor_info.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
