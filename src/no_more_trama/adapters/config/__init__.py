"""Configuration adapters."""

from no_more_trama.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
