"""Configuration module for prefixcodec settings and defaults."""

from .config import DispatchConfig, reset_logging
from . import default_config

__all__ = ["DispatchConfig", "default_config", "reset_logging"]
