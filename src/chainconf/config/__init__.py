"""
Configuration module for chainconf.

Uses pydantic-settings for environment variable loading.
"""

from chainconf.config.settings import Settings
from chainconf.config.types import LoggingConfig

__all__ = ["LoggingConfig", "Settings"]
