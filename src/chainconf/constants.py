"""
Shared constants for chainconf.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

PACKAGE_LOGGER = "chainconf"
"""Name of the package logger that Settings.configure_logging() adjusts."""

ENV_PREFIX = "CHAINCONF_"
"""Prefix for environment variables read by Settings."""

ENV_FILE_VAR = "CHAINCONF_ENV_FILE"
"""Environment variable naming an explicit .env file for Settings."""

DEFAULT_COPY_ON_READ_KEYS = ("hooks",)
"""Keys copied from the parent chain on first read.

Hook registries are mutable collections that callers extend in place, so a
child node takes its own copy instead of appending to its ancestor's.
"""

DEFAULT_LOG_LEVEL = "warning"
"""Default level for the package logger."""
