"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with CHAINCONF_ prefix
3. .env file named by CHAINCONF_ENV_FILE (if present)
4. Field defaults

Nested config uses double underscore delimiter:
  CHAINCONF_LOGGING__LEVEL=debug

Whole sections can also be given as JSON:
  CHAINCONF_NODE='{"copy_on_read_keys": ["hooks", "plugins"]}'
"""

import collections.abc as _abc
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import chainconf.config.types as types
import chainconf.constants as constants
import chainconf.node as chainconf_node


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    CHAINCONF_ENV_FILE is used if it names an existing file. If it is set
    but missing, no .env is loaded rather than falling back silently.
    """
    if env_file := _os.environ.get(constants.ENV_FILE_VAR):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    chainconf settings.

    All settings can be overridden via environment variables with CHAINCONF_
    prefix. For nested config, use double underscore:
    CHAINCONF_LOGGING__LEVEL=debug
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation and for reproducing issues without .env
        interference.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    node: chainconf_node.NodeOptions = _pydantic.Field(
        default_factory=chainconf_node.NodeOptions
    )
    """Options given to root nodes built by new_root()."""

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Logging settings."""

    def configure_logging(self) -> None:
        """Apply the configured level to the chainconf package logger.

        No handlers are installed; that is left to the application.
        """
        _logging.getLogger(constants.PACKAGE_LOGGER).setLevel(self.logging.level.upper())

    def new_root(
        self,
        source: _abc.Mapping[_typing.Any, _typing.Any] | None = None,
    ) -> chainconf_node.ConfigNode:
        """
        Create a root ConfigNode carrying these settings' node options.

        Args:
            source: Optional mapping to populate the root from.
        """
        if source is None:
            return chainconf_node.ConfigNode(options=self.node)
        return chainconf_node.ConfigNode.from_map(source, options=self.node)
