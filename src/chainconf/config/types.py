"""Configuration section types for chainconf settings.

These are "config section" models nested within the main Settings class.
NodeOptions lives with ConfigNode in chainconf.node; the sections defined
here only concern the package itself.
"""

import typing as _typing

import pydantic as _pydantic

import chainconf.constants as constants


class LoggingConfig(_pydantic.BaseModel):
    """
    Logging settings.

    Env section: CHAINCONF_LOGGING__*
    """

    model_config = _pydantic.ConfigDict(extra="forbid")

    level: _typing.Literal["debug", "info", "warning", "error"] = constants.DEFAULT_LOG_LEVEL
    """Level applied to the chainconf package logger."""
