"""
Shared pytest fixtures for chainconf tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import logging as _logging
import os as _os
import unittest.mock as _mock

import pytest as _pytest

import chainconf.config as config
import chainconf.constants as constants


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """
    Return environment dict with every CHAINCONF_ variable removed.

    Use with mock.patch.dict to isolate tests from the actual environment.
    """
    return {k: v for k, v in _os.environ.items() if not k.startswith(constants.ENV_PREFIX)}


@_pytest.fixture
def isolated_env(clean_env: dict[str, str]):
    """
    Context manager that isolates tests from environment variables.

    Usage:
        def test_something(isolated_env):
            with isolated_env:
                settings = config.Settings.construct_without_dotenv()
    """
    return _mock.patch.dict(_os.environ, clean_env, clear=True)


@_pytest.fixture
def clean_settings(isolated_env) -> config.Settings:
    """
    Settings instance isolated from environment and .env file.

    This fixture ensures tests get predictable default settings.
    """
    with isolated_env:
        return config.Settings.construct_without_dotenv()


@_pytest.fixture
def package_logger():
    """The chainconf package logger, with its level restored afterwards."""
    logger = _logging.getLogger(constants.PACKAGE_LOGGER)
    saved = logger.level
    yield logger
    logger.setLevel(saved)
