"""Unit tests for environment-level settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.users_api.runtime.config.settings import EnvironmentVariables


class TestEnvironmentVariables:
    def test_default_values(self):
        with patch.dict(os.environ, {}, clear=True):
            env_vars = EnvironmentVariables(_env_file=None)

        assert env_vars.environment == "development"
        assert env_vars.config_path == "config.yaml"

    def test_environment_variable_loading(self):
        env = {"APP_ENVIRONMENT": "production", "CONFIG_PATH": "/etc/users/config.yaml"}
        with patch.dict(os.environ, env, clear=True):
            env_vars = EnvironmentVariables(_env_file=None)

        assert env_vars.environment == "production"
        assert env_vars.config_path == "/etc/users/config.yaml"

    def test_empty_values_ignored(self):
        with patch.dict(os.environ, {"CONFIG_PATH": ""}, clear=True):
            assert EnvironmentVariables(_env_file=None).config_path == "config.yaml"

    def test_unknown_environment_rejected(self):
        with patch.dict(os.environ, {"APP_ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                EnvironmentVariables(_env_file=None)
