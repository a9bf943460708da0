"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.users_api.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
    validate_config_env_vars,
)

CONFIG_YAML = """
config:
  app:
    environment: test
    port: ${APP_PORT:-9000}
  database:
    url: ${DATABASE_URL:-sqlite://}
"""


class TestSubstituteEnvVars:
    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            result = substitute_env_vars("http://${HOST}:${PORT}/api")
            assert result == "http://localhost:8080/api"

    def test_substitute_env_var_with_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-fallback}") == "fallback"

    def test_substitute_env_var_with_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_required_env_var_custom_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="DB_URL: point me at postgres"):
                substitute_env_vars("${DB_URL:?point me at postgres}")

    def test_text_without_placeholders_unchanged(self):
        assert substitute_env_vars("plain: value") == "plain: value"


class TestLoadTemplatedYaml:
    @pytest.fixture
    def config_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML)
        return path

    def test_defaults_fill_missing_variables(self, config_file: Path):
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(config_file)

        assert config.app.port == 9000
        assert config.app.base_path == "/api/go"
        assert config.database.url == "sqlite://"

    def test_database_url_from_environment(self, config_file: Path):
        env = {"DATABASE_URL": "postgres://app:secret@db:5432/users"}
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(config_file)

        assert config.database.connection_string == (
            "postgresql://app:secret@db:5432/users"
        )

    def test_environment_prefixed_override(self, config_file: Path):
        env = {
            "APP_ENVIRONMENT": "production",
            "DATABASE_URL": "postgresql://dev@localhost/users",
            "PRODUCTION_DATABASE_URL": "postgresql://prod@db/users",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(config_file)

        assert config.database.url == "postgresql://prod@db/users"

    def test_empty_file_rejected(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(path)

    def test_invalid_yaml_rejected(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("config: [unclosed")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_invalid_shape_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("config:\n  app:\n    port: not-a-port\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "absent.yaml")


class TestValidateConfigEnvVars:
    def test_reports_missing_database_url(self):
        with patch.dict(os.environ, {}, clear=True):
            assert "DATABASE_URL" in validate_config_env_vars()

    def test_nothing_missing(self):
        with patch.dict(os.environ, {"DATABASE_URL": "sqlite://"}, clear=True):
            assert validate_config_env_vars() == {}


class TestShippedConfig:
    """The repository's own config.yaml loads with nothing set in the environment."""

    CONFIG_PATH = Path(__file__).resolve().parents[5] / "config.yaml"

    def test_loads_with_empty_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(self.CONFIG_PATH)

        assert config.app.environment == "development"
        assert config.app.port == 8000
        assert config.app.base_path == "/api/go"
        assert config.app.cors.origins == ["*"]
        assert config.logging.file is None
        assert config.database.url == "sqlite:///./users.db"

    def test_database_url_from_environment(self):
        env = {"DATABASE_URL": "postgres://app:pw@db:5432/app"}
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(self.CONFIG_PATH)

        assert config.database.connection_string == "postgresql://app:pw@db:5432/app"
