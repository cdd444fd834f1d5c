"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.storefront.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            result = substitute_env_vars("Server running at http://${HOST}:${PORT}/api")
            assert result == "Server running at http://localhost:8080/api"

    def test_substitute_env_var_with_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_substitute_env_var_with_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_substitute_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_substitute_required_with_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="DB_URL: database is required"):
                substitute_env_vars("${DB_URL:?database is required}")


def test_environment_overrides_copy_prefixed_vars():
    with patch.dict(os.environ, {"PRODUCTION_DATABASE_URL": "postgresql://db/shop"}, clear=True):
        apply_environment_overrides("production")
        assert os.environ["DATABASE_URL"] == "postgresql://db/shop"


class TestLoadTemplatedYaml:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_templated_yaml(tmp_path / "absent.yaml")
        assert config.app.admin_role == "Administrator"
        assert config.images.upload_dir == "product-photos"

    def test_values_are_substituted(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n"
            "  database:\n"
            "    url: ${DATABASE_URL:-sqlite:///./default.db}\n"
            "  images:\n"
            "    upload_dir: ${UPLOADS}\n"
            "  logging:\n"
            "    file: ${LOG_FILE:-}\n"
        )

        with patch.dict(os.environ, {"UPLOADS": "/srv/photos"}, clear=True):
            config = load_templated_yaml(path)

        assert config.database.url == "sqlite:///./default.db"
        assert config.images.upload_dir == "/srv/photos"
        assert config.logging.file is None

    def test_invalid_configuration(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  app:\n    port: not-a-port\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config: [unclosed\n")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_project_config_file_loads(self):
        config = load_templated_yaml(Path(__file__).parents[3] / "config.yaml")
        assert config.images.allowed_extensions == [".jpg", ".jpeg", ".png", ".gif"]
