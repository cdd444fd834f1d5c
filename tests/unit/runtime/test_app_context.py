"""Unit tests for the application context and scoped overrides."""

import pytest

from src.storefront.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
)
from src.storefront.runtime.context import get_config, merge_configs, with_context


class TestWithContext:
    def test_override_is_scoped(self):
        original_role = get_config().app.admin_role
        override = ConfigData(app=AppConfig(admin_role="Merchandiser"))

        with with_context(override):
            assert get_config().app.admin_role == "Merchandiser"

        assert get_config().app.admin_role == original_role

    def test_unset_fields_are_inherited(self):
        base_url = get_config().database.url
        override = ConfigData()
        override.images.upload_dir = "/tmp/photos"

        with with_context(override):
            assert get_config().images.upload_dir == "/tmp/photos"
            assert get_config().database.url == base_url

    def test_nested_overrides(self):
        outer = ConfigData(app=AppConfig(admin_role="Outer"))
        inner = ConfigData(database=DatabaseConfig(url="sqlite:///:memory:"))

        with with_context(outer), with_context(inner):
            assert get_config().app.admin_role == "Outer"
            assert get_config().database.url == "sqlite:///:memory:"

    def test_none_is_a_noop(self):
        before = get_config()
        with with_context(None):
            assert get_config() is before

    def test_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {}}):  # type: ignore[arg-type]
                pass


def test_merge_configs_keeps_base_values():
    base = ConfigData(database=DatabaseConfig(url="postgresql://db/shop", pool_size=5))
    override = ConfigData()
    override.database.echo = True

    merged = merge_configs(base, override)

    assert merged.database.url == "postgresql://db/shop"
    assert merged.database.pool_size == 5
    assert merged.database.echo is True


def test_database_password_from_environment(monkeypatch):
    monkeypatch.setenv("SHOP_DB_PASSWORD", "s3cret")
    config = DatabaseConfig(
        url="postgresql://shop@db:5432/shop", password_env_var="SHOP_DB_PASSWORD"
    )

    assert config.connection_string == "postgresql://shop:s3cret@db:5432/shop"
    assert not config.is_sqlite


def test_database_password_missing(monkeypatch):
    monkeypatch.delenv("SHOP_DB_PASSWORD", raising=False)
    config = DatabaseConfig(url="postgresql://shop@db/shop", password_env_var="SHOP_DB_PASSWORD")

    with pytest.raises(ValueError, match="SHOP_DB_PASSWORD not set"):
        _ = config.connection_string
