"""CLI commands run against a temporary SQLite database."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.storefront.cli import app
from src.storefront.runtime.config.config_data import ConfigData, DatabaseConfig
from src.storefront.runtime.context import with_context

runner = CliRunner()


@pytest.fixture
def file_database(tmp_path: Path):
    override = ConfigData(database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'shop.db'}"))
    with with_context(override):
        yield


def test_init_db(file_database):
    result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0
    assert "Schema ready" in result.output


def test_seed_then_list(file_database):
    first = runner.invoke(app, ["seed"])
    second = runner.invoke(app, ["seed"])
    listing = runner.invoke(app, ["list-products"])

    assert first.exit_code == 0
    assert "Seeded 3 products" in first.output
    assert "already populated" in second.output
    assert listing.exit_code == 0
    assert "Oxford Shirt" in listing.output
    assert "Found 3 products" in listing.output


def test_list_products_empty_database(file_database):
    runner.invoke(app, ["init-db"])

    result = runner.invoke(app, ["list-products", "--category", "1"])

    assert result.exit_code == 0
    assert "No products found" in result.output
