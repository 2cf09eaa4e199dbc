"""
Tests for the mapgraph command line
"""

import os
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy import create_engine, inspect, text

from mapgraph import __version__
from mapgraph.cli import cli

TABLES = {
    "users",
    "maps",
    "places",
    "routes",
    "favorites",
    "subscriptions",
    "traffic_data",
    "weather_data",
    "comments",
    "media",
    "navigation_history",
    "map_styles",
    "events",
}


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_db_upgrade_and_downgrade(test_database: tuple[str, Path]):
    dsn, _ = test_database
    os.environ["MAPGRAPH_DATABASE_URL"] = dsn
    engine = create_engine(dsn)

    result = CliRunner().invoke(cli, ["db", "upgrade"])
    assert result.exit_code == 0, result.output
    assert TABLES <= set(inspect(engine).get_table_names())

    result = CliRunner().invoke(cli, ["db", "downgrade", "base"])
    assert result.exit_code == 0, result.output
    assert not TABLES & set(inspect(engine).get_table_names())
    engine.dispose()


@pytest.mark.requires_db
def test_db_seed_is_idempotent(alembic_migrate, test_database: tuple[str, Path]):
    dsn, _ = test_database
    from mapgraph.database.connection import reset_database

    reset_database()

    for _ in range(2):
        result = CliRunner().invoke(cli, ["db", "seed"])
        assert result.exit_code == 0, result.output
        assert "Database seeded" in result.output

    engine = create_engine(dsn)
    with engine.connect() as conn:
        assert conn.execute(text("SELECT count(*) FROM users")).scalar() == 1
        assert conn.execute(text("SELECT name, type FROM maps")).one() == ("City A", "road")
        assert conn.execute(text("SELECT count(*) FROM places")).scalar() == 2
        assert conn.execute(text("SELECT count(*) FROM routes")).scalar() == 1
    engine.dispose()
