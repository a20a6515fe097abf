"""
Tests for the projectdesk command line interface
"""

from click.testing import CliRunner

from projectdesk import __version__
from projectdesk.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_init_db_then_seed(tmp_path):
    runner = CliRunner()
    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"

    init = runner.invoke(cli, ["init-db", "--database-url", url])
    assert init.exit_code == 0, init.output
    assert "Database tables created" in init.output

    first = runner.invoke(cli, ["seed"], env={"PROJECTDESK_DATABASE_URL": url})
    second = runner.invoke(cli, ["seed"], env={"PROJECTDESK_DATABASE_URL": url})

    assert first.exit_code == 0, first.output
    assert "Demo client ready: Acme" in first.output
    # Seeding twice reuses the same client
    assert first.output.strip().splitlines()[-1] == second.output.strip().splitlines()[-1]


def test_seed_without_tables_fails(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}"

    result = CliRunner().invoke(cli, ["seed", "--database-url", url])

    assert result.exit_code == 1
