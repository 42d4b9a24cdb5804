"""
Tests for the database setup and demo seed scripts.
"""

from click.testing import CliRunner
from sqlalchemy.exc import OperationalError

from catalog_console import db
from catalog_console.models import Category, Product
from init_db import init_database, main as init_db_main
from scripts.seed_catalog import load_demo_catalog


def invoke(runner, *args):
    return runner.invoke(args=['fop:category', *args])


def test_init_database(monkeypatch):
    """init_db.py creates the schema on a fresh database."""
    monkeypatch.setenv('FLASK_ENV', 'testing')

    assert init_database() is True


def test_init_db_lists_every_table():
    result = CliRunner().invoke(init_db_main, ['--config', 'testing'])

    assert result.exit_code == 0
    for table in db.metadata.sorted_tables:
        assert f'✓ {table.name} (' in result.output
    assert 'Dropped' not in result.output


def test_init_db_drop_flag():
    result = CliRunner().invoke(init_db_main, ['--config', 'testing', '--drop'])

    assert result.exit_code == 0
    assert 'Dropped existing catalog tables' in result.output
    assert '✓ categories (' in result.output


def test_init_db_failure_exits_1(monkeypatch):
    def refuse():
        raise OperationalError('CREATE TABLE categories', {}, Exception('disk I/O error'))

    monkeypatch.setattr(db, 'create_all', refuse)

    result = CliRunner().invoke(init_db_main, ['--config', 'testing'])

    assert result.exit_code == 1
    assert 'Could not create catalog tables' in result.output
    assert '✅' not in result.output


def test_seed_twice_is_noop(db_session):
    assert load_demo_catalog() is True
    assert load_demo_catalog() is False
    assert Category.query.count() == 8


def test_seed_then_status(runner, db_session):
    load_demo_catalog()

    result = invoke(runner, 'status')

    assert result.exit_code == 0
    assert 'Shoes (4)' in result.output
    assert 'Hats (5)' in result.output
    # consistent leaves and parents stay out of the report
    assert 'Belts' not in result.output
    assert 'Bags' not in result.output
    assert 'Clothes' not in result.output


def test_seed_then_fix_everything(runner, db_session):
    load_demo_catalog()

    assert invoke(runner, 'disable-empty').exit_code == 0
    assert invoke(runner, 'enable-no-empty').exit_code == 0
    result = invoke(runner, 'status')

    assert 'All categories with active product are enable' in result.output
    assert Product.query.count() == 5
