#!/usr/bin/env python
"""Create (or recreate) the catalog tables straight from the models.

For a throwaway local database only; real installs go through
`flask --app catalog_console db upgrade`.

Usage:
    python init_db.py
    python init_db.py --drop        # wipe existing catalog tables first
"""

import logging
import os
import sys

import click
from sqlalchemy.exc import SQLAlchemyError

from catalog_console import create_app, db

logger = logging.getLogger(__name__)


def init_database(drop=False, config_name=None):
    """Create every catalog table, dropping them first when `drop` is set.

    Returns:
        True on success, False if the database refused the DDL
    """
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    app = create_app(config_name)

    with app.app_context():
        click.echo(f"Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}")
        try:
            if drop:
                db.drop_all()
                click.echo("🗑️  Dropped existing catalog tables")
            db.create_all()
        except SQLAlchemyError as e:
            logger.error(f'Catalog schema creation failed: {e}')
            click.secho(f"❌ Could not create catalog tables: {e}", fg='red', err=True)
            return False

        click.echo("✅ Catalog tables ready:")
        for table in db.metadata.sorted_tables:
            click.echo(f"  ✓ {table.name} ({len(table.columns)} columns)")

    click.echo("Next: python scripts/seed_catalog.py, then "
               "flask --app catalog_console fop:category status")
    return True


@click.command()
@click.option('--drop', is_flag=True, default=False, help='Drop the catalog tables before creating them.')
@click.option('--config', 'config_name', default=None, help='App config name (defaults to $FLASK_ENV).')
def main(drop, config_name):
    sys.exit(0 if init_database(drop=drop, config_name=config_name) else 1)


if __name__ == '__main__':
    main()
