"""Console script entry point: `catalog-console fop:category ...`.

Same commands as `flask --app catalog_console ...`, with the app factory
already wired in.
"""

import os

from flask.cli import FlaskGroup

from catalog_console import create_app


def _create_app():
    return create_app(os.getenv('FLASK_ENV', 'development'))


cli = FlaskGroup(create_app=_create_app, help='Catalog maintenance commands.')


def main():
    cli()


if __name__ == '__main__':
    main()
