"""`fop:category` - report or fix leaf categories whose active flag is wrong.

Usage:
    flask --app catalog_console fop:category                 # status
    flask --app catalog_console fop:category disable-empty --exclude 12,14
    flask --app catalog_console fop:category toggle -c 3
"""

import logging
import sys

import click
from flask.cli import with_appcontext

from catalog_console.constants import CategoryAction
from catalog_console.errors import CategoryCommandError
from catalog_console.services.catalog_store import CatalogStore
from catalog_console.services.category_cleaner import (
    check_multishop_guard,
    dispatch_category_action,
)
from catalog_console.utils import console

logger = logging.getLogger(__name__)

COMMAND_NAME = 'fop:category'

HELP = (
    'Manage your categories, this command don\'t support multishop.\n\n'
    'This command :\n\n'
    '\b\n'
    '   - Enable or disable a category.\n'
    '   - Disable final categories without product.\n'
    '   - Enable final categories with an active product.\n'
    '   - This command DON\'T SUPPORT multi-shop.\n\n'
    'Usage examples:\n\n'
    '\b\n'
    f'   {COMMAND_NAME} toggle -c 3   (enable or disable the category with id 3)\n'
    f'   {COMMAND_NAME} status --exclude=[XX,YY,ZZ]   (id-category separate by coma)'
)


class CategoryIdList(click.ParamType):
    """Comma separated category IDs, optionally wrapped in [ ]."""

    name = 'ids'

    def convert(self, value, param, ctx):
        if isinstance(value, (list, tuple)):
            return list(value)
        raw = str(value).strip().strip('[]')
        ids = []
        for part in raw.split(','):
            part = part.strip()
            if not part:
                continue
            try:
                ids.append(int(part))
            except ValueError:
                self.fail(f'{part!r} is not a category id', param, ctx)
        return ids


def _print_status(report):
    if report.is_consistent:
        console.title('All categories with active product are enable and all categories without product active are disable.')
        return

    if report.to_deactivate:
        console.title('The following category(s) are enabled but without active product')
        console.text(' / '.join(report.to_deactivate))
        console.text(f' -- You can run `{COMMAND_NAME} {CategoryAction.DISABLE_EMPTY.value}` to fix it')
        console.text(' -- If you want exclude categories you can add --exclude ID,ID2,ID3')

    if report.to_activate:
        console.title('The following categorie(s) are disabled but with product active in the category')
        console.text(' / '.join(report.to_activate))
        console.text(f' -- You can run `{COMMAND_NAME} {CategoryAction.ENABLE_NO_EMPTY.value}` to fix it')
        console.text(' -- If you want exclude categories you can add --exclude ID,ID2,ID3')


def _print_outcome(outcome):
    action = outcome.action

    if action is CategoryAction.STATUS:
        _print_status(outcome.report)
    elif action is CategoryAction.DISABLE_EMPTY:
        if not outcome.report.to_deactivate:
            console.title('All categories without product active are disable.')
        else:
            console.title('The following categories have been disabled')
            console.text(', '.join(outcome.report.to_deactivate))
    elif action is CategoryAction.ENABLE_NO_EMPTY:
        if not outcome.report.to_activate:
            console.title('All categories with active product are enable.')
        else:
            console.title('The following categories have been enabled')
            console.text(', '.join(outcome.report.to_activate))
    elif action is CategoryAction.TOGGLE:
        console.success(f'The category : {outcome.toggle.name} is now {outcome.toggle.state}.')


@click.command(COMMAND_NAME, help=HELP, short_help='Manage your categories (no multishop support).')
@click.argument('action', required=False, default=CategoryAction.STATUS.value)
@click.option('--id-lang', 'id_lang', type=int, default=None, help='Id lang (defaults to the shop default language).')
@click.option('-c', '--id-category', 'id_category', type=int, default=None, help='Id of the category to toggle.')
@click.option('--exclude', type=CategoryIdList(), default=None, help='Ids Category to exclude, e.g. 12,14,20.')
@click.option('-f', '--force', is_flag=True, default=False, help='Force the command when the MultiShop is enable.')
@with_appcontext
def category_command(action, id_lang, id_category, exclude, force):
    store = CatalogStore()

    try:
        unsafe = check_multishop_guard(store, force)
        if unsafe:
            console.warning('MultiShop Enable, Force Mode')

        parsed = CategoryAction.parse(action)
        if parsed is CategoryAction.TOGGLE and id_category is None:
            id_category = click.prompt('Which id_category you want to toggle', type=int)

        outcome = dispatch_category_action(
            store,
            parsed,
            language_id=id_lang,
            exclude=exclude or [],
            category_id=id_category,
            unsafe_multishop=unsafe,
        )
    except CategoryCommandError as e:
        logger.info(f'{COMMAND_NAME} {action} failed: {e}')
        console.error(e)
        sys.exit(1)

    _print_outcome(outcome)
