"""Category consistency checks and fixes.

A leaf category should be active exactly when it holds at least one active
product. `scan_categories` reports the leaves that break that rule and, for
the corrective actions, flips their flag through the store.

The functions here take the store and the platform config as arguments and
never prompt or print; the CLI layer owns all terminal I/O.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from catalog_console.constants import CategoryAction
from catalog_console.errors import (
    CategoryNotFound,
    GuardBlocked,
    PersistenceFailure,
)
from catalog_console.services.catalog_store import (
    CatalogStore,
    PlatformConfig,
    to_category_id,
)

logger = logging.getLogger(__name__)


@dataclass
class CleanReport:
    """Leaf categories whose active flag disagrees with their contents."""

    to_deactivate: list[str] = field(default_factory=list)  # active but empty
    to_activate: list[str] = field(default_factory=list)  # inactive but not empty

    @property
    def is_consistent(self) -> bool:
        return not self.to_deactivate and not self.to_activate


@dataclass(frozen=True)
class ToggleResult:
    category_id: int
    name: str
    active: bool

    @property
    def state(self) -> str:
        return 'enabled' if self.active else 'disabled'


@dataclass(frozen=True)
class CommandOutcome:
    """What a dispatched action produced, for the CLI to render."""

    action: CategoryAction
    report: Optional[CleanReport] = None
    toggle: Optional[ToggleResult] = None
    unsafe_multishop: bool = False


def check_multishop_guard(store: CatalogStore, force: bool) -> bool:
    """Refuse to run on a multi-shop install unless forced.

    Returns True when the run goes ahead in forced multi-shop mode. The
    scan and toggle logic is not shop-aware.
    """
    shop_count = store.total_shop_count()
    if shop_count <= 1:
        return False
    if not force:
        raise GuardBlocked(shop_count)
    logger.info(f'Running category command on {shop_count} shops in force mode')
    return True


def scan_categories(
    store: CatalogStore,
    config: PlatformConfig,
    language_id: int,
    action: CategoryAction,
    exclude: Iterable = (),
) -> CleanReport:
    """Classify inconsistent leaf categories, fixing them for corrective actions.

    Args:
        store: Catalog store to read from and write to
        config: Platform config (reserved root/home categories)
        language_id: Language used for category names
        action: STATUS only reports; DISABLE_EMPTY / ENABLE_NO_EMPTY also write
        exclude: Extra category IDs to skip

    Returns:
        CleanReport with "name (id)" labels in platform order

    Raises:
        PersistenceFailure: on the first failed write. Earlier writes are kept.
    """
    excluded = {to_category_id(category_id) for category_id in exclude}
    excluded |= config.reserved_category_ids

    report = CleanReport()

    for category in store.list_categories(language_id):
        if category.id in excluded:
            continue
        if store.list_children(category.id, language_id):
            continue

        current = store.load_category(category.id, language_id)
        if current is None:
            continue
        has_products = store.count_active_products(current.id, language_id, limit=1) > 0

        if not has_products and current.active:
            if action is CategoryAction.DISABLE_EMPTY:
                _write_active_flag(store, current, language_id, False)
            report.to_deactivate.append(current.label)
        elif has_products and not current.active:
            if action is CategoryAction.ENABLE_NO_EMPTY:
                _write_active_flag(store, current, language_id, True)
            report.to_activate.append(current.label)

    logger.debug(
        f'Category scan ({action.value}, lang {language_id}): '
        f'{len(report.to_deactivate)} to deactivate, {len(report.to_activate)} to activate'
    )
    return report


def _write_active_flag(store, category, language_id, active):
    if not store.update_active_flag(category.id, language_id, active):
        raise PersistenceFailure(f'Failed to update Category : {category.name}')
    logger.info(f'Category {category.label} set to {"active" if active else "inactive"}')


def toggle_category(store: CatalogStore, category_id: int, language_id: int) -> ToggleResult:
    """Flip one category's active flag, whatever it contains."""
    category_id = to_category_id(category_id)
    if not store.category_exists(category_id):
        raise CategoryNotFound(category_id)

    category = store.load_category(category_id, language_id)
    if category is None:
        raise CategoryNotFound(category_id)

    new_active = not category.active
    if not store.update_active_flag(category.id, language_id, new_active):
        raise PersistenceFailure(f'Failed to update Category with ID : {category_id}')

    logger.info(f'Category {category.label} toggled to {"active" if new_active else "inactive"}')
    return ToggleResult(category_id=category.id, name=category.name, active=new_active)


def dispatch_category_action(
    store: CatalogStore,
    action,
    *,
    language_id: Optional[int] = None,
    exclude: Iterable = (),
    category_id: Optional[int] = None,
    unsafe_multishop: bool = False,
) -> CommandOutcome:
    """Run an action once the multi-shop guard has passed.

    `action` may be a CategoryAction or its name; unknown names raise
    InvalidAction before the store is read. A missing or zero language
    falls back to the platform default.
    """
    if not isinstance(action, CategoryAction):
        action = CategoryAction.parse(action)

    config = store.platform_config()
    if not language_id:
        language_id = config.default_language_id
    language_id = to_category_id(language_id, name='language id')

    if action is CategoryAction.TOGGLE:
        if category_id is None:
            raise ValueError('toggle needs a category id')
        result = toggle_category(store, category_id, language_id)
        return CommandOutcome(action=action, toggle=result, unsafe_multishop=unsafe_multishop)

    report = scan_categories(store, config, language_id, action, exclude)
    return CommandOutcome(action=action, report=report, unsafe_multishop=unsafe_multishop)
