"""Catalog store - read and write access to categories for the console commands.

All queries go through the Flask-SQLAlchemy session, so an application
context must be active. Reads return immutable snapshots; the only write is
`update_active_flag`, which commits one category at a time.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import and_
from sqlalchemy.exc import SQLAlchemyError

from catalog_console import db
from catalog_console.constants import (
    CONFIG_DEFAULT_LANGUAGE,
    CONFIG_ROOT_CATEGORY,
    CONFIG_HOME_CATEGORY,
    CONFIG_DEFAULTS,
)
from catalog_console.models import (
    Category,
    CategoryTranslation,
    Configuration,
    Product,
    Shop,
    category_products,
)

logger = logging.getLogger(__name__)


def to_category_id(value, name='category id') -> int:
    """Normalize an identifier read from config or user input to int."""
    if isinstance(value, bool):
        raise ValueError(f'Invalid {name}: {value!r}')
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValueError(f'Invalid {name}: {value!r}') from None


@dataclass(frozen=True)
class PlatformConfig:
    """Platform settings the category command depends on."""

    default_language_id: int
    root_category_id: int
    home_category_id: int

    @property
    def reserved_category_ids(self) -> frozenset:
        """Categories that are never scanned: the tree root and the home page."""
        return frozenset({self.root_category_id, self.home_category_id})


@dataclass(frozen=True)
class CategorySnapshot:
    id: int
    name: str
    active: bool

    @property
    def label(self) -> str:
        return f'{self.name} ({self.id})'


class CatalogStore:
    """SQLAlchemy-backed access to the category tree."""

    def __init__(self, session=None):
        self.session = session or db.session

    def _translated_categories(self, language_id, named_only=False):
        """Categories with their name in `language_id`.

        Without `named_only`, categories lacking that translation come back
        with a None name.
        """
        query = self.session.query(Category, CategoryTranslation.name)
        on_clause = and_(
            CategoryTranslation.category_id == Category.id,
            CategoryTranslation.language_id == language_id
        )
        if named_only:
            return query.join(CategoryTranslation, on_clause)
        return query.outerjoin(CategoryTranslation, on_clause)

    def list_categories(self, language_id: int) -> list[CategorySnapshot]:
        """Categories named in `language_id`, in platform order: depth, position, ID."""
        rows = self._translated_categories(language_id, named_only=True).order_by(
            Category.level_depth.asc(),
            Category.position.asc(),
            Category.id.asc()
        ).all()
        return [
            CategorySnapshot(id=category.id, name=name, active=bool(category.is_active))
            for category, name in rows
        ]

    def list_children(self, category_id: int, language_id: int) -> list[int]:
        """IDs of direct children that have a name in the given language."""
        rows = self.session.query(Category.id).join(
            CategoryTranslation,
            and_(
                CategoryTranslation.category_id == Category.id,
                CategoryTranslation.language_id == language_id
            )
        ).filter(
            Category.parent_id == category_id
        ).order_by(Category.position.asc(), Category.id.asc()).all()
        return [row[0] for row in rows]

    def load_category(self, category_id: int, language_id: int) -> Optional[CategorySnapshot]:
        row = self._translated_categories(language_id).filter(Category.id == category_id).first()
        if row is None:
            return None
        category, name = row
        return CategorySnapshot(id=category.id, name=name or '', active=bool(category.is_active))

    def count_active_products(self, category_id: int, language_id: int, limit: int = 1) -> int:
        """Count active products in a category, stopping at `limit`.

        Products are not language-scoped in this schema; language_id is kept
        so every read takes the same arguments.
        """
        rows = self.session.query(Product.id).join(
            category_products,
            category_products.c.product_id == Product.id
        ).filter(
            category_products.c.category_id == category_id,
            Product.is_active == True
        ).limit(limit).all()
        return len(rows)

    def update_active_flag(self, category_id: int, language_id: int, active: bool) -> bool:
        """Persist a category's active flag. Returns False when the write fails."""
        try:
            category = self.session.get(Category, category_id)
            if category is None:
                logger.error(f'Cannot update category {category_id}: not found')
                return False
            category.is_active = bool(active)
            self.session.commit()
            return True
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f'Failed to update category {category_id} (lang {language_id}): {e}')
            return False

    def category_exists(self, category_id: int) -> bool:
        return self.session.query(Category.id).filter(Category.id == category_id).first() is not None

    def total_shop_count(self) -> int:
        """Number of shops, active or not."""
        return self.session.query(Shop).count()

    def platform_config(self) -> PlatformConfig:
        """Read default language and reserved category IDs from configuration."""
        rows = self.session.query(Configuration).filter(
            Configuration.name.in_(list(CONFIG_DEFAULTS))
        ).all()
        stored = {row.name: row.value for row in rows if row.value is not None}

        values = {}
        for key, default in CONFIG_DEFAULTS.items():
            values[key] = to_category_id(stored.get(key, default), name=key)
        return PlatformConfig(
            default_language_id=values[CONFIG_DEFAULT_LANGUAGE],
            root_category_id=values[CONFIG_ROOT_CATEGORY],
            home_category_id=values[CONFIG_HOME_CATEGORY],
        )
