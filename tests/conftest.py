"""
Pytest configuration and fixtures for testing the catalog console.
"""

import os
import sys
import pytest
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from catalog_console import create_app, db
from catalog_console.constants import (
    CONFIG_DEFAULT_LANGUAGE,
    CONFIG_ROOT_CATEGORY,
    CONFIG_HOME_CATEGORY,
)
from catalog_console.models import (
    Category,
    CategoryTranslation,
    Configuration,
    Language,
    Product,
    Shop,
)
from catalog_console.services.catalog_store import CatalogStore

fake = Faker()

ROOT_ID = 1
HOME_ID = 2
LANG_EN = 1
LANG_FR = 2


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def db_session(app):
    """Create a fresh database session for each test."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        yield db.session
        db.session.rollback()


@pytest.fixture
def runner(app):
    """CLI runner for invoking `fop:category`."""
    return app.test_cli_runner()


@pytest.fixture
def store(db_session):
    return CatalogStore()


def _create_category(name=None, parent_id=None, active=True, active_products=0,
                     inactive_products=0, category_id=None, position=0,
                     names=None):
    """Helper to create a category with products and an English name.

    `names` maps language id -> name and replaces the default English name;
    pass {} for a category without any translation.
    """
    level_depth = 0
    if parent_id is not None:
        level_depth = db.session.get(Category, parent_id).level_depth + 1

    category = Category(
        id=category_id,
        parent_id=parent_id,
        level_depth=level_depth,
        position=position,
        is_active=active,
    )
    db.session.add(category)
    db.session.flush()

    if names is None:
        names = {LANG_EN: name or fake.unique.word().title()}
    for language_id, translated in names.items():
        db.session.add(CategoryTranslation(
            category_id=category.id,
            language_id=language_id,
            name=translated,
        ))

    for index in range(active_products + inactive_products):
        product = Product(
            name=fake.sentence(nb_words=3),
            reference=fake.bothify('REF-####'),
            is_active=index < active_products,
        )
        db.session.add(product)
        category.products.append(product)

    db.session.commit()
    return category.id


def _create_shop(name=None):
    shop = Shop(name=name or fake.company()[:64])
    db.session.add(shop)
    db.session.commit()
    return shop.id


@pytest.fixture
def make_category(db_session):
    """Factory fixture: make_category(name, parent_id=..., active=..., active_products=...)."""
    return _create_category


@pytest.fixture
def make_shop(db_session):
    return _create_shop


@pytest.fixture
def catalog(db_session):
    """Single-shop install with the root and home categories in place."""
    db.session.add(Language(id=LANG_EN, iso_code='en', name='English'))
    db.session.add(Language(id=LANG_FR, iso_code='fr', name='Français'))
    db.session.commit()

    _create_shop('Main Shop')

    Configuration.set(CONFIG_DEFAULT_LANGUAGE, LANG_EN)
    Configuration.set(CONFIG_ROOT_CATEGORY, ROOT_ID)
    Configuration.set(CONFIG_HOME_CATEGORY, HOME_ID)
    db.session.commit()

    _create_category('Root', category_id=ROOT_ID)
    _create_category('Home', category_id=HOME_ID, parent_id=ROOT_ID)

    return {
        'root_id': ROOT_ID,
        'home_id': HOME_ID,
        'language_id': LANG_EN,
    }


@pytest.fixture
def read_active(db_session):
    """Read a category's active flag straight from the database."""
    def _read(category_id):
        db.session.expire_all()
        return db.session.get(Category, category_id).is_active
    return _read
