#!/usr/bin/env python3
"""Seed a small demo catalog for trying `fop:category` locally.

The tree has a few leaf categories that are deliberately out of sync:
an active category with no product and an inactive one with products.

Usage:
    python scripts/seed_catalog.py
    flask --app catalog_console fop:category status
"""

import sys
import os

# Add parent directory to path to import app modules
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

LANGUAGES = [
    {'id': 1, 'iso_code': 'en', 'name': 'English'},
    {'id': 2, 'iso_code': 'fr', 'name': 'Français'},
]

# id, parent, active, names per language, product names (active, inactive)
CATEGORIES_DATA = [
    {'id': 1, 'parent': None, 'active': True, 'names': {'en': 'Root', 'fr': 'Racine'}},
    {'id': 2, 'parent': 1, 'active': True, 'names': {'en': 'Home', 'fr': 'Accueil'}},
    {'id': 3, 'parent': 2, 'active': True, 'names': {'en': 'Clothes', 'fr': 'Vêtements'}},
    {'id': 4, 'parent': 3, 'active': True, 'names': {'en': 'Shoes', 'fr': 'Chaussures'},
     'products': [], 'inactive_products': ['Old Sneakers']},
    {'id': 5, 'parent': 3, 'active': False, 'names': {'en': 'Hats', 'fr': 'Chapeaux'},
     'products': ['Straw Hat', 'Beanie', 'Cap']},
    {'id': 6, 'parent': 2, 'active': True, 'names': {'en': 'Accessories', 'fr': 'Accessoires'}},
    {'id': 7, 'parent': 6, 'active': True, 'names': {'en': 'Bags', 'fr': 'Sacs'},
     'products': ['Tote Bag']},
    {'id': 8, 'parent': 6, 'active': False, 'names': {'en': 'Belts', 'fr': 'Ceintures'},
     'products': []},
]


def load_demo_catalog():
    """Insert the demo catalog in the current app context.

    Returns:
        False if categories already exist (nothing is written), True otherwise
    """
    if Category.query.count() > 0:
        print("Catalog already has categories, skipping seed")
        return False

    languages = {}
    for language_data in LANGUAGES:
        language = Language(**language_data)
        db.session.add(language)
        languages[language.iso_code] = language

    db.session.add(Shop(id=1, name='Demo Shop'))

    Configuration.set(CONFIG_DEFAULT_LANGUAGE, 1)
    Configuration.set(CONFIG_ROOT_CATEGORY, 1)
    Configuration.set(CONFIG_HOME_CATEGORY, 2)

    depths = {}
    for position, category_data in enumerate(CATEGORIES_DATA):
        parent_id = category_data['parent']
        depth = 0 if parent_id is None else depths[parent_id] + 1
        depths[category_data['id']] = depth

        category = Category(
            id=category_data['id'],
            parent_id=parent_id,
            level_depth=depth,
            position=position,
            is_active=category_data['active'],
        )
        db.session.add(category)
        db.session.flush()

        for iso_code, name in category_data['names'].items():
            db.session.add(CategoryTranslation(
                category_id=category.id,
                language_id=languages[iso_code].id,
                name=name,
            ))

        for product_name in category_data.get('products', []):
            product = Product(name=product_name, is_active=True)
            db.session.add(product)
            category.products.append(product)
        for product_name in category_data.get('inactive_products', []):
            product = Product(name=product_name, is_active=False)
            db.session.add(product)
            category.products.append(product)

        print(f"  Added: {category_data['names']['en']} (depth {depth})")

    db.session.commit()
    return True


def seed_catalog():
    """Seed the demo catalog database."""
    app = create_app()

    with app.app_context():
        db.create_all()
        print("Starting catalog seeding...")

        if load_demo_catalog():
            print(f"\n" + "="*50)
            print(f"Catalog seeding completed!")
            print(f"Categories: {Category.query.count()}")
            print(f"Products: {Product.query.count()}")
            print("="*50)


if __name__ == '__main__':
    seed_catalog()
