"""Database models for the catalog console."""

from .shop import Shop, Language
from .configuration import Configuration
from .product import Product
from .category import Category, CategoryTranslation, category_products

__all__ = [
    'Shop',
    'Language',
    'Configuration',
    'Product',
    'Category',
    'CategoryTranslation',
    'category_products',
]
