"""Catalog services used by the console commands."""

from catalog_console.services.catalog_store import (
    CatalogStore,
    CategorySnapshot,
    PlatformConfig,
)
from catalog_console.services.category_cleaner import (
    CleanReport,
    CommandOutcome,
    ToggleResult,
    check_multishop_guard,
    dispatch_category_action,
    scan_categories,
    toggle_category,
)

__all__ = [
    'CatalogStore',
    'CategorySnapshot',
    'PlatformConfig',
    'CleanReport',
    'CommandOutcome',
    'ToggleResult',
    'check_multishop_guard',
    'dispatch_category_action',
    'scan_categories',
    'toggle_category',
]
