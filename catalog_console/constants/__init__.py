"""Shared constants for the application."""

from catalog_console.constants.actions import (
    CategoryAction,
    CONFIG_DEFAULT_LANGUAGE,
    CONFIG_ROOT_CATEGORY,
    CONFIG_HOME_CATEGORY,
    CONFIG_DEFAULTS,
)

__all__ = [
    'CategoryAction',
    'CONFIG_DEFAULT_LANGUAGE',
    'CONFIG_ROOT_CATEGORY',
    'CONFIG_HOME_CATEGORY',
    'CONFIG_DEFAULTS',
]
