"""Category command actions and platform configuration keys."""

from enum import Enum

from catalog_console.errors import InvalidAction


class CategoryAction(str, Enum):
    """Actions accepted by `fop:category`."""

    STATUS = 'status'
    TOGGLE = 'toggle'
    ENABLE_NO_EMPTY = 'enable-no-empty'
    DISABLE_EMPTY = 'disable-empty'

    @classmethod
    def allowed(cls) -> list[str]:
        return [action.value for action in cls]

    @classmethod
    def parse(cls, name: str) -> 'CategoryAction':
        """Map an action name to its enum member.

        Raises InvalidAction listing the allowed names when unknown.
        """
        try:
            return cls(name)
        except ValueError:
            raise InvalidAction(name, cls.allowed()) from None


# Configuration table keys and the values a fresh install ships with
CONFIG_DEFAULT_LANGUAGE = 'PS_LANG_DEFAULT'
CONFIG_ROOT_CATEGORY = 'PS_ROOT_CATEGORY'
CONFIG_HOME_CATEGORY = 'PS_HOME_CATEGORY'

CONFIG_DEFAULTS = {
    CONFIG_DEFAULT_LANGUAGE: 1,
    CONFIG_ROOT_CATEGORY: 1,
    CONFIG_HOME_CATEGORY: 2,
}
