"""Errors raised by the category command.

Every one of them ends the current invocation; the CLI layer prints the
message and exits with status 1.
"""


class CategoryCommandError(Exception):
    """Base class for terminal category command failures."""


class GuardBlocked(CategoryCommandError):
    """More than one shop is configured and --force was not given."""

    def __init__(self, shop_count: int):
        self.shop_count = shop_count
        super().__init__(
            'Currently this command don\'t work with MultiShop.\n'
            'Use force (-f) option to run the command.'
        )


class InvalidAction(CategoryCommandError):
    """The requested action name is not one of the allowed actions."""

    def __init__(self, action: str, allowed: list[str]):
        self.action = action
        self.allowed = allowed
        super().__init__(
            f'Action {action} not allowed.\n'
            f'Possible actions : {",".join(allowed)}'
        )


class CategoryNotFound(CategoryCommandError):
    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f'Hum i don\'t think id_category {category_id} exist')


class PersistenceFailure(CategoryCommandError):
    """A write to the catalog store did not go through."""
