"""Console commands package for the catalog console."""


def register_commands(app):
    """Register all CLI commands with the application."""
    from .category import category_command

    app.cli.add_command(category_command)
