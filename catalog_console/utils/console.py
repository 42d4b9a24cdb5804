"""Terminal output helpers shared by the console commands."""

import click


def title(message):
    click.echo('')
    click.secho(message, bold=True)
    click.secho('=' * len(message), bold=True)
    click.echo('')


def text(message):
    click.echo(f' {message}')


def success(message):
    click.secho(f'\n✅ {message}\n', fg='green')


def warning(message):
    click.secho(f'\n⚠️  {message}\n', fg='yellow', err=True)


def error(message):
    """Print an error block on stderr, one line per message line."""
    lines = str(message).splitlines() or ['']
    click.secho(f'\n❌ {lines[0]}', fg='red', err=True)
    for line in lines[1:]:
        click.secho(f'   {line}', fg='red', err=True)
    click.echo('', err=True)
