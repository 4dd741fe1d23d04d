"""Single-line, colourised status messages prefixed with the command name."""

import click


class Reporter:
    """Writes progress, success, warning and error lines for one command run."""

    def __init__(self, command_name: str):
        self.command_name = command_name

    def _prefix(self, colour=None):
        prefix = f"{self.command_name}:"
        return click.style(prefix, fg=colour, bold=True) if colour else prefix

    def info(self, message: str):
        click.echo(f"{self._prefix()} {message}")

    def success(self, message: str):
        click.echo(f"{self._prefix('green')} {message}")

    def warning(self, message: str):
        click.echo(f"{self._prefix('yellow')} {message}", err=True)

    def error(self, message: str):
        click.echo(f"{self._prefix('red')} {message}", err=True)
