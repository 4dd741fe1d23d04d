"""Click command for the static page scaffolder."""

import sys

import click

from webstarter.errors import WebstarterError
from webstarter.reporter import Reporter
from webstarter.settings import Settings
from webstarter.static_cmd.create_static import create_static
from webstarter.tools.editor import editor_for


@click.command("static")
@click.argument("name")
@click.option("--title", "-t", help="Page title (defaults to NAME)")
@click.pass_context
def static_cmd(ctx, name, title):
    """Create a plain HTML/CSS/JS project."""
    settings = ctx.obj or Settings.from_env()
    reporter = Reporter(ctx.command_path)
    try:
        create_static(name, title, editor_for(settings), reporter)
    except WebstarterError as e:
        reporter.error(str(e))
        sys.exit(int(e.exit_code))
