"""Top-level Click group for the webstarter CLI."""

import click

from webstarter.settings import Settings
from webstarter.static_cmd.cli import static_cmd
from webstarter.webpack_cmd.cli import webpack_cmd


@click.group()
@click.option("--editor", metavar="CMD", help="Editor command used to open the project (default: $WEBSTARTER_EDITOR or code)")
@click.option("--no-editor", is_flag=True, help="Do not open the project in an editor")
@click.pass_context
def main(ctx, editor, no_editor):
    """webstarter - scaffold new web projects."""
    ctx.obj = Settings.from_env().with_overrides(editor=editor, no_editor=no_editor)


main.add_command(webpack_cmd)
main.add_command(static_cmd)
