"""Click command for the webpack scaffolder."""

import sys

import click

from webstarter.errors import WebstarterError
from webstarter.reporter import Reporter
from webstarter.settings import Settings
from webstarter.tools.editor import editor_for
from webstarter.tools.fetcher import Fetcher
from webstarter.tools.hook_installer import HookInstaller
from webstarter.tools.linter import Linter
from webstarter.tools.manifest_editor import ManifestEditor
from webstarter.tools.package_manager import PackageManager
from webstarter.tools.version_control import VersionControl
from webstarter.webpack_cmd.options import parse_args
from webstarter.webpack_cmd.steps import Toolchain
from webstarter.webpack_cmd.webpack_command import WebpackCommand

USAGE = (
    "PROJECT_NAME|REPO_LINK [--skip|-s] [--title|-t TITLE] "
    "[--github|-g REPO_LINK] [--name|-n NAME]"
)


def build_toolchain(settings) -> Toolchain:
    return Toolchain(
        package_manager=PackageManager(npm=settings.npm),
        manifest_editor=ManifestEditor(),
        version_control=VersionControl(),
        fetcher=Fetcher(timeout=settings.fetch_timeout),
        linter=Linter(npx=settings.npx),
        hook_installer=HookInstaller(npx=settings.npx),
    )


RAW_ARGS_KEY = "webstarter.raw_args"


class RawArgsCommand(click.Command):
    """Keeps the argument list away from click's parser.

    Only a leading ``--help`` is handled by click. Every other token,
    ``--`` and later ``--help`` included, reaches the option parser as typed.
    """

    def parse_args(self, ctx, args):
        if args and args[0] == "--help":
            return super().parse_args(ctx, args)
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, [])


@click.command("webpack", cls=RawArgsCommand, options_metavar=USAGE)
@click.pass_context
def webpack_cmd(ctx):
    """Create a webpack project with eslint, prettier and husky.

    \b
    Options:
      -s, --skip           Skip the eslint prompts and use a fixed config
      -t, --title TITLE    Page title (defaults to the project name)
      -g, --github LINK    Clone LINK into the project directory
      -n, --name NAME      Directory name when cloning from a repository link
    """
    settings = ctx.obj or Settings.from_env()
    reporter = Reporter(ctx.command_path)
    try:
        opts = parse_args(ctx.meta.get(RAW_ARGS_KEY, []))
        command = WebpackCommand(
            opts,
            build_toolchain(settings),
            editor_for(settings),
            reporter,
            gitignore_url=settings.gitignore_url,
        )
        command.execute()
    except WebstarterError as e:
        reporter.error(str(e))
        sys.exit(int(e.exit_code))
