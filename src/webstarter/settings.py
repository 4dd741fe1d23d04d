"""Runtime settings read from the environment, overridable from the command line."""

import os
from dataclasses import dataclass, replace

import click

NODE_GITIGNORE_URL = "https://raw.githubusercontent.com/github/gitignore/main/Node.gitignore"


@dataclass(frozen=True)
class Settings:
    """Executables and endpoints used by the scaffolders."""

    editor: str = "code"
    npm: str = "npm"
    npx: str = "npx"
    gitignore_url: str = NODE_GITIGNORE_URL
    fetch_timeout: float = 30.0
    open_editor: bool = True

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        return cls(
            editor=environ.get("WEBSTARTER_EDITOR", cls.editor),
            npm=environ.get("WEBSTARTER_NPM", cls.npm),
            npx=environ.get("WEBSTARTER_NPX", cls.npx),
            gitignore_url=environ.get("WEBSTARTER_GITIGNORE_URL", cls.gitignore_url),
            fetch_timeout=_parse_timeout(environ.get("WEBSTARTER_FETCH_TIMEOUT")),
        )

    def with_overrides(self, editor=None, no_editor=False) -> "Settings":
        """Return a copy with command-line overrides applied."""
        updated = self
        if editor:
            updated = replace(updated, editor=editor)
        if no_editor:
            updated = replace(updated, open_editor=False)
        return updated


def _parse_timeout(raw):
    if raw is None or raw == "":
        return Settings.fetch_timeout
    try:
        value = float(raw)
    except ValueError:
        raise click.UsageError(f"WEBSTARTER_FETCH_TIMEOUT must be a number, got {raw!r}")
    if value <= 0:
        raise click.UsageError("WEBSTARTER_FETCH_TIMEOUT must be positive")
    return value
