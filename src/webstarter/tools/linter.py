"""Linter: eslint's interactive configuration initializer."""

from webstarter.tools.process import run_tool

# eslint 9 only writes flat configs; the JSON config format needs eslint 8.
ESLINT_PACKAGE = "eslint@8"


class Linter:
    def __init__(self, npx="npx", package=ESLINT_PACKAGE):
        self._npx = npx
        self._package = package

    def init_interactive(self, cwd) -> bool:
        """Run `eslint --init`, leaving the prompts to the user."""
        return run_tool([self._npx, self._package, "--init"], cwd=cwd)
