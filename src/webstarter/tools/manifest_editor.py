"""ManifestEditor: in-place JSON edits through the `json` command-line tool."""

from webstarter.tools.process import run_tool

JSON_TOOL_PACKAGE = "json"


class ManifestEditor:
    """Applies a JavaScript expression to a JSON file in place.

    The `json` tool is installed globally during provisioning, so it is
    available by the time the manifest and lint configuration are edited.
    """

    def __init__(self, executable="json"):
        self._executable = executable

    def edit(self, filename, expression, cwd) -> bool:
        return run_tool([self._executable, "-I", "-f", filename, "-e", expression], cwd=cwd)
