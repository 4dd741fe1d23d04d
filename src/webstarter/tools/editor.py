"""EditorLauncher: hands the finished project to the user's editor."""

from webstarter.tools.process import run_tool


class EditorLauncher:
    def __init__(self, command="code"):
        self._command = command

    def open(self, path) -> bool:
        return run_tool([self._command, path])


def editor_for(settings):
    """Return the configured launcher, or None when the editor handoff is off."""
    return EditorLauncher(settings.editor) if settings.open_editor else None
