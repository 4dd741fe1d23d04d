"""Create a plain HTML/CSS/JS project directory."""

import os

from webstarter.errors import ProvisioningError
from webstarter.exit_codes import ExitCode
from webstarter.naming import resolve_fresh_project
from webstarter.templates.template_renderer import write_template


def _write_files(path, title):
    write_template(os.path.join(path, "index.html"), "index.html.j2", package=__package__, title=title)
    for name in ("style.css", "script.js"):
        open(os.path.join(path, name), "w").close()


def create_static(name, title, editor, reporter, *, cwd=None):
    """Create *name* with index.html, style.css and script.js and open it.

    An existing directory is opened in the editor untouched.

    Raises:
        ProjectNameError: If the name is empty or reserved.
        ProvisioningError: If the directory or files cannot be created.
    """
    project = resolve_fresh_project(name, title_override=title, cwd=cwd)

    if project.exists:
        reporter.info(f"{project.directory_name} already exists, opening it instead")
    else:
        try:
            os.mkdir(project.absolute_path)
        except OSError as e:
            raise ProvisioningError("create-directory", ExitCode.INVALID_PROJECT_NAME, str(e)) from e
        try:
            _write_files(project.absolute_path, project.title)
        except OSError as e:
            raise ProvisioningError("write-files", ExitCode.SOURCE_FILES_FAILED, str(e)) from e
        reporter.success(f"Created {project.directory_name} at {project.absolute_path}")

    if editor is not None and not editor.open(project.absolute_path):
        reporter.warning(f"Could not open {project.absolute_path} in the editor")
    return project
