"""WebpackCommand encapsulates the webpack scaffolder workflow."""

from webstarter.naming import resolve_project
from webstarter.webpack_cmd.provisioner import Provisioner
from webstarter.webpack_cmd.steps import WebpackProjectSteps
from webstarter.working_directory import preserved_working_directory


class WebpackCommand:
    """Resolves the project, provisions it and hands it to the editor.

    Errors are raised as WebstarterError subclasses; the caller turns them
    into exit codes.
    """

    def __init__(self, opts, toolchain, editor, reporter, *, gitignore_url, cwd=None):
        self.opts = opts
        self.toolchain = toolchain
        self.editor = editor
        self.reporter = reporter
        self.gitignore_url = gitignore_url
        self.cwd = cwd

    def resolve(self):
        return resolve_project(
            self.opts.project_name_or_repo_link,
            name_override=self.opts.name_override,
            title_override=self.opts.title_override,
            repo_link_override=self.opts.repo_link_override,
            cwd=self.cwd,
        )

    def provisioner(self):
        steps = WebpackProjectSteps(
            self.toolchain,
            skip_prompt=self.opts.skip_prompt,
            gitignore_url=self.gitignore_url,
            reporter=self.reporter,
        )
        return Provisioner(steps.build(), reporter=self.reporter)

    def execute(self):
        project = self.resolve()

        if project.exists:
            self.reporter.info(f"{project.directory_name} already exists, opening it instead")
            self._open_editor(project)
            return project

        with preserved_working_directory():
            self.provisioner().run(project)

        self.reporter.success(f"Created {project.directory_name} at {project.absolute_path}")
        self._open_editor(project)
        return project

    def _open_editor(self, project):
        if self.editor is None:
            return
        if not self.editor.open(project.absolute_path):
            self.reporter.warning(f"Could not open {project.absolute_path} in the editor")
