"""The webpack project's provisioning steps, in the order they run."""

import json
import os
from dataclasses import dataclass

from webstarter.errors import StepFailed
from webstarter.exit_codes import ExitCode
from webstarter.templates.template_renderer import write_template
from webstarter.tools.linter import ESLINT_PACKAGE
from webstarter.tools.manifest_editor import JSON_TOOL_PACKAGE
from webstarter.webpack_cmd.provisioner import ProvisioningStep, StepId

ENTRY_POINT = "src/app.js"
SOURCE_DIR = "src"
DEV_SERVER_PORT = 8080
BUILD_SCRIPTS = {"build": "webpack", "serve": "webpack serve"}

DEV_DEPENDENCIES = [
    "webpack",
    "webpack-cli",
    "webpack-dev-server",
    "html-webpack-plugin",
    "style-loader",
    "css-loader",
]
DEPENDENCIES = ["@fortawesome/fontawesome-free", "modern-normalize"]
ENTRY_IMPORTS = [
    "@fortawesome/fontawesome-free/css/all.min.css",
    "modern-normalize/modern-normalize.css",
    "./style.css",
]

LINT_CONFIG_FILE = ".eslintrc.json"
LINT_RULE_SET = "airbnb-base"
LINT_PACKAGES = [ESLINT_PACKAGE, "eslint-config-airbnb-base", "eslint-plugin-import"]
DISABLED_LINT_RULES = {
    "no-console": "off",
    "no-alert": "off",
    "no-param-reassign": "off",
    "import/prefer-default-export": "off",
}

EDITOR_SETTINGS_FILE = os.path.join(".vscode", "settings.json")
EDITOR_SETTINGS = {
    "editor.formatOnSave": True,
    "editor.codeActionsOnSave": {"source.fixAll.eslint": "explicit"},
}

PRETTIER_VERSION = "3.3.3"
PRETTIER_IGNORE_FILE = ".prettierignore"
PRETTIER_IGNORE_PATTERNS = ["dist", "package-lock.json", ".husky"]

HOOK_PACKAGES = ["husky", "lint-staged"]
PRE_COMMIT_COMMAND = "npx lint-staged"
LINT_STAGED_CONFIG = {"**/*": "prettier --write --ignore-unknown"}

INITIAL_COMMIT_MESSAGE = "Initial commit"


@dataclass
class Toolchain:
    """The external collaborators a provisioning run talks to."""
    package_manager: object
    manifest_editor: object
    version_control: object
    fetcher: object
    linter: object
    hook_installer: object


def _merge_expression(key, values):
    """A `json -e` expression that merges *values* into this[key]."""
    key_ref = json.dumps(key)
    return f"this[{key_ref}] = Object.assign(this[{key_ref}] || {{}}, {json.dumps(values)})"


def _is_fresh(project):
    return not project.is_clone


def _is_clone(project):
    return project.is_clone


class WebpackProjectSteps:
    """Builds the ordered step list for one webpack project run."""

    def __init__(self, toolchain: Toolchain, *, skip_prompt=False, gitignore_url=None, reporter=None):
        self._tools = toolchain
        self._skip_prompt = skip_prompt
        self._gitignore_url = gitignore_url
        self._reporter = reporter

    def build(self):
        return [
            ProvisioningStep(StepId.CREATE_DIRECTORY, "Creating project directory",
                             self.create_directory, ExitCode.INVALID_PROJECT_NAME, applies=_is_fresh),
            ProvisioningStep(StepId.CLONE_REPOSITORY, "Cloning repository",
                             self.clone_repository, ExitCode.CLONE_FAILED, applies=_is_clone),
            ProvisioningStep(StepId.INIT_MANIFEST, "Initializing package.json",
                             self.init_manifest, ExitCode.INIT_FAILED),
            ProvisioningStep(StepId.INIT_VERSION_CONTROL, "Initializing git repository",
                             self.init_version_control, ExitCode.INIT_FAILED, applies=_is_fresh),
            ProvisioningStep(StepId.FETCH_GITIGNORE, "Fetching .gitignore",
                             self.fetch_gitignore, ExitCode.GITIGNORE_FETCH_FAILED),
            ProvisioningStep(StepId.INSTALL_DEPENDENCIES, "Installing dependencies",
                             self.install_dependencies, ExitCode.DEPENDENCY_INSTALL_FAILED),
            ProvisioningStep(StepId.REWRITE_MANIFEST, "Adding entry point and scripts to package.json",
                             self.rewrite_manifest, ExitCode.MANIFEST_REWRITE_FAILED),
            ProvisioningStep(StepId.WRITE_BUNDLER_CONFIG, "Writing webpack.config.js",
                             self.write_bundler_config, ExitCode.BUNDLER_CONFIG_FAILED),
            ProvisioningStep(StepId.CREATE_SOURCE_DIRECTORY, "Creating src directory",
                             self.create_source_directory, ExitCode.SOURCE_DIRECTORY_FAILED),
            ProvisioningStep(StepId.WRITE_SOURCE_FILES, "Writing source files",
                             self.write_source_files, ExitCode.SOURCE_FILES_FAILED),
            ProvisioningStep(StepId.INIT_LINTER, "Setting up eslint",
                             self.init_linter, ExitCode.LINT_SETUP_FAILED),
            ProvisioningStep(StepId.WRITE_EDITOR_SETTINGS, "Writing editor settings",
                             self.write_editor_settings, ExitCode.EDITOR_SETTINGS_FAILED),
            ProvisioningStep(StepId.INIT_FORMATTER, "Setting up prettier",
                             self.init_formatter, ExitCode.FORMATTER_SETUP_FAILED),
            ProvisioningStep(StepId.INSTALL_PRE_COMMIT_HOOK, "Installing pre-commit hook",
                             self.install_pre_commit_hook, ExitCode.HOOK_SETUP_FAILED),
            ProvisioningStep(StepId.INITIAL_COMMIT, "Committing initial files",
                             self.initial_commit, ExitCode.INIT_FAILED),
        ]

    # --- step actions ---

    def create_directory(self, project):
        os.mkdir(project.absolute_path)

    def clone_repository(self, project):
        if not self._tools.version_control.clone(project.repo_link, project.absolute_path):
            raise StepFailed(f"Could not clone {project.repo_link}")

    def init_manifest(self, project):
        if not self._tools.package_manager.init(cwd=project.absolute_path):
            raise StepFailed("npm init failed")

    def init_version_control(self, project):
        if not self._tools.version_control.init(project.absolute_path):
            raise StepFailed("git init failed")

    def fetch_gitignore(self, project):
        content = self._tools.fetcher.fetch_text(self._gitignore_url)
        if content is None:
            raise StepFailed(f"Could not fetch .gitignore from {self._gitignore_url}")
        with open(os.path.join(project.absolute_path, ".gitignore"), "w") as f:
            f.write(content)

    def install_dependencies(self, project):
        npm = self._tools.package_manager
        cwd = project.absolute_path
        if not npm.install(DEV_DEPENDENCIES, cwd=cwd, dev=True):
            raise StepFailed("Could not install development dependencies")
        if not npm.install(DEPENDENCIES, cwd=cwd):
            raise StepFailed("Could not install dependencies")
        if not npm.install([JSON_TOOL_PACKAGE], cwd=cwd, global_=True):
            raise StepFailed(f"Could not install {JSON_TOOL_PACKAGE} globally")

    def rewrite_manifest(self, project):
        expression = f"this.main = {json.dumps(ENTRY_POINT)}; " + _merge_expression("scripts", BUILD_SCRIPTS)
        if not self._tools.manifest_editor.edit("package.json", expression, cwd=project.absolute_path):
            raise StepFailed("Could not update package.json")

    def write_bundler_config(self, project):
        config_path = os.path.join(project.absolute_path, "webpack.config.js")
        write_template(config_path, "webpack.config.js.j2", package=__package__,
                       title=project.title, entry=ENTRY_POINT, port=DEV_SERVER_PORT)
        if not os.path.isfile(config_path):
            raise StepFailed("webpack.config.js was not created")

    def create_source_directory(self, project):
        os.mkdir(os.path.join(project.absolute_path, SOURCE_DIR))

    def write_source_files(self, project):
        source_dir = os.path.join(project.absolute_path, SOURCE_DIR)
        write_template(os.path.join(source_dir, "template.html"), "template.html.j2", package=__package__)
        open(os.path.join(source_dir, "style.css"), "w").close()
        write_template(os.path.join(source_dir, "app.js"), "app.js.j2", package=__package__,
                       imports=ENTRY_IMPORTS)

    def init_linter(self, project):
        if self._skip_prompt:
            self._write_fixed_lint_config(project)
        else:
            self._run_interactive_lint_init(project)

    def _write_fixed_lint_config(self, project):
        cwd = project.absolute_path
        if not self._tools.package_manager.install(LINT_PACKAGES, cwd=cwd, dev=True):
            raise StepFailed("Could not install eslint rule set")
        write_template(os.path.join(cwd, LINT_CONFIG_FILE), "eslintrc.json.j2", package=__package__,
                       extends=LINT_RULE_SET, rules=DISABLED_LINT_RULES)

    def _run_interactive_lint_init(self, project):
        cwd = project.absolute_path
        if self._reporter is not None:
            self._reporter.info(f"Choose JSON as the config file format so {LINT_CONFIG_FILE} can be updated.")
        if not self._tools.linter.init_interactive(cwd=cwd):
            raise StepFailed("eslint --init failed")
        if not os.path.isfile(os.path.join(cwd, LINT_CONFIG_FILE)):
            raise StepFailed(f"eslint --init did not create {LINT_CONFIG_FILE}")
        expression = _merge_expression("rules", DISABLED_LINT_RULES)
        if not self._tools.manifest_editor.edit(LINT_CONFIG_FILE, expression, cwd=cwd):
            raise StepFailed(f"Could not update rules in {LINT_CONFIG_FILE}")

    def write_editor_settings(self, project):
        settings_file = os.path.join(project.absolute_path, EDITOR_SETTINGS_FILE)
        os.makedirs(os.path.dirname(settings_file), exist_ok=True)
        with open(settings_file, "w") as f:
            json.dump(EDITOR_SETTINGS, f, indent=2)
            f.write("\n")

    def init_formatter(self, project):
        cwd = project.absolute_path
        if not self._tools.package_manager.install([f"prettier@{PRETTIER_VERSION}"], cwd=cwd,
                                                   dev=True, exact=True):
            raise StepFailed("Could not install prettier")
        with open(os.path.join(cwd, ".gitignore")) as f:
            gitignore = f.read()
        with open(os.path.join(cwd, PRETTIER_IGNORE_FILE), "w") as f:
            f.write("\n".join(PRETTIER_IGNORE_PATTERNS) + "\n\n" + gitignore)

    def install_pre_commit_hook(self, project):
        tools = self._tools
        cwd = project.absolute_path
        if not tools.package_manager.install(HOOK_PACKAGES, cwd=cwd, dev=True):
            raise StepFailed("Could not install husky and lint-staged")
        if not tools.hook_installer.init(cwd=cwd):
            raise StepFailed("husky init failed")
        tools.hook_installer.write_hook(cwd, "pre-commit", PRE_COMMIT_COMMAND)
        if not tools.manifest_editor.edit("package.json", _merge_expression("lint-staged", LINT_STAGED_CONFIG),
                                          cwd=cwd):
            raise StepFailed("Could not add lint-staged configuration to package.json")

    def initial_commit(self, project):
        if not self._tools.version_control.commit_all(project.absolute_path, INITIAL_COMMIT_MESSAGE):
            raise StepFailed("Could not create the initial commit")
