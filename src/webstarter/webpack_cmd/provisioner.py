"""Provisioner: runs the fixed, ordered list of provisioning steps.

Steps run strictly in sequence. The first failure stops the run and is
raised as a ProvisioningError carrying that step's id and exit code; steps
already applied are not rolled back.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from webstarter.errors import ProvisioningError, StepFailed
from webstarter.exit_codes import ExitCode


class StepId(Enum):
    CREATE_DIRECTORY = "create-directory"
    CLONE_REPOSITORY = "clone-repository"
    INIT_MANIFEST = "init-manifest"
    INIT_VERSION_CONTROL = "init-version-control"
    FETCH_GITIGNORE = "fetch-gitignore"
    INSTALL_DEPENDENCIES = "install-dependencies"
    REWRITE_MANIFEST = "rewrite-manifest"
    WRITE_BUNDLER_CONFIG = "write-bundler-config"
    CREATE_SOURCE_DIRECTORY = "create-source-directory"
    WRITE_SOURCE_FILES = "write-source-files"
    INIT_LINTER = "init-linter"
    WRITE_EDITOR_SETTINGS = "write-editor-settings"
    INIT_FORMATTER = "init-formatter"
    INSTALL_PRE_COMMIT_HOOK = "install-pre-commit-hook"
    INITIAL_COMMIT = "initial-commit"


@dataclass(frozen=True)
class ProvisioningStep:
    """One step of the pipeline.

    ``action`` receives the resolved project and raises StepFailed on failure.
    ``applies`` decides whether the step runs at all for that project.
    """

    id: StepId
    description: str
    action: Callable
    failure_code: ExitCode
    applies: Optional[Callable] = None

    def should_run(self, project) -> bool:
        return self.applies is None or self.applies(project)


class Provisioner:
    """Executes steps in order, aborting on the first failure."""

    def __init__(self, steps: List[ProvisioningStep], reporter=None):
        self._steps = list(steps)
        self._reporter = reporter

    @property
    def steps(self):
        return list(self._steps)

    def run(self, project) -> List[StepId]:
        """Run every applicable step and return the ids of the steps that ran.

        Raises:
            ProvisioningError: As soon as a step fails.
        """
        completed = []
        for step in self._steps:
            if not step.should_run(project):
                continue
            if self._reporter:
                self._reporter.info(step.description)
            try:
                step.action(project)
            except StepFailed as e:
                raise ProvisioningError(step.id, step.failure_code, str(e)) from e
            except OSError as e:
                raise ProvisioningError(step.id, step.failure_code, f"{step.description}: {e}") from e
            completed.append(step.id)
        return completed
