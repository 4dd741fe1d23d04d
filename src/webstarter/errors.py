"""Typed errors raised while parsing options and provisioning projects.

Each error knows the exit code it surfaces as, so the command boundary can
report it and terminate without re-classifying anything.
"""

from enum import Enum

from webstarter.exit_codes import ExitCode


class OptionErrorKind(Enum):
    UNKNOWN = ExitCode.UNKNOWN_OPTION
    INVALID_ARGUMENT = ExitCode.INVALID_OPTION_ARGUMENT
    DUPLICATE = ExitCode.DUPLICATE_OPTION
    MISSING_PROJECT_NAME = ExitCode.INVALID_PROJECT_NAME


_OPTION_MESSAGES = {
    OptionErrorKind.UNKNOWN: "Unknown option: {option}",
    OptionErrorKind.INVALID_ARGUMENT: "Invalid or missing argument for option: {option}",
    OptionErrorKind.DUPLICATE: "Option given more than once: {option}",
    OptionErrorKind.MISSING_PROJECT_NAME: "Missing project name or repository link",
}


class WebstarterError(Exception):
    """Base class for errors that end a run with a specific exit code."""

    exit_code = ExitCode.INTERNAL_ERROR


class OptionError(WebstarterError):
    """Raised by the option parser before any side effect happens."""

    def __init__(self, kind: OptionErrorKind, option: str = ""):
        self.kind = kind
        self.option = option
        super().__init__(_OPTION_MESSAGES[kind].format(option=option))

    @property
    def exit_code(self):
        return self.kind.value


class ProjectNameError(WebstarterError):
    """The resolved project directory name is empty or reserved."""

    exit_code = ExitCode.INVALID_PROJECT_NAME

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid project name: {name!r}")


class StepFailed(Exception):
    """Raised by a provisioning step action; carries a human-readable detail."""


class ProvisioningError(WebstarterError):
    """A provisioning step failed. Steps already applied are left in place."""

    def __init__(self, step_id, exit_code: ExitCode, cause: str):
        self.step_id = step_id
        self._exit_code = exit_code
        self.cause = cause
        step_name = getattr(step_id, "value", step_id)
        super().__init__(f"{cause} (step: {step_name})")

    @property
    def exit_code(self):
        return self._exit_code
