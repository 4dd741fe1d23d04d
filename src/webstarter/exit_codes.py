"""Process exit codes shared by every webstarter command.

Scripts that drive webstarter branch on these values, so they never change.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    INTERNAL_ERROR = 1
    INVALID_PROJECT_NAME = 2
    INIT_FAILED = 3
    GITIGNORE_FETCH_FAILED = 4
    DEPENDENCY_INSTALL_FAILED = 5
    MANIFEST_REWRITE_FAILED = 6
    BUNDLER_CONFIG_FAILED = 7
    SOURCE_DIRECTORY_FAILED = 8
    SOURCE_FILES_FAILED = 9
    LINT_SETUP_FAILED = 10
    EDITOR_SETTINGS_FAILED = 11
    FORMATTER_SETUP_FAILED = 12
    HOOK_SETUP_FAILED = 13
    CLONE_FAILED = 20
    UNKNOWN_OPTION = 90
    INVALID_OPTION_ARGUMENT = 91
    DUPLICATE_OPTION = 92
