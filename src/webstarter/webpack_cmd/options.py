"""Option parsing for the webpack scaffolder.

The scaffolder keeps its own parser rather than click's so each kind of
option error surfaces as its own stable exit code.
"""

from dataclasses import dataclass
from enum import Enum

from webstarter.errors import OptionError, OptionErrorKind


class Option(Enum):
    """Recognised options: (long form, short form, takes an argument)."""

    SKIP = ("--skip", "-s", False)
    TITLE = ("--title", "-t", True)
    GITHUB = ("--github", "-g", True)
    NAME = ("--name", "-n", True)

    def __init__(self, long_form, short_form, takes_argument):
        self.long_form = long_form
        self.short_form = short_form
        self.takes_argument = takes_argument

    @classmethod
    def lookup(cls, token):
        for option in cls:
            if token in (option.long_form, option.short_form):
                return option
        return None


@dataclass(frozen=True)
class WebpackOpts:
    """Parsed configuration for one webpack scaffolder run."""

    project_name_or_repo_link: str
    skip_prompt: bool = False
    title_override: str | None = None
    repo_link_override: str | None = None
    name_override: str | None = None


_FIELD_FOR_OPTION = {
    Option.TITLE: "title_override",
    Option.GITHUB: "repo_link_override",
    Option.NAME: "name_override",
}


def _looks_like_option(token):
    return token.startswith("-")


def parse_args(args) -> WebpackOpts:
    """Decode the raw argument list into WebpackOpts.

    Raises:
        OptionError: MISSING_PROJECT_NAME, UNKNOWN, INVALID_ARGUMENT or DUPLICATE.
    """
    args = list(args)
    if not args or not args[0] or _looks_like_option(args[0]):
        raise OptionError(OptionErrorKind.MISSING_PROJECT_NAME)

    values = {"project_name_or_repo_link": args[0]}
    seen = set()
    index = 1
    while index < len(args):
        token = args[index]
        if token == "":
            break
        option = Option.lookup(token)
        if option is None:
            raise OptionError(OptionErrorKind.UNKNOWN, token)
        if option in seen:
            raise OptionError(OptionErrorKind.DUPLICATE, token)
        seen.add(option)

        if not option.takes_argument:
            values["skip_prompt"] = True
            index += 1
            continue

        argument = args[index + 1] if index + 1 < len(args) else None
        if not argument or _looks_like_option(argument):
            raise OptionError(OptionErrorKind.INVALID_ARGUMENT, token)
        values[_FIELD_FOR_OPTION[option]] = argument
        index += 2

    return WebpackOpts(**values)
