"""Tests for the webpack scaffolder's option parser."""

import pytest

from webstarter.errors import OptionError, OptionErrorKind
from webstarter.exit_codes import ExitCode
from webstarter.webpack_cmd.options import Option, WebpackOpts, parse_args


def _parse_error(args):
    with pytest.raises(OptionError) as excinfo:
        parse_args(args)
    return excinfo.value


@pytest.mark.unit
class TestParseValidArguments:

    def test_positional_only(self):
        assert parse_args(["myapp"]) == WebpackOpts(project_name_or_repo_link="myapp")

    def test_all_long_options(self):
        opts = parse_args([
            "git@github.com:user/thing.git",
            "--skip", "--title", "My App", "--github", "git@github.com:user/other.git", "--name", "custom",
        ])

        assert opts.skip_prompt is True
        assert opts.title_override == "My App"
        assert opts.repo_link_override == "git@github.com:user/other.git"
        assert opts.name_override == "custom"

    def test_all_short_options(self):
        opts = parse_args(["myapp", "-s", "-t", "Title", "-g", "git@h:o/r.git", "-n", "n"])

        assert opts == WebpackOpts("myapp", True, "Title", "git@h:o/r.git", "n")

    def test_skip_defaults_to_false(self):
        assert parse_args(["myapp", "-t", "x"]).skip_prompt is False

    def test_empty_token_stops_parsing(self):
        opts = parse_args(["myapp", "-s", "", "--bogus"])

        assert opts.skip_prompt is True

    def test_option_lookup_matches_both_forms(self):
        assert Option.lookup("--title") is Option.TITLE
        assert Option.lookup("-t") is Option.TITLE
        assert Option.lookup("--titles") is None


@pytest.mark.unit
class TestMissingProjectName:

    @pytest.mark.parametrize("args", [[], [""], ["--skip"], ["-t", "x"]])
    def test_missing_or_option_shaped_positional(self, args):
        error = _parse_error(args)

        assert error.kind is OptionErrorKind.MISSING_PROJECT_NAME
        assert error.exit_code == ExitCode.INVALID_PROJECT_NAME


@pytest.mark.unit
class TestUnknownOption:
    @pytest.mark.parametrize("token", ["--bogus", "-x", "extra", "--Skip", "--", "--help"])
    def test_unknown_token_in_option_position(self, token):
        error = _parse_error(["myapp", token])

        assert error.kind is OptionErrorKind.UNKNOWN
        assert error.option == token
        assert error.exit_code == 90

    def test_unknown_after_valid_options(self):
        error = _parse_error(["myapp", "-s", "-t", "x", "--what"])

        assert error.exit_code == ExitCode.UNKNOWN_OPTION


@pytest.mark.unit
class TestInvalidArgument:

    @pytest.mark.parametrize("option", ["--title", "-t", "--github", "-g", "--name", "-n"])
    def test_missing_argument(self, option):
        error = _parse_error(["myapp", option])

        assert error.kind is OptionErrorKind.INVALID_ARGUMENT
        assert error.exit_code == 91

    @pytest.mark.parametrize("next_token", ["-s", "--skip", "-n", "-anything"])
    def test_option_shaped_argument_is_not_consumed(self, next_token):
        error = _parse_error(["myapp", "--title", next_token])

        assert error.kind is OptionErrorKind.INVALID_ARGUMENT
        assert error.option == "--title"

    def test_empty_argument(self):
        error = _parse_error(["myapp", "--name", ""])

        assert error.exit_code == ExitCode.INVALID_OPTION_ARGUMENT


@pytest.mark.unit
class TestDuplicateOption:

    @pytest.mark.parametrize("args", [
        ["myapp", "-s", "-s"],
        ["myapp", "--skip", "-s"],
        ["myapp", "-t", "a", "--title", "b"],
        ["myapp", "--title", "a", "-s", "-t", "b"],
        ["myapp", "-n", "a", "-g", "git@h:o/r.git", "--name", "b"],
        ["myapp", "--github", "git@h:o/r.git", "-g", "git@h:o/s.git"],
    ])
    def test_second_occurrence_is_duplicate(self, args):
        error = _parse_error(args)

        assert error.kind is OptionErrorKind.DUPLICATE
        assert error.exit_code == 92

    def test_duplicate_detected_before_argument_validation(self):
        error = _parse_error(["myapp", "--title", "a", "--title"])

        assert error.kind is OptionErrorKind.DUPLICATE

    def test_first_occurrence_never_reported_as_duplicate(self):
        for option in Option:
            args = ["myapp", option.long_form] + (["value"] if option.takes_argument else [])
            parse_args(args)
