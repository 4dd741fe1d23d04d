"""Tests for the command lines the tool wrappers run."""

from unittest.mock import MagicMock, patch

import pytest

from webstarter.tools.editor import EditorLauncher, editor_for
from webstarter.tools.hook_installer import HookInstaller
from webstarter.tools.linter import Linter
from webstarter.tools.manifest_editor import ManifestEditor
from webstarter.tools.package_manager import PackageManager
from webstarter.tools.process import run_tool
from webstarter.settings import Settings


def _run_tool_patch(module, returns=True):
    return patch(f"webstarter.tools.{module}.run_tool", return_value=returns)


@pytest.mark.unit
class TestRunTool:

    def test_zero_exit_is_success(self):
        with patch("webstarter.tools.process.subprocess.run", return_value=MagicMock(returncode=0)) as run:
            assert run_tool(("npm", "init", "-y"), cwd="/tmp/app") is True
        run.assert_called_once_with(["npm", "init", "-y"], cwd="/tmp/app")

    def test_non_zero_exit_is_failure(self):
        with patch("webstarter.tools.process.subprocess.run", return_value=MagicMock(returncode=1)):
            assert run_tool(["npm", "install"]) is False

    def test_missing_executable_is_failure(self, capsys):
        with patch("webstarter.tools.process.subprocess.run", side_effect=FileNotFoundError()):
            assert run_tool(["no-such-tool"]) is False
        assert "no-such-tool" in capsys.readouterr().err


@pytest.mark.unit
class TestPackageManager:

    def test_init(self):
        with _run_tool_patch("package_manager") as run:
            assert PackageManager().init(cwd="/app")
        run.assert_called_once_with(["npm", "init", "-y"], cwd="/app")

    def test_dev_install(self):
        with _run_tool_patch("package_manager") as run:
            PackageManager().install(["webpack", "webpack-cli"], cwd="/app", dev=True)
        run.assert_called_once_with(["npm", "install", "--save-dev", "webpack", "webpack-cli"], cwd="/app")

    def test_exact_dev_install(self):
        with _run_tool_patch("package_manager") as run:
            PackageManager().install(["prettier@3.3.3"], cwd="/app", dev=True, exact=True)
        assert run.call_args[0][0] == ["npm", "install", "--save-dev", "--save-exact", "prettier@3.3.3"]

    def test_global_install(self):
        with _run_tool_patch("package_manager") as run:
            PackageManager(npm="pnpm").install(["json"], cwd="/app", global_=True)
        assert run.call_args[0][0] == ["pnpm", "install", "--global", "json"]

    def test_failure_propagates(self):
        with _run_tool_patch("package_manager", returns=False):
            assert PackageManager().install(["x"], cwd="/app") is False


@pytest.mark.unit
class TestOtherTools:

    def test_manifest_editor(self):
        with _run_tool_patch("manifest_editor") as run:
            ManifestEditor().edit("package.json", "this.main = 1", cwd="/app")
        run.assert_called_once_with(["json", "-I", "-f", "package.json", "-e", "this.main = 1"], cwd="/app")

    def test_linter_uses_json_capable_eslint(self):
        with _run_tool_patch("linter") as run:
            Linter().init_interactive(cwd="/app")
        run.assert_called_once_with(["npx", "eslint@8", "--init"], cwd="/app")

    def test_husky_init(self):
        with _run_tool_patch("hook_installer") as run:
            HookInstaller().init(cwd="/app")
        run.assert_called_once_with(["npx", "husky", "init"], cwd="/app")

    def test_write_hook(self, tmp_path):
        (tmp_path / ".husky").mkdir()
        (tmp_path / ".husky" / "pre-commit").write_text("npm test\n")

        path = HookInstaller().write_hook(str(tmp_path), "pre-commit", "npx lint-staged")

        assert open(path).read() == "npx lint-staged\n"
        assert (tmp_path / ".husky" / "pre-commit").stat().st_mode & 0o111

    def test_editor_launcher(self):
        with _run_tool_patch("editor") as run:
            EditorLauncher("vim").open("/app")
        run.assert_called_once_with(["vim", "/app"])

    def test_editor_for_settings(self):
        assert editor_for(Settings(open_editor=False)) is None
        assert isinstance(editor_for(Settings()), EditorLauncher)
