"""HookInstaller: husky pre-commit hook setup."""

import os

from webstarter.tools.process import run_tool


class HookInstaller:
    def __init__(self, npx="npx"):
        self._npx = npx

    def init(self, cwd) -> bool:
        """Run `husky init`, which creates .husky/ and the prepare script."""
        return run_tool([self._npx, "husky", "init"], cwd=cwd)

    def write_hook(self, cwd, name, command) -> str:
        """Write (or replace) a hook script and return its path."""
        hooks_dir = os.path.join(cwd, ".husky")
        os.makedirs(hooks_dir, exist_ok=True)
        hook_path = os.path.join(hooks_dir, name)
        with open(hook_path, "w") as f:
            f.write(command + "\n")
        os.chmod(hook_path, 0o755)
        return hook_path
