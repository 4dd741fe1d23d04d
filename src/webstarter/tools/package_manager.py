"""PackageManager: wraps the npm calls used while provisioning a project."""

from webstarter.tools.process import run_tool


class PackageManager:
    """Runs npm against a project directory."""

    def __init__(self, npm="npm"):
        self._npm = npm

    def init(self, cwd) -> bool:
        """Create package.json with npm's defaults, without prompting."""
        return run_tool([self._npm, "init", "-y"], cwd=cwd)

    def install(self, packages, cwd, *, dev=False, exact=False, global_=False) -> bool:
        args = [self._npm, "install"]
        if global_:
            args.append("--global")
        if dev:
            args.append("--save-dev")
        if exact:
            args.append("--save-exact")
        return run_tool(args + list(packages), cwd=cwd)
