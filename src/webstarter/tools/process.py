"""Runs external tools with the terminal attached and reports success."""

import subprocess
import sys


def run_tool(args, cwd=None) -> bool:
    """Run args in cwd, inheriting stdin/stdout/stderr.

    Returns True when the tool exits with status 0. A missing executable is
    reported on stderr and counts as a failure.
    """
    try:
        result = subprocess.run(list(args), cwd=cwd)
    except FileNotFoundError:
        print(f"Error: command not found: {args[0]}", file=sys.stderr)
        return False
    return result.returncode == 0
