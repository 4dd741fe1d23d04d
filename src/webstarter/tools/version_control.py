"""VersionControl: GitPython-backed init, clone and commit."""

import sys

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError


class VersionControl:
    """Git operations needed to provision a project."""

    def clone(self, repo_link, path) -> bool:
        try:
            Repo.clone_from(repo_link, path)
        except GitCommandError as e:
            print(f"Error: git clone failed: {e}", file=sys.stderr)
            return False
        return True

    def init(self, path) -> bool:
        try:
            Repo.init(path)
        except (GitCommandError, OSError) as e:
            print(f"Error: git init failed: {e}", file=sys.stderr)
            return False
        return True

    def commit_all(self, path, message) -> bool:
        """Stage every file and commit through the git CLI so configured hooks run."""
        try:
            repo = Repo(path)
            repo.git.add(A=True)
            repo.git.commit("-m", message)
        except (GitCommandError, InvalidGitRepositoryError, NoSuchPathError) as e:
            print(f"Error: git commit failed: {e}", file=sys.stderr)
            return False
        return True
