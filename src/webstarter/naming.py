"""Naming resolver: turns a parsed configuration into a concrete project location."""

import os
import re
from dataclasses import dataclass
from enum import Enum

from webstarter.errors import ProjectNameError

RESERVED_NAMES = ("", ".", "..")

# git@host:owner/repo(.git) or http(s)://host/owner/repo(.git)
_REPO_LINK_RE = re.compile(
    r"^(?:git@[\w.-]+:|(?:ssh|https?)://(?:[\w.-]+@)?[\w.-]+(?::\d+)?/)"
    r"[\w.~/-]+$"
)
_VCS_SUFFIX = ".git"


class SourceMode(Enum):
    FRESH = "fresh"
    CLONED_FROM_REPO = "cloned"


@dataclass(frozen=True)
class ResolvedProject:
    directory_name: str
    absolute_path: str
    title: str
    source_mode: SourceMode
    repo_link: str | None = None

    @property
    def exists(self) -> bool:
        return os.path.exists(self.absolute_path)

    @property
    def is_clone(self) -> bool:
        return self.source_mode is SourceMode.CLONED_FROM_REPO


def is_repo_link(value: str) -> bool:
    return bool(_REPO_LINK_RE.match(value))


def name_from_repo_link(link: str) -> str:
    """Return the last path segment of a repository link without its .git suffix.

    git@github.com:user/thing.git -> thing
    """
    tail = re.split(r"[/:]", link.rstrip("/"))[-1]
    if tail.endswith(_VCS_SUFFIX):
        tail = tail[: -len(_VCS_SUFFIX)]
    return tail


def validate_project_name(name: str) -> str:
    if name.strip() in RESERVED_NAMES:
        raise ProjectNameError(name)
    return name


def _resolved(directory_name, title_override, repo_link, cwd) -> ResolvedProject:
    validate_project_name(directory_name)
    base = cwd if cwd is not None else os.getcwd()
    return ResolvedProject(
        directory_name=directory_name,
        absolute_path=os.path.join(base, directory_name),
        title=title_override or directory_name,
        source_mode=SourceMode.CLONED_FROM_REPO if repo_link else SourceMode.FRESH,
        repo_link=repo_link,
    )


def resolve_fresh_project(
    name: str,
    *,
    title_override: str | None = None,
    cwd: str | None = None,
) -> ResolvedProject:
    """Resolve *name* verbatim as a fresh project, even if it looks like a link."""
    return _resolved(name, title_override, None, cwd)


def resolve_project(
    project_name_or_repo_link: str,
    *,
    name_override: str | None = None,
    title_override: str | None = None,
    repo_link_override: str | None = None,
    cwd: str | None = None,
) -> ResolvedProject:
    """Decide the project directory name, location and source mode.

    Only a repository link positional selects clone mode. The name and link
    overrides apply to that case; for a plain project name both are ignored
    and the project is fresh.
    """
    if not is_repo_link(project_name_or_repo_link):
        return resolve_fresh_project(project_name_or_repo_link, title_override=title_override, cwd=cwd)

    repo_link = repo_link_override or project_name_or_repo_link
    directory_name = name_override or name_from_repo_link(project_name_or_repo_link)
    return _resolved(directory_name, title_override, repo_link, cwd)
