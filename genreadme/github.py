"""Parse package.json repository values into GitHub coordinates."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

_DEFAULT_BRANCH = "master"

_URL_PATTERNS = (
    # https://github.com/owner/repo(.git)(/tree/branch | #branch)
    re.compile(
        r"^(?:git\+)?(?:https?|git|ssh)://(?:[^@/]+@)?(?:www\.)?github\.com[:/]"
        r"(?P<user>[^/\s]+)/(?P<repo>[^/#\s]+?)(?:\.git)?"
        r"(?:/(?:tree|blob)/(?P<tree>[^/#\s]+).*|/)?(?:#(?P<branch>\S+))?$"
    ),
    # git@github.com:owner/repo.git
    re.compile(
        r"^git@github\.com:(?P<user>[^/\s]+)/(?P<repo>[^/#\s]+?)(?:\.git)?(?:#(?P<branch>\S+))?$"
    ),
    # github.com/owner/repo
    re.compile(
        r"^(?:www\.)?github\.com/(?P<user>[^/\s]+)/(?P<repo>[^/#\s]+?)(?:\.git)?/?(?:#(?P<branch>\S+))?$"
    ),
    # github:owner/repo or the bare owner/repo shorthand
    re.compile(
        r"^(?:github:)?(?!(?:www\.)?github\.com/)(?P<user>[A-Za-z0-9][\w.-]*)/(?P<repo>[\w.-]+?)(?:\.git)?(?:#(?P<branch>\S+))?$"
    ),
)


@dataclass
class GitHubRepo:
    """Owner/repository pair with the URLs README badges link to."""

    user: str
    repo: str
    branch: str = _DEFAULT_BRANCH
    host: str = "github.com"

    @property
    def https_url(self) -> str:
        return f"https://{self.host}/{self.user}/{self.repo}"

    @property
    def clone_url(self) -> str:
        return f"{self.https_url}.git"

    @property
    def travis_url(self) -> str:
        return f"https://travis-ci.org/{self.user}/{self.repo}"

    @property
    def api_url(self) -> str:
        return f"https://api.github.com/repos/{self.user}/{self.repo}"

    @property
    def tarball_url(self) -> str:
        return f"{self.api_url}/tarball/{self.branch}"


def repository_url(value: Any) -> Optional[str]:
    """Return the URL from a repository string or ``{"url": ...}`` mapping."""
    if isinstance(value, Mapping):
        value = value.get("url")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_repository(value: Any) -> Optional[GitHubRepo]:
    """Parse a package.json ``repository`` value; ``None`` when unrecognised."""
    url = repository_url(value)
    if url is None:
        return None

    for pattern in _URL_PATTERNS:
        match = pattern.match(url)
        if not match:
            continue
        groups = match.groupdict()
        branch = groups.get("branch") or groups.get("tree") or _DEFAULT_BRANCH
        return GitHubRepo(user=groups["user"], repo=groups["repo"], branch=branch)
    return None


__all__ = ["GitHubRepo", "parse_repository", "repository_url"]
