"""
Git Operations Module for Helm Dependency Updater

This module handles repository coordinate resolution and GitHub client
initialization. The local checkout is only read (to find the ``origin``
remote when no repository is given); it is never modified.

Functions:
    parse_repository: Validates an ``owner/name`` coordinate
    repository_from_remote: Reads ``owner/name`` from a checkout's remote URL
    resolve_repository: Picks the target repository from inputs and context
    setup_github_client: Sets up the GitHub repository client

Raises:
    RepositoryResolutionError: When no valid repository can be determined
    GitOperationError: When the GitHub client cannot be created
"""

import logging
import re
from typing import Mapping, Optional, Tuple

from git import Repo
from git.exc import GitError
from github import Auth, Github
from github.Repository import Repository

from .exceptions import GitOperationError, RepositoryResolutionError

logger = logging.getLogger(__name__)

_REPOSITORY_PATTERN = re.compile(r"^([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+)$")
_REMOTE_URL_PATTERN = re.compile(r"[:/]([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+?)(?:\.git)?/?$")


def parse_repository(coordinate: str) -> Tuple[str, str]:
    """Split an ``owner/name`` coordinate.

    Raises:
        RepositoryResolutionError: If the coordinate is malformed
    """
    match = _REPOSITORY_PATTERN.match(coordinate.strip())
    if not match:
        raise RepositoryResolutionError(
            f"Invalid repository '{coordinate}'. Expected format 'owner/name'"
        )
    return match.group(1), match.group(2)


def repository_from_remote(path: str, remote: str = "origin") -> Optional[str]:
    """Return ``owner/name`` of a checkout's remote, or None if unavailable."""
    try:
        repo = Repo(path, search_parent_directories=True)
        url = repo.remote(remote).url
    except (GitError, ValueError) as e:
        logger.debug(f"Could not read remote '{remote}' in {path}: {e}")
        return None

    match = _REMOTE_URL_PATTERN.search(url)
    if not match:
        return None
    return f"{match.group(1)}/{match.group(2)}"


def resolve_repository(explicit: str, env: Mapping[str, str], workspace: str) -> str:
    """Determine the target repository.

    The explicit input wins, then ``GITHUB_REPOSITORY``, then the
    ``origin`` remote of the workspace checkout.
    """
    coordinate = explicit or env.get("GITHUB_REPOSITORY", "") or repository_from_remote(workspace)
    if not coordinate:
        raise RepositoryResolutionError(
            "Target repository could not be determined. Set TARGET_REPOSITORY to 'owner/name'"
        )
    owner, name = parse_repository(coordinate)
    return f"{owner}/{name}"


def setup_github_client(token: str, repository: str) -> Repository:
    """Set up the GitHub repository client."""
    try:
        github_client = Github(auth=Auth.Token(token))
        return github_client.get_repo(repository)
    except Exception as e:
        raise GitOperationError(f"Failed to setup GitHub client: {e}") from e
