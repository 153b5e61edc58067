"""
I/O Layer for Helm Dependency Updater

This module contains all I/O operations (file system, GitHub API)
separated from business logic. This is the "imperative shell" that
handles all side effects. Every remote mutation goes through the
GitHub content API; no local git working tree is touched.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from github import InputGitAuthor
from github.GithubException import GithubException, UnknownObjectException

logger = logging.getLogger(__name__)


class IOLayer:
    """Handles all I/O operations for the application."""

    def __init__(self, github_repo: Any = None, dry_run: bool = False):
        """Initialize the I/O layer.

        Args:
            github_repo: GitHub repository object (may be None in dry run)
            dry_run: If True, don't perform actual remote writes
        """
        self.github_repo = github_repo
        self.dry_run = dry_run

    # -----------------------------------------------------------------------------
    # File System Operations
    # -----------------------------------------------------------------------------

    def read_file(self, path: str) -> Optional[str]:
        """Read a UTF-8 text file.

        Args:
            path: Path to the file

        Returns:
            File content as string or None if file doesn't exist
        """
        file_path = Path(path)
        if not file_path.exists():
            return None

        with file_path.open(encoding="utf-8") as f:
            return f.read()

    # -----------------------------------------------------------------------------
    # GitHub Ref Operations
    # -----------------------------------------------------------------------------

    def get_branch_sha(self, branch_name: str) -> Optional[str]:
        """Resolve the tip commit of a branch.

        Returns:
            Commit sha, or None in dry run
        """
        if self.dry_run:
            print(f"[DRY RUN] Would resolve tip of branch: {branch_name}")
            return None

        ref = self.github_repo.get_git_ref(f"heads/{branch_name}")
        return ref.object.sha

    def create_branch(self, branch_name: str, sha: Optional[str]) -> bool:
        """Create a branch ref pointing at ``sha``.

        Returns:
            True if created, False if dry run
        """
        if self.dry_run:
            print(f"[DRY RUN] Would create branch: {branch_name}")
            return False

        self.github_repo.create_git_ref(ref=f"refs/heads/{branch_name}", sha=sha)
        return True

    def reset_branch(self, branch_name: str, sha: Optional[str]) -> bool:
        """Force an existing branch ref to point at ``sha``.

        Returns:
            True if updated, False if dry run
        """
        if self.dry_run:
            print(f"[DRY RUN] Would reset branch {branch_name} to {sha}")
            return False

        ref = self.github_repo.get_git_ref(f"heads/{branch_name}")
        ref.edit(sha, force=True)
        return True

    # -----------------------------------------------------------------------------
    # GitHub Content Operations
    # -----------------------------------------------------------------------------

    def get_file_sha(self, path: str, branch_name: str) -> Optional[str]:
        """Get the blob sha of a file on a branch.

        Returns:
            The sha, or None if the file does not exist there (or in dry run)
        """
        if self.dry_run:
            return None

        try:
            content = self.github_repo.get_contents(path, ref=branch_name)
        except UnknownObjectException:
            return None
        except GithubException as e:
            logger.debug(f"Could not fetch {path} on {branch_name}: {e}")
            return None

        if isinstance(content, list):
            return None
        return content.sha

    def create_or_update_file(
        self,
        path: str,
        content: str,
        message: str,
        branch_name: str,
        sha: Optional[str],
        author_name: str,
        author_email: str,
    ) -> bool:
        """Commit ``content`` to ``path`` on a branch.

        The current blob ``sha`` guards against concurrent modification; a
        missing sha creates the file.

        Returns:
            True if committed, False if dry run
        """
        if self.dry_run:
            print(f"[DRY RUN] Would commit {path} to {branch_name}: {message}")
            return False

        identity = InputGitAuthor(author_name, author_email)
        if sha is None:
            self.github_repo.create_file(
                path,
                message,
                content,
                branch=branch_name,
                committer=identity,
                author=identity,
            )
        else:
            self.github_repo.update_file(
                path,
                message,
                content,
                sha,
                branch=branch_name,
                committer=identity,
                author=identity,
            )
        return True

    # -----------------------------------------------------------------------------
    # GitHub Pull Request Operations
    # -----------------------------------------------------------------------------

    def create_pull_request(
        self,
        title: str,
        body: str,
        branch_name: str,
        base_branch: str,
    ) -> Optional[str]:
        """Create a GitHub pull request.

        Args:
            title: PR title
            body: PR body/description
            branch_name: Head branch name
            base_branch: Base branch name

        Returns:
            PR URL if created, None if dry run
        """
        if self.dry_run:
            print(f"[DRY RUN] Would create PR: '{title}'")
            print(f"[DRY RUN] Base: {base_branch}, Head: {branch_name}")
            print(f"[DRY RUN] Body:\n{body}")
            return None

        pr = self.github_repo.create_pull(
            title=title,
            body=body,
            head=branch_name,
            base=base_branch,
        )

        print(f"PR created: {pr.html_url}")
        return pr.html_url
