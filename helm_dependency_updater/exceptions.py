"""Custom exceptions for Helm Dependency Updater."""

from typing import Optional


class UpdaterError(Exception):
    """Base class for errors raised by the updater."""


class RepositoryResolutionError(UpdaterError):
    """Raised when the target repository coordinate is missing or malformed."""


class GitOperationError(UpdaterError):
    """Raised when the GitHub client cannot be set up."""


class PublishError(UpdaterError):
    """Raised when no file could be committed to the update branch."""

    def __init__(self, message: str, branch_name: Optional[str] = None):
        self.branch_name = branch_name
        super().__init__(message)
