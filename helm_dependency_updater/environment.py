"""
Environment Configuration Module

Handles parsing and validation of environment variables.
This is a pure module - no side effects, just data transformation.

Each input can be given either as a plain variable (``CHART_NAME``) or in
the form GitHub Actions uses for action inputs (``INPUT_CHART-NAME``).
"""

from dataclasses import dataclass
from typing import List, Mapping
import logging

from .config import DEFAULT_BASE_BRANCH, PublishConfig
from .exceptions import RepositoryResolutionError
from .git_operations import parse_repository

logger = logging.getLogger(__name__)


def _get_input(env: Mapping[str, str], name: str, default: str = "") -> str:
    """Read an input by plain name, falling back to the GitHub Actions form."""
    value = env.get(name, "")
    if not value:
        value = env.get(f"INPUT_{name.replace('_', '-')}", "")
    return value.strip() if value else default


def _get_bool(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    return _get_input(env, name, str(default).lower()).lower() == "true"


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    chart_name: str
    version: str
    github_token: str
    target_repository: str = ""
    target_chart_prefix: str = ""
    base_branch: str = DEFAULT_BASE_BRANCH
    recursive: bool = False
    dry_run: bool = False
    reset_existing_branch: bool = False
    workspace: str = "."

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        github_token = _get_input(env, "GH_TOKEN") or _get_input(env, "GITHUB_TOKEN")
        return cls(
            chart_name=_get_input(env, "CHART_NAME"),
            version=_get_input(env, "VERSION"),
            github_token=github_token,
            target_repository=_get_input(env, "TARGET_REPOSITORY"),
            target_chart_prefix=_get_input(env, "TARGET_CHART_PREFIX"),
            base_branch=_get_input(env, "BRANCH", DEFAULT_BASE_BRANCH),
            recursive=_get_bool(env, "RECURSIVE"),
            dry_run=_get_bool(env, "DRY_RUN"),
            reset_existing_branch=_get_bool(env, "RESET_EXISTING_BRANCH"),
            workspace=env.get("GITHUB_WORKSPACE", "") or ".",
        )

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        missing = [
            name
            for name, value in (
                ("chart-name", self.chart_name),
                ("version", self.version),
                ("github-token", self.github_token),
            )
            if not value
        ]
        if missing:
            errors.append(f"Missing required inputs: {', '.join(missing)}")

        if self.target_repository:
            try:
                parse_repository(self.target_repository)
            except RepositoryResolutionError as e:
                errors.append(str(e))

        return errors

    def publish_config(self) -> PublishConfig:
        """Build the immutable publish settings for this run."""
        return PublishConfig(reset_existing_branch=self.reset_existing_branch)
