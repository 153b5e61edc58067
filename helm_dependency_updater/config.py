"""
Configuration Module for Helm Dependency Updater

This module contains configuration settings and data structures used throughout the application.
It defines constants and configuration classes that control
the behavior of the dependency updating process.

Constants:
    CHART_FILE_NAMES: Exact basenames of chart descriptor files
    HELMFILE_FILE_NAMES: Exact basenames of helmfile descriptor files
    DESCRIPTOR_FILE_NAMES: All descriptor basenames, in lookup order
    IGNORED_FOLDERS: Set of folder names to ignore during scanning
    PR_TITLE_PREFIX: Marker prepended to every pull request title
    DEFAULT_BASE_BRANCH: Base branch used when none is given
    BRANCH_NAME_PREFIX: Prefix of every generated branch name
    BOT_NAME / BOT_EMAIL: Identity used for author and committer

Classes:
    PublishConfig: Immutable settings handed to the publish driver
"""

from dataclasses import dataclass

# Constants
CHART_FILE_PREFIX = "Chart"
HELMFILE_FILE_PREFIX = "helmfile"
CHART_FILE_NAMES = ("Chart.yaml", "Chart.yml")
HELMFILE_FILE_NAMES = ("helmfile.yaml", "helmfile.yml")
DESCRIPTOR_FILE_NAMES = CHART_FILE_NAMES + HELMFILE_FILE_NAMES
IGNORED_FOLDERS = {".git", ".github", "node_modules"}
PR_TITLE_PREFIX = "deps: update Helm dependencies: "
DEFAULT_BASE_BRANCH = "master"
BRANCH_NAME_PREFIX = "update-helm-chart"
BOT_NAME = "github-actions[bot]"
BOT_EMAIL = "github-actions[bot]@users.noreply.github.com"


@dataclass(frozen=True)
class PublishConfig:
    """Settings for the publish driver."""

    pr_title_prefix: str = PR_TITLE_PREFIX
    branch_name_prefix: str = BRANCH_NAME_PREFIX
    bot_name: str = BOT_NAME
    bot_email: str = BOT_EMAIL
    reset_existing_branch: bool = False
