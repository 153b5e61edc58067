"""
Message Generation Module

Pure functions for generating branch names, commit messages, PR titles,
and PR bodies. This module contains no side effects - only text
formatting logic.
"""

import re
from typing import List, Optional

from .config import BRANCH_NAME_PREFIX, PR_TITLE_PREFIX
from .models import FileChange

# Characters git does not accept in ref names.
_INVALID_REF_CHARS = re.compile(r"[\s~^:?*\[\]\\]+")


def generate_branch_name(
    dependency_name: str,
    target_version: str,
    label: str = "",
    prefix: str = BRANCH_NAME_PREFIX,
) -> str:
    """
    Generate the update branch name.

    The same inputs always produce the same name, so repeated runs target
    the same branch.

    Args:
        dependency_name: Name of the dependency being updated
        target_version: The new version
        label: Optional prefix filter or directory name
        prefix: Leading part of the branch name

    Returns:
        Branch name string
    """
    parts = [prefix]
    if label:
        parts.append(label)
    parts.extend([dependency_name, target_version])
    name = _INVALID_REF_CHARS.sub("-", "-".join(parts))
    name = re.sub(r"-{2,}", "-", name)
    name = re.sub(r"\.{2,}", ".", name).strip("-./")
    if name.endswith(".lock"):
        name = name[: -len(".lock")]
    return name


def generate_commit_message(
    dependency_name: str,
    old_version: Optional[str],
    new_version: str,
    path: str,
) -> str:
    """Generate a commit message for a single file."""
    if old_version:
        version_msg = f"from version {old_version} to {new_version}"
    else:
        version_msg = f"to version {new_version}"
    return f"deps: update '{dependency_name}' {version_msg} in {path}"


def generate_pr_title(dependency_name: str, prefix: str = PR_TITLE_PREFIX) -> str:
    """Generate the PR title."""
    return f"{prefix}{dependency_name}"


def generate_pr_body(
    dependency_name: str,
    new_version: str,
    file_changes: List[FileChange],
    failed_changes: Optional[List[FileChange]] = None,
) -> str:
    """
    Generate the PR body listing every updated chart directory.

    Args:
        dependency_name: Name of the dependency
        new_version: The new version
        file_changes: Committed changes
        failed_changes: Changes whose commit failed

    Returns:
        Markdown body
    """
    lines = [
        f"Update Helm chart dependency '`{dependency_name}`' to version `{new_version}`.",
        "",
        "### Updated charts:",
    ]
    lines.extend(_format_change(change) for change in file_changes)

    if failed_changes:
        lines.extend(["", "### Failed to update:"])
        lines.extend(f"- `{change.relative_path}`" for change in failed_changes)

    return "\n".join(lines)


def generate_summary(dependency_name: str, new_version: str, directories: List[str]) -> str:
    """Generate the final success message."""
    return (
        f"Successfully created PR to update dependency '{dependency_name}' "
        f"to version {new_version} in charts: {', '.join(directories)}"
    )


def generate_no_update_message(dependency_name: str) -> str:
    return f"No charts required updating for dependency '{dependency_name}'. No PR will be opened."


def _format_change(change: FileChange) -> str:
    old = f" (old version: {change.old_version})" if change.old_version else ""
    return f"- `{change.directory}`{old}"
