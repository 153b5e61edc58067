"""Publish driver - pushes file changes to a new branch and opens a PR.

The three steps run in order with no rollback: create the branch, commit
each file, open the pull request. A failed commit for one file is logged
and the next file is still attempted, so the branch may end up holding
only part of the changes; those files are reported in the PR body and in
the returned result. Branch and PR failures propagate to the caller.
"""

import logging
from typing import List

from github.GithubException import GithubException

from .config import PublishConfig
from .exceptions import PublishError
from .io_layer import IOLayer
from .message_generation import (
    generate_branch_name,
    generate_commit_message,
    generate_pr_body,
    generate_pr_title,
)
from .models import FileChange, PublishResult

logger = logging.getLogger(__name__)


def publish(
    file_changes: List[FileChange],
    dependency_name: str,
    target_version: str,
    base_branch: str,
    io_layer: IOLayer,
    publish_config: PublishConfig = PublishConfig(),
    label: str = "",
) -> PublishResult:
    """
    Publish the changes as a pull request against ``base_branch``.

    Args:
        file_changes: Files to commit, in commit order
        dependency_name: Name of the dependency being updated
        target_version: The new version
        base_branch: Branch the update branch starts from and targets
        io_layer: IO layer bound to the target repository
        publish_config: Title prefix, branch prefix and bot identity
        label: Optional label (prefix filter) included in the branch name

    Returns:
        PublishResult describing what was committed and the PR URL

    Raises:
        PublishError: If no file could be committed
        GithubException: If the branch or the PR cannot be created
    """
    branch_name = generate_branch_name(
        dependency_name, target_version, label, prefix=publish_config.branch_name_prefix
    )
    result = PublishResult(branch_name=branch_name, dry_run=io_layer.dry_run)

    # Step 1: Create the update branch from the tip of the base branch
    _create_branch(io_layer, base_branch, branch_name, publish_config)

    # Step 2: Commit each file, one at a time
    committed, failed = _commit_files(
        io_layer, branch_name, file_changes, dependency_name, target_version, publish_config
    )
    result.committed_paths = [change.relative_path for change in committed]
    result.failed_paths = [change.relative_path for change in failed]

    if not committed:
        raise PublishError(
            f"Failed to commit any file to branch '{branch_name}'", branch_name=branch_name
        )

    # Step 3: Open the pull request
    result.pr_url = io_layer.create_pull_request(
        title=generate_pr_title(dependency_name, prefix=publish_config.pr_title_prefix),
        body=generate_pr_body(dependency_name, target_version, committed, failed),
        branch_name=branch_name,
        base_branch=base_branch,
    )
    return result


def _create_branch(
    io_layer: IOLayer, base_branch: str, branch_name: str, publish_config: PublishConfig
) -> None:
    base_sha = io_layer.get_branch_sha(base_branch)
    logger.info(f"Creating branch {branch_name} from {base_branch} ({base_sha})")
    try:
        io_layer.create_branch(branch_name, base_sha)
    except GithubException as e:
        if not (publish_config.reset_existing_branch and _is_existing_ref_error(e)):
            raise
        logger.warning(f"Branch {branch_name} already exists, resetting it to {base_branch}")
        io_layer.reset_branch(branch_name, base_sha)


def _commit_files(
    io_layer: IOLayer,
    branch_name: str,
    file_changes: List[FileChange],
    dependency_name: str,
    target_version: str,
    publish_config: PublishConfig,
):
    committed = []
    failed = []
    for change in file_changes:
        try:
            sha = io_layer.get_file_sha(change.relative_path, branch_name)
            io_layer.create_or_update_file(
                path=change.relative_path,
                content=change.new_content,
                message=generate_commit_message(
                    dependency_name, change.old_version, target_version, change.relative_path
                ),
                branch_name=branch_name,
                sha=sha,
                author_name=publish_config.bot_name,
                author_email=publish_config.bot_email,
            )
        except Exception as e:  # any remote failure is per-file
            logger.warning(f"Failed to update file '{change.relative_path}': {e}")
            failed.append(change)
            continue
        committed.append(change)
    return committed, failed


def _is_existing_ref_error(error: GithubException) -> bool:
    message = ""
    if isinstance(error.data, dict):
        message = str(error.data.get("message", ""))
    return error.status == 422 and "already exists" in message.lower()
