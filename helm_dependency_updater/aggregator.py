"""Change aggregator - applies the patcher to every discovered descriptor."""

import logging
from typing import List

from .config import CHART_FILE_PREFIX, HELMFILE_FILE_PREFIX
from .io_layer import IOLayer
from .models import AggregationResult, ChartDirectoryEntry, FileChange
from .yaml_patcher import patch_chart, patch_helmfile

logger = logging.getLogger(__name__)


def aggregate(
    entries: List[ChartDirectoryEntry],
    dependency_name: str,
    target_version: str,
    io_layer: IOLayer,
) -> AggregationResult:
    """
    Collect the file changes needed to move ``dependency_name`` to ``target_version``.

    A failure on one file is logged and the remaining files are still
    processed.

    Args:
        entries: Descriptor files found by the scanner
        dependency_name: Dependency / release name to update
        target_version: The new version
        io_layer: IO layer used to read the files

    Returns:
        AggregationResult with the staged file changes and changed directories
    """
    result = AggregationResult()

    for entry in entries:
        if entry.file_name.startswith(CHART_FILE_PREFIX):
            patcher = patch_chart
        elif entry.file_name.startswith(HELMFILE_FILE_PREFIX):
            patcher = patch_helmfile
        else:
            continue

        try:
            content = io_layer.read_file(entry.absolute_file_path)
            if content is None:
                logger.warning(f"{entry.relative_path} not found, skipping")
                continue
            update = patcher(content, dependency_name, target_version)
        except Exception as e:
            logger.warning(f"Failed to process chart '{entry.directory_name}': {e}")
            continue

        if update.updated and update.new_content:
            logger.info(
                f"Updating {entry.relative_path}: {dependency_name} "
                f"{update.old_version} -> {target_version}"
            )
            result.file_changes.append(
                FileChange(
                    relative_path=entry.relative_path,
                    new_content=update.new_content,
                    old_version=update.old_version,
                )
            )
            result.changed_directories.add(entry.directory_name)

    return result
