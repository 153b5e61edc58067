"""
Chart Directory Scanner

Finds the chart and helmfile descriptors that are candidates for patching.
Only first-level workspace directories are considered, optionally filtered
by a name prefix; the recursive mode also walks every subdirectory of a
selected top-level directory.
"""

import logging
import os
from pathlib import Path
from typing import List

from .config import DESCRIPTOR_FILE_NAMES, IGNORED_FOLDERS
from .models import ChartDirectoryEntry

logger = logging.getLogger(__name__)


def scan(workspace_root: str, prefix_filter: str = "", recursive: bool = False) -> List[ChartDirectoryEntry]:
    """Collect descriptor files under the workspace.

    Args:
        workspace_root: Root directory holding the chart directories
        prefix_filter: Keep only top-level directories starting with this prefix
            (empty keeps all)
        recursive: Also look inside every subdirectory of a kept directory

    Returns:
        One entry per existing descriptor file, in a stable order
    """
    root = Path(workspace_root)
    entries = []
    for directory in _top_level_directories(root):
        if prefix_filter and not directory.name.startswith(prefix_filter):
            continue
        candidates = [directory]
        if recursive:
            candidates.extend(_subdirectories(directory))
        for candidate in candidates:
            directory_name = candidate.relative_to(root).as_posix()
            entries.extend(find_chart_files(candidate, directory_name))

    logger.info(f"Found {len(entries)} descriptor file(s) in {workspace_root}")
    return entries


def find_chart_files(directory: Path, directory_name: str) -> List[ChartDirectoryEntry]:
    """Return entries for the descriptor files that exist directly in ``directory``."""
    entries = []
    existing = set(os.listdir(directory))
    for file_name in DESCRIPTOR_FILE_NAMES:
        # exact, case-sensitive basename match
        if file_name in existing and (directory / file_name).is_file():
            entries.append(
                ChartDirectoryEntry(
                    directory_name=directory_name,
                    absolute_file_path=str((directory / file_name).resolve()),
                )
            )
    return entries


def _top_level_directories(root: Path) -> List[Path]:
    return sorted(
        item for item in root.iterdir()
        if item.is_dir() and item.name not in IGNORED_FOLDERS
    )


def _subdirectories(directory: Path) -> List[Path]:
    found = []
    for current, dirs, _ in os.walk(directory):
        dirs[:] = sorted(d for d in dirs if d not in IGNORED_FOLDERS)
        for name in dirs:
            found.append(Path(current) / name)
    return found
