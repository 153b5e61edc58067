"""Data models shared by the scanner, aggregator and publish driver."""

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, List, Optional, Set


@dataclass(frozen=True)
class DependencyRecord:
    """A chart dependency or helmfile release with a string name and version."""
    name: str
    version: str

    @classmethod
    def from_node(cls, node: Any) -> Optional["DependencyRecord"]:
        """Build a record from a parsed YAML node.

        Returns None when the node is not a mapping or when ``name`` or
        ``version`` is missing or not a string.
        """
        if not isinstance(node, dict):
            return None
        name = node.get("name")
        version = node.get("version")
        if not isinstance(name, str) or not isinstance(version, str):
            return None
        return cls(name=name, version=version)


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of patching a single descriptor document."""
    updated: bool
    old_version: Optional[str] = None
    new_content: Optional[str] = None


@dataclass(frozen=True)
class ChartDirectoryEntry:
    """A descriptor file discovered inside a chart directory."""
    directory_name: str
    absolute_file_path: str

    @property
    def file_name(self) -> str:
        return PurePosixPath(self.absolute_file_path.replace("\\", "/")).name

    @property
    def relative_path(self) -> str:
        return f"{self.directory_name}/{self.file_name}"


@dataclass(frozen=True)
class FileChange:
    """Represents a single file to be committed to the update branch."""
    relative_path: str
    new_content: str
    old_version: Optional[str] = None

    @property
    def directory(self) -> str:
        """Chart directory of the file (everything before the file name)."""
        return str(PurePosixPath(self.relative_path).parent)


@dataclass
class AggregationResult:
    """Changes collected over every discovered descriptor file."""
    file_changes: List[FileChange] = field(default_factory=list)
    changed_directories: Set[str] = field(default_factory=set)

    def has_changes(self) -> bool:
        """Check if there are any changes to publish."""
        return bool(self.changed_directories)


@dataclass
class PublishResult:
    """Result of publishing file changes."""
    branch_name: str
    pr_url: Optional[str] = None
    committed_paths: List[str] = field(default_factory=list)
    failed_paths: List[str] = field(default_factory=list)
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return not self.failed_paths
