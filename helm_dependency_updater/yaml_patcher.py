"""
YAML Dependency Patcher

Pure functions that locate a dependency (Chart.yaml) or release
(helmfile.yaml) by name and rewrite its version field. Documents are
round-tripped with ruamel.yaml so that key order, comments and quoting
survive; nothing is serialized when no record needs a change.

Layout details ruamel.yaml does not keep on its own are restored around
the round trip: comments above a leading ``---``, trailing empty
documents, the indentation of the dependency list and CRLF line endings.

Functions:
    patch_chart: Update ``dependencies[].version`` in a chart descriptor
    patch_helmfile: Update ``releases[].version`` in a helmfile descriptor
"""

import logging
import re
from io import StringIO
from typing import Any, List, Optional, Tuple

import dpath
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.scalarstring import ScalarString

from .models import DependencyRecord, UpdateResult

logger = logging.getLogger(__name__)

CHART_DEPENDENCIES_KEY = "dependencies"
HELMFILE_RELEASES_KEY = "releases"

# Blank and comment lines up to a leading document start marker.
_HEADER_BEFORE_START = re.compile(r"((?:[^\S\n]*(?:#[^\n]*)?\n)*)(?=---(?:[^\S\n]|\n|$))")


def patch_chart(content: str, dependency_name: str, target_version: str) -> UpdateResult:
    """Update the version of every chart dependency named ``dependency_name``.

    Args:
        content: Raw Chart.yaml text
        dependency_name: Name of the dependency to update
        target_version: Desired version string

    Returns:
        UpdateResult with the new document text when something changed
    """
    return _patch_documents(content, CHART_DEPENDENCIES_KEY, dependency_name, target_version)


def patch_helmfile(content: str, release_name: str, target_version: str) -> UpdateResult:
    """Update the version of every helmfile release named ``release_name``.

    Args:
        content: Raw helmfile.yaml text
        release_name: Name of the release to update
        target_version: Desired version string

    Returns:
        UpdateResult with the new document text when something changed
    """
    return _patch_documents(content, HELMFILE_RELEASES_KEY, release_name, target_version)


def _patch_documents(content: str, list_key: str, name: str, target_version: str) -> UpdateResult:
    newline = "\r\n" if "\r\n" in content else "\n"
    header, body = _split_header(content.replace("\r\n", "\n"))
    yaml = _make_yaml(body, list_key)
    try:
        documents = list(yaml.load_all(body))
    except YAMLError as e:
        logger.warning(f"Failed to parse YAML document: {e}")
        return UpdateResult(updated=False)

    updated = False
    old_version = None
    for document in documents:
        for node in _records(document, list_key):
            record = DependencyRecord.from_node(node)
            if record is None or record.name != name or record.version == target_version:
                continue
            old_version = record.version
            dpath.new(node, "version", _with_quote_style(node["version"], target_version))
            updated = True

    if not updated:
        return UpdateResult(updated=False)

    new_content = header + _dump_documents(yaml, documents)
    return UpdateResult(
        updated=True,
        old_version=old_version,
        new_content=new_content.replace("\n", newline),
    )


def _split_header(content: str) -> Tuple[str, str]:
    """Split off the comment lines that precede a leading ``---``.

    ruamel.yaml drops comments placed before the document start marker,
    so they are carried around the round trip as plain text.
    """
    match = _HEADER_BEFORE_START.match(content)
    if match is None:
        return "", content
    return match.group(1), content[match.end(1):]


def _records(document: Any, list_key: str) -> List[Any]:
    """Return the dependency/release sequence of a document, or an empty list."""
    if not isinstance(document, dict):
        return []
    records = document.get(list_key)
    if not isinstance(records, list):
        return []
    return records


def _with_quote_style(old_value: str, new_value: str) -> str:
    if isinstance(old_value, ScalarString):
        return type(old_value)(new_value)
    return new_value


def _sequence_offset(content: str, list_key: str) -> Optional[int]:
    """Indentation of the dependency list dashes relative to their key."""
    pattern = re.compile(
        rf"^([^\S\n]*){re.escape(list_key)}:[^\S\n]*(?:#[^\n]*)?\n"
        r"(?:[^\S\n]*(?:#[^\n]*)?\n)*"
        r"([^\S\n]*)-[^\S\n]",
        re.MULTILINE,
    )
    match = pattern.search(content)
    if match is None:
        return None
    return len(match.group(2)) - len(match.group(1))


def _make_yaml(content: str, list_key: str) -> YAML:
    yaml = YAML(typ="rt")
    yaml.preserve_quotes = True
    yaml.width = 4096
    yaml.explicit_start = content.startswith("---")
    offset = _sequence_offset(content, list_key)
    if offset and offset > 0:
        yaml.indent(mapping=2, sequence=offset + 2, offset=offset)
    return yaml


def _dump_documents(yaml: YAML, documents: List[Any]) -> str:
    # A stream ending in "---" loads with trailing empty documents
    trailing = 0
    while documents and documents[-1] is None:
        documents = documents[:-1]
        trailing += 1

    buf = StringIO()
    yaml.dump_all(documents, buf)
    return buf.getvalue() + "---\n" * trailing
