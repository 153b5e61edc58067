"""Tests for the change aggregator."""

import logging
from unittest.mock import Mock

from helm_dependency_updater.aggregator import aggregate
from helm_dependency_updater.chart_scanner import scan
from helm_dependency_updater.io_layer import IOLayer
from helm_dependency_updater.models import ChartDirectoryEntry, FileChange


def test_single_chart_is_staged(make_workspace, chart_yaml):
    root = make_workspace({"serviceA/Chart.yaml": chart_yaml})

    result = aggregate(scan(str(root)), "db", "1.1.0", IOLayer())

    assert result.changed_directories == {"serviceA"}
    assert len(result.file_changes) == 1
    change = result.file_changes[0]
    assert change.relative_path == "serviceA/Chart.yaml"
    assert change.old_version == "1.0.0"
    assert "version: 1.1.0" in change.new_content


def test_files_on_disk_are_not_modified(make_workspace, chart_yaml):
    root = make_workspace({"serviceA/Chart.yaml": chart_yaml})

    aggregate(scan(str(root)), "db", "1.1.0", IOLayer())

    assert (root / "serviceA" / "Chart.yaml").read_text(encoding="utf-8") == chart_yaml


def test_chart_and_helmfile_dispatch(make_workspace, chart_yaml, helmfile_yaml):
    root = make_workspace(
        {
            "serviceA/Chart.yaml": chart_yaml,
            "serviceA/helmfile.yaml": helmfile_yaml,
        }
    )

    result = aggregate(scan(str(root)), "db", "1.1.0", IOLayer())

    assert [c.relative_path for c in result.file_changes] == [
        "serviceA/Chart.yaml",
        "serviceA/helmfile.yaml",
    ]
    assert result.changed_directories == {"serviceA"}


def test_no_matching_dependency_has_no_changes(make_workspace, chart_yaml):
    root = make_workspace({"serviceA/Chart.yaml": chart_yaml, "serviceB/Chart.yaml": chart_yaml})

    result = aggregate(scan(str(root)), "redis", "7.0.0", IOLayer())

    assert not result.has_changes()
    assert result.file_changes == []


def test_up_to_date_dependency_has_no_changes(make_workspace, chart_yaml):
    root = make_workspace({"serviceA/Chart.yaml": chart_yaml})

    result = aggregate(scan(str(root)), "db", "1.0.0", IOLayer())

    assert not result.has_changes()


def test_malformed_file_is_skipped(make_workspace, chart_yaml, caplog):
    root = make_workspace(
        {
            "serviceA/Chart.yaml": chart_yaml,
            "serviceB/Chart.yaml": "dependencies: [unclosed\n",
        }
    )

    with caplog.at_level(logging.WARNING):
        result = aggregate(scan(str(root)), "db", "1.1.0", IOLayer())

    assert result.changed_directories == {"serviceA"}
    assert [c.relative_path for c in result.file_changes] == ["serviceA/Chart.yaml"]
    assert "Failed to parse YAML document" in caplog.text


def test_read_failure_does_not_abort_remaining_files(chart_yaml, caplog):
    entries = [
        ChartDirectoryEntry("broken", "/ws/broken/Chart.yaml"),
        ChartDirectoryEntry("serviceA", "/ws/serviceA/Chart.yaml"),
    ]
    io_layer = Mock()
    io_layer.read_file.side_effect = [OSError("permission denied"), chart_yaml]

    with caplog.at_level(logging.WARNING):
        result = aggregate(entries, "db", "1.1.0", io_layer)

    assert result.changed_directories == {"serviceA"}
    assert "Failed to process chart 'broken': permission denied" in caplog.text


def test_missing_file_is_skipped(chart_yaml, caplog):
    entries = [ChartDirectoryEntry("gone", "/ws/gone/Chart.yaml")]
    io_layer = Mock()
    io_layer.read_file.return_value = None

    with caplog.at_level(logging.WARNING):
        result = aggregate(entries, "db", "1.1.0", io_layer)

    assert not result.has_changes()
    assert "gone/Chart.yaml not found" in caplog.text


def test_unrecognized_file_names_are_skipped(chart_yaml):
    entries = [ChartDirectoryEntry("serviceA", "/ws/serviceA/values.yaml")]
    io_layer = Mock()
    io_layer.read_file.return_value = chart_yaml

    result = aggregate(entries, "db", "1.1.0", io_layer)

    assert not result.has_changes()
    io_layer.read_file.assert_not_called()


def test_nested_directories_keep_relative_paths(make_workspace, chart_yaml):
    root = make_workspace({"platform/db-consumer/Chart.yaml": chart_yaml})

    result = aggregate(scan(str(root), recursive=True), "db", "1.1.0", IOLayer())

    assert result.file_changes == [
        FileChange(
            relative_path="platform/db-consumer/Chart.yaml",
            new_content=result.file_changes[0].new_content,
            old_version="1.0.0",
        )
    ]
    assert result.file_changes[0].directory == "platform/db-consumer"
    assert result.changed_directories == {"platform/db-consumer"}
