"""Test fixtures for Helm Dependency Updater.

This module provides shared fixtures used across multiple test modules.
It sets up sample descriptor documents, a workspace factory and mock
GitHub objects that simulate the environment needed for testing.

Fixtures:
    chart_yaml: A Chart.yaml document with a ``db`` dependency at 1.0.0
    helmfile_yaml: A helmfile.yaml document with a ``db`` release at 1.0.0
    make_workspace: Factory creating chart directories under tmp_path
    mock_github_repo: Mock PyGithub repository
"""

from unittest.mock import MagicMock

import pytest

CHART_YAML = """\
apiVersion: v2
name: service-a
version: 0.1.0
# upstream dependencies
dependencies:
- name: db
  version: 1.0.0
  repository: https://charts.example.com
- name: cache
  version: 2.0.0
  repository: https://charts.example.com
"""

HELMFILE_YAML = """\
repositories:
- name: example
  url: https://charts.example.com
releases:
- name: db
  chart: example/db
  version: 1.0.0
- name: api
  chart: example/api
  version: 3.2.1
"""


@pytest.fixture
def chart_yaml():
    """Chart.yaml text with ``db`` at 1.0.0 and ``cache`` at 2.0.0."""
    return CHART_YAML


@pytest.fixture
def helmfile_yaml():
    """helmfile.yaml text with ``db`` at 1.0.0 and ``api`` at 3.2.1."""
    return HELMFILE_YAML


@pytest.fixture
def make_workspace(tmp_path):
    """Creates descriptor files under a temporary workspace.

    Usage:
        root = make_workspace({"serviceA/Chart.yaml": CHART_YAML})

    Returns:
        callable: Takes a mapping of relative path to content and returns
        the workspace root
    """

    def _make(files):
        for relative_path, content in files.items():
            path = tmp_path / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def mock_github_repo():
    """Provides a mock GitHub repository for branch, content and PR calls."""
    repo = MagicMock()
    repo.get_git_ref.return_value.object.sha = "base-sha"
    repo.get_contents.return_value.sha = "blob-sha"
    repo.create_pull.return_value.html_url = "https://github.com/mock-org/mock-repo/pull/123"
    return repo
