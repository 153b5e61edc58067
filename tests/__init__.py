"""Test suite for Helm Dependency Updater.

This package contains test modules and fixtures for verifying the functionality
of the Helm Dependency Updater tool. It includes tests for:
- YAML dependency patching
- Chart directory scanning and change aggregation
- GitHub branch, commit and pull request operations
- Configuration handling and the CLI

The test suite uses pytest and provides fixtures for common test scenarios.
"""
