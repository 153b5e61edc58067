#!/usr/bin/env python3

"""
Helm Chart Dependency Update Script

Simplified CLI using the Functional Core, Imperative Shell pattern.
Scanning and patching are pure, all remote calls go through the I/O layer.
"""

import os
import sys

from .aggregator import aggregate
from .chart_scanner import scan
from .environment import EnvironmentConfig
from .exceptions import RepositoryResolutionError
from .git_operations import resolve_repository, setup_github_client
from .io_layer import IOLayer
from .message_generation import generate_no_update_message, generate_summary
from .publisher import publish
from .utils import setup_logging


UNRESOLVED_REPOSITORY = "(unresolved)"


def _resolve_target_repository(config: EnvironmentConfig) -> str:
    """Resolve the target repository, tolerating failure in dry-run mode."""
    try:
        return resolve_repository(config.target_repository, os.environ, config.workspace)
    except RepositoryResolutionError as e:
        if not config.dry_run:
            raise
        print(f"Warning: {e}")
        return UNRESOLVED_REPOSITORY


def main():
    """Main entry point - scan, aggregate, publish."""
    setup_logging()
    try:
        # Step 1: Parse environment
        config = EnvironmentConfig.from_env(os.environ)

        # Step 2: Validate configuration
        errors = config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        repository = _resolve_target_repository(config)

        # Print configuration
        print(f"Processing dependency: {config.chart_name}")
        print(f"New version: {config.version}")
        print(f"Target repository: {repository}")
        print(f"Base branch: {config.base_branch}")
        if config.target_chart_prefix:
            print(f"Chart directory prefix: {config.target_chart_prefix}")
        print(f"Recursive: {config.recursive}")
        print(f"Dry run: {config.dry_run}")

        # Step 3: Find and patch descriptor files
        io_layer = IOLayer(dry_run=config.dry_run)
        entries = scan(config.workspace, config.target_chart_prefix, config.recursive)
        changes = aggregate(entries, config.chart_name, config.version, io_layer)

        if not changes.has_changes():
            print(generate_no_update_message(config.chart_name))
            return

        # Step 4: Publish branch, commits and PR
        if not config.dry_run:
            io_layer.github_repo = setup_github_client(config.github_token, repository)

        result = publish(
            changes.file_changes,
            config.chart_name,
            config.version,
            config.base_branch,
            io_layer,
            config.publish_config(),
            label=config.target_chart_prefix,
        )

        if not result.success:
            if result.pr_url:
                print(f"PR created with missing files: {result.pr_url}")
            for path in result.failed_paths:
                print(f"Error: Failed to commit {path}")
            sys.exit(1)

        directories = sorted(changes.changed_directories)
        if result.dry_run:
            print("\nDry run summary:")
            print(f"Would update '{config.chart_name}' to {config.version} in charts: {', '.join(directories)}")
        else:
            print(generate_summary(config.chart_name, config.version, directories))
    except Exception as e:
        print(f"Action failed with error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
