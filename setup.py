"""Setup configuration for helm-dependency-updater package.

This module configures the package for distribution, including dependencies,
entry points, and metadata. It reads requirements from requirements.txt if available,
otherwise uses a default set of requirements.

Example:
    To install the package:
        $ pip install .

    To install with test dependencies:
        $ pip install -e ".[test]"

Attributes:
    requirements_file (Path): Path to requirements.txt file
    requirements (list): List of package dependencies
"""

from pathlib import Path
from setuptools import setup, find_packages

requirements_file = Path(__file__).parent / "requirements.txt"
if requirements_file.exists():
    with open(requirements_file, encoding="utf-8") as f:
        requirements = [line for line in f.read().splitlines() if line and not line.startswith("#")]
else:
    # Default requirements if file is not found
    requirements = [
        "ruamel.yaml>=0.18.0",
        "GitPython>=3.1.0",
        "PyGithub>=2.1.1",
        "dpath>=2.1.0",
    ]

setup(
    name="helm_dependency_updater",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
            "PyYAML>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "helm-dependency-updater=helm_dependency_updater.cli:main",
        ],
    },
    python_requires=">=3.10",
    description="Tool for updating Helm chart dependency versions and opening pull requests",
)
