#!/usr/bin/env python3
"""
Setup script for configbridge package.
"""

from setuptools import setup, find_packages

setup(
    name="configbridge",
    version="0.3",
    description="Shared config.toml settings and local/remote file routing for the desktop app",
    author="configbridge Team",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "tomlkit>=0.12",
        "pydantic>=2.0",
        "typer>=0.9",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "configbridge=configbridge.cli.main:main",
        ],
    },
)
