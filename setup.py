#!/usr/bin/env python3
"""Setup script."""
import os

from setuptools import setup


def open_file(fname):
    """Open and return a file-like object for the relative filename."""
    return open(os.path.join(os.path.dirname(__file__), fname))


def read_requirements(fname):
    """Read the requirements from a requirements file, ignoring comments."""
    return [r.strip() for r in open_file(fname) if r.strip() and not r.startswith("#")]


setup(
    name="exelocate",
    version="0.0.1",
    description="Locate executables on the search path and below Program Files style directories",
    author="exelocate",
    packages=["exelocate"],
    include_package_data=True,
    python_requires=">=3.11",
    classifiers=[],
    entry_points={
        "console_scripts": [
            "exelocate = exelocate.cli:main",
        ],
    },
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements_test.txt")},
)
