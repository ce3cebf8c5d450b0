#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="behaviorable",
    version="0.1.0",
    description="Composition for Python objects through attachable behaviors",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "json5",
        "PyYAML",
    ],
    extras_require={
        "dev": ["pytest", "black", "mypy"],
    },
)
