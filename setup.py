#!/usr/bin/env python
"""
Setup.py for branchgraph.
"""

from setuptools import setup, find_packages

setup(
    name="branchgraph",
    version="0.1.0",
    description="Directed graph container with traversal, shortest path, cycle, "
                "component and constrained path algorithms",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
