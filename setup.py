#!/usr/bin/env python3
"""Setup script for LLM Supervisor."""

from setuptools import setup, find_packages

setup(
    name="llm-supervisor",
    version="1.0.0",
    description="Cloud/local LLM fallback supervisor skill for agent runtimes",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.31.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "llm-supervisor=llm_supervisor.hook:main",
        ],
    },
)
