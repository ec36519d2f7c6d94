#!/usr/bin/env python3
"""Setup script for doc_similarity package.
"""

from setuptools import find_packages, setup

setup(
    name="doc_similarity",
    version="0.3.0",
    description="Multi-metric text similarity engine",
    author="Doc Similarity Team",
    packages=find_packages(include=["docsim*"]),
    python_requires=">=3.10",
    install_requires=[
        "pandas>=1.5.0",
        "rapidfuzz>=3.0.0",
        "pyyaml>=6.0",
        "openpyxl>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "numpy>=1.23.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "pandas-stubs>=2.0.0",
            "types-PyYAML>=6.0.0",
        ],
    },
)
