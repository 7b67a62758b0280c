#!/usr/bin/env python3
# coding: utf-8

from setuptools import setup, find_packages

# Read long description from README.md
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="genocompare",
    version="0.1.0",
    author="Alex Skryl",
    author_email="rut216@gmail.com",
    description="Cross-check 23andMe API genotype data against a raw data download",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/skryl/genocompare",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas<3",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "genocompare=genocompare.cli:main",
        ],
    },
)
