# File: familialdisease/setup.py
# Location: familialdisease/setup.py
"""
Setup script for familialdisease.

This file configures how the package is built, installed, and what
dependencies are required.
"""

import os
from setuptools import setup, find_packages

# Load version from version.py without importing the module
version = {}
with open(os.path.join("familialdisease", "version.py")) as f:
    exec(f.read(), version)

# Read the README for the long description
this_dir = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_dir, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="familialdisease",
    version=version["__version__"],
    description=(
        "Probability that a pedigree is segregating familial disease, "
        "and ascertainment-corrected estimation of familial risk in relatives."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "pandas",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    package_data={"familialdisease": ["config.json"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
)
