"""
Python package configuration for sales-price-elasticity.

This setup script configures the package for distribution and installation,
defining metadata, dependencies, and entry points.
"""
from setuptools import setup, find_packages

# Read the long description from README.md
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Parse requirements from requirements.txt
with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="sales-price-elasticity",
    version="0.1.0",
    description="Price elasticity estimates and price recommendations from historical sales records",

    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],

    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],

    python_requires=">=3.9",

    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },

    # Command-line scripts that can be called after installation
    entry_points={
        "console_scripts": [
            "elasticity-analysis=main:main",
        ],
    },
)
