"""
Setup configuration for ip-registration package.

This package provides the work registration interface for intellectual-property
works and their royalty-rights tokens, a reference implementation, and Python
access to the matching contract artifacts.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read version from package
version_file = Path(__file__).parent / "ip_registration" / "__init__.py"
version = "0.1.0"  # Default version
if version_file.exists():
    with open(version_file) as f:
        for line in f:
            if line.startswith("__version__"):
                version = line.split("=")[1].strip().strip('"').strip("'")
                break

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    with open(readme_file, encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="ip-registration",
    version=version,
    author="IP Registration Contributors",
    description="Work registration interface for IP works and their royalty-rights tokens",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    include_package_data=True,
    package_data={
        "ip_registration": [
            "data/artifacts/*/*.json",
            "data/artifacts/*/*/*.json",
        ],
    },
    install_requires=[
        "web3>=6.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Distributed Computing",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    keywords="ethereum, blockchain, intellectual-property, royalties, smart-contracts, web3",
)
