#!/usr/bin/env python3
"""NodeKit - Setup"""

from setuptools import setup, find_packages

with open("requirements.txt") as f:
    requirements = f.read().splitlines()

setup(
    name="nodekit",
    version="1.0.0",
    description="Installation payloads for Solana validator-node services",
    author="NodeKit Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "nodekit.services.firedancer": ["assets/*"],
        "nodekit.services.watchtower": ["assets/*"],
    },
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "nodekit=nodekit.main:main",
        ],
    },
    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
