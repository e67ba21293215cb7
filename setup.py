#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

setup(
    name="swift-diagnostics",
    version="0.1.0",
    description="Extract editor diagnostics from Swift build output",
    package_dir={"": "python"},
    packages=find_packages(where="python", include=["swift_diagnostics", "swift_diagnostics.*"]),
    python_requires=">=3.10",
    install_requires=[
        "loguru>=0.7.0",
        "pydantic>=2.0",
        "termcolor>=2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "swift-diagnostics=swift_diagnostics.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Build Tools",
    ],
)
