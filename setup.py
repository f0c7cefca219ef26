# SPDX-FileCopyrightText: 2025 share-recovery contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="share-recovery",
    version="0.1.0",
    description="Tamper-tolerant recovery of Shamir-style secrets with exact rational interpolation",
    author="share-recovery contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "click<9.0,>=8.2",
        "tqdm>=4.66.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "share-recovery=share_recovery.cli:main",
        ],
    },
)
