"""Setup configuration for litetest."""

from setuptools import setup, find_packages

setup(
    name="litetest",
    version="0.1.0",
    description="Minimal marker-based unit test runner",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "litetest=litetest.cli:main",
        ],
    },
)
