"""Setup script for prefixcodec."""

from setuptools import setup, find_packages

setup(
    name="prefixcodec",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "loguru>=0.7.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-mock>=3.10",
            "base58>=2.1",
        ],
    },
)
