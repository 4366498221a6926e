"""Setup script for extinit."""

from pathlib import Path

from setuptools import find_packages, setup


def read_readme():
    """Read the long description, tolerating a source tree without README."""
    readme = Path(__file__).parent / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="extinit",
    version="0.1.0",
    description="Namespace-aware, dependency-ordered initialization of installed extensions",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(include=["extinit", "extinit.*"]),
    install_requires=[
        "click>=8.1",
        "dependency-injector>=4.41",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "extinit=extinit.__main__:main",
        ],
    },
)
