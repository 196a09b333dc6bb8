"""
Setup script for the mruby build configurator

Computes the toolchain, compiler defines and core gem selection for the
embedded mruby runtime and renders them as an mruby build_config.rb or a
JSON/YAML manifest.
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read README for long description
readme_path = Path("README.md")
long_description = ""
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="mruby-build",
    version="1.0.0",
    description="Build configurator for the embedded mruby runtime",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["mruby_build", "mruby_build.*"]),
    entry_points={
        "console_scripts": [
            "mruby-build=mruby_build.main:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Build Tools",
    ],
)
