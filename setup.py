"""
Setup script for adaptive-learning-platform.

A small adaptive learning platform: learners with a learning style,
lessons whose content the style adapts, progress tracking and
recommendations of unfinished lessons.

The 'adaptlearn' command runs the demonstration scenario.
"""

from setuptools import find_packages, setup

setup(
    name="adaptive-learning-platform",
    version="1.0.0",
    description="Learning styles, lessons and recommendations in a terminal demo",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["adaptlearn", "adaptlearn.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Imaging
        "numpy>=1.24.0",
        "pillow>=10.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "adaptlearn=adaptlearn.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning styles education oop demo",
)
