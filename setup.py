"""
Setup script for lexprep.

LexPrep is a self-study quiz tool for exam preparation. Free-text answers
are scored against the keywords of an official answer:

1. Scoring engine - Normalization, keyword extraction, weighted scoring
2. Bank tooling - OCR import and offline keyword preparation
3. Terminal sessions - Training and timed exam modes

The 'lexprep' command is the entry point.
"""

from setuptools import find_packages, setup

setup(
    name="lexprep",
    version="1.0.0",
    description="Self-study quiz with keyword-based free-text answer scoring",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="LexPrep",
    packages=find_packages(include=["lexprep", "lexprep.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.12.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # HTTP
        "httpx>=0.25.0",
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
            "lexprep=lexprep.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="quiz exam-preparation keywords scoring cli education",
)
