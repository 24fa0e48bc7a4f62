#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DocSolver - Setup Configuration
Enables optional dependency groups for OCR features.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_path.exists():
    requirements = [
        line.strip()
        for line in requirements_path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]

# Optional dependencies for OCR
ocr_requirements = [
    "paddleocr>=2.7.0",
    "paddlepaddle>=2.5.0",  # CPU version
    "opencv-python-headless>=4.8.0",
]

setup(
    name="docsolver",
    version="1.0.0",
    description="Answers chat questions and solves PDF or image worksheets with hosted LLMs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="DocSolver Team",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["solve_cli"],
    install_requires=requirements,
    extras_require={
        # OCR features
        "ocr": ocr_requirements,

        # Development dependencies
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-asyncio>=0.21.0",
        ],

        # All optional features
        "all": ocr_requirements,
    },
    entry_points={
        "console_scripts": [
            "docsolver=solve_cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="worksheet solver ai ocr pdf paddle tesseract",
)
