"""Setup script for the Savaj Seeds catalog backend."""

from pathlib import Path

from setuptools import setup, find_packages

readme = Path(__file__).parent / "README.md"
long_description = readme.read_text(encoding="utf-8") if readme.exists() else ""

setup(
    name="savaj-seeds-catalog",
    version="0.1.0",
    author="Savaj Seeds",
    description="Seed catalog backend: product normalization, filtering, search and CRUD API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["app", "app.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Framework :: FastAPI",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "sqlalchemy>=2.0.0",
        "pydantic[email]>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        "python-multipart>=0.0.9",
        "loguru>=0.7.0",
        "click>=8.1.0",
        "pandas>=2.0.0",
        "openpyxl>=3.1.0",
        "bcrypt>=4.0.0",
        "slowapi>=0.1.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "seeds-cli=app.cli:cli",
        ],
    },
)
