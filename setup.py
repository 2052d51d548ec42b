"""
Setup script for the league-records package.

Installs the league_records package from src/ together with its SQLite
schema and the league-records command.
"""

from setuptools import setup, find_packages

setup(
    name="league-records",
    version="1.0.0",
    description="League Records - Best-of match bookkeeping for named leagues",
    author="Course Staff",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    package_data={
        "league_records._storage": ["schema.sql"],
    },
    entry_points={
        "console_scripts": [
            "league-records=league_records.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
