"""
Setup configuration for the Eliza CLI.

The console command 'eliza' wraps the Click group in eliza_cli/cli.py.
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

# Read version from constants.py
version = "0.2.0"
try:
    with open(this_directory / "eliza_cli" / "constants.py") as f:
        for line in f:
            if line.startswith("ELIZA_VERSION"):
                version = line.split('"')[1]
                break
except OSError:
    pass  # Fall back to hardcoded version if constants.py is not readable

# Read requirements
requirements = []
with open(this_directory / "requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

# Read dev requirements
dev_requirements = []
try:
    with open(this_directory / "requirements-dev.txt") as f:
        dev_requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]
except FileNotFoundError:
    pass

setup(
    name="eliza-cli",
    version=version,
    description="Eliza agent bootstrap: discover projects and plugins, configure credentials, serve agents",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],  # Include main.py at root level
    include_package_data=True,
    package_data={
        "eliza_cli": [
            "client/**/*",  # Web client bundle (if present, bundled by the release build)
        ],
    },
    entry_points={
        "console_scripts": [
            "eliza=eliza_cli.cli:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
        "postgres": ["psycopg2-binary>=2.9.0"],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    keywords="ai agent eliza cli agent-server",
)
