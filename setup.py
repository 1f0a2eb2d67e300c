from setuptools import find_packages, setup

setup(
    name="gitlink",
    version="0.1.0",
    description="Copy GitHub and Bitbucket permalinks for lines of a file in a Git working copy",
    packages=find_packages(include=["gitlink", "gitlink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI framework
        "pydantic>=2",  # Configuration and output schemas
        "rich",  # Terminal formatting
        "PyYAML",  # YAML structured output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "gitlink=gitlink.cli:main",
        ],
    },
)
