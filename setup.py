"""Setup script for CF-Lite."""

from setuptools import setup, find_namespace_packages

if __name__ == "__main__":
    setup(
        name="cf-lite",
        version="0.1.0",
        description="Memory-based collaborative filtering recommendations",
        author="CF-Lite Team",
        packages=find_namespace_packages(where="src"),
        package_dir={"": "src"},
        entry_points={
            "console_scripts": [
                "cf-lite=cf_lite.cli:app",
            ],
        },
        python_requires=">=3.11",
        install_requires=[
            "numpy>=1.24",
            "pandas>=2.0",
            "duckdb>=0.9",
            "pydantic>=2.5",
            "fastapi>=0.100",
            "uvicorn>=0.23",
            "typer>=0.9",
            "optuna>=3.0",
        ],
        extras_require={
            "test": [
                "pytest>=7.0",
                "httpx>=0.24",
                "pyarrow>=12.0",
            ],
        },
    )
