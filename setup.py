"""Setup script for ytdata, a typed YouTube Data API client."""

from setuptools import setup, find_namespace_packages

setup(
    name="ytdata",
    version="0.1.0",
    description="Search and look up YouTube videos, channels and playlists",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "google-api-python-client>=2.0.0",
        "pydantic>=2.0.0",
        "python-dotenv>=0.19.0",
        "fastapi>=0.100.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ytdata=ytdata.cli:main",
        ]
    },
)
