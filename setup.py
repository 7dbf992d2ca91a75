"""
setup.py - Project Setup
Installs the panocrypt packages (client, common, server) and their dependencies.

  pip install -e .[test]
  python -m pytest tests/ -v
"""

from setuptools import setup, find_packages

REQUIREMENTS = [
    "cryptography>=41.0",
    "flask>=2.3",
]

TEST_REQUIREMENTS = [
    "pytest>=7.0",
]

setup(
    name="panocrypt",
    version="1.0.0",
    description="AES-256-CBC string encryption, SHA-256 hashing and Shannon entropy",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=REQUIREMENTS,
    extras_require={"test": TEST_REQUIREMENTS},
    entry_points={
        "console_scripts": [
            "panocrypt=client.client_app:run",
        ],
    },
    python_requires=">=3.8",
)
