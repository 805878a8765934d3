# setup.py
from setuptools import setup, find_packages

setup(
    name="meshkit",
    version="1.0.0",
    description="Mesh construction and canonicalization for real-time rendering",
    packages=find_packages(include=["meshkit", "meshkit.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
