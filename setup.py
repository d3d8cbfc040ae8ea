"""setuptools entry point for the carriersynth package."""
from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="carriersynth",
    version="0.1.0",
    description="Square-wave carrier synthesis for multi-channel stimulation strategies",
    packages=find_packages(include=["carriersynth", "carriersynth.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
