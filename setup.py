"""
Setup script for flowpost package.
"""

from setuptools import setup, find_packages

setup(
    name="flowpost",
    version="0.1.0",
    description="Strain rate and spin tensors from velocity gradient fields (PIV/CFD post-processing)",
    author="Andrey",
    packages=find_packages(include=["flowpost", "flowpost.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20",
        "numba>=0.56",
    ],
    extras_require={
        "dev": ["pytest>=7.0", "black", "flake8"],
    },
)
