"""
Setup script for pysatl-uncertainty.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-uncertainty",
    version="0.0.1a0",
    description="Closed-form parametric distributions for uncertainty quantification",
    license="MIT",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
    ],
    extras_require={
        "test": [
            "pytest>=8",
        ],
    },
)
