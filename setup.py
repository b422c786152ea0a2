# !/usr/bin/env python

from setuptools import setup, find_packages

with open("README.md") as f:
    long_description = f.read()

setup(
    name="shortlist",
    packages=find_packages(".", exclude=["tests", "tests.*"]),
    version="0.1.0",
    description="Fixed-capacity container that keeps the largest items of a stream",
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21",
        "coloredlogs",
    ],
    extras_require={"tests": ["pytest"]},
    long_description=long_description,
    long_description_content_type="text/markdown",
)
