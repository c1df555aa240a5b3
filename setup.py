from setuptools import setup, find_packages


setup(
    name="arcpath",
    version="0.1",
    packages=find_packages(include=["arcpath", "arcpath.*"]),
    description="Normalization helpers for slash-delimited archive-internal paths.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[],
)
