from os import environ
from pathlib import Path

from setuptools import find_packages, setup

version = environ["VERSION"] if "VERSION" in environ else Path("VERSION").read_text().strip()

setup(
    name="PyEmoji",
    version=version,
    description="Lookup of unicode emojis by their gemoji aliases",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    package_data={"PyEmoji": ["emoji.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=open("requirements.txt").read().splitlines(),
    extras_require={"test": ["pytest"]},
)
