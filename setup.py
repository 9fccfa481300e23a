from os import environ

from setuptools import find_packages, setup


version = environ.get("VERSION", "1.0.0")

setup(
    name="emojimap",
    version=version,
    description="Generator for the emoji annotation to unicode codepoint map",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.10",
    install_requires=open("requirements.txt").read().splitlines(),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["emojimap=emojimap.main:run_main"]},
)
