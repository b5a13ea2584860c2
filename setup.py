from configparser import ConfigParser

from setuptools import setup


with open("README.md", "r") as fd:
    long_description = fd.read()


def get_dependencies(section: str = "packages"):
    pipfile = ConfigParser()
    assert pipfile.read("Pipfile"), "Could not read Pipfile"
    return list(pipfile[section])


setup(
    name="shamirsolve",
    version="2026.10.19",
    description="Recover a Shamir secret from threshold shares written in "
    "arbitrary numeric bases.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["shamirsolve"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: Public Domain",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=get_dependencies(),
    extras_require={"tests": get_dependencies("dev-packages")},
    entry_points={"console_scripts": ["shamirsolve=shamirsolve.cli:main"]},
)
