import re

import setuptools

with open("tsdump/__version__.py", "r", encoding="utf-8") as fh:
    version = re.search(r"__version__ = \"(.+?)\"", fh.read()).group(1)

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="tsdump",
    description="A command line utility to dump tree-sitter syntax trees as indented text",
    long_description=long_description,
    long_description_content_type="text/markdown",
    version=version,
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    license="MIT",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=open("requirements/install.txt", "r").read().splitlines(),
    extras_require={"test": open("requirements/test.txt", "r").read().splitlines()},
    entry_points={"console_scripts": ["tsdump=tsdump.__main__:main"]},
)
