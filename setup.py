#!/usr/bin/env python3
#
# Copyright (c)  2023  Xiaomi Corporation (author: Wei Kang)

import os
import re

import setuptools

cur_dir = os.path.dirname(os.path.abspath(__file__))


def get_package_version():
    with open(os.path.join(cur_dir, "kmrsa/python/kmrsa/__init__.py")) as f:
        content = f.read()

    latest_version = re.search(r"__version__ = (.*)", content).group(1)
    latest_version = latest_version.strip().strip('"')
    return latest_version


def get_long_description():
    readme = os.path.join(cur_dir, "README.md")
    if not os.path.isfile(readme):
        return ""
    with open(readme) as f:
        return f.read()


setuptools.setup(
    name="kmrsa",
    version=get_package_version(),
    description="Suffix array construction with the Karp-Miller-Rosenberg "
    "radius-doubling algorithm",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.7",
    package_dir={
        "kmrsa": "kmrsa/python/kmrsa",
    },
    packages=["kmrsa"],
    install_requires=["numpy"],
    extras_require={
        "test": ["pytest"],
    },
    license="Apache-2.0",
)
