# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import sys
from pathlib import Path

import setuptools

if sys.version_info[:2] < (3, 9):  # "unreachable" sanity check
    raise Exception(
        "You are trying to install Exhaustigen using Python "
        f"{sys.version.split()[0]}, but it requires Python 3.9 or later."
    )


def local_file(name):
    return Path(__file__).absolute().parent.joinpath(name).relative_to(Path.cwd())


SOURCE = str(local_file("src"))

# Assignment to placate pyflakes. The actual version is from the exec that follows.
__version__ = None
exec(local_file("src/exhaustigen/version.py").read_text(encoding="utf-8"))
assert __version__ is not None


extras = {
    "pytest": ["pytest>=4.6"],
    "test": ["pytest>=7.0", "hypothesis>=6.0"],
}


setuptools.setup(
    name="exhaustigen",
    version=__version__,
    author="The Exhaustigen Authors",
    packages=setuptools.find_packages(SOURCE),
    package_dir={"": SOURCE},
    package_data={"exhaustigen": ["py.typed"]},
    license="MPL-2.0",
    description="Exhaustive enumeration of bounded choices for imperative tests",
    zip_safe=False,
    extras_require=extras,
    install_requires=["attrs>=22.2.0"],
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Framework :: Pytest",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development :: Testing",
        "Typing :: Typed",
    ],
    entry_points={
        "pytest11": ["exhaustigen = exhaustigen.extra.pytestplugin"],
    },
    long_description=local_file("README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    keywords="python testing exhaustive enumeration",
)
