# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import sys
from pathlib import Path

import setuptools

if sys.version_info[:2] < (3, 9):  # "unreachable" sanity check
    raise Exception(
        "You are trying to install falsify using Python "
        f"{sys.version.split()[0]}, but it requires Python 3.9 or later."
    )


def local_file(name):
    return Path(__file__).absolute().parent.joinpath(name).relative_to(Path.cwd())


SOURCE = str(local_file("src"))

# Assignment to placate pyflakes. The actual version is from the exec that follows.
__version__ = None
exec(local_file("src/falsify/version.py").read_text(encoding="utf-8"))
assert __version__ is not None


extras = {
    "pytest": ["pytest>=4.6"],
    "test": ["pytest>=7.0", "hypothesis>=6.0"],
}

extras["all"] = sorted(set(sum(extras.values(), [])))


setuptools.setup(
    name="falsify",
    version=__version__,
    author="the falsify Authors",
    packages=setuptools.find_packages(SOURCE),
    package_dir={"": SOURCE},
    license="MPL-2.0",
    description="Property-based testing with seeded generation and shrinking",
    zip_safe=False,
    extras_require=extras,
    install_requires=["attrs>=22.2.0"],
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
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
    ],
    py_modules=["_falsify_pytestplugin"],
    entry_points={
        "pytest11": ["falsifypytest = _falsify_pytestplugin"],
    },
    long_description=local_file("README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    keywords="python testing property-based-testing shrinking",
)
