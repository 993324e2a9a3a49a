#!/usr/bin/env python
# encoding: utf-8

import os

from setuptools import setup, find_packages


# Utility function to read the README file.
# Used for the long_description.  It's nice, because now 1) we have a top level
# README file and 2) it's easier to type in the README file than to put a raw
# string in below ...
def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()

setup(
    name = "urlencoded-data",
    version = "0.1.0",
    author = "Alexander Mollberg",
    author_email = "amollberg@users.noreply.github.com",
    description = ("Read, edit and re-encode application/x-www-form-urlencoded data"),
    license = "Apache-2.0",
    keywords = "url query string form urlencoded multimap",
    packages=find_packages(exclude=["tests"]),
    long_description=read('README.md'),
    long_description_content_type="text/markdown",
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP",
        "Environment :: Console",
        "Topic :: Utilities",
        "License :: OSI Approved :: Apache Software License",
    ],
    install_requires=["yattag>=1.10.0"],
    tests_require=read("requirements-dev.txt").split(),
    extras_require={
        'test': read("requirements-dev.txt").split(),
    },
    entry_points={
        'console_scripts': ['urlencoded-data=urlencoded_data.main:main'],
    },
)
