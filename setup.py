#!/usr/bin/env python3
"""
Setup script for yaml12.

yaml12 is pure Python: PyYAML provides the YAML 1.2 grammar work (reading,
scanning, parsing and emitting) and yaml12 provides the mapping between
Python values and YAML nodes.

Install for development with the test extra:

    pip install -e '.[test]'
"""

import os
import re

from setuptools import setup


def get_version():
    """Read __version__ from the package without importing it."""
    init_py = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                           'yaml12', '__init__.py')
    with open(init_py, encoding='utf-8') as fp:
        match = re.search(r'^__version__ = "([^"]+)"', fp.read(), re.M)
    return match.group(1)


setup(
    name='yaml12',
    version=get_version(),
    description='YAML 1.2 conversion between Python values and YAML text',
    license='MIT',
    packages=['yaml12'],
    python_requires='>=3.8',
    install_requires=[
        'PyYAML >= 5.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={'console_scripts': ['yaml12=yaml12.__main__:main']},
    classifiers=[
        'Programming Language :: Python :: 3',
        'Topic :: Text Processing :: Markup',
    ],
)
