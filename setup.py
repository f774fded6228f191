#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import os

from setuptools import find_packages, setup

# read the version without importing the package, its dependencies may not be installed yet
_version: dict[str, str] = {}
with open(os.path.join(os.path.dirname(__file__), 'wideint', 'version.py')) as fp:
    exec(fp.read(), _version)

install_requires = [
    'colorama>=0.4',
    'configargparse>=1.5',
    'pydantic>=2.0',
    'pyyaml>=6.0',
    'structlog>=22.1',
    'typing_extensions>=4.6',
]

setup(
    name='wideint',
    version=_version['__version__'],
    description='Exact 64-bit integers in raw byte buffers',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    entry_points={
        'console_scripts': ['wideint=wideint_cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(include=('wideint', 'wideint.*', 'wideint_cli', 'wideint_cli.*')),
    package_data={
        'wideint.conf': ['*.yml'],
    },
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
