#!/usr/bin/env python
import os

from setuptools import setup, find_packages

with open('requirements.txt') as requirements:
    requires = list(requirements)

version = os.environ.get('VERSION')

if version is None:
    with open(os.path.join('.', 'VERSION')) as version_file:
        version = version_file.read().strip()

setup_options = {
    'name': 'codechain-tx',
    'version': version,
    'description': 'Canonical RLP and JSON encoding of CodeChain transactions',
    'author': 'ICON foundation',
    'packages': find_packages(exclude=('tests', 'tests.*')),
    'license': "Apache License 2.0",
    'install_requires': requires,
    'extras_require': {
        'tests': ['pytest>=4.6.3'],
    },
    'entry_points': {
        'console_scripts': [
            'codechain-tx=codechain.__main__:main'
        ],
    },
    'classifiers': [
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3 :: Only'
    ]
}

setup(**setup_options)
