# -*- coding: utf-8 -*-
#
# Copyright (c), 2024-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from setuptools import setup, find_packages

with open("README.rst", encoding="utf-8") as readme:
    long_description = readme.read()

setup(
    name='seqkit',
    version='1.0.0',
    packages=find_packages(include=['seqkit', 'seqkit.*']),
    package_data={'seqkit': ['py.typed']},
    entry_points={
        'console_scripts': ['seqkit=seqkit.__main__:main'],
    },
    author='Davide Brunato',
    author_email='brunato@sissa.it',
    keywords=['sequence', 'fill', 'immutable', 'empty-sequence', 'singleton'],
    license='MIT',
    description='Bulk fill/generate utilities for mutable sequences and '
                'a shared immutable empty sequence',
    long_description=long_description,
    python_requires='>=3.10',
    extras_require={
        'dev': ['tox', 'coverage', 'flake8', 'mypy', 'pytest']
    },
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Libraries',
    ]
)
